from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import math
import re
from typing import Any, Protocol

from headless_forms.a11y import (
    LabelBindings,
    Props,
    build_accessible_error_props,
    build_described_by_props,
    build_label_props,
    compact_props,
)
from headless_forms.component_schema import ElementRef
from headless_forms.events import BeforeInputEvent, KeyEvent, ValueEvent, WheelEvent
from headless_forms.field import FormField, SchemaLike
from headless_forms.ids import FieldTypePrefixes, uniq_id
from headless_forms.slider.math import clamp, decimals_from_step, normalize_step
from headless_forms.validation import InputConstraints, InputValidity, ValidityDetails

PAGE_STEP_MULTIPLIER = 10


class NumberParser(Protocol):
    def parse(self, text: str) -> float | None:
        ...

    def format(self, value: float) -> str:
        ...

    def is_valid_number_part(self, text: str) -> bool:
        ...


@dataclass(frozen=True)
class DecimalNumberParser:
    """Plain decimal notation with optional digit grouping."""

    group_separator: str = ","
    decimal_separator: str = "."
    max_fraction_digits: int | None = None

    def __post_init__(self) -> None:
        if self.group_separator == self.decimal_separator:
            raise ValueError("group and decimal separators must differ")
        if self.max_fraction_digits is not None and self.max_fraction_digits < 0:
            raise ValueError("max_fraction_digits must be >= 0")

    def _partial_pattern(self) -> re.Pattern[str]:
        group = re.escape(self.group_separator)
        dec = re.escape(self.decimal_separator)
        return re.compile(rf"^[+-]?[0-9{group}]*({dec}[0-9]*)?$")

    def parse(self, text: str) -> float | None:
        raw = text.strip().replace(self.group_separator, "").replace(self.decimal_separator, ".")
        if not raw:
            return None
        try:
            value = float(Decimal(raw))
        except InvalidOperation:
            return None
        return value if math.isfinite(value) else None

    def format(self, value: float) -> str:
        d = Decimal(str(value))
        if self.max_fraction_digits is not None:
            d = d.quantize(Decimal("1").scaleb(-self.max_fraction_digits))
        out = format(d, "f")
        if "." in out:
            out = out.rstrip("0").rstrip(".")
        if out == "-0":
            out = "0"
        return out.replace(".", self.decimal_separator)

    def is_valid_number_part(self, text: str) -> bool:
        return self._partial_pattern().match(text) is not None


def _add(a: float, b: float) -> float:
    return float(Decimal(str(a)) + Decimal(str(b)))


@dataclass(frozen=True)
class NumberFieldProps:
    label: str
    model_value: float | None = None
    description: str | None = None
    increment_label: str = "Increment"
    decrement_label: str = "Decrement"
    name: str | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    placeholder: str | None = None
    required: bool = False
    readonly: bool = False
    disabled: bool = False
    disable_wheel: bool = False
    disable_html_validation: bool = False
    schema: SchemaLike | None = field(default=None, compare=False, repr=False)


class NumberField:
    """Text-entry number input with spin-button stepping and clamping."""

    def __init__(
        self,
        props: NumberFieldProps,
        *,
        parser: NumberParser | None = None,
        input_ref: ElementRef | None = None,
    ) -> None:
        self.props = props
        self.parser: NumberParser = parser or DecimalNumberParser()
        self.input_id = uniq_id(FieldTypePrefixes.NumberField)
        self.input_ref = input_ref or ElementRef(tag_name="input")
        self.field: FormField[float] = FormField(
            props.model_value,
            path=props.name,
            disabled=props.disabled,
            schema=props.schema,
        )
        self.validity = InputValidity(
            self.field,
            constraints=self._constraints(),
            input_ref=self.input_ref,
            disable_html_validation=props.disable_html_validation,
        )

    def _constraints(self) -> InputConstraints:
        return InputConstraints(required=self.props.required, min=self.props.min, max=self.props.max)

    def update_props(self, **changes: Any) -> "NumberField":
        self.props = dataclasses.replace(self.props, **changes)
        self.field.disabled = self.props.disabled
        self.field.schema = self.props.schema
        self.validity.constraints = self._constraints()
        self.validity.disable_html_validation = self.props.disable_html_validation
        if "model_value" in changes:
            self.field.set_value(changes["model_value"])
        return self

    @property
    def field_value(self) -> float | None:
        return self.field.value

    @property
    def error_message(self) -> str | None:
        return self.field.error_message

    @property
    def validity_details(self) -> ValidityDetails:
        return self.validity.validity_details

    @property
    def step(self) -> float:
        return normalize_step(self.props.step)

    @property
    def formatted_text(self) -> str:
        value = self.field.value
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return ""
        return self.parser.format(value)

    @property
    def input_mode(self) -> str:
        return "decimal" if decimals_from_step(self.step) > 0 else "numeric"

    def _is_locked(self) -> bool:
        return self.props.disabled or self.props.readonly

    def apply_clamp(self, value: float | None) -> float | None:
        if value is None or math.isnan(value):
            return None
        low = -math.inf if self.props.min is None else self.props.min
        high = math.inf if self.props.max is None else self.props.max
        return clamp(value, low, high)

    def _commit(self, value: float | None) -> None:
        self.field.set_value(self.apply_clamp(value))
        self.field.set_touched(True)
        self.validity.update_validity()

    def _spin(self, delta: float) -> bool:
        if self._is_locked():
            return False
        current = self.field.value
        if current is None:
            base = self.props.min if self.props.min is not None else 0.0
            self._commit(base)
            return True
        self._commit(_add(current, delta))
        return True

    def increment(self, _event: object = None) -> bool:
        return self._spin(self.step)

    def decrement(self, _event: object = None) -> bool:
        return self._spin(-self.step)

    def _is_at_max(self) -> bool:
        return self.props.max is not None and self.field.value is not None and self.field.value >= self.props.max

    def _is_at_min(self) -> bool:
        return self.props.min is not None and self.field.value is not None and self.field.value <= self.props.min

    def on_key_down(self, event: KeyEvent) -> bool:
        if self._is_locked():
            return False
        if event.key == "ArrowUp":
            return self.increment()
        if event.key == "ArrowDown":
            return self.decrement()
        if event.key == "PageUp":
            return self._spin(self.step * PAGE_STEP_MULTIPLIER)
        if event.key == "PageDown":
            return self._spin(-self.step * PAGE_STEP_MULTIPLIER)
        if event.key == "Home" and self.props.min is not None:
            self._commit(self.props.min)
            return True
        if event.key == "End" and self.props.max is not None:
            self._commit(self.props.max)
            return True
        return False

    def on_before_input(self, event: BeforeInputEvent) -> bool:
        """Return True (reject) when the edit would not leave a partial number."""

        if event.data is None:
            return False
        return not self.parser.is_valid_number_part(event.predicted_text())

    def on_change(self, event: ValueEvent) -> bool:
        text = "" if event.value is None else str(event.value)
        self.field.set_value(self.apply_clamp(self.parser.parse(text)))
        self.validity.update_validity()
        return False

    def on_blur(self, _event: object = None) -> bool:
        self.field.set_touched(True)
        return False

    def on_wheel(self, event: WheelEvent) -> bool:
        if self.props.disable_wheel:
            return False
        if event.delta_y > 0:
            return self.increment()
        return self.decrement()

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(self.input_id, self.props.label, target_ref=self.input_ref)

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def description_props(self) -> Props:
        return build_described_by_props(self.input_id, description=self.props.description).description_props

    @property
    def error_message_props(self) -> Props:
        return build_accessible_error_props(self.input_id, self.error_message).error_message_props

    @property
    def increment_button_props(self) -> Props:
        disabled = self._is_locked() or self._is_at_max()
        return compact_props(
            {
                "type": "button",
                "tabindex": "-1",
                "aria-label": self.props.increment_label,
                "aria-disabled": True if disabled else None,
                "on_click": self.increment,
            }
        )

    @property
    def decrement_button_props(self) -> Props:
        disabled = self._is_locked() or self._is_at_min()
        return compact_props(
            {
                "type": "button",
                "tabindex": "-1",
                "aria-label": self.props.decrement_label,
                "aria-disabled": True if disabled else None,
                "on_click": self.decrement,
            }
        )

    @property
    def input_props(self) -> Props:
        described_by = build_described_by_props(self.input_id, description=self.props.description)
        errors = build_accessible_error_props(self.input_id, self.error_message)
        return compact_props(
            {
                "name": self.props.name,
                "placeholder": self.props.placeholder,
                "required": self.props.required,
                "readonly": self.props.readonly,
                "disabled": self.props.disabled,
                **self._label_bindings().labelled_by_props,
                **described_by.described_by_props,
                **errors.accessible_error_props,
                "id": self.input_id,
                "inputmode": self.input_mode,
                "value": self.formatted_text,
                "max": self.props.max,
                "min": self.props.min,
                "type": "text",
                "spellcheck": False,
                "on_before_input": self.on_before_input,
                "on_change": self.on_change,
                "on_blur": self.on_blur,
                "on_key_down": self.on_key_down,
                "on_wheel": self.on_wheel,
            }
        )
