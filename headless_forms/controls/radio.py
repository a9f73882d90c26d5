from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
import logging
from typing import Any, Callable

from headless_forms.a11y import (
    LabelBindings,
    Props,
    build_accessible_error_props,
    build_label_props,
    compact_props,
)
from headless_forms.component_schema import Direction, ElementRef, Orientation, parse_direction, parse_orientation
from headless_forms.events import KeyEvent
from headless_forms.field import FormField, SchemaLike
from headless_forms.ids import FieldTypePrefixes, uniq_id
from headless_forms.locale import LocaleContext
from headless_forms.validation import InputConstraints, InputValidity

LOGGER = logging.getLogger(__name__)

_NEXT_KEYS = {"ArrowDown": 1, "ArrowUp": -1, "ArrowRight": 1, "ArrowLeft": -1}


@dataclass(frozen=True)
class RadioGroupProps:
    label: str | None = None
    name: str | None = None
    model_value: Any = None
    orientation: Orientation | None = None
    dir: Direction | None = None
    disabled: bool = False
    readonly: bool = False
    required: bool = False
    schema: SchemaLike | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        parse_orientation(self.orientation)
        parse_direction(self.dir)


@dataclass
class RadioItem:
    """What a radio tells its group so the group can move focus and selection."""

    is_checked: Callable[[], bool]
    is_disabled: Callable[[], bool]
    set_checked: Callable[[], bool]


class RadioRegistration:
    def __init__(self, group: "RadioGroup", item: RadioItem) -> None:
        self._group = group
        self._item = item

    def can_receive_focus(self) -> bool:
        return self._group._focus_candidate() is self._item

    def unregister(self) -> None:
        self._group._unregister(self._item)


class RadioGroup:
    """Owns the selected value of a set of radios and their keyboard navigation."""

    def __init__(self, props: RadioGroupProps | None = None, *, locale: LocaleContext | None = None) -> None:
        self.props = props or RadioGroupProps()
        self.locale = locale or LocaleContext()
        self.group_id = uniq_id(FieldTypePrefixes.RadioButtonGroup)
        self.field: FormField[Any] = FormField(
            self.props.model_value,
            path=self.props.name,
            disabled=self.props.disabled,
            schema=self.props.schema,
        )
        self.validity = InputValidity(self.field, constraints=InputConstraints(required=self.props.required))
        self._radios: list[RadioItem] = []

    def update_props(self, **changes: Any) -> "RadioGroup":
        self.props = dataclasses.replace(self.props, **changes)
        self.field.disabled = self.props.disabled
        self.field.schema = self.props.schema
        self.validity.constraints = InputConstraints(required=self.props.required)
        return self

    @property
    def field_value(self) -> Any:
        return self.field.value

    def set_value(self, value: Any) -> None:
        if self.props.disabled or self.props.readonly:
            LOGGER.debug("radio group %s is locked, ignoring selection", self.group_id)
            return
        self.field.set_value(value)
        self.validity.update_validity()

    def set_touched(self, touched: bool) -> None:
        self.field.set_touched(touched)

    def set_errors(self, message: str) -> None:
        self.field.set_errors(message)

    def use_radio_registration(self, item: RadioItem) -> RadioRegistration:
        self._radios.append(item)
        return RadioRegistration(self, item)

    def _unregister(self, item: RadioItem) -> None:
        for idx, radio in enumerate(self._radios):
            if radio is item:
                del self._radios[idx]
                return

    def _focus_candidate(self) -> RadioItem | None:
        for radio in self._radios:
            if radio.is_checked():
                return radio
        for radio in self._radios:
            if not radio.is_disabled():
                return radio
        return None

    def get_direction(self) -> Direction:
        return self.props.dir or self.locale.direction

    def on_key_down(self, event: KeyEvent) -> bool:
        if event.key not in _NEXT_KEYS or self.props.disabled or self.props.readonly:
            return False
        enabled = [radio for radio in self._radios if not radio.is_disabled()]
        if not enabled:
            return False
        delta = _NEXT_KEYS[event.key]
        if event.key in ("ArrowLeft", "ArrowRight") and self.get_direction() == "rtl":
            delta = -delta
        current = next((i for i, radio in enumerate(enabled) if radio.is_checked()), -1)
        if current == -1:
            target = 0 if delta > 0 else len(enabled) - 1
        else:
            target = (current + delta) % len(enabled)
        enabled[target].set_checked()
        self.set_touched(True)
        return True

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(self.group_id, self.props.label)

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def error_message_props(self) -> Props:
        return build_accessible_error_props(self.group_id, self.field.error_message).error_message_props

    @property
    def radio_group_props(self) -> Props:
        errors = build_accessible_error_props(self.group_id, self.field.error_message)
        return compact_props(
            {
                **self._label_bindings().labelled_by_props,
                **errors.accessible_error_props,
                "id": self.group_id,
                "role": "radiogroup",
                "dir": self.get_direction(),
                "aria-orientation": self.props.orientation,
                "aria-required": self.props.required or None,
                "aria-disabled": self.props.disabled or None,
                "aria-readonly": self.props.readonly or None,
                "on_key_down": self.on_key_down,
            }
        )

    @property
    def context(self) -> "RadioGroupContext":
        return RadioGroupContext(self)


class RadioGroupContext:
    """The part of a radio group that its radios may see and drive."""

    def __init__(self, group: RadioGroup) -> None:
        self._group = group

    @property
    def value(self) -> Any:
        return self._group.field.value

    @property
    def name(self) -> str | None:
        return self._group.props.name

    @property
    def disabled(self) -> bool:
        return self._group.props.disabled

    @property
    def readonly(self) -> bool:
        return self._group.props.readonly

    @property
    def required(self) -> bool:
        return self._group.props.required

    def set_value(self, value: Any) -> None:
        self._group.set_value(value)

    def set_touched(self, touched: bool) -> None:
        self._group.set_touched(touched)

    def set_errors(self, message: str) -> None:
        self._group.set_errors(message)

    def use_radio_registration(self, item: RadioItem) -> RadioRegistration:
        return self._group.use_radio_registration(item)


@dataclass(frozen=True)
class RadioProps:
    value: Any
    label: str | None = None
    disabled: bool = False


class Radio:
    def __init__(
        self,
        props: RadioProps,
        group: RadioGroupContext | None = None,
        *,
        input_ref: ElementRef | None = None,
    ) -> None:
        self.props = props
        self.group = group
        self.input_id = uniq_id(FieldTypePrefixes.RadioButton)
        self.input_ref = input_ref or ElementRef(tag_name="input")
        if group is None:
            LOGGER.warning(
                "Radio %s is not part of a radio group; create a RadioGroup and pass its context.",
                self.input_id,
            )
            self.registration: RadioRegistration | None = None
        else:
            self.registration = group.use_radio_registration(
                RadioItem(is_checked=lambda: self.is_checked, is_disabled=self.is_disabled, set_checked=self._select_and_focus)
            )

    @property
    def is_checked(self) -> bool:
        return self.group is not None and self.group.value == self.props.value

    def is_disabled(self) -> bool:
        return bool(self.props.disabled or (self.group is not None and self.group.disabled))

    def _select(self) -> None:
        if self.group is None:
            return
        self.group.set_value(self.props.value)
        self.group.set_touched(True)

    def _select_and_focus(self) -> bool:
        if self.group is None:
            return False
        self.group.set_value(self.props.value)
        self.input_ref.focus()
        self.group.set_errors(self.input_ref.validation_message)
        return True

    def on_click(self, _event: object = None) -> bool:
        if self.is_disabled():
            return False
        self._select()
        return False

    def on_key_down(self, event: KeyEvent) -> bool:
        if self.is_disabled():
            return False
        if event.code == "Space":
            self._select()
            return True
        return False

    def on_blur(self, _event: object = None) -> bool:
        if self.group is not None:
            self.group.set_touched(True)
        return False

    def _sync_native_errors(self, _event: object = None) -> bool:
        if self.group is not None:
            self.group.set_errors(self.input_ref.validation_message)
        return False

    def unregister(self) -> None:
        if self.registration is not None:
            self.registration.unregister()

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(self.input_id, self.props.label, target_ref=self.input_ref)

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def input_props(self) -> Props:
        is_input = self.input_ref.is_input_element()
        group = self.group
        base: Props = {
            **self._label_bindings().labelled_by_props,
            "id": self.input_id,
            "on_click": self.on_click,
            "on_key_down": self.on_key_down,
            "on_blur": self.on_blur,
        }
        readonly = (group is not None and group.readonly) or None
        disabled = self.is_disabled() or None
        required = group.required if group is not None else None
        if is_input:
            base.update(
                {
                    "checked": self.is_checked,
                    "readonly": readonly,
                    "disabled": disabled,
                    "required": required,
                    "name": group.name if group is not None else None,
                    "type": "radio",
                    "on_change": self._sync_native_errors,
                    "on_invalid": self._sync_native_errors,
                }
            )
            return compact_props(base)

        can_focus = self.registration is not None and self.registration.can_receive_focus()
        base.update(
            {
                "aria-checked": self.is_checked,
                "aria-readonly": readonly,
                "aria-disabled": disabled,
                "aria-required": required,
                "role": "radio",
                "tabindex": "0" if self.is_checked or can_focus else "-1",
            }
        )
        return compact_props(base)
