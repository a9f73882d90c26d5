from __future__ import annotations

import dataclasses
from dataclasses import dataclass
import logging
from typing import Any

from headless_forms.a11y import LabelBindings, Props, build_label_props, compact_props
from headless_forms.component_schema import ElementRef
from headless_forms.events import KeyEvent, ValueEvent
from headless_forms.field import FormField
from headless_forms.ids import FieldTypePrefixes, uniq_id

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitchProps:
    label: str | None = None
    name: str | None = None
    model_value: Any = None
    readonly: bool = False
    disabled: bool = False
    true_value: Any = True
    false_value: Any = False


class Switch:
    """Two-state toggle with configurable on/off values.

    `input_props` targets a native checkbox; `switch_props` targets a plain
    element acting as `role="switch"`.
    """

    def __init__(self, props: SwitchProps | None = None, *, input_ref: ElementRef | None = None) -> None:
        self.props = props or SwitchProps()
        self.input_id = uniq_id(FieldTypePrefixes.Switch)
        self.input_ref = input_ref or ElementRef(tag_name="input")
        initial = self.props.false_value if self.props.model_value is None else self.props.model_value
        self.field: FormField[Any] = FormField(self.normalize_value(initial), path=self.props.name)

    def update_props(self, **changes: Any) -> "Switch":
        self.props = dataclasses.replace(self.props, **changes)
        if "model_value" in changes:
            self.field.set_value(self.normalize_value(changes["model_value"]))
        return self

    def normalize_value(self, next_value: Any) -> Any:
        """Map a raw value onto `true_value`/`false_value`, or a plain bool."""

        if isinstance(next_value, bool):
            return self.props.true_value if next_value else self.props.false_value
        if next_value == self.props.true_value:
            return self.props.true_value
        if next_value == self.props.false_value:
            return self.props.false_value
        return bool(next_value)

    @property
    def field_value(self) -> Any:
        return self.field.value

    @property
    def is_pressed(self) -> bool:
        return self.field.value == self.props.true_value

    def _is_locked(self) -> bool:
        return self.props.disabled or self.props.readonly

    def set_pressed(self, pressed: bool) -> None:
        if self._is_locked():
            LOGGER.debug("switch %s is locked, ignoring toggle", self.input_id)
            return
        self.field.set_value(self.normalize_value(bool(pressed)))

    def toggle(self, force: bool | None = None) -> bool:
        self.set_pressed(not self.is_pressed if force is None else force)
        return self.is_pressed

    def on_key_down(self, event: KeyEvent) -> bool:
        if event.code == "Space" or event.key == "Enter":
            self.toggle()
            return True
        return False

    def on_click(self, _event: object = None) -> bool:
        self.toggle()
        return True

    def on_change(self, event: ValueEvent) -> bool:
        self.set_pressed(bool(event.value))
        return False

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(self.input_id, self.props.label, target_ref=self.input_ref)

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def input_props(self) -> Props:
        return compact_props(
            {
                **self._label_bindings().labelled_by_props,
                "id": self.input_id,
                "name": self.props.name,
                "disabled": self.props.disabled,
                "readonly": self.props.readonly,
                "checked": self.is_pressed,
                "role": "switch",
                "on_key_down": self.on_key_down,
                "on_change": self.on_change,
                "on_input": self.on_change,
            }
        )

    @property
    def switch_props(self) -> Props:
        return compact_props(
            {
                **self._label_bindings().labelled_by_props,
                "role": "switch",
                "tabindex": "0",
                "aria-checked": self.is_pressed,
                "aria-readonly": self.props.readonly or None,
                "aria-disabled": self.props.disabled or None,
                "on_key_down": self.on_key_down,
                "on_click": self.on_click,
            }
        )
