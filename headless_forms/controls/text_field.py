from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Literal

from headless_forms.a11y import (
    LabelBindings,
    Props,
    build_accessible_error_props,
    build_described_by_props,
    build_label_props,
    compact_props,
)
from headless_forms.component_schema import ElementRef
from headless_forms.events import KeyEvent, ValueEvent
from headless_forms.field import FormField, SchemaLike
from headless_forms.ids import FieldTypePrefixes, uniq_id
from headless_forms.validation import InputConstraints, InputValidity, ValidityDetails

TextInputType = Literal["text", "password", "email", "number", "tel", "url"]


@dataclass(frozen=True)
class TextFieldProps:
    label: str
    model_value: str | None = None
    description: str | None = None
    name: str | None = None
    type: TextInputType = "text"
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    placeholder: str | None = None
    required: bool = False
    readonly: bool = False
    disabled: bool = False
    schema: SchemaLike | None = field(default=None, compare=False, repr=False)


class TextInputBase:
    """Shared value, validity and labelling wiring for free-text inputs."""

    id_prefix = FieldTypePrefixes.TextField

    def __init__(self, props: Any, *, input_ref: ElementRef | None = None) -> None:
        self.props = props
        self.input_id = uniq_id(self.id_prefix)
        self.input_ref = input_ref or ElementRef(tag_name="input")
        self.field: FormField[str] = FormField(
            props.model_value,
            path=props.name,
            disabled=props.disabled,
            schema=props.schema,
        )
        self.validity = InputValidity(
            self.field,
            constraints=self._constraints(),
            input_ref=self.input_ref,
        )

    def _constraints(self) -> InputConstraints:
        return InputConstraints(
            required=self.props.required,
            min_length=self.props.min_length,
            max_length=self.props.max_length,
            pattern=self.props.pattern,
        )

    def update_props(self, **changes: Any) -> "TextInputBase":
        self.props = dataclasses.replace(self.props, **changes)
        self.field.disabled = self.props.disabled
        self.field.schema = self.props.schema
        self.validity.constraints = self._constraints()
        if "model_value" in changes:
            self.field.set_value(changes["model_value"])
        return self

    @property
    def field_value(self) -> str | None:
        return self.field.value

    @property
    def error_message(self) -> str | None:
        return self.field.error_message

    @property
    def is_invalid(self) -> bool:
        return self.validity.is_invalid

    @property
    def validity_details(self) -> ValidityDetails:
        return self.validity.validity_details

    def set_text(self, text: str) -> None:
        self.field.set_value(text)
        self.validity.update_validity()

    def on_input(self, event: ValueEvent) -> bool:
        self.set_text("" if event.value is None else str(event.value))
        return False

    def on_change(self, event: ValueEvent) -> bool:
        self.set_text("" if event.value is None else str(event.value))
        return False

    def on_blur(self, _event: object = None) -> bool:
        self.field.set_touched(True)
        self.validity.update_validity()
        return False

    def on_key_down(self, event: KeyEvent) -> bool:
        return False

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

    def _base_input_props(self) -> Props:
        described_by = build_described_by_props(
            self.input_id,
            description=self.props.description,
            error_message=self.error_message,
        )
        return {
            "name": self.props.name,
            "placeholder": self.props.placeholder,
            "required": self.props.required,
            "readonly": self.props.readonly,
            "disabled": self.props.disabled,
            **self._label_bindings().labelled_by_props,
            "id": self.input_id,
            "value": self.field.value,
            "maxlength": self.props.max_length,
            "minlength": self.props.min_length,
            **described_by.described_by_props,
            "aria-invalid": True if self.error_message else None,
            "on_input": self.on_input,
            "on_change": self.on_change,
            "on_blur": self.on_blur,
            "on_key_down": self.on_key_down,
            "on_invalid": self.validity.on_invalid,
        }


class TextField(TextInputBase):
    def __init__(self, props: TextFieldProps, *, input_ref: ElementRef | None = None) -> None:
        super().__init__(props, input_ref=input_ref)

    @property
    def input_props(self) -> Props:
        is_textarea = self.input_ref.tag_name.lower() == "textarea"
        return compact_props(
            {
                **self._base_input_props(),
                "type": self.props.type,
                "pattern": None if is_textarea else self.props.pattern,
            }
        )
