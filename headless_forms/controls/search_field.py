from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from headless_forms.a11y import Props, compact_props
from headless_forms.component_schema import ElementRef
from headless_forms.events import KeyEvent
from headless_forms.field import SchemaLike
from headless_forms.ids import FieldTypePrefixes

from .text_field import TextInputBase


@dataclass(frozen=True)
class SearchFieldProps:
    label: str
    model_value: str | None = None
    description: str | None = None
    on_submit: Callable[[str], None] | None = field(default=None, compare=False, repr=False)
    name: str | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    placeholder: str | None = None
    required: bool = False
    readonly: bool = False
    disabled: bool = False
    schema: SchemaLike | None = field(default=None, compare=False, repr=False)


class SearchField(TextInputBase):
    """Search input: Escape clears, Enter submits outside of a form."""

    id_prefix = FieldTypePrefixes.SearchField

    def __init__(self, props: SearchFieldProps, *, input_ref: ElementRef | None = None) -> None:
        super().__init__(props, input_ref=input_ref)

    def clear(self, _event: object = None) -> bool:
        self.set_text("")
        return True

    def on_key_down(self, event: KeyEvent) -> bool:
        if event.key == "Escape":
            self.clear()
            return True
        if event.key == "Enter" and not self.input_ref.in_form and self.props.on_submit is not None:
            if not self.is_invalid:
                self.props.on_submit(self.field.value or "")
            return True
        return False

    @property
    def clear_button_props(self) -> Props:
        return {
            "tabindex": "-1",
            "type": "button",
            "aria-label": "Clear search",
            "on_click": self.clear,
        }

    @property
    def input_props(self) -> Props:
        return compact_props(
            {
                **self._base_input_props(),
                "type": "search",
                "pattern": self.props.pattern,
            }
        )
