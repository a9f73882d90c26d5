from __future__ import annotations

from dataclasses import dataclass

from headless_forms.a11y import LabelBindings, Props, build_label_props
from headless_forms.component_schema import ElementRef
from headless_forms.ids import FieldTypePrefixes, uniq_id


@dataclass(frozen=True)
class OptionGroupProps:
    label: str


class OptionGroup:
    def __init__(self, props: OptionGroupProps, *, group_ref: ElementRef | None = None) -> None:
        self.props = props
        self.group_id = uniq_id(FieldTypePrefixes.OptionGroup)
        self.group_ref = group_ref or ElementRef()

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(self.group_id, self.props.label, target_ref=self.group_ref)

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def group_props(self) -> Props:
        return {
            "id": self.group_id,
            "role": "group",
            **self._label_bindings().labelled_by_props,
        }
