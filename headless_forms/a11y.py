from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .component_schema import ElementRef

Props = dict[str, Any]


def compact_props(props: Mapping[str, Any]) -> Props:
    """Drop unset attributes so bundles only carry what should be rendered."""

    return {key: value for key, value in props.items() if value is not None}


@dataclass(frozen=True)
class LabelBindings:
    label_props: Props
    labelled_by_props: Props


@dataclass(frozen=True)
class ErrorBindings:
    error_message_props: Props
    accessible_error_props: Props


@dataclass(frozen=True)
class DescriptionBindings:
    description_props: Props
    described_by_props: Props


def label_id_for(for_id: str) -> str:
    return f"{for_id}-l"


def error_message_id_for(input_id: str) -> str:
    return f"{input_id}-r"


def description_id_for(input_id: str) -> str:
    return f"{input_id}-d"


def build_label_props(
    for_id: str,
    label: str | None,
    *,
    target_ref: ElementRef | None = None,
    handle_click: Callable[[], None] | None = None,
) -> LabelBindings:
    """Build the label element bundle and the bundle linking a control to it.

    `for` is only emitted when the target is a native input; other targets are
    linked through `aria-labelledby` alone.
    """

    label_id = label_id_for(for_id)
    is_input = target_ref is not None and target_ref.is_input_element()
    label_props = compact_props(
        {
            "id": label_id,
            "for": for_id if is_input else None,
            "on_click": handle_click,
        }
    )
    if label:
        labelled_by_props: Props = {"aria-labelledby": label_id}
    else:
        labelled_by_props = {}
    return LabelBindings(label_props=label_props, labelled_by_props=labelled_by_props)


def build_accessible_error_props(input_id: str, error_message: str | None) -> ErrorBindings:
    error_id = error_message_id_for(input_id)
    error_message_props: Props = {
        "id": error_id,
        "aria-live": "polite",
        "aria-atomic": True,
    }
    accessible_error_props = compact_props(
        {
            "aria-invalid": True if error_message else None,
            "aria-errormessage": error_id if error_message else None,
        }
    )
    return ErrorBindings(
        error_message_props=error_message_props,
        accessible_error_props=accessible_error_props,
    )


def build_described_by_props(
    input_id: str,
    *,
    description: str | None = None,
    error_message: str | None = None,
) -> DescriptionBindings:
    description_id = description_id_for(input_id)
    if error_message:
        described_by: str | None = error_message_id_for(input_id)
    elif description:
        described_by = description_id
    else:
        described_by = None
    return DescriptionBindings(
        description_props={"id": description_id},
        described_by_props=compact_props({"aria-describedby": described_by}),
    )
