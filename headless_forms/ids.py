from __future__ import annotations

import itertools


class FieldTypePrefixes:
    TextField = "tf"
    SearchField = "sf"
    NumberField = "nf"
    Switch = "sw"
    RadioButtonGroup = "rbg"
    RadioButton = "rb"
    OptionGroup = "og"
    Slider = "s"


_COUNTER = itertools.count(1)


def uniq_id(prefix: str | None = None) -> str:
    """Return a process-unique id, optionally namespaced by a field prefix."""

    n = next(_COUNTER)
    return f"{prefix}-{n}" if prefix else f"hf-{n}"
