from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Union


EventType = Literal[
    "pointer_down",
    "key_down",
    "input",
    "change",
    "before_input",
    "wheel",
]


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float
    button: int = 0


@dataclass(frozen=True)
class KeyEvent:
    key: str
    code: str = ""


@dataclass(frozen=True)
class ValueEvent:
    """Carries the element's current value for `input`/`change` events."""

    value: object


@dataclass(frozen=True)
class BeforeInputEvent:
    """Text about to be inserted, plus the current text and selection."""

    data: str | None
    current_text: str = ""
    selection_start: int | None = None
    selection_end: int | None = None

    def predicted_text(self) -> str:
        if self.data is None:
            return self.current_text
        start = len(self.current_text) if self.selection_start is None else self.selection_start
        end = len(self.current_text) if self.selection_end is None else self.selection_end
        return self.current_text[:start] + self.data + self.current_text[end:]


@dataclass(frozen=True)
class WheelEvent:
    delta_y: float


FormEvent = Union[PointerEvent, KeyEvent, ValueEvent, BeforeInputEvent, WheelEvent]


def _as_float(raw: object) -> float | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def parse_input_event(event_type: str, payload: object) -> FormEvent | None:
    """Parse a loose event payload into a typed widget event.

    Returns None for unknown event types or payloads missing required fields,
    so hosts can forward raw events without pre-filtering.
    """

    if not isinstance(payload, Mapping):
        return None
    if event_type == "pointer_down":
        x = _as_float(payload.get("x"))
        y = _as_float(payload.get("y"))
        if x is None or y is None:
            return None
        button = payload.get("button", 0)
        return PointerEvent(x=x, y=y, button=button if isinstance(button, int) else 0)
    if event_type == "key_down":
        key = payload.get("key")
        if not isinstance(key, str):
            return None
        return KeyEvent(key=key, code=str(payload.get("code", "")))
    if event_type in ("input", "change"):
        if "value" not in payload:
            return None
        return ValueEvent(value=payload["value"])
    if event_type == "before_input":
        data = payload.get("data")
        start = payload.get("selection_start")
        end = payload.get("selection_end")
        return BeforeInputEvent(
            data=None if data is None else str(data),
            current_text=str(payload.get("current_text", "")),
            selection_start=start if isinstance(start, int) else None,
            selection_end=end if isinstance(end, int) else None,
        )
    if event_type == "wheel":
        delta_y = _as_float(payload.get("delta_y"))
        if delta_y is None:
            return None
        return WheelEvent(delta_y=delta_y)
    return None
