from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal


Orientation = Literal["horizontal", "vertical"]
Direction = Literal["ltr", "rtl"]

_ORIENTATIONS = ("horizontal", "vertical")
_DIRECTIONS = ("ltr", "rtl")


def parse_orientation(raw: str | None) -> Orientation | None:
    if raw is None:
        return None
    if raw not in _ORIENTATIONS:
        raise ValueError(f"orientation must be one of {_ORIENTATIONS}, got `{raw}`")
    return raw  # type: ignore[return-value]


def parse_direction(raw: str | None) -> Direction | None:
    if raw is None:
        return None
    if raw not in _DIRECTIONS:
        raise ValueError(f"direction must be one of {_DIRECTIONS}, got `{raw}`")
    return raw  # type: ignore[return-value]


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass
class ElementRef:
    """Handle on a rendered element, filled in by the rendering layer.

    Widgets read geometry and a few element facts through it; nothing here
    touches a real DOM. An unmounted ref has no bounds.
    """

    tag_name: str = "div"
    bounds: BoundingBox | None = None
    in_form: bool = False
    validation_message: str = ""
    on_focus: Callable[[], None] | None = field(default=None, repr=False)
    focus_count: int = field(default=0, init=False)

    @property
    def is_mounted(self) -> bool:
        return self.bounds is not None

    def mount(self, bounds: BoundingBox, *, tag_name: str | None = None) -> "ElementRef":
        self.bounds = bounds
        if tag_name is not None:
            self.tag_name = tag_name
        return self

    def unmount(self) -> None:
        self.bounds = None

    def is_input_element(self) -> bool:
        return self.tag_name.lower() == "input"

    def focus(self) -> None:
        self.focus_count += 1
        if self.on_focus is not None:
            self.on_focus()
