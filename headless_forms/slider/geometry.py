from __future__ import annotations

from headless_forms.component_schema import BoundingBox, CoordinatePoint, Direction, Orientation

from .math import quantize
from .ranges import ValueRange


def has_track_extent(track_rect: BoundingBox | None, orientation: Orientation) -> bool:
    """True when the track box can be mapped along its main axis."""

    if track_rect is None:
        return False
    extent = track_rect.width if orientation == "horizontal" else track_rect.height
    return extent > 0


def track_percent(
    coord: CoordinatePoint,
    track_rect: BoundingBox,
    orientation: Orientation,
    direction: Direction,
) -> float | None:
    """Fraction of the track covered up to `coord`, in value order.

    Screen-down is the low end of a vertical track and screen-right is the low
    end of an rtl track, so both flip the raw fraction. The two triggers are
    one combined condition: a vertical rtl track flips once.
    """

    if not has_track_extent(track_rect, orientation):
        return None
    if orientation == "horizontal":
        percent = (coord.x - track_rect.x) / track_rect.width
    else:
        percent = (coord.y - track_rect.y) / track_rect.height
    if orientation == "vertical" or direction == "rtl":
        percent = 1 - percent
    return percent


def position_to_value(
    coord: CoordinatePoint,
    track_rect: BoundingBox | None,
    orientation: Orientation,
    direction: Direction,
    bounds: ValueRange,
    step: float,
) -> float:
    if track_rect is None:
        return 0
    percent = track_percent(coord, track_rect, orientation, direction)
    if percent is None:
        return 0
    value = percent * (bounds.max - bounds.min) + bounds.min
    return quantize(value, step)
