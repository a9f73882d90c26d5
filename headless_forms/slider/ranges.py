from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class ValueRange:
    min: float
    max: float


@dataclass(frozen=True)
class ThumbRange:
    """Legal window for one thumb, plus the slider's own bounds."""

    min: float
    max: float
    absolute_min: float
    absolute_max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


def resolve_thumb_range(
    index: int,
    thumb_count: int,
    value_at: Callable[[int], float | None],
    bounds: ValueRange,
) -> ThumbRange:
    """Compute the window for thumb `index` from its neighbors' live values.

    A missing neighbor, or one without a value, leaves that side at the
    slider bound. Nothing is cached: moving a thumb changes what its
    neighbors see on their next query.
    """

    prev_value = value_at(index - 1) if index > 0 else None
    next_value = value_at(index + 1) if 0 <= index < thumb_count - 1 else None
    return ThumbRange(
        min=bounds.min if prev_value is None else prev_value,
        max=bounds.max if next_value is None else next_value,
        absolute_min=bounds.min,
        absolute_max=bounds.max,
    )
