"""Multi-thumb slider engine: quantizing, track mapping, neighbor ranges and thumb registration."""

from .geometry import has_track_extent, position_to_value, track_percent
from .math import clamp, decimals_from_step, normalize_step, quantize
from .ranges import ThumbRange, ValueRange, resolve_thumb_range
from .registry import ThumbRegistration, ThumbRegistry
from .slider import Slider, SliderContext, SliderProps, SliderRegistration, SliderValue

__all__ = [
    "Slider",
    "SliderContext",
    "SliderProps",
    "SliderRegistration",
    "SliderValue",
    "ThumbRange",
    "ThumbRegistration",
    "ThumbRegistry",
    "ValueRange",
    "clamp",
    "decimals_from_step",
    "has_track_extent",
    "normalize_step",
    "position_to_value",
    "quantize",
    "resolve_thumb_range",
    "track_percent",
]
