from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Sequence, Union

import numpy as np

from headless_forms.a11y import LabelBindings, Props, build_accessible_error_props, build_label_props, compact_props
from headless_forms.component_schema import (
    CoordinatePoint,
    Direction,
    ElementRef,
    Orientation,
    parse_direction,
    parse_orientation,
)
from headless_forms.config import DEFAULT_CONFIG, FormsConfig
from headless_forms.events import PointerEvent
from headless_forms.field import FormField, SchemaLike
from headless_forms.ids import FieldTypePrefixes, uniq_id
from headless_forms.locale import LocaleContext
from headless_forms.validation import InputValidity

from .geometry import has_track_extent, position_to_value
from .math import normalize_step
from .ranges import ThumbRange, ValueRange, resolve_thumb_range
from .registry import ThumbRegistration, ThumbRegistry

LOGGER = logging.getLogger(__name__)

SliderValue = Union[float, list[Union[float, None]], None]


@dataclass(frozen=True)
class SliderProps:
    label: str | None = None
    name: str | None = None
    orientation: Orientation | None = None
    dir: Direction | None = None
    model_value: float | Sequence[float | None] | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    disabled: bool = False
    readonly: bool = False
    schema: SchemaLike | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        parse_orientation(self.orientation)
        parse_direction(self.dir)


def _initial_value(model_value: float | Sequence[float | None] | None) -> SliderValue:
    if model_value is None or isinstance(model_value, (int, float)):
        return model_value
    return list(model_value)


class SliderRegistration:
    """Per-thumb view of the slider, returned when a thumb registers.

    Everything a thumb needs to render and clamp its own drags is read through
    here; the only writes it can make are its own value and the touched flag.
    """

    def __init__(self, slider: "Slider", thumb: ThumbRegistration) -> None:
        self._slider = slider
        self._thumb = thumb

    @property
    def thumb_id(self) -> str:
        return self._thumb.id

    def get_thumb_range(self) -> ThumbRange:
        return self._slider.get_thumb_range(self._thumb)

    def get_slider_range(self) -> ValueRange:
        return self._slider.get_slider_range()

    def get_slider_step(self) -> float:
        return self._slider.get_slider_step()

    def get_slider_label_props(self) -> Props:
        return self._slider.labelled_by_props

    def get_orientation(self) -> Orientation:
        return self._slider.get_orientation()

    def get_value_for_page_position(self, coord: CoordinatePoint) -> float:
        return self._slider.get_value_for_page_position(coord)

    def get_inline_direction(self) -> Direction:
        return self._slider.get_inline_direction()

    def get_index(self) -> int:
        return self._slider.registry.index_of(self._thumb.id)

    def get_thumb_value(self) -> float:
        value = self._slider.get_thumb_value(self.get_index())
        if value is None:
            return self.get_thumb_range().absolute_min
        return value

    def set_thumb_value(self, value: float) -> None:
        self._slider.commit_thumb_value(self.get_index(), value)

    def set_touched(self, touched: bool) -> None:
        self._slider.field.set_touched(touched)

    def is_disabled(self) -> bool:
        return self._slider.is_disabled()

    def get_accessible_error_props(self) -> Props:
        return self._slider.accessible_error_props

    def unregister(self) -> None:
        self._slider.registry.deregister(self._thumb.id)


@dataclass(frozen=True)
class SliderContext:
    """Registration channel handed down to thumb widgets."""

    register: Callable[[ThumbRegistration], SliderRegistration]

    def use_slider_thumb_registration(self, thumb: ThumbRegistration) -> SliderRegistration:
        return self.register(thumb)


class Slider:
    """Multi-thumb slider controller.

    Owns the field value (a number for one thumb, a list for several) and the
    thumb registry. Every attribute bundle is derived on read from the current
    props, registry and field state.
    """

    def __init__(
        self,
        props: SliderProps | None = None,
        *,
        locale: LocaleContext | None = None,
        track_ref: ElementRef | None = None,
        config: FormsConfig = DEFAULT_CONFIG,
    ) -> None:
        self.props = props or SliderProps()
        self.config = config
        self.locale = locale or LocaleContext(config.default_locale)
        self.input_id = uniq_id(FieldTypePrefixes.Slider)
        self.track_ref = track_ref or ElementRef()
        self.registry = ThumbRegistry()
        self.field: FormField[Any] = FormField(
            _initial_value(self.props.model_value),
            path=self.props.name,
            disabled=self.props.disabled,
            schema=self.props.schema,
        )
        self.validity = InputValidity(self.field)

    def update_props(self, **changes: Any) -> "Slider":
        self.props = dataclasses.replace(self.props, **changes)
        self.field.disabled = self.props.disabled
        self.field.schema = self.props.schema
        if "model_value" in changes:
            self.set_value(changes["model_value"])
        return self

    # State reads

    def is_disabled(self) -> bool:
        return bool(self.props.disabled)

    def is_readonly(self) -> bool:
        return bool(self.props.readonly)

    def is_mutable(self) -> bool:
        return not self.is_disabled() and not self.is_readonly()

    def get_slider_range(self) -> ValueRange:
        low = self.config.slider_min if self.props.min is None else self.props.min
        high = self.config.slider_max if self.props.max is None else self.props.max
        return ValueRange(min=low, max=high)

    def get_slider_step(self) -> float:
        return normalize_step(self.props.step, self.config.slider_step)

    def get_orientation(self) -> Orientation:
        return self.props.orientation or "horizontal"

    def get_inline_direction(self) -> Direction:
        return self.props.dir or self.locale.direction

    def get_value_for_page_position(self, coord: CoordinatePoint) -> float:
        return position_to_value(
            coord,
            self.track_ref.bounds,
            self.get_orientation(),
            self.get_inline_direction(),
            self.get_slider_range(),
            self.get_slider_step(),
        )

    def get_thumb_value(self, index: int) -> float | None:
        value = self.field.value
        if isinstance(value, list):
            if 0 <= index < len(value):
                return value[index]
            return None
        if index == 0:
            return value
        return None

    def get_thumb_range(self, thumb: ThumbRegistration) -> ThumbRange:
        return resolve_thumb_range(
            self.registry.index_of(thumb.id),
            len(self.registry),
            self.get_thumb_value,
            self.get_slider_range(),
        )

    # Writes

    def commit_thumb_value(self, index: int, value: float) -> None:
        """Write `value` at thumb position `index` without clamping it."""

        if not self.is_mutable():
            LOGGER.debug("slider %s is not mutable, ignoring write to thumb %d", self.input_id, index)
            return
        if index < 0:
            LOGGER.debug("slider %s ignoring write for unregistered thumb", self.input_id)
            return

        if len(self.registry) <= 1:
            self.field.set_value(value)
            self.validity.update_validity()
            return

        current = self.field.value
        if current is None:
            values: list[float | None] = []
        elif isinstance(current, list):
            values = list(current)
        else:
            values = [current]

        size = max(len(values), len(self.registry), index + 1)
        values.extend([None] * (size - len(values)))
        values[index] = value

        previous = self.get_slider_range().min
        for i, item in enumerate(values):
            if item is None:
                values[i] = previous
            else:
                previous = item

        self.field.set_value(values)
        self.validity.update_validity()

    def set_value(self, value: SliderValue) -> None:
        self.field.set_value(_initial_value(value))

    def set_touched(self, touched: bool) -> None:
        self.field.set_touched(touched)

    # Track interaction

    def _nearest_thumb_index(self, target: float) -> int:
        thumbs = self.registry.snapshot()
        if not thumbs:
            return 0
        values = np.full(len(thumbs), np.nan, dtype=np.float64)
        lows = np.empty(len(thumbs), dtype=np.float64)
        highs = np.empty(len(thumbs), dtype=np.float64)
        for idx, thumb in enumerate(thumbs):
            value = self.get_thumb_value(idx)
            if value is not None:
                values[idx] = value
            thumb_range = self.get_thumb_range(thumb)
            lows[idx] = thumb_range.min
            highs[idx] = thumb_range.max

        admissible = (target >= lows) & (target <= highs) & np.isfinite(values)
        if not np.any(admissible):
            return 0
        distances = np.where(admissible, np.abs(values - target), np.inf)
        # argmin keeps the first minimum, so ties go to the earliest registered thumb.
        return int(np.argmin(distances))

    def handle_track_pointer_down(self, event: PointerEvent) -> bool:
        measured = has_track_extent(self.track_ref.bounds, self.get_orientation())
        if not measured or not self.is_mutable():
            LOGGER.debug("slider %s ignoring track press (measured=%s)", self.input_id, measured)
            return False
        target = self.get_value_for_page_position(CoordinatePoint(event.x, event.y))
        index = self._nearest_thumb_index(target)
        self.commit_thumb_value(index, target)
        self.field.set_touched(True)
        return True

    # Registration protocol

    def use_slider_thumb_registration(self, thumb: ThumbRegistration) -> SliderRegistration:
        self.registry.register(thumb)
        return SliderRegistration(self, thumb)

    @property
    def context(self) -> SliderContext:
        return SliderContext(register=self.use_slider_thumb_registration)

    def _focus_first_thumb(self) -> None:
        thumb = self.registry.first()
        if thumb is not None:
            thumb.focus()

    # Derived bundles

    @property
    def label_props(self) -> Props:
        return self._label_bindings().label_props

    @property
    def labelled_by_props(self) -> Props:
        return self._label_bindings().labelled_by_props

    def _label_bindings(self) -> LabelBindings:
        return build_label_props(
            self.input_id,
            self.props.label,
            target_ref=self.track_ref,
            handle_click=self._focus_first_thumb,
        )

    @property
    def error_message_props(self) -> Props:
        return build_accessible_error_props(self.input_id, self.field.error_message).error_message_props

    @property
    def accessible_error_props(self) -> Props:
        return build_accessible_error_props(self.input_id, self.field.error_message).accessible_error_props

    @property
    def group_props(self) -> Props:
        return compact_props(
            {
                **self.labelled_by_props,
                "id": self.input_id,
                "role": "group",
                "dir": self.props.dir,
            }
        )

    @property
    def track_props(self) -> Props:
        is_vertical = self.get_orientation() == "vertical"
        return {
            "style": {
                "container-type": "size" if is_vertical else "inline-size",
                "position": "relative",
            },
            "on_pointer_down": self.handle_track_pointer_down,
        }

    @property
    def output_props(self) -> Props:
        return {"aria-live": "off"}

    # Field accessors

    @property
    def field_value(self) -> SliderValue:
        return self.field.value

    @property
    def is_touched(self) -> bool:
        return self.field.touched

    @property
    def error_message(self) -> str | None:
        return self.field.error_message

    @property
    def errors(self) -> tuple[str, ...]:
        return self.field.errors

    @property
    def is_valid(self) -> bool:
        return self.field.is_valid

    @property
    def is_dirty(self) -> bool:
        return self.field.is_dirty
