"""Headless form widget behavior: attribute bundles and event handlers, no rendering."""

from .a11y import (
    build_accessible_error_props,
    build_described_by_props,
    build_label_props,
    compact_props,
)
from .component_schema import BoundingBox, CoordinatePoint, Direction, ElementRef, Orientation
from .config import DEFAULT_CONFIG, FormsConfig, load_forms_config, validate_forms_config
from .controls import (
    DecimalNumberParser,
    NumberField,
    NumberFieldProps,
    OptionGroup,
    OptionGroupProps,
    Radio,
    RadioGroup,
    RadioGroupProps,
    RadioProps,
    SearchField,
    SearchFieldProps,
    Switch,
    SwitchProps,
    TextField,
    TextFieldProps,
)
from .events import BeforeInputEvent, KeyEvent, PointerEvent, ValueEvent, WheelEvent, parse_input_event
from .field import FormField, FunctionSchema, TypedSchema
from .ids import uniq_id
from .locale import LocaleContext
from .slider import (
    Slider,
    SliderContext,
    SliderProps,
    SliderRegistration,
    ThumbRange,
    ThumbRegistration,
    ValueRange,
    position_to_value,
    quantize,
)

__all__ = [
    "BeforeInputEvent",
    "BoundingBox",
    "CoordinatePoint",
    "DEFAULT_CONFIG",
    "DecimalNumberParser",
    "Direction",
    "ElementRef",
    "FormField",
    "FormsConfig",
    "FunctionSchema",
    "KeyEvent",
    "LocaleContext",
    "NumberField",
    "NumberFieldProps",
    "OptionGroup",
    "OptionGroupProps",
    "Orientation",
    "PointerEvent",
    "Radio",
    "RadioGroup",
    "RadioGroupProps",
    "RadioProps",
    "SearchField",
    "SearchFieldProps",
    "Slider",
    "SliderContext",
    "SliderProps",
    "SliderRegistration",
    "Switch",
    "SwitchProps",
    "TextField",
    "TextFieldProps",
    "ThumbRange",
    "ThumbRegistration",
    "TypedSchema",
    "ValueEvent",
    "ValueRange",
    "WheelEvent",
    "build_accessible_error_props",
    "build_described_by_props",
    "build_label_props",
    "compact_props",
    "load_forms_config",
    "parse_input_event",
    "position_to_value",
    "quantize",
    "uniq_id",
    "validate_forms_config",
]
