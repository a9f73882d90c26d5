"""Form controls built on the shared field, validity and labelling services."""

from .number_field import DecimalNumberParser, NumberField, NumberFieldProps, NumberParser
from .option_group import OptionGroup, OptionGroupProps
from .radio import Radio, RadioGroup, RadioGroupContext, RadioGroupProps, RadioProps
from .search_field import SearchField, SearchFieldProps
from .switch import Switch, SwitchProps
from .text_field import TextField, TextFieldProps

__all__ = [
    "DecimalNumberParser",
    "NumberField",
    "NumberFieldProps",
    "NumberParser",
    "OptionGroup",
    "OptionGroupProps",
    "Radio",
    "RadioGroup",
    "RadioGroupContext",
    "RadioGroupProps",
    "RadioProps",
    "SearchField",
    "SearchFieldProps",
    "Switch",
    "SwitchProps",
    "TextField",
    "TextFieldProps",
]
