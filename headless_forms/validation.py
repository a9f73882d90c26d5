from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Any

from .component_schema import ElementRef
from .field import FormField


@dataclass(frozen=True)
class InputConstraints:
    """Native-style constraint attributes of an input element."""

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    min: float | None = None
    max: float | None = None

    def __post_init__(self) -> None:
        if self.min_length is not None and self.min_length < 0:
            raise ValueError("min_length must be >= 0")
        if self.max_length is not None and self.max_length < 0:
            raise ValueError("max_length must be >= 0")


@dataclass(frozen=True)
class ValidityDetails:
    value_missing: bool = False
    too_short: bool = False
    too_long: bool = False
    pattern_mismatch: bool = False
    range_underflow: bool = False
    range_overflow: bool = False
    message: str = ""

    @property
    def valid(self) -> bool:
        return not (
            self.value_missing
            or self.too_short
            or self.too_long
            or self.pattern_mismatch
            or self.range_underflow
            or self.range_overflow
        )


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def check_constraints(value: Any, constraints: InputConstraints) -> ValidityDetails:
    """Evaluate constraints the way a browser would for a single input.

    Length and pattern checks only apply to non-empty text; numeric range
    checks only apply to numbers.
    """

    if _is_empty(value):
        if constraints.required:
            return ValidityDetails(value_missing=True, message="Please fill out this field.")
        return ValidityDetails()

    if isinstance(value, str):
        if constraints.min_length is not None and len(value) < constraints.min_length:
            return ValidityDetails(
                too_short=True,
                message=f"Please lengthen this text to {constraints.min_length} characters or more.",
            )
        if constraints.max_length is not None and len(value) > constraints.max_length:
            return ValidityDetails(
                too_long=True,
                message=f"Please shorten this text to {constraints.max_length} characters or less.",
            )
        if constraints.pattern is not None and re.fullmatch(constraints.pattern, value) is None:
            return ValidityDetails(pattern_mismatch=True, message="Please match the requested format.")
        return ValidityDetails()

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if constraints.min is not None and value < constraints.min:
            return ValidityDetails(
                range_underflow=True,
                message=f"Value must be greater than or equal to {constraints.min:g}.",
            )
        if constraints.max is not None and value > constraints.max:
            return ValidityDetails(
                range_overflow=True,
                message=f"Value must be less than or equal to {constraints.max:g}.",
            )
    return ValidityDetails()


class InputValidity:
    """Keeps a field's errors in sync with native constraints and its schema."""

    def __init__(
        self,
        field: FormField[Any],
        *,
        constraints: InputConstraints | None = None,
        input_ref: ElementRef | None = None,
        disable_html_validation: bool = False,
    ) -> None:
        self.field = field
        self.constraints = constraints
        self.input_ref = input_ref
        self.disable_html_validation = disable_html_validation
        self.validity_details = ValidityDetails()

    def _native_details(self) -> ValidityDetails:
        if self.disable_html_validation:
            return ValidityDetails()
        if self.constraints is not None:
            details = check_constraints(self.field.value, self.constraints)
            if not details.valid:
                return details
        if self.input_ref is not None and self.input_ref.validation_message:
            return ValidityDetails(message=self.input_ref.validation_message)
        return ValidityDetails()

    def update_validity(self) -> ValidityDetails:
        details = self._native_details()
        self.validity_details = details
        self.field.revalidate(extra_errors=(details.message,) if details.message else ())
        return details

    @property
    def is_invalid(self) -> bool:
        return not self.field.is_valid

    def on_invalid(self, _event: object = None) -> bool:
        self.update_validity()
        return True
