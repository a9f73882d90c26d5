from __future__ import annotations

import copy
from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, Union

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class TypedSchema(Protocol):
    """Validates a field value, returning user-facing error messages."""

    def validate(self, value: Any) -> Sequence[str]:
        ...


SchemaLike = Union[TypedSchema, Callable[[Any], Sequence[str]]]


@dataclass(frozen=True)
class FunctionSchema:
    """Schema built from a predicate and the message shown when it fails."""

    predicate: Callable[[Any], bool]
    message: str

    def validate(self, value: Any) -> Sequence[str]:
        return () if self.predicate(value) else (self.message,)


def run_schema(schema: SchemaLike | None, value: Any) -> tuple[str, ...]:
    if schema is None:
        return ()
    validate = getattr(schema, "validate", None)
    if callable(validate):
        errors = validate(value)
    else:
        errors = schema(value)  # type: ignore[operator]
    return tuple(str(e) for e in errors if e)


class FormField(Generic[T]):
    """Field state store: value, touched/dirty flags and validation errors."""

    def __init__(
        self,
        initial_value: T | None = None,
        *,
        path: str | None = None,
        disabled: bool = False,
        schema: SchemaLike | None = None,
    ) -> None:
        self.path = path
        self.disabled = disabled
        self.schema = schema
        self._initial_value = copy.deepcopy(initial_value)
        self._value: T | None = copy.deepcopy(initial_value)
        self._touched = False
        self._errors: tuple[str, ...] = ()

    @property
    def value(self) -> T | None:
        return self._value

    def set_value(self, value: T | None) -> None:
        self._value = value

    @property
    def touched(self) -> bool:
        return self._touched

    def set_touched(self, touched: bool) -> None:
        self._touched = bool(touched)

    @property
    def errors(self) -> tuple[str, ...]:
        return self._errors

    @property
    def error_message(self) -> str | None:
        return self._errors[0] if self._errors else None

    def set_errors(self, errors: str | Sequence[str]) -> None:
        if isinstance(errors, str):
            errors = (errors,) if errors else ()
        self._errors = tuple(e for e in errors if e)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def is_dirty(self) -> bool:
        return self._value != self._initial_value

    def revalidate(self, extra_errors: Sequence[str] = ()) -> tuple[str, ...]:
        """Re-run the schema against the current value and store the result."""

        errors = tuple(e for e in extra_errors if e) + run_schema(self.schema, self._value)
        self._errors = errors
        if errors:
            LOGGER.debug("field %s failed validation: %s", self.path or "<anonymous>", errors[0])
        return errors

    def reset(self) -> None:
        self._value = copy.deepcopy(self._initial_value)
        self._touched = False
        self._errors = ()
