"""Default conversion service: scalar values to and from their string form."""

from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from graphmap.domain.exceptions import ConversionError

# Types converted to and from str without a registered converter.
STRING_CONVERTIBLE_TYPES: tuple[type, ...] = (
    str,
    int,
    float,
    bool,
    Decimal,
    datetime,
    date,
    time,
    timedelta,
    UUID,
)

Converter = Callable[[Any], Any]


@lru_cache(maxsize=256)
def _adapter(target: type) -> TypeAdapter:
    return TypeAdapter(target)


class DefaultConversionService:
    """Converts string-convertible scalars in both directions.

    Parsing goes through pydantic, so "42", "true" and ISO dates are accepted.
    Enums are stored by member name, bools as "true"/"false". Converters added
    with add_converter take precedence and may work in one direction only.
    """

    def __init__(self) -> None:
        self._converters: dict[tuple[type, type], Converter] = {}

    def add_converter(self, source: type, target: type, converter: Converter) -> None:
        self._converters[(source, target)] = converter

    def can_convert(self, source: type, target: type) -> bool:
        if self._find_converter(source, target) is not None:
            return True
        if source is target:
            return True
        if target is str:
            return _is_string_convertible(source)
        if source is str:
            return _is_string_convertible(target)
        return False

    def convert(self, value: Any, target: type) -> Any:
        """Convert value to target. None passes through. Raises ConversionError."""
        if value is None:
            return None
        source = type(value)
        converter = self._find_converter(source, target)
        if converter is not None:
            return converter(value)
        if source is target:
            return value
        if target is str and _is_string_convertible(source):
            return _to_string(value)
        if source is str and _is_string_convertible(target):
            return _from_string(value, target)
        raise ConversionError(f"No converter from {source.__qualname__} to {target.__qualname__}")

    def _find_converter(self, source: type, target: type) -> Converter | None:
        for klass in source.__mro__:
            converter = self._converters.get((klass, target))
            if converter is not None:
                return converter
        return None


def _is_string_convertible(t: type) -> bool:
    return t in STRING_CONVERTIBLE_TYPES or (isinstance(t, type) and issubclass(t, Enum))


def _to_string(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(_adapter(type(value)).dump_python(value, mode="json"))


def _from_string(value: str, target: type) -> Any:
    if issubclass(target, Enum):
        try:
            return target[value]
        except KeyError as e:
            raise ConversionError(f"{value!r} is not a member of {target.__qualname__}") from e
    try:
        return _adapter(target).validate_python(value)
    except ValidationError as e:
        raise ConversionError(f"Cannot convert {value!r} to {target.__qualname__}: {e}") from e
