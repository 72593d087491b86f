"""Conversion service port - string (de)serialization of property values."""

from typing import Any, Protocol


class ConversionService(Protocol):
    """Port for converting values between types."""

    def can_convert(self, source: type, target: type) -> bool: ...

    def convert(self, value: Any, target: type) -> Any: ...
