"""Declared type of a mapped field, with array and collection component information."""

import collections.abc
import types
import typing
from dataclasses import dataclass
from typing import Any

# Treated as arrays of int, the way the graph store keeps byte arrays.
_BYTE_ARRAYS = (bytes, bytearray)


@dataclass(frozen=True)
class TypeInformation:
    """Raw type of a field plus one level of component information.

    Arrays are homogeneous variadic tuples (``tuple[int, ...]``) and byte
    strings. Collections are every other iterable except ``str``; mappings are
    collections whose component is the value type.
    """

    raw_type: type
    component: "TypeInformation | None" = None
    is_array: bool = False
    is_collection: bool = False
    is_map: bool = False

    @property
    def actual_type(self) -> type:
        """Component type for arrays and collections, the raw type otherwise."""
        if self.component is not None:
            return self.component.raw_type
        return self.raw_type

    @property
    def array_depth(self) -> int:
        if not self.is_array or self.component is None:
            return 0
        return 1 + self.component.array_depth

    @classmethod
    def from_hint(cls, hint: Any) -> "TypeInformation":
        """Build type information from a (resolved) type hint."""
        hint = _unwrap(hint)
        origin = typing.get_origin(hint)
        args = typing.get_args(hint)

        if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            return cls(tuple, component=cls.from_hint(args[0]), is_array=True)

        raw = origin if origin is not None else hint
        if raw is Any or not isinstance(raw, type):
            return cls(object)
        if issubclass(raw, _BYTE_ARRAYS):
            return cls(raw, component=cls(int), is_array=True)
        if issubclass(raw, str):
            return cls(raw)
        if issubclass(raw, collections.abc.Mapping):
            value_hint = args[1] if len(args) == 2 else object
            return cls(
                raw,
                component=cls.from_hint(value_hint),
                is_collection=True,
                is_map=True,
            )
        if issubclass(raw, collections.abc.Iterable):
            element_hint = args[0] if len(args) == 1 else object
            return cls(raw, component=cls.from_hint(element_hint), is_collection=True)
        return cls(raw)

    def __str__(self) -> str:
        name = self.raw_type.__qualname__
        if self.component is None:
            return name
        if self.is_array and self.raw_type is tuple:
            return f"{self.component}[]"
        return f"{name}[{self.component}]"


def _unwrap(hint: Any) -> Any:
    """Strip Annotated, NewType and Optional wrappers; collapse other unions to object."""
    while True:
        if typing.get_origin(hint) is typing.Annotated:
            hint = hint.__origin__
        elif hasattr(hint, "__supertype__"):
            hint = hint.__supertype__
        elif typing.get_origin(hint) in (typing.Union, types.UnionType):
            members = [a for a in typing.get_args(hint) if a is not type(None)]
            if len(members) != 1:
                return object
            hint = members[0]
        else:
            return hint
