"""Field descriptor - the declared shape of one field of a mapped class."""

import typing
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from graphmap.domain.exceptions import FieldAccessError
from graphmap.domain.value_objects.type_information import TypeInformation

# pydantic error types raised when assigning to a frozen model or field
_FROZEN_ERROR_TYPES = frozenset({"frozen_instance", "frozen_field"})


@dataclass(frozen=True, eq=False)
class FieldDescriptor:
    """Name, declared type, owning class and attached metadata of a field.

    ``metadata`` holds every object attached to the field (``Annotated``
    extras, pydantic field metadata); tags are the ``Tag`` instances among
    them. ``owner_type`` is a handle to the owning class, not to its metadata.
    """

    name: str
    type_info: TypeInformation
    owner_type: type
    metadata: tuple[Any, ...] = ()

    @classmethod
    def from_hint(
        cls,
        name: str,
        hint: Any,
        owner_type: type,
        extra_metadata: tuple[Any, ...] = (),
    ) -> "FieldDescriptor":
        """Split ``Annotated[T, ...]`` into the declared type and its metadata."""
        metadata: tuple[Any, ...] = ()
        if typing.get_origin(hint) is typing.Annotated:
            metadata = hint.__metadata__
            hint = hint.__origin__
        return cls(
            name=name,
            type_info=TypeInformation.from_hint(hint),
            owner_type=owner_type,
            metadata=metadata + tuple(extra_metadata),
        )

    def get(self, instance: Any) -> Any:
        """Read the field from an instance. Raises FieldAccessError."""
        try:
            return getattr(instance, self.name)
        except AttributeError as e:
            raise FieldAccessError(self.owner_type.__name__, self.name, str(e)) from e

    def set(self, instance: Any, value: Any) -> None:
        """Write the field on an instance. Raises FieldAccessError."""
        try:
            setattr(instance, self.name, value)
        except AttributeError as e:
            raise FieldAccessError(self.owner_type.__name__, self.name, str(e)) from e
        except ValidationError as e:
            if not any(err["type"] in _FROZEN_ERROR_TYPES for err in e.errors()):
                raise
            raise FieldAccessError(self.owner_type.__name__, self.name, "field is frozen") from e
