"""Domain entities."""

from graphmap.domain.entities.owner import EntityOwner
from graphmap.domain.entities.persistent_entity import PersistentEntity
from graphmap.domain.entities.persistent_property import PersistentProperty, is_native_type

__all__ = [
    "EntityOwner",
    "PersistentEntity",
    "PersistentProperty",
    "is_native_type",
]
