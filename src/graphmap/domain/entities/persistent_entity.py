"""Persistent entity - the mapping metadata of one class."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from graphmap.domain.entities.owner import EntityOwner
from graphmap.domain.entities.persistent_property import PersistentProperty
from graphmap.domain.value_objects import EntityKind, SimpleValue


class PersistentEntity:
    """Owns the persistent properties of a mapped class, keyed by field name.

    Properties refer back to the entity only through its class; look the
    entity up in the mapping context when a property needs it.
    """

    __slots__ = ("_owner", "_properties", "_id_property")

    def __init__(self, owner: EntityOwner, properties: Iterable[PersistentProperty]) -> None:
        self._owner = owner
        self._properties = MappingProxyType({p.name: p for p in properties})
        self._id_property = next(
            (p for p in self._properties.values() if p.is_identity), None
        )

    @property
    def raw_type(self) -> type:
        return self._owner.raw_type

    @property
    def name(self) -> str:
        return self._owner.simple_type_name

    @property
    def owner(self) -> EntityOwner:
        return self._owner

    @property
    def kind(self) -> EntityKind | None:
        return self._owner.kind

    @property
    def is_node_entity(self) -> bool:
        return self._owner.is_node_entity

    @property
    def is_relationship_entity(self) -> bool:
        return self._owner.is_relationship_entity

    @property
    def use_short_names(self) -> bool:
        return self._owner.use_short_names

    @property
    def properties(self) -> MappingProxyType:
        return self._properties

    @property
    def id_property(self) -> PersistentProperty | None:
        return self._id_property

    def get_property(self, name: str) -> PersistentProperty | None:
        return self._properties.get(name)

    @property
    def persistent_properties(self) -> list[PersistentProperty]:
        """Properties that take part in mapping (not synthetic, not transient)."""
        return [
            p for p in self._properties.values() if not (p.is_synthetic or p.is_transient)
        ]

    @property
    def relationships(self) -> list[PersistentProperty]:
        return [p for p in self._properties.values() if p.is_relationship]

    @property
    def simple_values(self) -> list[PersistentProperty]:
        return [
            p for p in self._properties.values() if isinstance(p.classification, SimpleValue)
        ]

    @property
    def indexed_properties(self) -> list[PersistentProperty]:
        return [p for p in self._properties.values() if p.is_indexed]

    def __iter__(self) -> Iterator[PersistentProperty]:
        return iter(self._properties.values())

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __repr__(self) -> str:
        return f"<PersistentEntity {self.name} ({self.kind}) properties={list(self._properties)}>"
