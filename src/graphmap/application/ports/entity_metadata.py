"""Entity metadata port - read access to built mapping metadata."""

from typing import Protocol

from graphmap.domain.entities import PersistentEntity


class EntityMetadataProvider(Protocol):
    """Port for looking up persistent entities."""

    @property
    def entities(self) -> list[PersistentEntity]: ...

    def get_entity_by_name(self, name: str) -> PersistentEntity | None: ...
