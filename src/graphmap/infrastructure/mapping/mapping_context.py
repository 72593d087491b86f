"""Mapping context: builds, caches and publishes entity metadata."""

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from graphmap.config import Settings
from graphmap.domain.entities import PersistentEntity, PersistentProperty
from graphmap.domain.exceptions import ConfigurationError
from graphmap.infrastructure.mapping.entity_builder import EntityBuilder

logger = logging.getLogger(__name__)


class MappingContext:
    """Registry of persistent entities keyed by class.

    Entities are built once under a lock and published as a new read-only
    snapshot; readers never lock and see either the old or the new snapshot.
    """

    def __init__(self, builder: EntityBuilder | None = None) -> None:
        self._builder = builder or EntityBuilder()
        self._lock = threading.Lock()
        self._entities: Mapping[type, PersistentEntity] = MappingProxyType({})

    @classmethod
    def from_settings(cls, settings: Settings) -> "MappingContext":
        return cls(EntityBuilder(default_use_short_names=settings.default_use_short_names))

    def add_entity_types(self, entity_types: Iterable[type]) -> list[PersistentEntity]:
        return [self.get_persistent_entity(t) for t in entity_types]

    def get_persistent_entity(self, entity_type: type) -> PersistentEntity:
        """Return entity metadata, building it on first use. Raises ConfigurationError."""
        entity = self._entities.get(entity_type)
        if entity is not None:
            return entity
        with self._lock:
            entity = self._entities.get(entity_type)
            if entity is None:
                entity = self._builder.build(entity_type)
                self._publish(entity)
        return entity

    def rebuild(self, entity_type: type) -> PersistentEntity:
        """Build entity metadata again (e.g. after a class reload) and replace it."""
        with self._lock:
            entity = self._builder.build(entity_type)
            self._publish(entity)
        logger.info("Rebuilt mapping metadata of %s", entity.name)
        return entity

    def get_entity_by_name(self, name: str) -> PersistentEntity | None:
        for entity in self._entities.values():
            if entity.name == name:
                return entity
        return None

    def resolve_owner(self, prop: PersistentProperty) -> PersistentEntity:
        return self.get_persistent_entity(prop.owner_type)

    @property
    def entities(self) -> list[PersistentEntity]:
        return list(self._entities.values())

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def _publish(self, entity: PersistentEntity) -> None:
        raw = entity.raw_type
        # a reloaded class is a new object; drop the metadata of the old one
        entities = {
            t: e
            for t, e in self._entities.items()
            if t is raw or (t.__module__, t.__qualname__) != (raw.__module__, raw.__qualname__)
        }
        entities[raw] = entity
        _check_index_names(entities.values())
        self._entities = MappingProxyType(entities)
        logger.debug("Published mapping metadata of %s", entity.name)


def _check_index_names(entities: Iterable[PersistentEntity]) -> None:
    """An explicitly named index is either fulltext or exact, never both."""
    seen: dict[str, tuple[bool, str]] = {}
    for entity in entities:
        for prop in entity.indexed_properties:
            info = prop.index_info
            if info.uses_default_name:
                continue
            where = f"{entity.name}.{prop.name}"
            previous = seen.setdefault(info.index_name, (info.fulltext, where))
            if previous[0] != info.fulltext:
                raise ConfigurationError(
                    f"Index {info.index_name!r} is used as "
                    f"{'fulltext' if previous[0] else 'exact'} by {previous[1]} "
                    f"and as {'fulltext' if info.fulltext else 'exact'} by {where}"
                )
