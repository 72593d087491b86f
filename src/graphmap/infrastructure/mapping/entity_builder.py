"""Entity builder: classify every field of a class and check the mapping contracts."""

import logging
import numbers

from graphmap.domain.entities import EntityOwner, PersistentEntity, PersistentProperty
from graphmap.domain.exceptions import ConfigurationError
from graphmap.domain.tags import RelatedTo, RelatedToVia
from graphmap.infrastructure.mapping.field_scanner import scan_fields

logger = logging.getLogger(__name__)


class EntityBuilder:
    """Builds PersistentEntity metadata for node and relationship entity classes."""

    def __init__(self, default_use_short_names: bool = True) -> None:
        self._default_use_short_names = default_use_short_names

    def build(self, entity_type: type) -> PersistentEntity:
        """Build and validate entity metadata. Raises ConfigurationError."""
        owner = EntityOwner.of(entity_type, self._default_use_short_names)
        if owner.is_node_entity and owner.is_relationship_entity:
            raise ConfigurationError(
                f"{entity_type.__qualname__} is both a node and a relationship entity"
            )
        if not (owner.is_node_entity or owner.is_relationship_entity):
            raise ConfigurationError(
                f"{entity_type.__qualname__} is neither a node nor a relationship entity"
            )

        properties = [PersistentProperty(field, owner) for field in scan_fields(entity_type)]
        self._validate(owner, properties)

        entity = PersistentEntity(owner, properties)
        logger.debug(
            "Built %s entity %s: %d properties, %d relationships, %d indexed",
            entity.kind,
            entity.name,
            len(entity),
            len(entity.relationships),
            len(entity.indexed_properties),
        )
        return entity

    def _validate(self, owner: EntityOwner, properties: list[PersistentProperty]) -> None:
        name = owner.simple_type_name
        identities = [p for p in properties if p.is_identity]
        if len(identities) > 1:
            raise ConfigurationError(
                f"{name} declares more than one identity field: "
                f"{', '.join(p.name for p in identities)}"
            )

        for prop in properties:
            explicit = [kind for kind in (RelatedTo, RelatedToVia) if prop.tags.has(kind)]
            if prop.is_identity and explicit:
                raise ConfigurationError(
                    f"{name}.{prop.name} is the identity field and cannot be "
                    f"tagged {explicit[0].__name__}"
                )
            if len(explicit) > 1:
                raise ConfigurationError(
                    f"{name}.{prop.name} is tagged both RelatedTo and RelatedToVia"
                )

        for prop in identities:
            if not issubclass(prop.raw_type, numbers.Integral):
                logger.warning(
                    "Identity field %s.%s is %s, graph ids are integers",
                    name,
                    prop.name,
                    prop.type_info,
                )
