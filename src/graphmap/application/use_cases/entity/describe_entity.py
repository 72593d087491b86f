"""Describe entity use case."""

from graphmap.application.dto.entity_dto import (
    EntityOutput,
    IndexOutput,
    PropertyOutput,
    RelationshipOutput,
)
from graphmap.application.ports import EntityMetadataProvider
from graphmap.domain.entities import PersistentEntity, PersistentProperty
from graphmap.domain.exceptions import NotFound
from graphmap.domain.value_objects import Relationship, Unclassified


def type_name(raw_type: type | None) -> str | None:
    if raw_type is None:
        return None
    return f"{raw_type.__module__}.{raw_type.__qualname__}"


class DescribeEntityUseCase:
    """Describe the classified properties of a mapped entity."""

    def __init__(self, metadata: EntityMetadataProvider) -> None:
        self._metadata = metadata

    def execute(self, name: str) -> EntityOutput:
        """Describe entity by simple class name."""
        entity = self._metadata.get_entity_by_name(name)
        if entity is None:
            raise NotFound(f"Entity {name!r} is not mapped")
        return describe(entity)


def describe(entity: PersistentEntity) -> EntityOutput:
    id_property = entity.id_property
    return EntityOutput(
        name=entity.name,
        kind=str(entity.kind),
        type=type_name(entity.raw_type),
        use_short_names=entity.use_short_names,
        id_property=id_property.name if id_property else None,
        properties=[_describe_property(p) for p in entity],
    )


def _describe_property(prop: PersistentProperty) -> PropertyOutput:
    output = PropertyOutput(
        name=prop.name,
        qualified_name=prop.qualified_property_name,
        role=prop.classification.role,
        type=str(prop.type_info),
        native=prop.is_native_property_type,
        synthetic=prop.is_synthetic,
        transient=prop.is_transient,
    )
    match prop.classification:
        case Relationship(info=info):
            output.relationship = RelationshipOutput(
                target_type=type_name(info.target_type),
                direction=info.direction.value,
                type_label=info.type_label,
                relationship_entity_type=type_name(info.relationship_entity_type),
                is_multiple=info.is_multiple,
            )
        case Unclassified(reason=reason):
            output.reason = reason
    if prop.index_info is not None:
        output.index = IndexOutput(
            index_name=prop.index_info.index_name,
            fulltext=prop.index_info.fulltext,
            field_name=prop.index_info.field_name,
            level=prop.index_info.level.value,
        )
    return output
