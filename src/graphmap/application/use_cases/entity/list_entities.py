"""List entities use case."""

from graphmap.application.dto.entity_dto import EntitySummary
from graphmap.application.ports import EntityMetadataProvider
from graphmap.application.use_cases.entity.describe_entity import type_name


class ListEntitiesUseCase:
    """List every mapped entity, sorted by name."""

    def __init__(self, metadata: EntityMetadataProvider) -> None:
        self._metadata = metadata

    def execute(self) -> list[EntitySummary]:
        entities = sorted(self._metadata.entities, key=lambda e: e.name)
        return [
            EntitySummary(
                name=e.name,
                kind=str(e.kind),
                type=type_name(e.raw_type),
                property_count=len(e),
            )
            for e in entities
        ]
