"""Entity metadata DTOs."""

from dataclasses import dataclass, field

from graphmap.domain.value_objects import PropertyRole


@dataclass
class RelationshipOutput:
    """Output DTO for relationship details."""

    target_type: str
    direction: str
    type_label: str
    relationship_entity_type: str | None
    is_multiple: bool


@dataclass
class IndexOutput:
    """Output DTO for index details."""

    index_name: str
    fulltext: bool
    field_name: str
    level: str


@dataclass
class PropertyOutput:
    """Output DTO for one classified property."""

    name: str
    qualified_name: str
    role: PropertyRole
    type: str
    native: bool
    synthetic: bool
    transient: bool
    reason: str = ""
    relationship: RelationshipOutput | None = None
    index: IndexOutput | None = None


@dataclass
class EntitySummary:
    """Output DTO for an entity in a listing."""

    name: str
    kind: str
    type: str
    property_count: int


@dataclass
class EntityOutput:
    """Output DTO for a described entity."""

    name: str
    kind: str
    type: str
    use_short_names: bool
    id_property: str | None
    properties: list[PropertyOutput] = field(default_factory=list)
