"""Owning-entity view used by property classification."""

from dataclasses import dataclass

from graphmap.domain.backing import get_node_entity_tag, get_relationship_entity_tag
from graphmap.domain.value_objects import EntityKind


@dataclass(frozen=True)
class EntityOwner:
    """The owner attributes a property needs, without a reference to the owner's metadata."""

    raw_type: type
    is_node_entity: bool
    is_relationship_entity: bool
    use_short_names: bool
    relationship_type: str = ""

    @property
    def simple_type_name(self) -> str:
        return self.raw_type.__name__

    @property
    def kind(self) -> EntityKind | None:
        if self.is_node_entity:
            return EntityKind.NODE
        if self.is_relationship_entity:
            return EntityKind.RELATIONSHIP
        return None

    @classmethod
    def of(cls, raw_type: type, default_use_short_names: bool = True) -> "EntityOwner":
        """Read the entity tags of a class."""
        node_tag = get_node_entity_tag(raw_type)
        relationship_tag = get_relationship_entity_tag(raw_type)
        declared = node_tag or relationship_tag
        use_short_names = default_use_short_names
        if declared is not None and declared.use_short_names is not None:
            use_short_names = declared.use_short_names
        return cls(
            raw_type=raw_type,
            is_node_entity=node_tag is not None,
            is_relationship_entity=relationship_tag is not None,
            use_short_names=use_short_names,
            relationship_type=relationship_tag.type if relationship_tag else "",
        )
