"""Relationship details of a field that references other graph elements."""

from dataclasses import dataclass

from graphmap.domain.value_objects.direction import Direction


@dataclass(frozen=True)
class RelationshipInfo:
    """How a field maps to graph relationships.

    ``target_type`` is the element type the field holds: a node entity for
    plain relationships, the relationship entity for "via" relationships.
    An empty ``type_label`` means no label was declared.
    """

    target_type: type
    direction: Direction
    type_label: str = ""
    relationship_entity_type: type | None = None
    is_multiple: bool = False

    @property
    def is_via(self) -> bool:
        return self.relationship_entity_type is not None
