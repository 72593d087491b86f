"""Property classification - closed set of roles a mapped field can take."""

from dataclasses import dataclass
from typing import ClassVar

from graphmap.domain.value_objects.property_role import PropertyRole
from graphmap.domain.value_objects.relationship_info import RelationshipInfo


@dataclass(frozen=True)
class Identity:
    """The graph-assigned identity of the entity."""

    role: ClassVar[PropertyRole] = PropertyRole.IDENTITY


@dataclass(frozen=True)
class Relationship:
    """A reference to other graph elements."""

    info: RelationshipInfo
    role: ClassVar[PropertyRole] = PropertyRole.RELATIONSHIP


@dataclass(frozen=True)
class SimpleValue:
    """A value stored as a graph property, natively or converted to a string."""

    role: ClassVar[PropertyRole] = PropertyRole.SIMPLE_VALUE


@dataclass(frozen=True)
class Unclassified:
    """A field the mapper does not store."""

    reason: str = ""
    role: ClassVar[PropertyRole] = PropertyRole.UNCLASSIFIED


PropertyClassification = Identity | Relationship | SimpleValue | Unclassified
