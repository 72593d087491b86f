"""Domain value objects."""

from graphmap.domain.value_objects.classification import (
    Identity,
    PropertyClassification,
    Relationship,
    SimpleValue,
    Unclassified,
)
from graphmap.domain.value_objects.direction import DEFAULT_DIRECTION, Direction
from graphmap.domain.value_objects.entity_kind import EntityKind
from graphmap.domain.value_objects.field_descriptor import FieldDescriptor
from graphmap.domain.value_objects.index_info import IndexInfo
from graphmap.domain.value_objects.index_level import IndexLevel
from graphmap.domain.value_objects.property_role import PropertyRole
from graphmap.domain.value_objects.relationship_info import RelationshipInfo
from graphmap.domain.value_objects.type_information import TypeInformation

__all__ = [
    "DEFAULT_DIRECTION",
    "Direction",
    "EntityKind",
    "FieldDescriptor",
    "Identity",
    "IndexInfo",
    "IndexLevel",
    "PropertyClassification",
    "PropertyRole",
    "Relationship",
    "RelationshipInfo",
    "SimpleValue",
    "TypeInformation",
    "Unclassified",
]
