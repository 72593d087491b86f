"""Persistent property - the graph mapping classification of one field.

Everything is decided in the constructor from the field's declared type, its
tags and the owning entity; a property never changes afterwards. Rebuilding
the owning entity's metadata produces new properties.
"""

import numbers
from typing import TYPE_CHECKING, Any

from graphmap.domain.backing import NodeBacked, RelationshipBacked, is_node_entity_type
from graphmap.domain.entities.owner import EntityOwner
from graphmap.domain.introspection import TagLookup, extract_tags
from graphmap.domain.tags import GraphId, Indexed, RelatedTo, RelatedToVia, Transient
from graphmap.domain.value_objects import (
    DEFAULT_DIRECTION,
    FieldDescriptor,
    Identity,
    IndexInfo,
    PropertyClassification,
    Relationship,
    RelationshipInfo,
    SimpleValue,
    TypeInformation,
    Unclassified,
)

if TYPE_CHECKING:
    from graphmap.application.ports.conversion_service import ConversionService

# Marks names generated by code generators and proxies; never user properties.
SYNTHETIC_NAME_MARKER = "$"

_NATIVE_SCALAR_TYPES = (bool, str)
_NATIVE_NUMBER_MODULES = frozenset({"builtins", "numpy"})


def is_native_type(type_info: TypeInformation) -> bool:
    """True for bool, str and builtin real numbers, or a one-level array of them."""
    if type_info.is_array:
        return type_info.array_depth == 1 and is_native_type(type_info.component)
    raw = type_info.raw_type
    if raw in _NATIVE_SCALAR_TYPES:
        return True
    return (
        issubclass(raw, (numbers.Integral, numbers.Real))
        and raw.__module__.partition(".")[0] in _NATIVE_NUMBER_MODULES
    )


class PersistentProperty:
    """Identity, relationship, index and value classification of a mapped field."""

    __slots__ = (
        "_field",
        "_owner",
        "_tags",
        "_is_identity",
        "_relationship_info",
        "_index_info",
        "_is_native",
        "_qualified_name",
        "_classification",
    )

    def __init__(self, field: FieldDescriptor, owner: EntityOwner) -> None:
        self._field = field
        self._owner = owner
        self._tags = extract_tags(field)
        self._is_identity = self._tags.has(GraphId)
        self._relationship_info = self._resolve_relationship()
        self._index_info = self._resolve_index()
        self._is_native = is_native_type(field.type_info)
        if owner.use_short_names:
            self._qualified_name = field.name
        else:
            self._qualified_name = f"{owner.simple_type_name}.{field.name}"
        self._classification = self._classify()

    @property
    def name(self) -> str:
        return self._field.name

    @property
    def field(self) -> FieldDescriptor:
        return self._field

    @property
    def type_info(self) -> TypeInformation:
        return self._field.type_info

    @property
    def raw_type(self) -> type:
        return self._field.type_info.raw_type

    @property
    def owner(self) -> EntityOwner:
        return self._owner

    @property
    def owner_type(self) -> type:
        """Handle of the owning class; resolve its metadata through the mapping context."""
        return self._field.owner_type

    @property
    def tags(self) -> TagLookup:
        return self._tags

    @property
    def is_identity(self) -> bool:
        return self._is_identity

    @property
    def relationship_info(self) -> RelationshipInfo | None:
        return self._relationship_info

    @property
    def is_relationship(self) -> bool:
        return self._relationship_info is not None

    @property
    def index_info(self) -> IndexInfo | None:
        return self._index_info

    @property
    def is_indexed(self) -> bool:
        return self._index_info is not None

    @property
    def is_synthetic(self) -> bool:
        return SYNTHETIC_NAME_MARKER in self._field.name

    @property
    def is_transient(self) -> bool:
        return self._tags.has(Transient)

    @property
    def is_native_property_type(self) -> bool:
        return self._is_native

    @property
    def qualified_property_name(self) -> str:
        """Graph property name, prefixed with the owner's class name unless short names are used."""
        return self._qualified_name

    @property
    def classification(self) -> PropertyClassification:
        return self._classification

    @property
    def is_simple_value(self) -> bool:
        """False for collections and node- or relationship-backed types.

        Checked before conversion: a converter for the element type says
        nothing about a collection of it.
        """
        type_info = self._field.type_info
        if type_info.is_collection:
            return False
        return not issubclass(type_info.raw_type, (NodeBacked, RelationshipBacked))

    def is_serializable(self, conversion: "ConversionService") -> bool:
        return self.is_simple_value and conversion.can_convert(self.raw_type, str)

    def is_deserializable(self, conversion: "ConversionService") -> bool:
        return self.is_simple_value and conversion.can_convert(str, self.raw_type)

    def get_value(self, instance: Any) -> Any:
        return self._field.get(instance)

    def set_value(self, instance: Any, value: Any) -> None:
        self._field.set(instance, value)

    def _resolve_relationship(self) -> RelationshipInfo | None:
        type_info = self._field.type_info
        is_multiple = type_info.is_collection or type_info.is_array

        related_to = self._tags.get(RelatedTo)
        if related_to is not None:
            return RelationshipInfo(
                target_type=related_to.element_type or type_info.actual_type,
                direction=related_to.direction,
                type_label=related_to.type,
                is_multiple=is_multiple,
            )

        via = self._tags.get(RelatedToVia)
        if via is not None:
            relationship_entity_type = via.element_type or type_info.actual_type
            return RelationshipInfo(
                target_type=relationship_entity_type,
                direction=via.direction,
                type_label=via.type,
                relationship_entity_type=relationship_entity_type,
                is_multiple=is_multiple,
            )

        if (
            not self._tags.has(Transient)
            and self._owner.is_node_entity
            and is_node_entity_type(type_info.actual_type)
        ):
            return RelationshipInfo(
                target_type=type_info.actual_type,
                direction=DEFAULT_DIRECTION,
                is_multiple=is_multiple,
            )
        return None

    def _resolve_index(self) -> IndexInfo | None:
        indexed = self._tags.get(Indexed)
        if indexed is None:
            return None
        return IndexInfo(
            index_name=indexed.index_name,
            fulltext=indexed.fulltext,
            field_name=indexed.field_name or self._field.name,
            level=indexed.level,
        )

    def _classify(self) -> PropertyClassification:
        if self._is_identity:
            return Identity()
        if self._relationship_info is not None:
            return Relationship(self._relationship_info)
        if self.is_synthetic:
            return Unclassified("synthetic")
        if self.is_transient:
            return Unclassified("transient")
        if self.is_simple_value:
            return SimpleValue()
        return Unclassified("not a simple value")

    def __repr__(self) -> str:
        return (
            f"<PersistentProperty {self._owner.simple_type_name}.{self.name}: "
            f"{self.type_info} rel={self.is_relationship} idx={self.is_indexed}>"
        )
