"""Property mapper: copy simple-value fields between instances and graph properties."""

from typing import Any

from graphmap.application.ports import ConversionService
from graphmap.domain.entities import PersistentProperty
from graphmap.domain.exceptions import ConversionError
from graphmap.infrastructure.mapping.mapping_context import MappingContext


class PropertyMapper:
    """Reads and writes the simple-value properties of mapped instances.

    Native values are stored as they are (arrays, bytes included, as lists),
    other values as strings through the conversion service. A value with
    neither form raises ConversionError. Identity and relationship fields are
    left to the rest of the mapper. FieldAccessError is not caught.
    """

    def __init__(self, context: MappingContext, conversion: ConversionService) -> None:
        self._context = context
        self._conversion = conversion

    def to_properties(self, instance: Any) -> dict[str, Any]:
        """Graph properties of an instance, keyed by qualified property name."""
        entity = self._context.get_persistent_entity(type(instance))
        properties: dict[str, Any] = {}
        for prop in entity.simple_values:
            value = prop.get_value(instance)
            if value is None:
                continue
            if prop.is_native_property_type:
                properties[prop.qualified_property_name] = (
                    list(value) if prop.type_info.is_array else value
                )
            elif prop.is_serializable(self._conversion):
                properties[prop.qualified_property_name] = self._conversion.convert(value, str)
            else:
                raise ConversionError(
                    f"{prop.qualified_property_name} ({prop.type_info}) has no native or string form"
                )
        return properties

    def apply_properties(self, instance: Any, properties: dict[str, Any]) -> None:
        """Set the simple-value fields of an instance from graph properties."""
        entity = self._context.get_persistent_entity(type(instance))
        for prop in entity.simple_values:
            key = prop.qualified_property_name
            if key not in properties:
                continue
            value = self._from_graph_value(prop, properties[key])
            prop.set_value(instance, value)

    def get_id(self, instance: Any) -> Any:
        """Value of the identity field, or None when the entity has none."""
        entity = self._context.get_persistent_entity(type(instance))
        if entity.id_property is None:
            return None
        return entity.id_property.get_value(instance)

    def _from_graph_value(self, prop: PersistentProperty, value: Any) -> Any:
        if value is None:
            return None
        if prop.is_native_property_type:
            return prop.raw_type(value) if prop.type_info.is_array else value
        if not prop.is_deserializable(self._conversion):
            raise ConversionError(
                f"{prop.qualified_property_name} ({prop.type_info}) cannot be read from a graph property"
            )
        if isinstance(value, str):
            return self._conversion.convert(value, prop.raw_type)
        return value
