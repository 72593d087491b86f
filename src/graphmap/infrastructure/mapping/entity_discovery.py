"""Find entity classes in modules."""

import importlib
import inspect
from collections.abc import Iterable
from types import ModuleType

from graphmap.domain.backing import is_node_entity_type, is_relationship_entity_type


def discover_entity_types(module: ModuleType) -> list[type]:
    """Node and relationship entity classes defined in a module, sorted by name."""
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__
        and (is_node_entity_type(obj) or is_relationship_entity_type(obj))
    ]


def import_entity_types(module_names: Iterable[str]) -> list[type]:
    """Import modules by name and collect their entity classes."""
    entity_types: list[type] = []
    for name in module_names:
        entity_types.extend(discover_entity_types(importlib.import_module(name)))
    return entity_types
