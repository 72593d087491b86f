"""Structural markers for node- and relationship-backed domain objects."""

from abc import ABC
from collections.abc import Callable
from typing import Any, TypeVar

from graphmap.domain.tags import NodeEntity, RelationshipEntity

T = TypeVar("T", bound=type)

NODE_ENTITY_ATTR = "__graph_node_entity__"
RELATIONSHIP_ENTITY_ATTR = "__graph_relationship_entity__"


class NodeBacked(ABC):
    """Domain object backed by a graph node."""


class RelationshipBacked(ABC):
    """Domain object backed by a graph relationship."""


def node_entity(
    cls: T | None = None, *, use_short_names: bool | None = None
) -> T | Callable[[T], T]:
    """Mark a class as a node entity. Usable with or without arguments."""

    def decorator(target: T) -> T:
        setattr(target, NODE_ENTITY_ATTR, NodeEntity(use_short_names=use_short_names))
        NodeBacked.register(target)
        return target

    if cls is not None:
        return decorator(cls)
    return decorator


def relationship_entity(
    cls: T | None = None,
    *,
    type: str = "",
    use_short_names: bool | None = None,
) -> T | Callable[[T], T]:
    """Mark a class as a relationship entity. Usable with or without arguments."""

    def decorator(target: T) -> T:
        setattr(
            target,
            RELATIONSHIP_ENTITY_ATTR,
            RelationshipEntity(type=type, use_short_names=use_short_names),
        )
        RelationshipBacked.register(target)
        return target

    if cls is not None:
        return decorator(cls)
    return decorator


def get_node_entity_tag(cls: Any) -> NodeEntity | None:
    tag = getattr(cls, NODE_ENTITY_ATTR, None)
    return tag if isinstance(tag, NodeEntity) else None


def get_relationship_entity_tag(cls: Any) -> RelationshipEntity | None:
    tag = getattr(cls, RELATIONSHIP_ENTITY_ATTR, None)
    return tag if isinstance(tag, RelationshipEntity) else None


def is_node_entity_type(cls: Any) -> bool:
    return isinstance(cls, type) and get_node_entity_tag(cls) is not None


def is_relationship_entity_type(cls: Any) -> bool:
    return isinstance(cls, type) and get_relationship_entity_tag(cls) is not None
