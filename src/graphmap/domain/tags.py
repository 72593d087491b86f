"""Declarative tags attached to mapped fields and classes.

Field tags go into ``Annotated`` metadata::

    friends: Annotated[list["Person"], RelatedTo(type="KNOWS")]

Class tags are set by the ``node_entity`` / ``relationship_entity``
decorators. A tag's kind is its class; a field keeps at most one tag per kind.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphmap.domain.value_objects import DEFAULT_DIRECTION, Direction, IndexLevel


class Tag:
    """Base class for all tags."""

    __slots__ = ()


@dataclass(frozen=True)
class GraphId(Tag):
    """Field holding the graph-assigned identity."""


@dataclass(frozen=True)
class RelatedTo(Tag):
    """Field referencing other nodes through relationships of one type."""

    type: str = ""
    direction: Direction = DEFAULT_DIRECTION
    element_type: type | None = None


@dataclass(frozen=True)
class RelatedToVia(Tag):
    """Field holding relationship entities rather than the nodes they connect."""

    type: str = ""
    direction: Direction = DEFAULT_DIRECTION
    element_type: type | None = None


@dataclass(frozen=True)
class Indexed(Tag):
    """Field whose value is written to an index."""

    index_name: str = ""
    fulltext: bool = False
    field_name: str = ""
    level: IndexLevel = IndexLevel.FIELD


@dataclass(frozen=True)
class Transient(Tag):
    """Field excluded from mapping and from relationship inference."""


@dataclass(frozen=True)
class NodeEntity(Tag):
    """Class mapped to graph nodes. None means use the configured default."""

    use_short_names: bool | None = None


@dataclass(frozen=True)
class RelationshipEntity(Tag):
    """Class mapped to graph relationships."""

    type: str = ""
    use_short_names: bool | None = None
