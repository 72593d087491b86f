"""Kind of mapped entity."""

from enum import StrEnum


class EntityKind(StrEnum):
    """Graph element a mapped class is stored as."""

    NODE = "node"
    RELATIONSHIP = "relationship"
