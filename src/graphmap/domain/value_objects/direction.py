"""Relationship direction."""

from enum import StrEnum


class Direction(StrEnum):
    """Direction of a relationship relative to the owning node."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


# Used by RelatedTo / RelatedToVia when not given, and for inferred relationships.
DEFAULT_DIRECTION = Direction.OUTGOING
