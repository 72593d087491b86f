"""Role a mapped field plays in the graph."""

from enum import StrEnum


class PropertyRole(StrEnum):
    """Names of the property classification variants."""

    IDENTITY = "identity"
    RELATIONSHIP = "relationship"
    SIMPLE_VALUE = "simple_value"
    UNCLASSIFIED = "unclassified"
