"""Index level for indexed properties."""

from enum import StrEnum


class IndexLevel(StrEnum):
    """Scope of the index an indexed property is written to."""

    FIELD = "field"
    INSTANCE = "instance"
    GLOBAL = "global"
