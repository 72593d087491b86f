"""Index details of an indexed field."""

from dataclasses import dataclass

from graphmap.domain.value_objects.index_level import IndexLevel


@dataclass(frozen=True)
class IndexInfo:
    """Index a property value is written to. Empty index_name means the default index."""

    index_name: str
    fulltext: bool
    field_name: str
    level: IndexLevel

    @property
    def uses_default_name(self) -> bool:
        return not self.index_name
