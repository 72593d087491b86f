"""Tag extraction from field descriptors."""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import TypeVar

from graphmap.domain.tags import Tag
from graphmap.domain.value_objects import FieldDescriptor

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Tag)


class TagLookup:
    """Read-only lookup from tag kind (the tag class) to the tag attached to a field.

    At most one tag per kind is kept. When a kind is attached twice the last
    one wins; this is a simplification, not a conflict check.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[Tag] = (), source: str = "") -> None:
        by_kind: dict[type[Tag], Tag] = {}
        for tag in tags:
            kind = type(tag)
            if kind in by_kind:
                logger.debug(
                    "Duplicate %s tag on %s, keeping the last one",
                    kind.__name__,
                    source or "field",
                )
            by_kind[kind] = tag
        self._tags = MappingProxyType(by_kind)

    def has(self, kind: type[Tag]) -> bool:
        return kind in self._tags

    def get(self, kind: type[T]) -> T | None:
        return self._tags.get(kind)  # type: ignore[return-value]

    def kinds(self) -> list[type[Tag]]:
        return list(self._tags)

    def __contains__(self, kind: object) -> bool:
        return kind in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags.values())

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagLookup({list(self._tags.values())!r})"


def extract_tags(field: FieldDescriptor) -> TagLookup:
    """Collect the tags attached to a field. Other metadata is ignored."""
    return TagLookup(
        (item for item in field.metadata if isinstance(item, Tag)),
        source=f"{field.owner_type.__name__}.{field.name}",
    )
