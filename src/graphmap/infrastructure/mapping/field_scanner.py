"""Field scanner: build field descriptors from a class's type hints."""

import logging
import typing
from collections.abc import Iterator, Mapping
from typing import Any, ClassVar

from graphmap.domain.exceptions import ConfigurationError
from graphmap.domain.value_objects import FieldDescriptor

logger = logging.getLogger(__name__)

# Optional class attribute: extra field name -> type hint, for fields that
# cannot be declared as annotations (generated names).
GRAPH_FIELDS_ATTR = "__graph_fields__"


def scan_fields(entity_type: type) -> list[FieldDescriptor]:
    """Return a descriptor for every mapped field of a class, base classes first."""
    fields = [
        FieldDescriptor.from_hint(name, hint, entity_type, metadata)
        for name, hint, metadata in _declared_fields(entity_type)
        if not _is_dunder(name) and not _is_class_var(hint)
    ]
    logger.debug(
        "Scanned %d fields of %s: %s",
        len(fields),
        entity_type.__qualname__,
        [f.name for f in fields],
    )
    return fields


def _declared_fields(entity_type: type) -> Iterator[tuple[str, Any, tuple[Any, ...]]]:
    model_fields = getattr(entity_type, "model_fields", None)
    if isinstance(model_fields, Mapping):
        # pydantic models: annotations are resolved and Annotated extras are in metadata
        for name, info in model_fields.items():
            yield name, info.annotation, tuple(info.metadata)
    else:
        for name, hint in _type_hints(entity_type).items():
            yield name, hint, ()

    extra = getattr(entity_type, GRAPH_FIELDS_ATTR, None) or {}
    for name, hint in extra.items():
        yield name, hint, ()


def _type_hints(entity_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(entity_type, include_extras=True)
    except (NameError, TypeError) as e:
        raise ConfigurationError(
            f"Cannot resolve type hints of {entity_type.__qualname__}: {e}"
        ) from e


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or typing.get_origin(hint) is ClassVar
