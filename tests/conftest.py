"""Pytest fixtures for graphmap tests."""

from typing import Any

import pytest

from graphmap.domain.entities import EntityOwner, PersistentEntity, PersistentProperty
from graphmap.domain.value_objects import FieldDescriptor
from graphmap.infrastructure.conversion.default_conversion_service import (
    DefaultConversionService,
)
from graphmap.infrastructure.mapping.mapping_context import MappingContext
from tests.models import Company, Friendship, Person, Product


def make_property(
    name: str,
    hint: Any,
    owner_type: type = Person,
    default_use_short_names: bool = True,
) -> PersistentProperty:
    """Classify a single field declared on owner_type."""
    owner = EntityOwner.of(owner_type, default_use_short_names)
    return PersistentProperty(FieldDescriptor.from_hint(name, hint, owner_type), owner)


@pytest.fixture
def context() -> MappingContext:
    """Fresh mapping context with default settings."""
    return MappingContext()


@pytest.fixture
def mapped_context(context: MappingContext) -> MappingContext:
    """Mapping context with the sample model built."""
    context.add_entity_types([Company, Friendship, Person, Product])
    return context


@pytest.fixture
def person_entity(mapped_context: MappingContext) -> PersistentEntity:
    return mapped_context.get_persistent_entity(Person)


@pytest.fixture
def conversion() -> DefaultConversionService:
    return DefaultConversionService()
