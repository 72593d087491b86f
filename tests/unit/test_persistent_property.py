"""Unit tests for PersistentProperty classification."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from typing import Annotated

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from graphmap.domain.backing import node_entity
from graphmap.domain.entities import EntityOwner, PersistentEntity, PersistentProperty
from graphmap.domain.exceptions import FieldAccessError
from graphmap.domain.tags import GraphId, Indexed, RelatedTo, RelatedToVia, Transient
from graphmap.domain.value_objects import (
    DEFAULT_DIRECTION,
    Direction,
    FieldDescriptor,
    Identity,
    IndexInfo,
    IndexLevel,
    Relationship,
    SimpleValue,
    Unclassified,
)
from graphmap.infrastructure.conversion.default_conversion_service import (
    DefaultConversionService,
)
from tests.conftest import make_property
from tests.models import Company, Friendship, Mood, Person


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


class TestIdentity:
    """Identity is decided by the GraphId tag alone."""

    def test_tagged_field_is_identity(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("id")
        assert prop.is_identity
        assert prop.classification == Identity()

    def test_untagged_fields_are_not_identity(self, person_entity: PersistentEntity) -> None:
        others = [p for p in person_entity if p.name != "id"]
        assert others
        assert not any(p.is_identity for p in others)

    def test_identity_wins_over_inferred_relationship(self) -> None:
        prop = make_property("id", Annotated[Company, GraphId()])
        assert prop.is_relationship
        assert prop.classification == Identity()


class TestRelationship:
    """Relationship resolution: RelatedTo, then RelatedToVia, then inference."""

    def test_related_to_uses_tag_parameters(self, person_entity: PersistentEntity) -> None:
        info = person_entity.get_property("friends").relationship_info
        assert info is not None
        assert info.type_label == "KNOWS"
        assert info.direction == Direction.BOTH
        assert info.target_type is Person
        assert info.is_multiple
        assert not info.is_via

    def test_explicit_tag_wins_over_inference(self, person_entity: PersistentEntity) -> None:
        # list[Company] on a node entity would also be inferred
        info = person_entity.get_property("investments").relationship_info
        assert info.type_label == "INVESTED_IN"
        assert info.direction == DEFAULT_DIRECTION
        assert info.target_type is Company

    def test_related_to_element_type_overrides_declared_type(self) -> None:
        prop = make_property(
            "contacts",
            Annotated[list[object], RelatedTo(type="CONTACT", element_type=Person)],
        )
        assert prop.relationship_info.target_type is Person

    def test_related_to_on_scalar_field(self) -> None:
        prop = make_property(
            "mentor",
            Annotated[Person | None, RelatedTo(type="MENTORED_BY", direction=Direction.INCOMING)],
        )
        info = prop.relationship_info
        assert info.direction == Direction.INCOMING
        assert info.type_label == "MENTORED_BY"
        assert not info.is_multiple

    def test_via_sets_relationship_entity_type(self, person_entity: PersistentEntity) -> None:
        info = person_entity.get_property("friendships").relationship_info
        assert info.is_via
        assert info.relationship_entity_type is Friendship
        assert info.type_label == "FRIEND_OF"

    def test_related_to_checked_before_via(self) -> None:
        prop = make_property(
            "links",
            Annotated[list[Friendship], RelatedToVia(type="VIA"), RelatedTo(type="DIRECT")],
        )
        assert prop.relationship_info.type_label == "DIRECT"
        assert not prop.relationship_info.is_via

    def test_inferred_for_collection_of_node_entities(self, person_entity: PersistentEntity) -> None:
        info = person_entity.get_property("former_employers").relationship_info
        assert info is not None
        assert info.target_type is Company
        assert info.direction == DEFAULT_DIRECTION
        assert info.type_label == ""
        assert info.is_multiple

    def test_inferred_for_scalar_node_reference(self, person_entity: PersistentEntity) -> None:
        info = person_entity.get_property("employer").relationship_info
        assert info.target_type is Company
        assert info.type_label == ""
        assert not info.is_multiple

    def test_inferred_for_array_of_node_entities(self) -> None:
        prop = make_property("partners", tuple[Company, ...])
        assert prop.relationship_info.target_type is Company
        assert prop.relationship_info.is_multiple

    def test_not_inferred_when_owner_is_not_node_entity(self) -> None:
        prop = make_property("person", Person | None, owner_type=Friendship)
        assert prop.relationship_info is None
        assert prop.classification == Unclassified("not a simple value")

    def test_not_inferred_for_transient_field(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("boss")
        assert prop.relationship_info is None
        assert prop.classification == Unclassified("transient")

    def test_plain_value_is_not_relationship(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("age")
        assert not prop.is_relationship
        assert prop.relationship_info is None

    def test_classification_carries_info(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("friends")
        match prop.classification:
            case Relationship(info=info):
                assert info is prop.relationship_info
            case _:
                pytest.fail(f"unexpected classification {prop.classification}")


class TestIndex:
    """Index info is copied from the Indexed tag."""

    def test_index_parameters(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("name")
        assert prop.is_indexed
        assert prop.index_info == IndexInfo(
            index_name="byName",
            fulltext=False,
            field_name="name",
            level=IndexLevel.INSTANCE,
        )

    def test_field_name_override(self, person_entity: PersistentEntity) -> None:
        info = person_entity.get_property("nickname").index_info
        assert info.field_name == "alias"
        assert info.uses_default_name
        assert info.level == IndexLevel.FIELD

    def test_fulltext_flag(self) -> None:
        prop = make_property("bio", Annotated[str, Indexed(index_name="bios", fulltext=True)])
        assert prop.index_info.fulltext

    def test_not_indexed(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("age")
        assert not prop.is_indexed
        assert prop.index_info is None

    def test_indexed_field_is_still_simple_value(self, person_entity: PersistentEntity) -> None:
        assert person_entity.get_property("name").classification == SimpleValue()


class TestSimpleValue:
    """Simple values exclude collections and node/relationship-backed types."""

    @pytest.mark.parametrize(
        "hint",
        [list[int], set[str], frozenset[int], dict[str, int], Sequence[str], list],
    )
    def test_collections_are_not_simple(self, hint: object) -> None:
        prop = make_property("values", hint)
        assert not prop.is_simple_value

    @pytest.mark.parametrize("hint", [list[int], dict[str, str]])
    def test_collections_never_serializable(self, hint: object) -> None:
        conversion = DefaultConversionService()
        conversion.add_converter(list, str, repr)
        conversion.add_converter(dict, str, repr)
        conversion.add_converter(str, list, list)
        prop = make_property("values", hint)
        assert conversion.can_convert(prop.raw_type, str)
        assert not prop.is_serializable(conversion)
        assert not prop.is_deserializable(conversion)

    def test_node_and_relationship_backed_are_not_simple(self) -> None:
        assert not make_property("company", Company, owner_type=Friendship).is_simple_value
        assert not make_property("friendship", Friendship, owner_type=Friendship).is_simple_value

    @pytest.mark.parametrize("hint", [int, str, Decimal, Mood, tuple[int, ...], bytes, object])
    def test_scalars_and_arrays_are_simple(self, hint: object) -> None:
        assert make_property("value", hint).is_simple_value

    def test_serializable_uses_conversion(self, person_entity: PersistentEntity, conversion) -> None:
        for name in ("mood", "balance", "birthday", "age"):
            prop = person_entity.get_property(name)
            assert prop.is_serializable(conversion), name
            assert prop.is_deserializable(conversion), name

    def test_not_serializable_without_converter(self, conversion) -> None:
        prop = make_property("handler", object)
        assert prop.is_simple_value
        assert not prop.is_serializable(conversion)
        assert not prop.is_deserializable(conversion)

    def test_one_way_converter(self) -> None:
        class Money:
            pass

        conversion = DefaultConversionService()
        conversion.add_converter(Money, str, lambda m: "money")
        prop = make_property("price", Money)
        assert prop.is_serializable(conversion)
        assert not prop.is_deserializable(conversion)

    def test_collection_of_values_is_unclassified(self, person_entity: PersistentEntity) -> None:
        assert person_entity.get_property("tags").classification == Unclassified(
            "not a simple value"
        )


class TestNativePropertyType:
    """Native types are bool, str, builtin numbers and one-level arrays of them."""

    @pytest.mark.parametrize(
        "hint",
        [int, float, bool, str, int | None, tuple[int, ...], tuple[str, ...], tuple[bool, ...], bytes],
    )
    def test_native(self, hint: object) -> None:
        assert make_property("value", hint).is_native_property_type

    @pytest.mark.parametrize(
        "hint",
        [
            tuple[tuple[int, ...], ...],
            tuple[tuple[str, ...], ...],
            tuple[bytes, ...],
            list[int],
            Decimal,
            Fraction,
            complex,
            Priority,
            Mood,
            object,
            tuple[Decimal, ...],
        ],
    )
    def test_not_native(self, hint: object) -> None:
        assert not make_property("value", hint).is_native_property_type

    def test_entity_fields(self, person_entity: PersistentEntity) -> None:
        native = {p.name for p in person_entity if p.is_native_property_type}
        assert {"name", "age", "height", "active", "scores", "avatar"} <= native
        assert "matrix" not in native
        assert "mood" not in native


class TestNaming:
    """Synthetic detection and qualified property names."""

    def test_synthetic_field(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("proxy$handler")
        assert prop.is_synthetic
        assert prop.classification == Unclassified("synthetic")

    def test_regular_field_not_synthetic(self, person_entity: PersistentEntity) -> None:
        assert not person_entity.get_property("age").is_synthetic

    def test_qualified_name_with_short_names(self) -> None:
        owner = EntityOwner(Person, is_node_entity=True, is_relationship_entity=False, use_short_names=True)
        prop = PersistentProperty(FieldDescriptor.from_hint("age", int, Person), owner)
        assert prop.qualified_property_name == "age"

    def test_qualified_name_without_short_names(self) -> None:
        owner = EntityOwner(Person, is_node_entity=True, is_relationship_entity=False, use_short_names=False)
        prop = PersistentProperty(FieldDescriptor.from_hint("age", int, Person), owner)
        assert prop.qualified_property_name == "Person.age"

    def test_entity_tag_overrides_default(self) -> None:
        # Person declares use_short_names=False
        prop = make_property("age", int, owner_type=Person, default_use_short_names=True)
        assert prop.qualified_property_name == "Person.age"
        # Company uses the default
        prop = make_property("name", str, owner_type=Company, default_use_short_names=False)
        assert prop.qualified_property_name == "Company.name"


class TestIdempotence:
    def test_queries_are_stable(self, person_entity: PersistentEntity, conversion) -> None:
        for prop in person_entity:
            first = (
                prop.is_identity,
                prop.relationship_info,
                prop.index_info,
                prop.is_simple_value,
                prop.is_serializable(conversion),
                prop.is_deserializable(conversion),
                prop.is_native_property_type,
                prop.is_synthetic,
                prop.qualified_property_name,
                prop.classification,
            )
            second = (
                prop.is_identity,
                prop.relationship_info,
                prop.index_info,
                prop.is_simple_value,
                prop.is_serializable(conversion),
                prop.is_deserializable(conversion),
                prop.is_native_property_type,
                prop.is_synthetic,
                prop.qualified_property_name,
                prop.classification,
            )
            assert first == second

    def test_public_accessors_are_read_only(self, person_entity: PersistentEntity) -> None:
        prop = person_entity.get_property("age")
        for name in ("classification", "relationship_info", "index_info", "qualified_property_name"):
            with pytest.raises(AttributeError):
                setattr(prop, name, None)
        with pytest.raises(AttributeError):
            prop.extra = 1  # type: ignore[attr-defined]


@node_entity
@dataclass(frozen=True)
class FrozenNode:
    id: Annotated[int | None, GraphId()] = None
    name: str = ""


@node_entity
class FrozenProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str = ""


@node_entity
class PricedProduct(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    sku: Annotated[str, Field(frozen=True)] = ""
    price: float = 0.0


class TestValueAccess:
    """get_value / set_value delegate to the field and propagate FieldAccessError."""

    def test_get_and_set(self) -> None:
        prop = make_property("age", int)
        person = Person(age=3)
        assert prop.get_value(person) == 3
        prop.set_value(person, 4)
        assert person.age == 4

    def test_set_on_frozen_instance_raises(self) -> None:
        prop = make_property("name", str, owner_type=FrozenNode)
        with pytest.raises(FieldAccessError, match="FrozenNode.name") as exc_info:
            prop.set_value(FrozenNode(), "x")
        assert isinstance(exc_info.value.__cause__, AttributeError)
        assert exc_info.value.field == "name"

    def test_set_on_frozen_pydantic_model_raises(self) -> None:
        prop = make_property("sku", str, owner_type=FrozenProduct)
        with pytest.raises(FieldAccessError, match="FrozenProduct.sku") as exc_info:
            prop.set_value(FrozenProduct(), "x")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_set_on_frozen_pydantic_field_raises(self) -> None:
        prop = make_property("sku", str, owner_type=PricedProduct)
        with pytest.raises(FieldAccessError, match="PricedProduct.sku"):
            prop.set_value(PricedProduct(), "x")

    def test_invalid_pydantic_assignment_is_not_access_error(self) -> None:
        prop = make_property("price", float, owner_type=PricedProduct)
        with pytest.raises(ValidationError):
            prop.set_value(PricedProduct(), "not a number")

    def test_get_missing_attribute_raises(self) -> None:
        prop = make_property("age", int)
        with pytest.raises(FieldAccessError):
            prop.get_value(object())


def test_transient_field_is_unclassified(person_entity: PersistentEntity) -> None:
    prop = person_entity.get_property("cached_rank")
    assert prop.is_transient
    assert prop.classification == Unclassified("transient")
    assert prop.tags.get(Transient) == Transient()
