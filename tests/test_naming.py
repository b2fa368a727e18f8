"""Tests for type and property name resolution."""

from __future__ import annotations

import pytest

from swagger_types.codegen.core.errors import NamingError
from swagger_types.codegen.core.naming import (
    NameResolver,
    PropertyNamePolicy,
    TypeNamePolicy,
    is_js_identifier,
    quote_property_name,
    resolve_property_name,
    resolve_type_name,
    split_words,
    to_pascal_case,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pet", "Pet"),
        ("pet_store", "PetStore"),
        ("petStore", "PetStore"),
        ("user-id", "UserId"),
        ("HTTPResponse", "HTTPResponse"),
        ("Order«Pet»", "OrderPet"),
        ("api.v1.Pet", "ApiV1Pet"),
        ("2fa_token", "_2faToken"),
    ],
)
def test_pascal_case_conversion(raw: str, expected: str) -> None:
    assert to_pascal_case(raw) == expected


def test_pascal_case_rejects_keys_without_word_characters() -> None:
    with pytest.raises(NamingError):
        to_pascal_case("«»")


def test_split_words_uses_separators_and_case_changes() -> None:
    assert split_words("myPet_store-item") == ["my", "Pet", "store", "item"]


def test_original_type_policy_passes_key_through() -> None:
    assert resolve_type_name("Order«Pet»", TypeNamePolicy.ORIGINAL) == "Order«Pet»"
    assert resolve_type_name("pet_store") == "pet_store"


def test_type_name_resolution_is_deterministic() -> None:
    first = resolve_type_name("pet_store", TypeNamePolicy.PASCAL)
    second = resolve_type_name("pet_store", TypeNamePolicy.PASCAL)

    assert first == second == "PetStore"


def test_first_case_lower_on_all_caps_key_lowercases_everything() -> None:
    assert resolve_property_name("ID", PropertyNamePolicy.FIRST_CASE_LOWER) == "id"
    assert resolve_property_name("URL2", "firstCaseLower") == "url2"


def test_first_case_lower_on_mixed_case_key_lowercases_first_letter() -> None:
    assert resolve_property_name("UserId", PropertyNamePolicy.FIRST_CASE_LOWER) == "userId"
    assert resolve_property_name("userId", "firstCaseLower") == "userId"


def test_normal_property_policy_passes_key_through() -> None:
    assert resolve_property_name("UserId", PropertyNamePolicy.NORMAL) == "UserId"
    assert resolve_property_name("ID") == "ID"


def test_unknown_policy_value_is_rejected() -> None:
    with pytest.raises(NamingError, match="firstCaseLower"):
        resolve_property_name("ID", "upper")


def test_resolver_from_options() -> None:
    resolver = NameResolver.from_options(change_type_case=True, transform_property="firstCaseLower")

    assert resolver.type_policy is TypeNamePolicy.PASCAL
    assert resolver.property_policy is PropertyNamePolicy.FIRST_CASE_LOWER
    assert resolver.type_name("pet_store") == "PetStore"
    assert resolver.property_name("ID") == "id"


def test_resolver_defaults_leave_names_unchanged() -> None:
    resolver = NameResolver()

    assert resolver.type_name("pet_store") == "pet_store"
    assert resolver.property_name("UserId") == "UserId"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("name", "name"),
        ("$id", "$id"),
        ("_links", "_links"),
        ("first-name", '"first-name"'),
        ("@type", '"@type"'),
        ("1st", '"1st"'),
        ('say"hi', '"say\\"hi"'),
    ],
)
def test_quote_property_name(name: str, expected: str) -> None:
    assert quote_property_name(name) == expected


def test_is_js_identifier() -> None:
    assert is_js_identifier("petId")
    assert not is_js_identifier("pet id")
