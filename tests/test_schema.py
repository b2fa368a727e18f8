"""Tests for parsing decoded Swagger documents."""

from __future__ import annotations

from typing import Any

import pytest

from swagger_types.codegen.core.errors import (
    MalformedDocumentError,
    UnresolvedReferenceError,
    UnsupportedTypeError,
)
from swagger_types.codegen.core.schema import (
    ArrayType,
    PrimitiveType,
    ReferenceType,
    parse_document,
    parse_reference,
    parse_type,
)


def _document(properties: dict[str, Any], **extra: Any) -> dict[str, Any]:
    definitions = {"Thing": {"type": "object", "properties": properties}}
    definitions.update(extra)
    return {"definitions": definitions}


def test_parse_keeps_definition_and_property_order(petstore_document) -> None:
    document = parse_document(petstore_document)

    assert list(document.definitions) == ["Order", "Category", "Tag", "Pet"]
    pet = document.definitions["Pet"]
    assert [key for key, _ in pet.properties] == ["id", "category", "Name", "photoUrls", "tags"]


def test_parse_property_variants(petstore_document) -> None:
    pet = parse_document(petstore_document).definitions["Pet"]
    types = dict(pet.properties)

    assert types["id"] == PrimitiveType("integer")
    assert types["category"] == ReferenceType("Category")
    assert types["photoUrls"] == ArrayType(PrimitiveType("string"))
    assert types["tags"] == ArrayType(ReferenceType("Tag"))
    assert pet.references() == ["Category", "Tag"]


@pytest.mark.parametrize("raw", [[], "definitions", None, {"paths": {}}, {"definitions": []}])
def test_document_without_definitions_mapping_is_rejected(raw: Any) -> None:
    with pytest.raises(MalformedDocumentError):
        parse_document(raw)


def test_non_object_definition_is_kept_for_the_renderer() -> None:
    document = parse_document({"definitions": {"Status": {"type": "string"}}})

    status = document.definitions["Status"]
    assert status.kind == "string"
    assert not status.is_object
    assert document.object_definitions() == []


def test_object_without_properties_parses_as_empty() -> None:
    document = parse_document({"definitions": {"Empty": {"type": "object"}}})

    assert document.definitions["Empty"].properties == ()


def test_description_is_kept() -> None:
    document = parse_document(
        {"definitions": {"Pet": {"type": "object", "description": "A pet", "properties": {}}}}
    )

    assert document.definitions["Pet"].description == "A pet"


def test_dangling_reference_is_rejected() -> None:
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        parse_document(_document({"owner": {"$ref": "#/definitions/Person"}}))

    assert excinfo.value.definition == "Thing"
    assert excinfo.value.target == "Person"


@pytest.mark.parametrize(
    ("schema", "reason"),
    [
        ({"type": "array"}, "array without declared item type"),
        ({"type": "object", "properties": {"a": {"type": "string"}}}, "inline nested objects"),
        ({"type": "object"}, "inline nested objects"),
        ({"type": "string", "enum": ["a", "b"]}, "'enum'"),
        ({"oneOf": [{"type": "string"}]}, "'oneOf'"),
        ({"allOf": [{"$ref": "#/definitions/Thing"}]}, "'allOf'"),
        ({"$ref": "#/components/schemas/Pet"}, "unsupported reference"),
        ({"$ref": "#/definitions/"}, "empty reference"),
        ({"format": "date"}, "missing or invalid type"),
        ("string", "expected a schema object"),
    ],
)
def test_unsupported_property_shapes_fail(schema: Any, reason: str) -> None:
    with pytest.raises(UnsupportedTypeError, match=reason) as excinfo:
        parse_document(_document({"field": schema}))

    assert excinfo.value.definition == "Thing"
    assert excinfo.value.prop == "field"


def test_definition_level_additional_properties_fail() -> None:
    raw = {"definitions": {"Bag": {"type": "object", "additionalProperties": {"type": "string"}}}}

    with pytest.raises(UnsupportedTypeError, match="additionalProperties"):
        parse_document(raw)


def test_additional_properties_false_is_allowed() -> None:
    raw = {"definitions": {"Bag": {"type": "object", "additionalProperties": False}}}

    assert parse_document(raw).definitions["Bag"].is_object


def test_definition_level_all_of_fails() -> None:
    raw = {"definitions": {"Dog": {"type": "object", "allOf": []}}}

    with pytest.raises(UnsupportedTypeError, match="allOf"):
        parse_document(raw)


def test_nested_array_parses_so_the_renderer_can_reject_it() -> None:
    parsed = parse_type(
        {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}, "Grid"
    )

    assert parsed == ArrayType(ArrayType(PrimitiveType("string")))


@pytest.mark.parametrize(
    ("ref", "target"),
    [
        ("#/definitions/Pet", "Pet"),
        ("#/definitions/a~1b", "a/b"),
        ("#/definitions/a~0b", "a~b"),
        ("#/definitions/a~01", "a~1"),
        ("#/definitions/Pet%20Type", "Pet Type"),
        ("#/definitions/Order%C2%ABPet%C2%BB", "Order«Pet»"),
    ],
)
def test_reference_segment_is_decoded(ref: str, target: str) -> None:
    assert parse_reference(ref, "Thing", "field") == target


def test_escaped_reference_resolves_against_definition_keys() -> None:
    raw = {
        "definitions": {
            "pets/Pet": {"type": "object", "properties": {}},
            "Order": {"type": "object", "properties": {"pet": {"$ref": "#/definitions/pets~1Pet"}}},
        }
    }

    order = parse_document(raw).definitions["Order"]

    assert dict(order.properties)["pet"] == ReferenceType("pets/Pet")


def test_reference_into_a_definition_is_rejected() -> None:
    with pytest.raises(UnsupportedTypeError, match="not a whole definition"):
        parse_document(_document({"field": {"$ref": "#/definitions/Thing/properties/x"}}))
