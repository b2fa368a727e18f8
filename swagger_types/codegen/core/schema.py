"""
Core schema representation for code generation.

Converts a parsed Swagger document into a normalized internal format
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union, Any, Mapping
from urllib.parse import unquote

from .errors import (
    MalformedDocumentError,
    UnresolvedReferenceError,
    UnsupportedTypeError,
)


REFERENCE_PREFIX = "#/definitions/"

# Keywords describing constructs the engine does not model
UNSUPPORTED_KEYWORDS = ("allOf", "oneOf", "anyOf", "enum", "not")


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive such as ``string`` or ``integer``."""

    name: str


@dataclass(frozen=True)
class ReferenceType:
    """A ``$ref`` to another definition, stored by raw definition key."""

    target: str


@dataclass(frozen=True)
class ArrayType:
    """An array whose elements are described by ``items``."""

    items: "SchemaType"


SchemaType = Union[PrimitiveType, ReferenceType, ArrayType]


@dataclass(frozen=True)
class SchemaDefinition:
    """A named definition from the document's ``definitions`` section."""

    name: str
    kind: Optional[str]
    properties: Tuple[Tuple[str, SchemaType], ...] = ()
    description: Optional[str] = None

    @property
    def is_object(self) -> bool:
        return self.kind == "object"

    def references(self) -> List[str]:
        """Raw keys of every definition this one points at, in property order."""
        targets = []
        for _, schema_type in self.properties:
            target = _reference_target(schema_type)
            if target is not None:
                targets.append(target)
        return targets


@dataclass(frozen=True)
class SchemaDocument:
    """Top-level parsed input."""

    definitions: Mapping[str, SchemaDefinition] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.definitions)

    def object_definitions(self) -> List[SchemaDefinition]:
        return [d for d in self.definitions.values() if d.is_object]


def _reference_target(schema_type: SchemaType) -> Optional[str]:
    if isinstance(schema_type, ReferenceType):
        return schema_type.target
    if isinstance(schema_type, ArrayType):
        return _reference_target(schema_type.items)
    return None


def parse_reference(ref: Any, definition: str, prop: Optional[str] = None) -> str:
    """
    Return the definition key a ``$ref`` points at.

    The part after ``#/definitions/`` is one JSON pointer segment: it is
    percent-decoded, then ``~1`` and ``~0`` are unescaped to ``/`` and ``~``.
    """
    if not isinstance(ref, str) or not ref.startswith(REFERENCE_PREFIX):
        raise UnsupportedTypeError(
            definition, prop, f"unsupported reference {ref!r}"
        )
    segment = ref[len(REFERENCE_PREFIX):]
    if not segment:
        raise UnsupportedTypeError(definition, prop, f"empty reference {ref!r}")
    if "/" in segment:
        raise UnsupportedTypeError(
            definition, prop, f"unsupported reference {ref!r} (not a whole definition)"
        )
    return unquote(segment).replace("~1", "/").replace("~0", "~")


def parse_type(raw: Any, definition: str, prop: Optional[str] = None) -> SchemaType:
    """
    Convert one raw property schema into a SchemaType.

    Args:
        raw: Property schema as decoded from JSON
        definition: Owning definition key, used in error messages
        prop: Owning property key, used in error messages

    Returns:
        PrimitiveType, ReferenceType or ArrayType

    Raises:
        UnsupportedTypeError: For shapes outside the supported subset
    """
    if not isinstance(raw, Mapping):
        raise UnsupportedTypeError(
            definition, prop, f"expected a schema object, got {type(raw).__name__}"
        )

    for keyword in UNSUPPORTED_KEYWORDS:
        if keyword in raw:
            raise UnsupportedTypeError(definition, prop, f"'{keyword}' is not supported")

    type_name = raw.get("type")

    if "$ref" in raw and not type_name:
        return ReferenceType(parse_reference(raw["$ref"], definition, prop))

    if type_name == "array":
        items = raw.get("items")
        if items is None:
            raise UnsupportedTypeError(
                definition, prop, "array without declared item type"
            )
        return ArrayType(parse_type(items, definition, prop))

    if type_name == "object" or "properties" in raw or "additionalProperties" in raw:
        raise UnsupportedTypeError(
            definition, prop, "inline nested objects are not supported"
        )

    if not isinstance(type_name, str) or not type_name:
        raise UnsupportedTypeError(
            definition, prop, f"missing or invalid type {type_name!r}"
        )

    return PrimitiveType(type_name)


def parse_definition(name: str, raw: Any) -> SchemaDefinition:
    """Convert one entry of ``definitions`` into a SchemaDefinition."""
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError(
            f"Definition '{name}' must be an object, got {type(raw).__name__}"
        )

    kind = raw.get("type")
    description = raw.get("description")

    # Non-object kinds are kept so the renderer can reject them by name
    if kind != "object":
        return SchemaDefinition(name=name, kind=kind, description=description)

    for keyword in UNSUPPORTED_KEYWORDS:
        if keyword in raw:
            raise UnsupportedTypeError(name, None, f"'{keyword}' is not supported")

    additional = raw.get("additionalProperties")
    if additional not in (None, False):
        raise UnsupportedTypeError(name, None, "'additionalProperties' is not supported")

    raw_properties = raw.get("properties") or {}
    if not isinstance(raw_properties, Mapping):
        raise MalformedDocumentError(f"Properties of '{name}' must be an object")

    properties = tuple(
        (prop_name, parse_type(prop_schema, name, prop_name))
        for prop_name, prop_schema in raw_properties.items()
    )

    return SchemaDefinition(
        name=name, kind=kind, properties=properties, description=description
    )


def parse_document(raw: Any) -> SchemaDocument:
    """
    Convert a decoded Swagger document into a SchemaDocument.

    Args:
        raw: Document as returned by ``json.load``

    Returns:
        SchemaDocument with definitions in input order

    Raises:
        MalformedDocumentError: If there is no ``definitions`` mapping
        UnresolvedReferenceError: If a ``$ref`` names an unknown definition
        UnsupportedTypeError: For unsupported property shapes
    """
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError("Schema document must be a JSON object")

    raw_definitions = raw.get("definitions")
    if not isinstance(raw_definitions, Mapping):
        raise MalformedDocumentError("No swagger definitions to parse")

    definitions: Dict[str, SchemaDefinition] = {}
    for name, raw_definition in raw_definitions.items():
        definitions[name] = parse_definition(name, raw_definition)

    for definition in definitions.values():
        for target in definition.references():
            if target not in definitions:
                raise UnresolvedReferenceError(definition.name, target)

    return SchemaDocument(definitions=definitions)
