"""
Target type representation for code generation.

The renderer builds these nodes; each language generator turns them into
text. Keeping the tree separate from the syntax lets the same rendering
pass feed several target languages.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

from .errors import UnmappedPrimitiveError


@dataclass(frozen=True)
class PrimitiveNode:
    """A target-language primitive such as ``string`` or ``number``."""

    name: str


@dataclass(frozen=True)
class ReferenceNode:
    """A bare reference to another emitted type alias."""

    name: str


@dataclass(frozen=True)
class ArrayNode:
    """An array of ``element``."""

    element: "TypeNode"


@dataclass(frozen=True)
class FieldNode:
    name: str
    type: "TypeNode"


@dataclass(frozen=True)
class ObjectNode:
    """An exact list of fields, in declaration order."""

    fields: Tuple[FieldNode, ...] = ()


TypeNode = Union[PrimitiveNode, ReferenceNode, ArrayNode]


@dataclass(frozen=True)
class TypeAlias:
    """One ``export type Name = <body>`` declaration before formatting."""

    name: str
    body: ObjectNode
    original_name: str = ""
    description: Optional[str] = None


@dataclass(frozen=True)
class RenderedDefinition:
    """Final text of one type alias declaration."""

    name: str
    text: str


# Swagger primitive names understood by the JavaScript type systems
JS_PRIMITIVE_TYPES: Dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
    "file": "File",
}


@dataclass
class PrimitiveTypeMap:
    """Lookup from schema primitive names to target primitive names."""

    mapping: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def with_overrides(
        cls, base: Mapping[str, str], overrides: Optional[Mapping[str, str]] = None
    ) -> "PrimitiveTypeMap":
        merged = dict(base)
        if overrides:
            merged.update(overrides)
        return cls(merged)

    def lookup(self, name: str) -> str:
        """
        Map a schema primitive name.

        Raises:
            UnmappedPrimitiveError: If the primitive is not in the map
        """
        try:
            return self.mapping[name]
        except KeyError:
            raise UnmappedPrimitiveError(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self.mapping
