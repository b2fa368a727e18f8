"""
Conversion of schema definitions into type alias trees.

The renderer consults the primitive type map and name resolver, and
registers every type it mentions in the dependency graph.
"""

from typing import Dict

from .errors import UnmappedPrimitiveError, UnsupportedDefinitionError, UnsupportedTypeError
from .graph import DependencyGraph
from .naming import NameResolver
from .schema import ArrayType, PrimitiveType, ReferenceType, SchemaDefinition, SchemaType
from .types import (
    ArrayNode,
    FieldNode,
    ObjectNode,
    PrimitiveNode,
    PrimitiveTypeMap,
    ReferenceNode,
    TypeAlias,
    TypeNode,
)
from ...logging_config import get_logger

logger = get_logger(__name__)


class DefinitionRenderer:
    """Renders one definition at a time into a TypeAlias."""

    def __init__(
        self,
        type_map: PrimitiveTypeMap,
        resolver: NameResolver,
        graph: DependencyGraph,
    ):
        self.type_map = type_map
        self.resolver = resolver
        self.graph = graph

    def render(self, raw_key: str, definition: SchemaDefinition) -> TypeAlias:
        """
        Render a definition.

        Args:
            raw_key: Key of the definition in the document
            definition: Parsed definition

        Returns:
            TypeAlias whose body lists the properties in declared order

        Raises:
            UnsupportedDefinitionError: If the definition is not an object
            UnmappedPrimitiveError: If a primitive has no target mapping
            UnsupportedTypeError: For nested arrays or colliding property names
        """
        if not definition.is_object:
            raise UnsupportedDefinitionError(raw_key, definition.kind)

        type_name = self.resolver.type_name(raw_key)
        self.graph.add_node(type_name)

        fields = []
        seen: Dict[str, str] = {}

        for prop_key, schema_type in definition.properties:
            prop_name = self.resolver.property_name(prop_key)

            if prop_name in seen:
                raise UnsupportedTypeError(
                    raw_key,
                    prop_key,
                    f"property name '{prop_name}' collides with '{seen[prop_name]}'",
                )
            seen[prop_name] = prop_key

            node = self._render_type(schema_type, type_name, raw_key, prop_key)
            fields.append(FieldNode(name=prop_name, type=node))

        logger.debug(
            "Rendered %s as %s with %d field(s)", raw_key, type_name, len(fields)
        )

        return TypeAlias(
            name=type_name,
            body=ObjectNode(tuple(fields)),
            original_name=raw_key,
            description=definition.description,
        )

    def _render_type(
        self, schema_type: SchemaType, type_name: str, raw_key: str, prop_key: str
    ) -> TypeNode:
        if isinstance(schema_type, PrimitiveType):
            return self._render_primitive(schema_type, raw_key, prop_key)

        if isinstance(schema_type, ReferenceType):
            return self._render_reference(schema_type, type_name)

        if isinstance(schema_type, ArrayType):
            items = schema_type.items
            if isinstance(items, PrimitiveType):
                return ArrayNode(self._render_primitive(items, raw_key, prop_key))
            if isinstance(items, ReferenceType):
                return ArrayNode(self._render_reference(items, type_name))
            raise UnsupportedTypeError(raw_key, prop_key, "nested arrays are not supported")

        raise UnsupportedTypeError(
            raw_key, prop_key, f"unknown schema type {type(schema_type).__name__}"
        )

    def _render_primitive(
        self, schema_type: PrimitiveType, raw_key: str, prop_key: str
    ) -> PrimitiveNode:
        try:
            return PrimitiveNode(self.type_map.lookup(schema_type.name))
        except UnmappedPrimitiveError:
            raise UnmappedPrimitiveError(schema_type.name, raw_key, prop_key) from None

    def _render_reference(self, schema_type: ReferenceType, type_name: str) -> ReferenceNode:
        target = self.resolver.type_name(schema_type.target)
        self.graph.add_dependency(type_name, target)
        return ReferenceNode(target)
