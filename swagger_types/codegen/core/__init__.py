"""
Core code generation components.

Provides the schema model, naming, dependency ordering and the base
classes used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GenerationResult,
    GenerationRun,
    generate_code,
)
from .errors import (
    GeneratorError,
    SchemaError,
    MalformedDocumentError,
    UnresolvedReferenceError,
    UnsupportedDefinitionError,
    UnsupportedTypeError,
    UnmappedPrimitiveError,
    NamingError,
    DuplicateTypeNameError,
    MissingDefinitionError,
    GraphFrozenError,
)
from .schema import (
    SchemaDocument,
    SchemaDefinition,
    SchemaType,
    PrimitiveType,
    ReferenceType,
    ArrayType,
    parse_document,
)
from .types import (
    PrimitiveTypeMap,
    PrimitiveNode,
    ReferenceNode,
    ArrayNode,
    ObjectNode,
    FieldNode,
    TypeAlias,
    RenderedDefinition,
)
from .naming import (
    NameResolver,
    TypeNamePolicy,
    PropertyNamePolicy,
    resolve_type_name,
    resolve_property_name,
)
from .graph import DependencyGraph
from .renderer import DefinitionRenderer
from .emitter import Emitter
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "GenerationRun",
    "generate_code",
    # Errors
    "GeneratorError",
    "SchemaError",
    "MalformedDocumentError",
    "UnresolvedReferenceError",
    "UnsupportedDefinitionError",
    "UnsupportedTypeError",
    "UnmappedPrimitiveError",
    "NamingError",
    "DuplicateTypeNameError",
    "MissingDefinitionError",
    "GraphFrozenError",
    # Schema system - input model
    "SchemaDocument",
    "SchemaDefinition",
    "SchemaType",
    "PrimitiveType",
    "ReferenceType",
    "ArrayType",
    "parse_document",
    # Target type tree
    "PrimitiveTypeMap",
    "PrimitiveNode",
    "ReferenceNode",
    "ArrayNode",
    "ObjectNode",
    "FieldNode",
    "TypeAlias",
    "RenderedDefinition",
    # Naming utilities
    "NameResolver",
    "TypeNamePolicy",
    "PropertyNamePolicy",
    "resolve_type_name",
    "resolve_property_name",
    # Ordering and output
    "DependencyGraph",
    "DefinitionRenderer",
    "Emitter",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
