"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and
drives one generation run: render every definition, order the results
through the dependency graph and emit them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Mapping, Optional, Union

from .config import GeneratorConfig
from .emitter import Emitter
from .errors import DuplicateTypeNameError, GeneratorError
from .graph import DependencyGraph
from .naming import JS_RESERVED_WORDS
from .renderer import DefinitionRenderer
from .schema import SchemaDocument, parse_document
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import (
    JS_PRIMITIVE_TYPES,
    ArrayNode,
    PrimitiveNode,
    PrimitiveTypeMap,
    ReferenceNode,
    RenderedDefinition,
    TypeAlias,
    TypeNode,
)
from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationRun:
    """Everything produced by one call to ``CodeGenerator.build``."""

    code: str
    graph: DependencyGraph
    rendered: Dict[str, RenderedDefinition] = field(default_factory=dict)

    @property
    def order(self) -> List[str]:
        return self.graph.overall_order()

    @property
    def cycles(self) -> List[List[str]]:
        return self.graph.find_cycles()


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.resolver = self.config.name_resolver()
        self.type_map = PrimitiveTypeMap.with_overrides(
            self.primitive_types, self.config.type_overrides
        )
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'flow', 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.js.flow')."""
        pass

    @property
    @abstractmethod
    def default_header(self) -> str:
        """Return the first line of every generated file."""
        pass

    @property
    @abstractmethod
    def alias_template(self) -> str:
        """Return the template used for one type alias declaration."""
        pass

    @property
    def primitive_types(self) -> Mapping[str, str]:
        """Schema primitive names mapped to target primitives."""
        return JS_PRIMITIVE_TYPES

    @property
    def header(self) -> str:
        if self.config.header is not None:
            return self.config.header
        return self.default_header

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Type syntax

    def render_type(self, node: TypeNode) -> str:
        """Render a type node as target syntax."""
        if isinstance(node, PrimitiveNode):
            return node.name
        if isinstance(node, ReferenceNode):
            return node.name
        if isinstance(node, ArrayNode):
            return self.render_array(self.render_type(node.element))
        raise GeneratorError(f"Cannot render type node {node!r}")

    def render_array(self, element: str) -> str:
        return f"Array<{element}>"

    def render_alias(self, alias: TypeAlias) -> RenderedDefinition:
        """Render one type alias declaration through the language template."""
        fields = [
            {"name": f.name, "type": self.render_type(f.type)}
            for f in alias.body.fields
        ]

        context = {
            "type_name": alias.name,
            "fields": fields,
            "indent": self.config.indent,
            "description": alias.description if self.config.add_comments else None,
        }

        text = self.template_engine.render_template(self.alias_template, context)
        return RenderedDefinition(name=alias.name, text=text)

    # Generation

    def build(self, document: SchemaDocument) -> GenerationRun:
        """
        Render and order every definition of a document.

        A new dependency graph is created for each call, so one generator
        can convert any number of documents.

        Raises:
            GeneratorError: On the first definition that cannot be rendered
        """
        graph = DependencyGraph()
        renderer = DefinitionRenderer(self.type_map, self.resolver, graph)
        rendered: Dict[str, RenderedDefinition] = {}
        owners: Dict[str, str] = {}

        for raw_key, definition in document.definitions.items():
            alias = renderer.render(raw_key, definition)

            if alias.name in owners:
                raise DuplicateTypeNameError(alias.name, owners[alias.name], raw_key)
            owners[alias.name] = alias.original_name

            rendered[alias.name] = self.render_alias(alias)

        graph.freeze()

        emitter = Emitter(self.header)
        code = emitter.render(graph, {name: r.text for name, r in rendered.items()})

        logger.info(
            "Generated %d %s type(s)", len(rendered), self.language_name
        )
        return GenerationRun(code=code, graph=graph, rendered=rendered)

    def generate(self, document: SchemaDocument) -> str:
        """Generate code for all definitions of a document."""
        return self.build(document).code

    def validate_document(self, document: SchemaDocument) -> List[str]:
        """
        Validate a document for issues that do not stop generation.

        Args:
            document: Parsed document

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for definition in document.definitions.values():
            if definition.is_object and not definition.properties:
                warnings.append(
                    f"Definition '{definition.name}' has no properties - "
                    f"will generate an empty type"
                )

            type_name = self.resolver.type_name(definition.name) if definition.is_object else None
            if type_name and type_name in JS_RESERVED_WORDS:
                warnings.append(
                    f"Type name '{type_name}' is a reserved word in {self.language_name}"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = [line.rstrip() for line in code.split("\n")]
        return "\n".join(lines)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    document: Union[SchemaDocument, Mapping[str, Any]],
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        document: Parsed SchemaDocument, or the decoded JSON document

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        if not isinstance(document, SchemaDocument):
            document = parse_document(document)

        warnings = generator.validate_document(document)

        run = generator.build(document)
        cycles = run.cycles
        for cycle in cycles:
            path = " -> ".join(cycle + cycle[:1])
            warnings.append(
                f"Circular reference {path}: declarations cannot all precede their uses"
            )

        formatted_code = generator.format_code(run.code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "definition_count": len(document),
            "type_count": len(run.rendered),
            "order": run.order,
            "has_cycles": bool(cycles),
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except (GeneratorError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
