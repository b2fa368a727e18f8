"""
TypeScript code generator implementation.

Generates TypeScript ``export type`` aliases from Swagger definitions.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from ...core.config import ConfigError, GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.schema import SchemaDocument


class ArrayStyle(Enum):
    """Array spellings supported by TypeScript."""

    GENERIC = "generic"  # Array<Pet>
    SHORTHAND = "shorthand"  # Pet[]


TYPESCRIPT_BUILTIN_TYPES = {
    "Array",
    "Boolean",
    "Date",
    "Error",
    "File",
    "Function",
    "Map",
    "Number",
    "Object",
    "Partial",
    "Promise",
    "Record",
    "Set",
    "String",
    "Symbol",
}


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript type aliases."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        style = self.config.custom.get("array_style", ArrayStyle.GENERIC.value)
        try:
            self.array_style = ArrayStyle(style)
        except ValueError:
            raise ConfigError(f"Invalid array_style: {style}") from None

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".d.ts"

    @property
    def default_header(self) -> str:
        return "// Generated by swagger-types. Do not edit."

    @property
    def alias_template(self) -> str:
        return "type_alias.ts.j2"

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def render_array(self, element: str) -> str:
        if self.array_style is ArrayStyle.SHORTHAND:
            return f"{element}[]"
        return super().render_array(element)

    def validate_document(self, document: SchemaDocument) -> List[str]:
        """Validate a document for TypeScript generation."""
        warnings = super().validate_document(document)

        for definition in document.object_definitions():
            type_name = self.resolver.type_name(definition.name)
            if type_name in TYPESCRIPT_BUILTIN_TYPES:
                warnings.append(
                    f"Type '{type_name}' shadows the TypeScript global of the same name"
                )

        return warnings

