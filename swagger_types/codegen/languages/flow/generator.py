"""
Flow code generator implementation.

Generates Flow ``export type`` aliases from Swagger definitions.
"""

from pathlib import Path
from typing import List, Optional

from ...core.generator import CodeGenerator
from ...core.schema import SchemaDocument


# Global types a generated alias would shadow
FLOW_BUILTIN_TYPES = {
    "Array",
    "Boolean",
    "Class",
    "Date",
    "Error",
    "File",
    "Function",
    "Map",
    "Number",
    "Object",
    "Promise",
    "Set",
    "String",
    "Symbol",
}


class FlowGenerator(CodeGenerator):
    """Code generator for Flow type aliases."""

    @property
    def language_name(self) -> str:
        return "flow"

    @property
    def file_extension(self) -> str:
        return ".js.flow"

    @property
    def default_header(self) -> str:
        return "// @flow"

    @property
    def alias_template(self) -> str:
        return "type_alias.flow.j2"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Flow templates directory."""
        return Path(__file__).parent / "templates"

    def validate_document(self, document: SchemaDocument) -> List[str]:
        """Validate a document for Flow generation."""
        warnings = super().validate_document(document)

        for definition in document.object_definitions():
            type_name = self.resolver.type_name(definition.name)
            if type_name in FLOW_BUILTIN_TYPES:
                warnings.append(
                    f"Type '{type_name}' shadows the Flow builtin of the same name"
                )

        return warnings

