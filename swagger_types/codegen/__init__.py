"""
Swagger Types Code Generation Module

Generates type alias declarations from Swagger definitions.
"""

from typing import Any, Mapping, Optional

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError
from .core.schema import SchemaDocument, parse_document
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_from_document(
    document: Mapping[str, Any],
    language: str = "flow",
    config: Optional[Any] = None,
) -> GenerationResult:
    """
    Generate code from a decoded Swagger document.

    Args:
        document: Document as returned by ``json.load``
        language: Target language name
        config: Generator configuration (GeneratorConfig, dict, or file path)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, document)


def quick_generate(document, language: str = "flow", **options) -> str:
    """
    Quick code generation from a Swagger document.

    Args:
        document: Decoded document, or its JSON text
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(document, str):
        import json

        document = json.loads(document)

    result = generate_from_document(document, language, options)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaDocument",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "parse_document",
    "generate_code",
    "generate_from_document",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
