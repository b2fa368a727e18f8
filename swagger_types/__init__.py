"""
swagger-types: generate Flow and TypeScript type aliases from Swagger definitions.
"""

__version__ = "1.0.0"

from .codegen import (  # noqa: E402
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    generate_from_document,
    get_generator,
    list_supported_languages,
    parse_document,
    quick_generate,
)
from .utils import JSONLoaderError, load_json, load_source  # noqa: E402

__all__ = [
    "__version__",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "generate_from_document",
    "get_generator",
    "list_supported_languages",
    "parse_document",
    "quick_generate",
    "JSONLoaderError",
    "load_json",
    "load_source",
]
