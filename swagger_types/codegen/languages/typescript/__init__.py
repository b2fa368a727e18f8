"""
TypeScript code generator module.

Generates TypeScript type aliases from Swagger definitions.
"""

from .generator import TYPESCRIPT_BUILTIN_TYPES, ArrayStyle, TypeScriptGenerator

__all__ = ["TYPESCRIPT_BUILTIN_TYPES", "ArrayStyle", "TypeScriptGenerator"]
