"""
Language-specific code generators.

This module contains generators for different type annotation languages.
"""

from .flow import FlowGenerator
from .typescript import TypeScriptGenerator

__all__ = ["FlowGenerator", "TypeScriptGenerator"]
