"""
Flow code generator module.

Generates Flow type aliases from Swagger definitions.
"""

from .generator import FLOW_BUILTIN_TYPES, FlowGenerator

__all__ = ["FLOW_BUILTIN_TYPES", "FlowGenerator"]
