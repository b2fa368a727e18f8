"""
Exception hierarchy for code generation.

Every failure raised by the core derives from GeneratorError so callers
can catch one type and still inspect the specific cause.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaError(GeneratorError):
    """The input document cannot be interpreted."""

    pass


class MalformedDocumentError(SchemaError):
    """Document is not a JSON object or has no ``definitions`` mapping."""

    pass


class UnresolvedReferenceError(SchemaError):
    """A ``$ref`` points at a definition that does not exist."""

    def __init__(self, definition: str, target: str):
        self.definition = definition
        self.target = target
        super().__init__(
            f"Definition '{definition}' references undefined type '{target}'"
        )


class UnsupportedDefinitionError(GeneratorError):
    """A definition's kind is not ``object``."""

    def __init__(self, definition: str, kind: Optional[str]):
        self.definition = definition
        self.kind = kind
        super().__init__(
            f"Cannot render non-object definition '{definition}' (kind: {kind})"
        )


class UnsupportedTypeError(GeneratorError):
    """A property uses a type shape outside the supported subset."""

    def __init__(self, definition: str, prop: Optional[str], reason: str):
        self.definition = definition
        self.prop = prop
        self.reason = reason
        location = f"{definition}.{prop}" if prop else definition
        super().__init__(f"Unsupported type in {location}: {reason}")


class UnmappedPrimitiveError(GeneratorError):
    """A primitive type has no entry in the primitive type map."""

    def __init__(
        self,
        primitive: str,
        definition: Optional[str] = None,
        prop: Optional[str] = None,
    ):
        self.primitive = primitive
        self.definition = definition
        self.prop = prop
        if definition:
            location = f"{definition}.{prop}" if prop else definition
            message = f"Unmapped primitive type '{primitive}' in {location}"
        else:
            message = f"Unmapped primitive type '{primitive}'"
        super().__init__(message)


class NamingError(GeneratorError):
    """A raw key cannot be turned into an identifier."""

    pass


class DuplicateTypeNameError(GeneratorError):
    """Two definitions resolve to the same emitted type name."""

    def __init__(self, type_name: str, first: str, second: str):
        self.type_name = type_name
        self.first = first
        self.second = second
        super().__init__(
            f"Definitions '{first}' and '{second}' both resolve to type '{type_name}'"
        )


class MissingDefinitionError(GeneratorError):
    """The dependency graph holds a type with no rendered declaration."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"No rendered declaration for type '{type_name}'")


class GraphFrozenError(GeneratorError):
    """The dependency graph was modified after it was frozen."""

    pass
