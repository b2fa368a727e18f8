"""
Naming utilities for safe code generation.

Derives emitted type and property identifiers from raw definition and
property keys under a configurable naming policy.
"""

import re
from enum import Enum
from typing import Set, Union

from .errors import NamingError


class TypeNamePolicy(Enum):
    """How definition keys become type names."""

    ORIGINAL = "original"  # Order«Pet»
    PASCAL = "pascal"  # OrderPet


class PropertyNamePolicy(Enum):
    """How property keys become property names."""

    NORMAL = "normal"  # UserId
    FIRST_CASE_LOWER = "firstCaseLower"  # userId, ID -> id


_SEPARATORS = re.compile(r"[\W_]+")
_CASE_CHANGE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_HAS_LOWER = re.compile(r"[a-z]")


def split_words(name: str) -> list[str]:
    """Split a key on separators and lower-to-upper case changes."""
    words = []
    for chunk in _SEPARATORS.split(name):
        if chunk:
            words.extend(w for w in _CASE_CHANGE.split(chunk) if w)
    return words


def to_pascal_case(name: str) -> str:
    """
    Convert a key to PascalCase.

    Each word's first letter is uppercased and the remainder is kept as-is,
    so acronyms survive (``HTTPResponse`` stays ``HTTPResponse``).

    Raises:
        NamingError: If the key has no alphanumeric characters
    """
    pascal = "".join(word[:1].upper() + word[1:] for word in split_words(name))

    if not pascal:
        raise NamingError(f"Cannot derive a type name from {name!r}")

    # Identifiers cannot start with a digit
    if pascal[0].isdigit():
        pascal = f"_{pascal}"

    return pascal


def to_first_case_lower(name: str) -> str:
    """Lower-case the first character, or the whole key if it has no lowercase."""
    if not _HAS_LOWER.search(name):
        return name.lower()
    return name[:1].lower() + name[1:]


def _coerce(policy, enum_cls):
    if isinstance(policy, enum_cls):
        return policy
    try:
        return enum_cls(policy)
    except ValueError:
        choices = ", ".join(p.value for p in enum_cls)
        raise NamingError(
            f"Unknown naming policy {policy!r} (expected one of: {choices})"
        ) from None


def resolve_type_name(
    raw_key: str, policy: Union[TypeNamePolicy, str] = TypeNamePolicy.ORIGINAL
) -> str:
    """Derive the emitted type name for a definition key."""
    if _coerce(policy, TypeNamePolicy) is TypeNamePolicy.PASCAL:
        return to_pascal_case(raw_key)
    return raw_key


def resolve_property_name(
    raw_key: str,
    policy: Union[PropertyNamePolicy, str] = PropertyNamePolicy.NORMAL,
) -> str:
    """Derive the emitted property name for a property key."""
    if _coerce(policy, PropertyNamePolicy) is PropertyNamePolicy.FIRST_CASE_LOWER:
        return to_first_case_lower(raw_key)
    return raw_key


class NameResolver:
    """Applies a fixed pair of naming policies. Holds no per-call state."""

    def __init__(
        self,
        type_policy: Union[TypeNamePolicy, str] = TypeNamePolicy.ORIGINAL,
        property_policy: Union[PropertyNamePolicy, str] = PropertyNamePolicy.NORMAL,
    ):
        self.type_policy = _coerce(type_policy, TypeNamePolicy)
        self.property_policy = _coerce(property_policy, PropertyNamePolicy)

    @classmethod
    def from_options(
        cls, change_type_case: bool = False, transform_property: str = "normal"
    ) -> "NameResolver":
        """Build a resolver from the command-line style options."""
        type_policy = (
            TypeNamePolicy.PASCAL if change_type_case else TypeNamePolicy.ORIGINAL
        )
        return cls(type_policy, transform_property)

    def type_name(self, raw_key: str) -> str:
        return resolve_type_name(raw_key, self.type_policy)

    def property_name(self, raw_key: str) -> str:
        return resolve_property_name(raw_key, self.property_policy)

    def __repr__(self) -> str:
        return (
            f"NameResolver(type_policy={self.type_policy.value!r}, "
            f"property_policy={self.property_policy.value!r})"
        )


# Identifier rules shared by Flow and TypeScript object keys
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

JS_RESERVED_WORDS: Set[str] = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
}


def is_js_identifier(name: str) -> bool:
    """Check whether a name can be used unquoted as an object type key."""
    return bool(_JS_IDENTIFIER.match(name))


def quote_property_name(name: str) -> str:
    """Quote a property name unless it is a plain identifier."""
    if is_js_identifier(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
