"""
Name resolver for wire-visible field and enum value names.

Precedence, highest first:

1. An explicit ``Rename`` on the field (or enum value) is used verbatim.
2. The owning type's ``RenameAll`` convention is applied to the raw name.
3. The raw name is used unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ...utils import to_camel_case, to_kebab_case, to_pascal_case, to_snake_case
from ..declarations.metadata import RENAME, RENAME_ALL, MetadataMap
from ..declarations.nodes import EnumDecl, EnumValue, Field
from ..errors import ConfigurationError

SCOPE_SEPARATOR = "::"


class NamingConvention(str, Enum):
    """Naming conventions accepted by ``RenameAll``."""

    CAMEL_CASE = "camelCase"
    KEBAB_CASE = "kebab-case"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"


_CONVERTERS: dict[NamingConvention, Callable[[str], str]] = {
    NamingConvention.CAMEL_CASE: to_camel_case,
    NamingConvention.KEBAB_CASE: to_kebab_case,
    NamingConvention.PASCAL_CASE: to_pascal_case,
    NamingConvention.SNAKE_CASE: to_snake_case,
}


def parse_naming_convention(value: str | None, strict: bool = False) -> NamingConvention | None:
    """
    Parse a ``RenameAll`` value.

    Unrecognized values resolve to no convention unless ``strict`` is set.

    Args:
        value: Raw metadata value (e.g. "snake_case"), or None
        strict: Raise on unrecognized values instead of ignoring them

    Returns:
        The matching convention, or None

    Raises:
        ConfigurationError: If ``strict`` and the value is not recognized
    """
    if value is None:
        return None
    try:
        return NamingConvention(value)
    except ValueError:
        if strict:
            accepted = ", ".join(c.value for c in NamingConvention)
            raise ConfigurationError(f"Unknown {RENAME_ALL} value '{value}' (expected one of: {accepted})") from None
        return None


def get_rename_all(metadata: MetadataMap, strict: bool = False) -> NamingConvention | None:
    """Return the ``RenameAll`` convention declared in ``metadata``."""
    return parse_naming_convention(metadata.get_str(RENAME_ALL), strict=strict)


def convert_name(name: str, convention: NamingConvention) -> str:
    return _CONVERTERS[convention](name)


def strip_scope(name: str) -> str:
    """Drop everything up to and including the last scope separator."""
    _, separator, tail = name.rpartition(SCOPE_SEPARATOR)
    return tail if separator else name


def resolve_field_name(raw: str, override: str | None, convention: NamingConvention | None) -> str:
    if override is not None:
        return override
    if convention is not None:
        return convert_name(raw, convention)
    return raw


def resolve_enum_value_name(raw: str, override: str | None, convention: NamingConvention | None) -> str:
    """Same as :func:`resolve_field_name`, after stripping any ``Scope::`` prefix."""
    return resolve_field_name(strip_scope(raw), override, convention)


def field_wire_name(field: Field, convention: NamingConvention | None) -> str:
    """Resolve a struct field's JSON key."""
    return resolve_field_name(field.name, field.metadata.get_str(RENAME), convention)


def enum_value_wire_name(enum: EnumDecl, value: EnumValue, convention: NamingConvention | None) -> str:
    """Resolve an enumerator's JSON string; overrides live in the enum's indexed metadata."""
    override = enum.metadata.get_indexed(RENAME, value.ordinal)
    return resolve_enum_value_name(value.name, override, convention)
