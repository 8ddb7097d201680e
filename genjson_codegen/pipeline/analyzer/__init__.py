"""
Analyzer module: walks the declaration tree and resolves wire names.
"""

from __future__ import annotations

from .naming import (
    NamingConvention,
    enum_value_wire_name,
    field_wire_name,
    parse_naming_convention,
    resolve_enum_value_name,
    resolve_field_name,
)
from .units import DiscoveryKind, DiscoveryRecord, GenerationUnit, GenerationUnits
from .walker import collect_enum_exports, collect_exports, collect_struct_exports, discover

__all__ = [
    "NamingConvention",
    "parse_naming_convention",
    "resolve_field_name",
    "resolve_enum_value_name",
    "field_wire_name",
    "enum_value_wire_name",
    "DiscoveryKind",
    "DiscoveryRecord",
    "GenerationUnit",
    "GenerationUnits",
    "collect_exports",
    "collect_struct_exports",
    "collect_enum_exports",
    "discover",
]
