"""
Enum serializer emitter.

Enums tagged ``AsNumber`` are written as their underlying integer;
all others are written as strings through a switch with one case per
enumerator, in declaration order, and a trailing ``return false`` for
values outside the declared set.
"""

from __future__ import annotations

from ..analyzer.naming import enum_value_wire_name
from ..analyzer.units import DiscoveryKind, DiscoveryRecord
from ..declarations.metadata import AS_NUMBER
from ..declarations.nodes import EnumDecl
from .base import Emitter


class EnumEmitter(Emitter):
    """Emits ``GenJson::TSerializer`` specializations for enums."""

    TEMPLATE_NAME = "enum_serializer.h.jinja2"

    def build_context(self, record: DiscoveryRecord, kind: DiscoveryKind) -> dict:
        enum = record.declaration
        if not isinstance(enum, EnumDecl):
            raise TypeError(f"EnumEmitter cannot emit {type(enum).__name__} '{record.qualified_name}'")

        as_number = enum.metadata.has_flag(AS_NUMBER)
        values = []
        if not as_number:
            values = [{"name": value.name, "wire_name": enum_value_wire_name(enum, value, record.rename_all)} for value in enum.values]

        return {
            "qualified_name": record.qualified_name,
            "as_number": as_number,
            "values": values,
        }
