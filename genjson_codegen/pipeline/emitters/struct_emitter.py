"""
Struct serializer emitter.

Writes a struct as a JSON object: one key per field, in declaration
order, each value delegated to ``GenJson::Write``.
"""

from __future__ import annotations

from ..analyzer.naming import field_wire_name
from ..analyzer.units import DiscoveryKind, DiscoveryRecord
from ..declarations.metadata import BLUEPRINT_TYPE
from ..declarations.nodes import StructDecl
from .base import Emitter


class StructEmitter(Emitter):
    """Emits ``GenJson::TSerializer`` specializations for structs."""

    TEMPLATE_NAME = "struct_serializer.h.jinja2"

    def build_context(self, record: DiscoveryRecord, kind: DiscoveryKind) -> dict:
        struct = record.declaration
        if not isinstance(struct, StructDecl):
            raise TypeError(f"StructEmitter cannot emit {type(struct).__name__} '{record.qualified_name}'")

        fields = [{"name": field.name, "wire_name": field_wire_name(field, record.rename_all)} for field in struct.fields]
        register_serializer = self.config.register_blueprint_structs and struct.metadata.has_flag(BLUEPRINT_TYPE)

        return {
            "qualified_name": record.qualified_name,
            "fields": fields,
            "register_serializer": register_serializer,
        }
