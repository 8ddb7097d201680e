"""
Template-based serializer emitters.

Each emitter turns one discovery record into the C++ text of its
GenJson serializer specialization.
"""

from __future__ import annotations

from .base import Emitter, make_template_environment
from .enum_emitter import EnumEmitter
from .struct_emitter import StructEmitter

__all__ = [
    "Emitter",
    "EnumEmitter",
    "StructEmitter",
    "make_template_environment",
]
