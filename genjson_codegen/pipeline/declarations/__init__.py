"""
Declaration tree module.

Node definitions for the declaration graph and the parser that builds it
from a JSON declaration document.
"""

from __future__ import annotations

from .metadata import MetadataMap
from .nodes import Container, Declaration, EnumDecl, EnumValue, Field, SourceUnit, StructDecl
from .parser import DeclarationParser

__all__ = [
    "MetadataMap",
    "Container",
    "Declaration",
    "EnumDecl",
    "EnumValue",
    "Field",
    "SourceUnit",
    "StructDecl",
    "DeclarationParser",
]
