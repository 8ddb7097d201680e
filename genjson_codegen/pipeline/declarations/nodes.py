"""
Declaration tree node definitions.

These nodes represent the parsed declaration graph handed over by the
header tool: containers (modules, headers, scopes) holding struct and
enum declarations together with their metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from .metadata import MetadataMap


@dataclass(frozen=True)
class SourceUnit:
    """Identity of the header file that declares a type."""

    path: str

    @property
    def stem(self) -> str:
        """File name without its last extension (``Point.h`` -> ``Point``)."""
        return PurePosixPath(self.path.replace("\\", "/")).stem

    def __str__(self) -> str:
        return self.path


@dataclass
class Declaration:
    """Base class for all declaration tree nodes."""

    name: str = ""
    kind: str = ""

    # Specifier metadata (Serialize, RenameAll, ...)
    metadata: MetadataMap = field(default_factory=MetadataMap)

    children: list[Declaration] = field(default_factory=list)

    # Header the declaration belongs to, if known
    source_unit: SourceUnit | None = None

    # Location in the input document (for error messages)
    source_path: str = ""


@dataclass
class Container(Declaration):
    """A scope that only groups other declarations (module, header, namespace)."""

    # Set on modules supplied by the engine rather than the user project
    is_part_of_engine: bool = False


@dataclass
class Field:
    """A member variable of a struct."""

    name: str = ""
    metadata: MetadataMap = field(default_factory=MetadataMap)

    # C++ type, informational only
    type_name: str | None = None


@dataclass
class EnumValue:
    """A single enumerator. ``name`` may be qualified (``EColor::Red``)."""

    name: str = ""
    ordinal: int = 0


@dataclass
class StructDecl(Declaration):
    """A struct (or class) declaration with ordered fields."""

    qualified_name: str = ""
    fields: list[Field] = field(default_factory=list)


@dataclass
class EnumDecl(Declaration):
    """An enum declaration with ordered enumerators."""

    qualified_name: str = ""
    values: list[EnumValue] = field(default_factory=list)
