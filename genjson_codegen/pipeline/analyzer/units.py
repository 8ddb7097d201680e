"""
Discovery records and per-header generation units.

A generation unit collects every serializable / deserializable struct
and enum declared in one header, in discovery order. One unit feeds one
generated header.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from ..declarations.nodes import Declaration, SourceUnit
from .naming import NamingConvention


class DiscoveryKind(str, Enum):
    """Direction a discovered declaration is exported for."""

    SERIALIZE = "serialize"
    DESERIALIZE = "deserialize"


@dataclass(frozen=True)
class DiscoveryRecord:
    """A declaration selected for export, with its resolved ``RenameAll``."""

    declaration: Declaration
    rename_all: NamingConvention | None = None

    @property
    def qualified_name(self) -> str:
        return getattr(self.declaration, "qualified_name", "") or self.declaration.name


@dataclass
class GenerationUnit:
    """Structs and enums declared in one header, split by export direction."""

    source_unit: SourceUnit
    serializable_structs: list[DiscoveryRecord] = field(default_factory=list)
    deserializable_structs: list[DiscoveryRecord] = field(default_factory=list)
    serializable_enums: list[DiscoveryRecord] = field(default_factory=list)
    deserializable_enums: list[DiscoveryRecord] = field(default_factory=list)

    def add_serializable_struct(self, record: DiscoveryRecord) -> None:
        self.serializable_structs.append(record)

    def add_deserializable_struct(self, record: DiscoveryRecord) -> None:
        self.deserializable_structs.append(record)

    def add_serializable_enum(self, record: DiscoveryRecord) -> None:
        self.serializable_enums.append(record)

    def add_deserializable_enum(self, record: DiscoveryRecord) -> None:
        self.deserializable_enums.append(record)

    def structs(self, kind: DiscoveryKind) -> list[DiscoveryRecord]:
        if kind is DiscoveryKind.SERIALIZE:
            return self.serializable_structs
        return self.deserializable_structs

    def enums(self, kind: DiscoveryKind) -> list[DiscoveryRecord]:
        if kind is DiscoveryKind.SERIALIZE:
            return self.serializable_enums
        return self.deserializable_enums


class GenerationUnits:
    """Ordered mapping from source unit to its generation unit.

    A new instance is created for every generation run and handed from
    discovery to emission; it is never shared between runs.
    """

    def __init__(self) -> None:
        self._units: dict[SourceUnit, GenerationUnit] = {}

    def get_or_create(self, source_unit: SourceUnit) -> GenerationUnit:
        """Fetch the unit for ``source_unit``, creating it on first use."""
        unit = self._units.get(source_unit)
        if unit is None:
            unit = GenerationUnit(source_unit)
            self._units[source_unit] = unit
        return unit

    def get(self, source_unit: SourceUnit) -> GenerationUnit | None:
        return self._units.get(source_unit)

    def items(self) -> Iterator[tuple[SourceUnit, GenerationUnit]]:
        return iter(self._units.items())

    def __iter__(self) -> Iterator[GenerationUnit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, source_unit: object) -> bool:
        return source_unit in self._units
