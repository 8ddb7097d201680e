"""
Type graph walker.

Walks a declaration tree and collects the struct and enum declarations
tagged ``Serialize`` and/or ``Deserialize`` into per-header generation
units.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..declarations.metadata import DESERIALIZE, SERIALIZE
from ..declarations.nodes import Declaration, EnumDecl, StructDecl
from ..errors import ConfigurationError, SourceUnitError
from .naming import get_rename_all
from .units import DiscoveryRecord, GenerationUnit, GenerationUnits

T = TypeVar("T", bound=Declaration)

AddRecord = Callable[[GenerationUnit, DiscoveryRecord], None]


def collect_exports(
    node: Declaration,
    target_type: type[T],
    units: GenerationUnits,
    add_serializable: AddRecord,
    add_deserializable: AddRecord,
    strict: bool = False,
) -> None:
    """
    Recursively collect declarations of ``target_type`` below ``node``.

    A node of another type is only searched through. A node of the target
    type is never descended into: it is either recorded or discarded.

    Args:
        node: Root of the (sub)tree to walk
        target_type: Declaration class to look for (StructDecl or EnumDecl)
        units: Generation units to populate
        add_serializable: Stores a record as serializable in a unit
        add_deserializable: Stores a record as deserializable in a unit
        strict: Reject unknown ``RenameAll`` values

    Raises:
        SourceUnitError: If a tagged declaration has no source unit
        ConfigurationError: If ``strict`` and ``RenameAll`` is not recognized
    """
    if not isinstance(node, target_type):
        for child in node.children:
            collect_exports(child, target_type, units, add_serializable, add_deserializable, strict)
        return

    is_serializable = node.metadata.has_flag(SERIALIZE)
    is_deserializable = node.metadata.has_flag(DESERIALIZE)

    if not is_serializable and not is_deserializable:
        return

    qualified_name = getattr(node, "qualified_name", "") or node.name
    if node.source_unit is None:
        raise SourceUnitError(
            f"Cannot resolve the header declaring {node.kind or 'type'} '{qualified_name}'",
            declaration=qualified_name,
        )

    try:
        rename_all = get_rename_all(node.metadata, strict=strict)
    except ConfigurationError as e:
        raise ConfigurationError(e.message, source_unit=node.source_unit, declaration=qualified_name) from None

    unit = units.get_or_create(node.source_unit)
    record = DiscoveryRecord(node, rename_all)

    if is_serializable:
        add_serializable(unit, record)

    if is_deserializable:
        add_deserializable(unit, record)


def collect_struct_exports(root: Declaration, units: GenerationUnits, strict: bool = False) -> None:
    """Collect serializable / deserializable structs below ``root``."""
    collect_exports(
        root,
        StructDecl,
        units,
        GenerationUnit.add_serializable_struct,
        GenerationUnit.add_deserializable_struct,
        strict,
    )


def collect_enum_exports(root: Declaration, units: GenerationUnits, strict: bool = False) -> None:
    """Collect serializable / deserializable enums below ``root``."""
    collect_exports(
        root,
        EnumDecl,
        units,
        GenerationUnit.add_serializable_enum,
        GenerationUnit.add_deserializable_enum,
        strict,
    )


def discover(root: Declaration, units: GenerationUnits | None = None, strict: bool = False) -> GenerationUnits:
    """
    Collect every exported struct and enum below ``root``.

    Args:
        root: A top-level scope (typically one module)
        units: Units to add to; a new mapping is created when omitted
        strict: Reject unknown ``RenameAll`` values

    Returns:
        The populated generation units
    """
    if units is None:
        units = GenerationUnits()
    collect_struct_exports(root, units, strict)
    collect_enum_exports(root, units, strict)
    return units
