"""
Declaration document parser that builds the declaration tree.

Phase 1 of the pipeline: turn the JSON declaration document exported by
the header tool into Declaration nodes, resolving which header each
declaration belongs to.
"""

from __future__ import annotations

from typing import Any

from ..errors import DeclarationParseError
from .metadata import MetadataMap
from .nodes import Container, Declaration, EnumDecl, EnumValue, Field, SourceUnit, StructDecl


class DeclarationParser:
    """Parses a declaration document into a declaration tree."""

    CONTAINER_KINDS = {"module", "package", "header", "namespace", "scope"}
    STRUCT_KINDS = {"struct", "class"}
    ENUM_KINDS = {"enum"}

    def parse(self, document: dict[str, Any]) -> list[Container]:
        """
        Parse a declaration document.

        Args:
            document: Dictionary with a "modules" list

        Returns:
            One container per top-level module, in document order

        Raises:
            DeclarationParseError: If the document is malformed
        """
        if not isinstance(document, dict):
            raise DeclarationParseError("Declaration document must be a JSON object")

        modules = document.get("modules", [])
        if not isinstance(modules, list):
            raise DeclarationParseError("'modules' must be a list (at #/modules)")

        result = []
        for i, module_data in enumerate(modules):
            path = f"#/modules/{i}"
            if isinstance(module_data, dict):
                module_data = {"kind": "module", **module_data}
            node = self._parse_node(module_data, path, None)
            if not isinstance(node, Container):
                raise DeclarationParseError(f"Top-level entries must be modules (at {path})")
            result.append(node)
        return result

    def _parse_node(self, data: Any, path: str, source_unit: SourceUnit | None) -> Declaration:
        """Parse one node and its children."""
        if not isinstance(data, dict):
            raise DeclarationParseError(f"Declaration must be an object (at {path})")

        kind = data.get("kind")
        if kind is None:
            raise DeclarationParseError(f"Declaration is missing 'kind' (at {path})")

        if kind == "header":
            header_path = data.get("path") or data.get("name")
            if not header_path:
                raise DeclarationParseError(f"Header is missing 'path' (at {path})")
            source_unit = SourceUnit(header_path)

        # An explicit source unit always wins over the enclosing header
        if data.get("source_unit"):
            source_unit = SourceUnit(data["source_unit"])

        metadata = self._parse_metadata(data.get("metadata"), f"{path}/metadata")

        if kind in self.CONTAINER_KINDS:
            name = data.get("name") or data.get("path") or ""
            node: Declaration = Container(
                name=name,
                kind=kind,
                metadata=metadata,
                source_unit=source_unit,
                source_path=path,
                is_part_of_engine=bool(data.get("is_part_of_engine", False)),
            )
        elif kind in self.STRUCT_KINDS:
            name = self._require_name(data, path)
            node = StructDecl(
                name=name,
                kind=kind,
                metadata=metadata,
                source_unit=source_unit,
                source_path=path,
                qualified_name=data.get("qualified_name") or name,
                fields=self._parse_fields(data.get("fields", []), f"{path}/fields"),
            )
        elif kind in self.ENUM_KINDS:
            name = self._require_name(data, path)
            node = EnumDecl(
                name=name,
                kind=kind,
                metadata=metadata,
                source_unit=source_unit,
                source_path=path,
                qualified_name=data.get("qualified_name") or name,
            )
            node.values = self._parse_enum_values(data.get("values", []), node.metadata, f"{path}/values")
        else:
            raise DeclarationParseError(f"Unknown declaration kind '{kind}' (at {path})")

        children = data.get("children", [])
        if not isinstance(children, list):
            raise DeclarationParseError(f"'children' must be a list (at {path}/children)")
        for i, child in enumerate(children):
            node.children.append(self._parse_node(child, f"{path}/children/{i}", source_unit))

        return node

    def _require_name(self, data: dict[str, Any], path: str) -> str:
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise DeclarationParseError(f"Declaration is missing 'name' (at {path})")
        return name

    def _parse_metadata(self, raw: Any, path: str) -> MetadataMap:
        """Parse a metadata object. ``true`` marks a flag, ``false``/``null`` are dropped."""
        metadata = MetadataMap()
        for key, value in self._metadata_items(raw, path):
            metadata.set(key, value)
        return metadata

    def _metadata_items(self, raw: Any, path: str) -> list[tuple[str, str]]:
        if raw is None:
            return []
        if not isinstance(raw, dict):
            raise DeclarationParseError(f"Metadata must be an object (at {path})")

        items = []
        for key, value in raw.items():
            if value is None or value is False:
                continue
            if value is True:
                items.append((key, ""))
            elif isinstance(value, (str, int, float)):
                items.append((key, str(value)))
            else:
                raise DeclarationParseError(f"Metadata value for '{key}' must be a string or boolean (at {path})")
        return items

    def _parse_fields(self, raw: Any, path: str) -> list[Field]:
        if not isinstance(raw, list):
            raise DeclarationParseError(f"'fields' must be a list (at {path})")

        fields = []
        for i, item in enumerate(raw):
            item_path = f"{path}/{i}"
            if isinstance(item, str):
                fields.append(Field(name=item))
                continue
            if not isinstance(item, dict):
                raise DeclarationParseError(f"Field must be a string or an object (at {item_path})")
            fields.append(
                Field(
                    name=self._require_name(item, item_path),
                    metadata=self._parse_metadata(item.get("metadata"), f"{item_path}/metadata"),
                    type_name=item.get("type"),
                )
            )
        return fields

    def _parse_enum_values(self, raw: Any, enum_metadata: MetadataMap, path: str) -> list[EnumValue]:
        """Parse enumerators; per-value metadata is stored on the enum, indexed by ordinal."""
        if not isinstance(raw, list):
            raise DeclarationParseError(f"'values' must be a list (at {path})")

        values = []
        for ordinal, item in enumerate(raw):
            item_path = f"{path}/{ordinal}"
            if isinstance(item, str):
                values.append(EnumValue(name=item, ordinal=ordinal))
                continue
            if not isinstance(item, dict):
                raise DeclarationParseError(f"Enum value must be a string or an object (at {item_path})")
            values.append(EnumValue(name=self._require_name(item, item_path), ordinal=ordinal))
            for key, value in self._metadata_items(item.get("metadata"), f"{item_path}/metadata"):
                enum_metadata.set_indexed(key, ordinal, value)
        return values
