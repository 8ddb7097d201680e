"""
Metadata maps attached to declarations.

Header tools record specifier metadata (``USTRUCT(meta = (Serialize))``)
as loosely typed key/value pairs. This wrapper exposes typed accessors
for the keys the generator understands, so callers never parse raw
dictionaries themselves.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

# Recognized metadata keys
SERIALIZE = "Serialize"
DESERIALIZE = "Deserialize"
RENAME_ALL = "RenameAll"
RENAME = "Rename"
AS_NUMBER = "AsNumber"
BLUEPRINT_TYPE = "BlueprintType"


@dataclass
class MetadataMap:
    """Case-sensitive string metadata with optional per-index entries.

    A flag is a key stored with the empty string as its value. Indexed
    entries hold metadata for members of a declaration (enum values),
    keyed by ``(key, index)``.
    """

    values: dict[str, str] = field(default_factory=dict)
    indexed: dict[tuple[str, int], str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str] | None) -> MetadataMap:
        return cls(values=dict(mapping or {}))

    def has_flag(self, key: str) -> bool:
        """Return True if ``key`` is present, whatever its value."""
        return key in self.values

    def get_str(self, key: str) -> str | None:
        return self.values.get(key)

    def get_indexed(self, key: str, index: int) -> str | None:
        """Return the value stored for ``key`` at ``index``, or None."""
        return self.indexed.get((key, index))

    def set(self, key: str, value: str = "") -> None:
        self.values[key] = value

    def set_indexed(self, key: str, index: int, value: str) -> None:
        self.indexed[(key, index)] = value

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
