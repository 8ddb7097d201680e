"""
Tests for field and enum value name resolution.
"""

import pytest

from genjson_codegen.pipeline.analyzer.naming import (
    NamingConvention,
    enum_value_wire_name,
    field_wire_name,
    get_rename_all,
    parse_naming_convention,
    resolve_enum_value_name,
    resolve_field_name,
    strip_scope,
)
from genjson_codegen.pipeline.declarations.metadata import MetadataMap
from genjson_codegen.pipeline.declarations.nodes import EnumDecl, EnumValue, Field
from genjson_codegen.pipeline.errors import ConfigurationError


class TestParseNamingConvention:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("camelCase", NamingConvention.CAMEL_CASE),
            ("kebab-case", NamingConvention.KEBAB_CASE),
            ("PascalCase", NamingConvention.PASCAL_CASE),
            ("snake_case", NamingConvention.SNAKE_CASE),
        ],
    )
    def test_known_values(self, value, expected):
        assert parse_naming_convention(value) is expected

    def test_missing_value(self):
        assert parse_naming_convention(None) is None

    def test_unknown_value_falls_back_to_no_convention(self):
        assert parse_naming_convention("SCREAMING_CASE") is None
        assert parse_naming_convention("snake-case") is None
        assert parse_naming_convention("") is None

    def test_unknown_value_in_strict_mode(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_naming_convention("SCREAMING_CASE", strict=True)
        assert "SCREAMING_CASE" in str(exc_info.value)
        assert "snake_case" in str(exc_info.value)

    def test_get_rename_all_reads_metadata(self):
        assert get_rename_all(MetadataMap.from_mapping({"RenameAll": "kebab-case"})) is NamingConvention.KEBAB_CASE
        assert get_rename_all(MetadataMap()) is None


class TestResolveFieldName:
    def test_override_wins_over_convention(self):
        assert resolve_field_name("MyField", "foo", NamingConvention.SNAKE_CASE) == "foo"

    def test_override_is_verbatim(self):
        assert resolve_field_name("MyField", "Some Key", None) == "Some Key"

    @pytest.mark.parametrize(
        "convention,expected",
        [
            (NamingConvention.CAMEL_CASE, "myFieldName"),
            (NamingConvention.KEBAB_CASE, "my-field-name"),
            (NamingConvention.PASCAL_CASE, "MyFieldName"),
            (NamingConvention.SNAKE_CASE, "my_field_name"),
        ],
    )
    def test_convention_applies_without_override(self, convention, expected):
        assert resolve_field_name("MyFieldName", None, convention) == expected

    def test_raw_name_without_override_or_convention(self):
        assert resolve_field_name("MyFieldName", None, None) == "MyFieldName"

    def test_repeated_calls_are_identical(self):
        results = {resolve_field_name("PlayerHealthMax", None, NamingConvention.KEBAB_CASE) for _ in range(5)}
        assert results == {"player-health-max"}


class TestResolveEnumValueName:
    def test_strips_scope(self):
        assert resolve_enum_value_name("EColor::Red", None, None) == "Red"

    def test_strips_up_to_last_separator(self):
        assert resolve_enum_value_name("Game::EColor::DarkRed", None, NamingConvention.SNAKE_CASE) == "dark_red"

    def test_unqualified_name(self):
        assert resolve_enum_value_name("Red", None, NamingConvention.CAMEL_CASE) == "red"

    def test_override_wins(self):
        assert resolve_enum_value_name("EColor::Red", "rouge", NamingConvention.SNAKE_CASE) == "rouge"

    def test_strip_scope(self):
        assert strip_scope("A::B::C") == "C"
        assert strip_scope("C") == "C"


class TestWireNames:
    def test_field_rename_from_metadata(self):
        field = Field(name="X", metadata=MetadataMap.from_mapping({"Rename": "x_coord"}))
        assert field_wire_name(field, NamingConvention.CAMEL_CASE) == "x_coord"

    def test_field_without_rename(self):
        assert field_wire_name(Field(name="PosX"), NamingConvention.SNAKE_CASE) == "pos_x"

    def test_enum_value_rename_is_indexed_by_ordinal(self):
        enum = EnumDecl(
            name="EColor",
            values=[EnumValue("EColor::Red", 0), EnumValue("EColor::Green", 1)],
        )
        enum.metadata.set_indexed("Rename", 1, "vert")

        assert enum_value_wire_name(enum, enum.values[0], None) == "Red"
        assert enum_value_wire_name(enum, enum.values[1], None) == "vert"

    def test_missing_index_is_not_an_override(self):
        enum = EnumDecl(name="EColor", values=[EnumValue("EColor::Red", 0)])
        enum.metadata.set_indexed("Rename", 7, "unused")
        assert enum_value_wire_name(enum, enum.values[0], NamingConvention.KEBAB_CASE) == "red"
