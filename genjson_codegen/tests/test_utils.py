"""
Tests for identifier case conversion.
"""

import pytest

from genjson_codegen.utils import (
    escape_cpp_string,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("MyFieldName", ["My", "Field", "Name"]),
        ("myFieldName", ["my", "Field", "Name"]),
        ("my_field_name", ["my", "field", "name"]),
        ("my-field-name", ["my", "field", "name"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("Item2Count", ["Item", "2", "Count"]),
        ("bIsActive", ["b", "Is", "Active"]),
        ("X", ["X"]),
        ("", []),
    ],
)
def test_split_words(text, expected):
    assert split_words(text) == expected


def test_my_field_name_in_every_convention():
    assert to_camel_case("MyFieldName") == "myFieldName"
    assert to_kebab_case("MyFieldName") == "my-field-name"
    assert to_pascal_case("MyFieldName") == "MyFieldName"
    assert to_snake_case("MyFieldName") == "my_field_name"


def test_acronyms_are_one_word():
    assert to_snake_case("HTTPServer") == "http_server"
    assert to_camel_case("HTTPServer") == "httpServer"
    assert to_pascal_case("HTTPServer") == "HttpServer"
    assert to_kebab_case("HTTPServer") == "http-server"


def test_conversions_are_stable():
    """Converting an already converted name does not change it."""
    for convert in (to_camel_case, to_kebab_case, to_pascal_case, to_snake_case):
        once = convert("PlayerHealthMax")
        assert convert(once) == once


def test_conventions_agree_on_word_boundaries():
    snake = to_snake_case("PlayerHealthMax")
    assert to_pascal_case(snake) == "PlayerHealthMax"
    assert to_camel_case(to_kebab_case("PlayerHealthMax")) == "playerHealthMax"


def test_single_letter_fields():
    assert to_snake_case("X") == "x"
    assert to_camel_case("Y") == "y"
    assert to_pascal_case("z") == "Z"


def test_empty_string():
    assert to_camel_case("") == ""
    assert to_snake_case("") == ""


def test_escape_cpp_string():
    assert escape_cpp_string('say "hi"') == 'say \\"hi\\"'
    assert escape_cpp_string("C:\\path") == "C:\\\\path"
    assert escape_cpp_string("plain") == "plain"


def test_escape_cpp_string_control_characters():
    assert escape_cpp_string("a\nb") == "a\\nb"
    assert escape_cpp_string("tab\there\r") == "tab\\there\\r"
    assert escape_cpp_string("\x01" + "7") == "\\0017"
    assert escape_cpp_string("\x7f") == "\\177"
    assert "\n" not in escape_cpp_string("line\nbreak\x00")
