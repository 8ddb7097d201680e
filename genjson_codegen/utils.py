"""
Utility functions for the GenJson code generator.

Identifier case conversion shared by every naming convention. All four
transforms split identifiers with the same rule, so converting the same
raw name always yields the same words.
"""

import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def split_words(text: str) -> list[str]:
    """Split an identifier into words.

    Examples:
        "MyFieldName" -> ["My", "Field", "Name"]
        "my_field_name" -> ["my", "field", "name"]
        "HTTPServer" -> ["HTTP", "Server"]
        "Item2Count" -> ["Item", "2", "Count"]
    """
    if not text:
        return []
    return _WORD_PATTERN.findall(_normalize_separators(text))


def _capitalize_and_join(words: list[str], separator: str = "") -> str:
    """Capitalize each word and join them together."""
    return separator.join(word.capitalize() for word in words if word)


def to_pascal_case(text: str) -> str:
    """Convert an identifier to PascalCase.

    Examples:
        "my_field_name" -> "MyFieldName"
        "myFieldName" -> "MyFieldName"
        "HTTPServer" -> "HttpServer"
    """
    return _capitalize_and_join(split_words(text))


def to_camel_case(text: str) -> str:
    """Convert an identifier to camelCase ("MyFieldName" -> "myFieldName")."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + _capitalize_and_join(words[1:])


def to_snake_case(text: str) -> str:
    """Convert an identifier to snake_case ("MyFieldName" -> "my_field_name")."""
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    """Convert an identifier to kebab-case ("MyFieldName" -> "my-field-name")."""
    return "-".join(word.lower() for word in split_words(text))


_CPP_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}

# Backslash, quote and every control character
_CPP_ESCAPE_PATTERN = re.compile(r'[\\"\x00-\x1f\x7f]')


def _escape_cpp_char(match: re.Match) -> str:
    char = match.group()
    # Octal escapes end after three digits
    return _CPP_ESCAPES.get(char, f"\\{ord(char):03o}")


def escape_cpp_string(text: str) -> str:
    """Escape text for use inside a single-line C++ string literal."""
    return _CPP_ESCAPE_PATTERN.sub(_escape_cpp_char, text)
