"""
Exceptions raised by the generation pipeline.

Any GenerationError aborts the whole run: a partially generated set of
headers can leave compiled code referencing serializers that were never
written.
"""

from __future__ import annotations

from typing import Any


class GenerationError(Exception):
    """Base class for fatal generation errors.

    Attributes:
        source_unit: Header the failing declaration belongs to, if known
        declaration: Qualified name of the failing declaration, if known
    """

    def __init__(self, message: str, source_unit: Any = None, declaration: str | None = None):
        super().__init__(message)
        self.message = message
        self.source_unit = source_unit
        self.declaration = declaration

    def __str__(self) -> str:
        context = []
        if self.source_unit is not None:
            context.append(f"source unit '{self.source_unit}'")
        if self.declaration:
            context.append(f"declaration '{self.declaration}'")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class DeclarationParseError(GenerationError):
    """Raised when a declaration document is malformed."""


class SourceUnitError(GenerationError):
    """Raised when a tagged declaration has no resolvable source unit."""


class ConfigurationError(GenerationError):
    """Raised for invalid configuration in strict mode."""


class OutputValidationError(GenerationError):
    """Raised when generated text fails structural validation."""


class CommitError(GenerationError):
    """Raised when a generated header cannot be persisted."""
