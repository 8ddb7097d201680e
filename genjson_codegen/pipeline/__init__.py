"""
Pipeline - metadata-driven GenJson serializer generator.

This module provides a multi-phase architecture for generating GenJson
serializer headers from a declaration tree:

1. Phase 1 (Parser): Parse the declaration document into a declaration tree
2. Phase 2 (Walker): Collect exported structs and enums per header
3. Phase 3 (Emitters): Render one serializer per struct and enum
4. Phase 4 (Driver): Assemble one macro header per source header
5. Phase 5 (Writer): Commit changed headers atomically
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig
from .declarations import DeclarationParser
from .errors import (
    CommitError,
    ConfigurationError,
    DeclarationParseError,
    GenerationError,
    OutputValidationError,
    SourceUnitError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "DeclarationParser",
    "AtomicWriter",
    "GenerationError",
    "DeclarationParseError",
    "SourceUnitError",
    "ConfigurationError",
    "OutputValidationError",
    "CommitError",
]
