"""GenJson Code Generator

A Python package for generating GenJson serializer headers from
annotated struct and enum declarations. Supports layered field naming
conventions, enum-as-string and enum-as-number output, and idempotent
header regeneration.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    DeclarationParser,
    GenerationError,
    OutputConfig,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "DeclarationParser",
    "GenerationError",
    "AtomicWriter",
]
