"""
Configuration for the GenJson code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        validate_before_write: Whether to validate generated headers before writing
        atomic_write: Whether to use atomic file writes
    """

    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Name of the macro wrapping all serializers of a header
    macro_name: str = "GENJSON_SERIALIZERS"

    # Runtime header declaring GenJson::TSerializer
    serializer_include: str = "GenJsonSerializer.h"

    # Suffix replacing the source header's extension
    output_suffix: str = ".genjson.h"

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Skip modules shipped with the engine
    skip_engine_modules: bool = True

    # Fail on unknown RenameAll values instead of ignoring them
    strict_rename_all: bool = False

    # Emit GENJSON_REGISTER_STRUCT_SERIALIZER for BlueprintType structs
    register_blueprint_structs: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "macro_name": self.macro_name,
            "serializer_include": self.serializer_include,
            "output_suffix": self.output_suffix,
            "add_generation_comment": self.add_generation_comment,
            "skip_engine_modules": self.skip_engine_modules,
            "strict_rename_all": self.strict_rename_all,
            "register_blueprint_structs": self.register_blueprint_structs,
            "output": {
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
