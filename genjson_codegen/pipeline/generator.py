"""
Pipeline generator: discovery, emission and commit of GenJson headers.

1. Discover exported declarations in every user module
2. Emit one header per source unit: preamble, then every serializable
   struct followed by every serializable enum, all inside one macro
3. Commit each header through the writer
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .. import __version__
from ..logging import get_logger
from .analyzer.units import DiscoveryKind, GenerationUnit, GenerationUnits
from .analyzer.walker import discover
from .config import CodeGeneratorConfig
from .declarations.nodes import Container, SourceUnit
from .emitters import EnumEmitter, StructEmitter, make_template_environment
from .errors import CommitError, GenerationError
from .writer import AtomicWriter

logger = get_logger("generator")

CONTINUATION = " \\"
SEPARATOR = "\\"


class PipelineGenerator:
    """Generates GenJson serializer headers from a declaration tree."""

    def __init__(
        self,
        config: CodeGeneratorConfig | None = None,
        writer: AtomicWriter | None = None,
        command_line: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            writer: Commit collaborator; an AtomicWriter is created when omitted
            command_line: Command line recorded in the generation comment
        """
        self.config = config or CodeGeneratorConfig()
        self.command_line = command_line or "genjson_codegen"
        self.writer = writer or AtomicWriter(
            macro_name=self.config.macro_name,
            atomic=self.config.output.atomic_write,
        )

        self.env = make_template_environment()
        self.prefix = self.env.get_template("prefix.h.jinja2")
        self.struct_emitter = StructEmitter(self.config, self.env)
        self.enum_emitter = EnumEmitter(self.config, self.env)

    def discover(self, modules: Iterable[Container]) -> GenerationUnits:
        """
        Collect exported declarations from every user module.

        Args:
            modules: Top-level module containers

        Returns:
            A new GenerationUnits mapping
        """
        units = GenerationUnits()
        for module in modules:
            if self.config.skip_engine_modules and module.is_part_of_engine:
                logger.debug("Skipping engine module %s", module.name)
                continue

            logger.info("Processing module %s", module.name)
            discover(module, units, strict=self.config.strict_rename_all)
        return units

    def emit_unit(self, unit: GenerationUnit, kind: DiscoveryKind = DiscoveryKind.SERIALIZE) -> str:
        """
        Emit the header text for one generation unit.

        Args:
            unit: The unit to emit
            kind: Export direction; only serialization is emitted today

        Returns:
            Header text ending with a newline
        """
        lines = self._render_prefix().split("\n")

        for record in unit.structs(kind):
            lines.extend(self._as_macro_lines(self.struct_emitter.emit(record, kind)))

        for record in unit.enums(kind):
            lines.extend(self._as_macro_lines(self.enum_emitter.emit(record, kind)))

        # Blank line terminates the macro
        lines.append("")
        return "\n".join(lines) + "\n"

    def emit(self, units: GenerationUnits) -> dict[SourceUnit, str]:
        """
        Emit one header per generation unit, in discovery order.

        Args:
            units: Units collected by discover()

        Returns:
            Mapping from source unit to header text
        """
        return {source_unit: self.emit_unit(unit) for source_unit, unit in units.items()}

    def output_path(self, source_unit: SourceUnit, output_dir: Path | None = None) -> Path:
        """Path of the header generated for ``source_unit``."""
        file_name = f"{source_unit.stem}{self.config.output_suffix}"
        if output_dir is None:
            return Path(source_unit.path).parent / file_name
        return Path(output_dir) / file_name

    def generate(self, modules: Iterable[Container], output_dir: Path | None = None) -> list[Path]:
        """
        Run the whole pipeline and commit every generated header.

        Args:
            modules: Top-level module containers
            output_dir: Directory receiving the headers; next to each
                source header when omitted

        Returns:
            Paths of all generated headers, written or already up to date

        Raises:
            GenerationError: If any declaration or header fails; the run
                stops at the first failure
        """
        logger.info("GenJson code generation started.")

        units = self.discover(modules)
        outputs = self.emit(units)

        paths = []
        for source_unit, content in outputs.items():
            path = self.output_path(source_unit, output_dir)
            try:
                written = self.writer.commit(path, content, validate=self.config.output.validate_before_write)
            except GenerationError as e:
                e.source_unit = source_unit
                raise
            except OSError as e:
                raise CommitError(f"Cannot write {path}: {e}", source_unit=source_unit) from e

            if written:
                logger.info("Wrote %s", path)
            else:
                logger.debug("Unchanged %s", path)
            paths.append(path)

        logger.info("GenJson code generation finished: %d header(s).", len(paths))
        return paths

    def _render_prefix(self) -> str:
        return self.prefix.render(
            generation_comment=self._generation_comment(),
            serializer_include=self.config.serializer_include,
            macro_name=self.config.macro_name,
        ).rstrip("\n")

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"// Generated by genjson_codegen v{__version__} : {self.command_line}"

    @staticmethod
    def _as_macro_lines(definition: str) -> list[str]:
        """Continue every line of a definition and close it with a lone separator line."""
        return [line + CONTINUATION for line in definition.split("\n")] + [SEPARATOR]
