import json
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .logging import configure_logging
from .pipeline import (
    CodeGeneratorConfig,
    ConfigurationError,
    DeclarationParseError,
    DeclarationParser,
    GenerationError,
    PipelineGenerator,
)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--strict-rename-all",
    is_flag=True,
    default=False,
    help="Fail on unknown RenameAll values instead of ignoring them",
)
@click.option(
    "--no-generation-comment",
    is_flag=True,
    default=False,
    help="Do not write the generation comment at the top of each header",
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(file_okay=False, resolve_path=True))
def genjson_codegen(config, verbose, strict_rename_all, no_generation_comment, path, output):
    """Generate GenJson serializer headers from the declarations in PATH.

    Headers are written to OUTPUT, or next to each source header when
    OUTPUT is omitted.
    """
    configure_logging(verbose=verbose)

    try:
        document = _load_json(path, DeclarationParseError)
        config = CodeGeneratorConfig.from_dict(_load_json(config, ConfigurationError)) if config else CodeGeneratorConfig()

        # CLI flags override the config file when set
        if strict_rename_all:
            config.strict_rename_all = True
        if no_generation_comment:
            config.add_generation_comment = False

        modules = DeclarationParser().parse(document)
        codegen = PipelineGenerator(config, command_line=reconstruct_command_line(genjson_codegen))
        paths = codegen.generate(modules, Path(output) if output else None)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    for p in paths:
        click.echo(str(p))


def _load_json(path: str, error_type: type[GenerationError]):
    """Load a JSON file, reporting malformed content as ``error_type``."""
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise error_type(f"{Path(path).name} is not valid JSON: {e}") from e
