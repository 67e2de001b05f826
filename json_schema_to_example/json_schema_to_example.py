import json
import logging
import sys
from pathlib import Path

import click

from .pipeline import (
    AtomicWriter,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    ParseError,
    SchemaGenerationError,
    SchemaGenerator,
)
from .render import render_html, render_json

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so they never mix with the generated output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def load_config(path: str) -> GeneratorConfig:
    """Read a generator config file, reporting bad content as a CLI error."""
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise click.ClickException(f"Invalid config file {path}: expected a JSON object")
    return GeneratorConfig.from_dict(data)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "-f", "output_format", default="json", type=click.Choice(["json", "html"]))
@click.option("--indent", default=2, type=int, show_default=True)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite the output file if it already exists",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr")
@click.argument("path", type=click.File("r", encoding="utf-8"))
@click.argument("output", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
@click.pass_context
def json_schema_to_example(ctx, config, output_format, indent, force, verbose, path, output):
    """Generate a random example object from the JSON schema in PATH ("-" for stdin)."""
    configure_logging(verbose)

    if config is not None:
        config = load_config(config)
        logger.debug("Loaded generator config from %s", ctx.params["config"])
    else:
        config = GeneratorConfig()

    output_config = OutputConfig(
        mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS,
        indent=indent,
    )

    schema_text = path.read()
    logger.info("Generating example from %s", path.name)

    error = None
    try:
        value = SchemaGenerator(config).generate_object_from_json_schema(schema_text)
    except (ParseError, SchemaGenerationError) as e:
        logger.info("Generation failed: %s", e)
        if output_format != "html":
            raise click.ClickException(str(e)) from e
        # The page keeps showing an empty result next to the error
        value = {}
        error = str(e)

    if output_format == "html":
        out = render_html(schema_text, value, error, indent=output_config.indent)
    else:
        out = render_json(value, indent=output_config.indent)

    if output is None:
        click.echo(out, nl=False)
    else:
        try:
            AtomicWriter().write_with_mode(Path(output), out, output_config.mode, output_format)
        except FileExistsError as e:
            raise click.ClickException(str(e)) from e
        logger.info("Wrote %s output to %s", output_format, output)

    if error is not None:
        ctx.exit(1)
