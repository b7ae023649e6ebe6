import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any

import rich_click as click
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError
from pydantic import ValidationError
from rich.console import Console
from rich.traceback import install

from graphql2jsonschema import __version__, log
from graphql2jsonschema.config import ConversionOptions, load_conversion_options
from graphql2jsonschema.converter import from_introspection
from graphql2jsonschema.errors import ConversionError
from graphql2jsonschema.introspection import introspect_sdl, load_introspection

console = Console()


introspection_option = click.option(
    "--introspection",
    "-i",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file holding a GraphQL introspection query result.",
)


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    multiple=True,
    help="GraphQL SDL file or directory to introspect. Can be specified multiple times.",
)


config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing conversion options",
)


keep_internals_option = click.option(
    "--keep-internals",
    is_flag=True,
    default=False,
    help="Keep GraphQL introspection meta types (names starting with '__') in the definitions",
)


def load_input(introspection: Path | None, schemas: tuple[Path, ...]) -> dict[str, Any]:
    """Load the introspection result from a JSON file or by introspecting SDL files."""
    if bool(introspection) == bool(schemas):
        raise click.UsageError("Provide exactly one of --introspection or --schema.")
    if introspection:
        try:
            return load_introspection(introspection)
        except (ValueError, TypeError) as e:
            raise click.BadParameter(str(e), param_hint="--introspection") from e
    try:
        return introspect_sdl(list(schemas))
    except (GraphQLError, GraphQLFileSyntaxError, TypeError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--schema") from e


def resolve_options(config: Path | None, keep_internals: bool) -> ConversionOptions:
    try:
        options = load_conversion_options(config)
    except (TypeError, ValidationError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e
    if keep_internals:
        options = options.model_copy(update={"ignore_internals": False})
    return options


def convert_or_exit(introspection: dict[str, Any], options: ConversionOptions) -> dict[str, Any]:
    try:
        return from_introspection(introspection, options)
    except ConversionError as e:
        log.error(f"Conversion failed: {e}")
        sys.exit(1)


@click.group(context_settings={"auto_envvar_prefix": "graphql2jsonschema"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@cli.command
@introspection_option
@schema_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Output file, the JSON Schema is printed to stdout when omitted",
)
@config_option
@keep_internals_option
def convert(
    introspection: Path | None,
    schemas: tuple[Path, ...],
    output: Path | None,
    config: Path | None,
    keep_internals: bool,
) -> None:
    """Generate a JSON Schema from a GraphQL introspection result."""
    options = resolve_options(config, keep_internals)
    json_schema = convert_or_exit(load_input(introspection, schemas), options)
    result = json.dumps(json_schema, indent=2)

    if output is None:
        click.echo(result)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    _ = output.write_text(result)
    log.info(f"Wrote JSON Schema to {output}")


@cli.command
@introspection_option
@schema_option
@config_option
@keep_internals_option
def stats(
    introspection: Path | None,
    schemas: tuple[Path, ...],
    config: Path | None,
    keep_internals: bool,
) -> None:
    """Show what a conversion produces: root operations and definitions per JSON Schema shape."""
    options = resolve_options(config, keep_internals)
    json_schema = convert_or_exit(load_input(introspection, schemas), options)

    shapes: Counter[str] = Counter()
    for definition in json_schema["definitions"].values():
        if "anyOf" in definition:
            shapes["enum"] += 1
        elif "properties" in definition:
            shapes["object"] += 1
        elif definition.get("type") == "object":
            shapes["generic_object"] += 1
        else:
            shapes["scalar"] += 1

    summary = {
        "root_operations": {
            name: len(definition["properties"]) for name, definition in json_schema["properties"].items()
        },
        "definitions": len(json_schema["definitions"]),
        "definition_shapes": dict(sorted(shapes.items())),
    }

    console.rule("[bold blue]JSON Schema Summary")
    console.print_json(json.dumps(summary, indent=2))


if __name__ == "__main__":
    cli()
