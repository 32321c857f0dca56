"""CLI entry point using Typer."""

import logging
from typing import List, Optional

import typer

from . import handler, logger
from .config import GenerationConfig, default_cache_dir
from .exceptions import (
    ConfigurationError,
    DuplicateIdentifierError,
    SchemaLookupError,
    SourceUnavailableError,
)
from .schema_to_code import SchemaToPythonConverter

EXIT_RESOLUTION_ERROR = 1
EXIT_UNAVAILABLE = 69
EXIT_CANT_CREATE = 73
EXIT_CONFIG = 78

app = typer.Typer(
    name="ontotraits",
    help="Generates Python traits and classes from schema.org schemas.",
    add_completion=False,
)


def _split(values: Optional[List[str]]) -> List[str]:
    """Accept both repeated options and comma separated lists."""
    names = []
    for value in values or []:
        names.extend(v.strip() for v in value.split(","))
    return [n for n in names if n]


@app.callback()
def main():
    """Generates Python traits and classes from schema.org schemas."""


@app.command()
def generate(
    version: str = typer.Argument(
        "latest",
        help="The schema.org version to use when generating files",
    ),
    schemas: Optional[List[str]] = typer.Option(
        None,
        "--schemas",
        "-s",
        help="Schemas to generate, e.g. Book,Movie (repeatable)",
    ),
    namespace: Optional[str] = typer.Option(
        None,
        "--namespace",
        "-n",
        help="The Python package the generated files are imported from",
    ),
    folder: Optional[str] = typer.Option(
        None,
        "--folder",
        "-f",
        help="The target folder for generated classes and traits",
    ),
    remove_old: bool = typer.Option(
        False,
        "--remove-old",
        help="Remove old files before re-generating",
    ),
    cache_dir: Optional[str] = typer.Option(
        None,
        "--cache-dir",
        help="Where downloaded snapshots are cached",
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        help="A local snapshot (JSON-LD, Turtle, ...) used instead of downloading one",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Generate the requested schemas along with all required traits."""
    if verbose:
        handler.setLevel(logging.DEBUG)

    config = GenerationConfig(
        schemas=_split(schemas),
        namespace=namespace,
        folder=folder,
        version=version,
        remove_old=remove_old,
        cache_dir=cache_dir or default_cache_dir(),
        source=source,
    )
    try:
        converter = SchemaToPythonConverter(config)
        converter.save_to_folder()
    except ConfigurationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        typer.echo("Use --schemas, --namespace and --folder to configure the generation.", err=True)
        raise typer.Exit(code=EXIT_CONFIG)
    except SourceUnavailableError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_UNAVAILABLE)
    except OSError as e:
        typer.secho(f"Error: cannot write to {folder}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_CANT_CREATE)
    except (SchemaLookupError, DuplicateIdentifierError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_RESOLUTION_ERROR)

    suggestions = converter.result.unresolved_suggestions
    if suggestions:
        typer.echo(
            "You may want to generate the following classes too for a better IDE experience:"
        )
        typer.echo(", ".join(suggestions))
    logger.debug(f"[cli]: generated {len(converter.result.classes)} traits")


if __name__ == "__main__":
    app()
