"""
Main CLI entry point using Typer.

This module defines the command-line interface for compact_schema using Typer.
It provides two commands: parse and validate.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from compact_schema.errors import ParseError
from compact_schema.schema.parser import ParserOptions
from compact_schema.utils.logging import setup_logging

from .commands import load_schema_text, parse_command, validate_command
from .display import print_error, print_parse_error


# Create Typer app
app = typer.Typer(
    name="compact-schema",
    help="compact-schema - Parse compact schema notation",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("parse")
def parse(
    schema: Annotated[
        Optional[str],
        typer.Argument(help="Schema notation, e.g. '{name: string}'")
    ] = None,
    schema_file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Read schema notation from a file", file_okay=True, dir_okay=False)
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output: tree, json-schema, notation or regex")
    ] = "tree",
    duplicate_keys: Annotated[
        str,
        typer.Option("--duplicate-keys", help="Duplicate property policy: last, first or error")
    ] = "last",
) -> None:
    """
    Parse schema notation and print the result.

    Example:
        compact-schema parse "{name: string, tags: string[]}" --format json-schema
    """
    try:
        parse_command(
            schema_text=load_schema_text(schema, schema_file),
            output_format=output_format,
            options=ParserOptions.from_name(duplicate_keys)
        )
    except ParseError as e:
        print_parse_error(e)
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("validate")
def validate(
    json_file: Annotated[
        Path,
        typer.Option("--json", "-j", help="Path to JSON file to validate", file_okay=True, dir_okay=False)
    ],
    schema: Annotated[
        Optional[str],
        typer.Argument(help="Schema notation, e.g. '{name: string}'")
    ] = None,
    schema_file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Read schema notation from a file", file_okay=True, dir_okay=False)
    ] = None,
    duplicate_keys: Annotated[
        str,
        typer.Option("--duplicate-keys", help="Duplicate property policy: last, first or error")
    ] = "last",
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the parsed schema")
    ] = False,
) -> None:
    """
    Validate a JSON document against a schema.

    Example:
        compact-schema validate "{name: string}" --json user.json
    """
    try:
        validate_command(
            json_path=json_file,
            schema_text=load_schema_text(schema, schema_file),
            options=ParserOptions.from_name(duplicate_keys),
            show_schema=show_schema
        )
    except ParseError as e:
        print_parse_error(e)
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    compact-schema - Parse compact schema notation.

    Turns '{name: string, tags: string[]}' style notation into typed schemas.
    """
    if version:
        from compact_schema import __version__
        typer.echo(f"compact-schema version {__version__}")
        raise typer.Exit()

    if verbose:
        setup_logging("DEBUG")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
