"""
CLI command implementations.

This module contains the business logic for each CLI command:
- parse: Parse schema notation and show the result
- validate: Validate a JSON document against a schema
"""

import json
import logging
from pathlib import Path
from typing import Optional

from compact_schema.schema.parser import ParserOptions, parse
from compact_schema.schema.regex_compiler import compile_to_regex
from compact_schema.validation.validator import validate

from .display import (
    print_header,
    print_success,
    print_error,
    print_info,
    print_json,
    print_plain,
    print_schema_tree,
    print_validation_errors,
    print_separator,
    console
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("tree", "json-schema", "notation", "regex")


def load_schema_text(schema: Optional[str], schema_path: Optional[Path]) -> str:
    """
    Get schema notation from an inline argument or a file.

    Args:
        schema: Inline schema text
        schema_path: Path to a file holding schema text

    Returns:
        Schema notation text

    Raises:
        ValueError: If both or neither are given, or the file doesn't exist
    """
    if (schema is None) == (schema_path is None):
        raise ValueError("Provide the schema either inline or with --file, not both")

    if schema_path is None:
        return schema

    if not schema_path.exists():
        raise ValueError(f"Schema file not found: {schema_path}")

    logger.debug(f"Reading schema from {schema_path}")
    return schema_path.read_text()


def parse_command(
    schema_text: str,
    output_format: str,
    options: ParserOptions
) -> None:
    """
    Execute the parse command.

    Args:
        schema_text: Schema notation
        output_format: One of OUTPUT_FORMATS
        options: Parser configuration

    Raises:
        ParseError: If the schema does not parse
        ValueError: If output_format is unknown
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown format: {output_format} (expected one of: {', '.join(OUTPUT_FORMATS)})")

    schema = parse(schema_text, options)

    if output_format == "tree":
        print_schema_tree(schema)
    elif output_format == "json-schema":
        print_json(schema.to_json_schema())
    elif output_format == "notation":
        print_plain(schema.to_notation())
    else:
        print_plain(compile_to_regex(schema))


def validate_command(
    json_path: Path,
    schema_text: str,
    options: ParserOptions,
    show_schema: bool
) -> None:
    """
    Execute the validate command.

    Args:
        json_path: Path to JSON file to validate
        schema_text: Schema notation
        options: Parser configuration
        show_schema: Whether to display the parsed schema

    Raises:
        ParseError: If the schema does not parse
    """
    print_header("compact-schema - Validate JSON")

    schema = parse(schema_text, options)
    print_success(f"Parsed schema with {len(schema)} top-level properties")

    if show_schema:
        print_schema_tree(schema)

    if not json_path.exists():
        print_error(f"JSON file not found: {json_path}")
        raise SystemExit(1)

    output = json_path.read_text()

    print_separator()
    print_info("Validating...")

    result = validate(output, schema)

    console.print()
    if result.is_valid:
        print_success("Validation passed!")
        print_json(json.dumps(result.parsed_output, indent=2), title="Input JSON")
    else:
        print_error("Validation failed")
        print_validation_errors(result.errors)
        raise SystemExit(1)
