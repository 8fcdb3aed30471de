"""
Instance validator with detailed error reporting.

Checks JSON documents against a compact schema. The schema is rendered to
JSON Schema (see SchemaNode.to_json_schema) and checked with jsonschema's
Draft 7 validator, so every error is collected, not just the first.

Usage:
    ```python
    from compact_schema.validation import validate

    result = validate('{"age": "old"}', "{age: number}")
    if not result.is_valid:
        for error in result.errors:
            print(f"{error.path}: {error.message}")
    ```
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from jsonschema import Draft7Validator

from compact_schema.schema.parser import ParserOptions, parse
from compact_schema.schema.types import SchemaNode

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """
    Represents a single validation error.

    Attributes:
        path: JSON path to the error location (e.g., ".address.city")
        message: Human-readable error message
        schema_path: Path in the JSON Schema that failed
        validator: Validator that failed (e.g., "type", "required")
        expected: What was expected
        actual: What was found
    """
    path: str
    message: str
    schema_path: str
    validator: str
    expected: Any
    actual: Any


@dataclass
class ValidationResult:
    """
    Result of validating JSON against a schema.

    Attributes:
        is_valid: Whether output is valid
        errors: List of validation errors (empty if valid)
        raw_output: Original output string
        parsed_output: Parsed JSON (None if invalid)
    """
    is_valid: bool
    errors: List[ValidationError]
    raw_output: str
    parsed_output: Optional[Any]


def validate(
    output: str,
    schema: Union[SchemaNode, str],
    options: Optional[ParserOptions] = None,
) -> ValidationResult:
    """
    Validate JSON output against a schema.

    Args:
        output: JSON string to validate
        schema: Parsed SchemaNode, or schema notation text to parse first
        options: Parser configuration used when schema is text

    Returns:
        ValidationResult: Validation result with errors if any

    Raises:
        ParseError: If schema is text and fails to parse

    Example:
        ```python
        result = validate('{"name": "Alice"}', "{name: string}")
        assert result.is_valid

        result = validate('{"age": 25}', "{name: string}")
        assert not result.is_valid
        ```
    """
    if isinstance(schema, str):
        schema = parse(schema, options)

    try:
        parsed = json.loads(output)
    except json.JSONDecodeError as e:
        return ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(
                    path="",
                    message=f"Invalid JSON: {e.msg}",
                    schema_path="",
                    validator="json",
                    expected="valid JSON",
                    actual=f"parse error at position {e.pos}"
                )
            ],
            raw_output=output,
            parsed_output=None
        )

    validator = Draft7Validator(schema.to_json_schema())
    errors = [_convert_jsonschema_error(error, parsed) for error in validator.iter_errors(parsed)]
    is_valid = len(errors) == 0

    logger.debug(f"Validation finished with {len(errors)} error(s)")

    return ValidationResult(
        is_valid=is_valid,
        errors=errors,
        raw_output=output,
        parsed_output=parsed if is_valid else None
    )


def _convert_jsonschema_error(error: Any, data: Any) -> ValidationError:
    """
    Convert a jsonschema ValidationError to our ValidationError.

    Args:
        error: jsonschema ValidationError
        data: The data being validated

    Returns:
        ValidationError: Our error representation
    """
    path = "." + ".".join(str(p) for p in error.path) if error.path else "root"

    # Walk to the value at the error location
    actual = data
    for key in error.path:
        if isinstance(actual, dict):
            actual = actual.get(key, "MISSING")
        elif isinstance(actual, list):
            try:
                actual = actual[int(key)]
            except (IndexError, ValueError):
                actual = "INVALID_INDEX"
        else:
            actual = "UNKNOWN"

    schema_path = "." + ".".join(str(p) for p in error.schema_path) if error.schema_path else "root"
    expected = error.schema.get(error.validator, "see schema")

    return ValidationError(
        path=path,
        message=error.message,
        schema_path=schema_path,
        validator=error.validator,
        expected=expected,
        actual=actual
    )


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format validation errors as human-readable string.

    Example output:
        Validation failed with 1 error(s):

          1. At .age: 'old' is not of type 'number'
             Expected: number
             Got: old
    """
    if not errors:
        return "No validation errors"

    lines = [f"Validation failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path}: {error.message}")
        lines.append(f"     Expected: {error.expected}")
        lines.append(f"     Got: {error.actual}")

    return "\n".join(lines)


def quick_validate(
    output: str,
    schema: Union[SchemaNode, str],
    options: Optional[ParserOptions] = None,
) -> bool:
    """Quick validation - just returns True/False."""
    return validate(output, schema, options).is_valid
