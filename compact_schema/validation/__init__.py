"""
Validation layer module.

This module checks JSON documents against compact schemas and formats parse
and validation errors for people.

Components:
    - validator: Main validation interface using jsonschema
    - error_formatter: Convert errors to human-readable messages

Validation Flow:
    1. Parse schema notation (if given as text)
    2. Parse the document as JSON
    3. Validate against the schema's JSON Schema rendering
    4. Collect all validation errors (not just first error)

Example:
    ```python
    from compact_schema.validation import validate, format_validation_errors

    result = validate('{"tags": "x"}', "{tags: string[]}")
    if not result.is_valid:
        print(format_validation_errors(result.errors))
    ```
"""

from compact_schema.validation.validator import (
    validate,
    quick_validate,
    ValidationResult,
    ValidationError,
    format_validation_errors
)
from compact_schema.validation.error_formatter import (
    format_error_with_context,
    format_parse_error,
    suggest_fix,
)

__all__ = [
    "validate",
    "quick_validate",
    "ValidationResult",
    "ValidationError",
    "format_validation_errors",
    "format_error_with_context",
    "format_parse_error",
    "suggest_fix",
]
