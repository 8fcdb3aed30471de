"""
Error formatter - convert parse and validation errors to user-friendly messages.
"""

from compact_schema.errors import ParseError
from compact_schema.validation.validator import ValidationError


def format_parse_error(error: ParseError) -> str:
    """
    Format a parse error chain as a numbered list, outermost context first.

    Example output:
        Schema parse failed:
          1. Failed to parse property 'n:int'
          2. Failed to parse value of property 'n'
          3. Expected one of [string, number, boolean] but got 'int'
    """
    lines = ["Schema parse failed:"]
    for i, message in enumerate(error.messages, 1):
        lines.append(f"  {i}. {message}")
    return "\n".join(lines)


def format_error_with_context(error: ValidationError) -> str:
    """
    Format one validation error with its location and expectation.

    Args:
        error: Validation error

    Returns:
        str: Multi-line description
    """
    lines = [
        f"❌ Validation Error at {error.path}",
        f"   Problem: {error.message}",
        f"   Expected: {error.expected}",
        f"   Got: {error.actual}",
    ]

    if error.validator:
        lines.append(f"   Validator: {error.validator}")

    return "\n".join(lines)


def suggest_fix(error: ValidationError) -> str:
    """
    Suggest how to fix a validation error.

    Args:
        error: Validation error

    Returns:
        str: Suggested fix
    """
    if error.validator == "required":
        return f"Add the missing field to the object at {error.path}"

    elif error.validator == "type":
        return f"Change {error.path} to type {error.expected}"

    elif error.validator == "additionalProperties":
        return f"Remove fields not declared in the schema from {error.path}"

    elif error.validator == "json":
        return "Fix the JSON syntax"

    else:
        return "Check the schema requirements"
