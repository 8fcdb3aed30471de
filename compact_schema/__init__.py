"""
compact_schema: Parse compact schema notation into typed schema trees

compact_schema turns a small embedded schema notation into a structured,
strongly typed schema representation, or fails with a chained diagnostic
naming every property on the path to the problem.

Key Features:
    - Nested objects, arrays of primitives, arrays of objects
    - Angle-bracket rule annotations accepted and ignored
    - Whitespace-insensitive input
    - Multi-level error chains
    - Rendering to JSON Schema, regex patterns and pydantic models

Quick Start:
    ```python
    from compact_schema import parse, ParseError

    schema = parse("{name: string, tags: string[], address: {city: string}}")
    print(schema.to_json_schema())

    try:
        parse("{n: int}")
    except ParseError as e:
        print(e)
        # Failed to parse property 'n:int'
        #   Failed to parse value of property 'n'
        #     Expected one of [string, number, boolean] but got 'int'
    ```

Architecture:
    1. Normalizer: Remove whitespace
    2. Splitter: Split an object's properties at top-level commas
    3. Property Parser: Split each property into key and value text
    4. Value Classifier: Dispatch on value shape, recursing into nested objects
    5. Object Parser: Merge parsed properties into one SchemaNode
"""

__version__ = "0.1.0"

# Main API exports - these are the primary user-facing names
from compact_schema.api import ParseError, ParseResult, ParserOptions, parse, try_parse  # noqa: F401
from compact_schema.schema.types import (  # noqa: F401
    ArrayType,
    ObjectType,
    PrimitiveType,
    SchemaNode,
    ValueDescriptor,
)
from compact_schema.schema.primitives import PrimitiveKind  # noqa: F401

__all__ = [
    "parse",
    "try_parse",
    "ParseError",
    "ParseResult",
    "ParserOptions",
    "SchemaNode",
    "ValueDescriptor",
    "PrimitiveType",
    "ObjectType",
    "ArrayType",
    "PrimitiveKind",
]
