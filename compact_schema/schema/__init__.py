"""
Schema parsing and processing module.

This module parses compact schema notation into SchemaNode trees and renders
those trees as JSON Schema, regex patterns and pydantic models.

Components:
    - types: SchemaNode and value descriptors (PrimitiveType, ObjectType, ArrayType)
    - primitives: The recognized primitive type names
    - parser: Main entry point for schema parsing
    - splitter: Brace-aware splitting of property lists
    - text: Generic text and merge helpers
    - regex_compiler: Convert schemas to regex patterns matching JSON instances
    - pydantic_adapter: Generate pydantic models from schemas

Example:
    ```python
    from compact_schema.schema import parse

    schema = parse("{name: string, tags: string[], address: {city: string}}")
    json_schema = schema.to_json_schema()
    ```
"""

from compact_schema.schema.parser import (
    DEFAULT_OPTIONS,
    ParseResult,
    ParserOptions,
    classify_value,
    normalize,
    parse,
    parse_object,
    parse_property,
    try_parse,
)
from compact_schema.schema.primitives import PRIMITIVE_NAMES, PrimitiveKind
from compact_schema.schema.pydantic_adapter import to_pydantic_model
from compact_schema.schema.regex_compiler import InstanceMatches, compile_to_regex, match_instances
from compact_schema.schema.splitter import split_top_level
from compact_schema.schema.text import DuplicateKeyPolicy
from compact_schema.schema.types import (
    ArrayType,
    ObjectType,
    PrimitiveType,
    SchemaNode,
    ValueDescriptor,
)

__all__ = [
    "parse",
    "try_parse",
    "normalize",
    "parse_object",
    "parse_property",
    "classify_value",
    "split_top_level",
    "ParseResult",
    "ParserOptions",
    "DEFAULT_OPTIONS",
    "DuplicateKeyPolicy",
    "PRIMITIVE_NAMES",
    "PrimitiveKind",
    "SchemaNode",
    "ValueDescriptor",
    "PrimitiveType",
    "ObjectType",
    "ArrayType",
    "compile_to_regex",
    "match_instances",
    "InstanceMatches",
    "to_pydantic_model",
]
