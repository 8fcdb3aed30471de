"""
Compact schema parser - converts schema notation text into a SchemaNode tree.

This module is the main entry point for parsing. It handles:
    - Whitespace normalization (whitespace is never significant)
    - Brace-aware splitting of an object's property list
    - Key/value splitting of each property
    - Value shape dispatch: primitives, arrays, nested objects, rule annotations
    - Error chains that name every property on the path to a failure

Grammar by example:
    {
        name: string,                  primitive
        age: number<min:0>,            primitive, rule annotation discarded
        tags: string[],                array of primitive
        scores: number[]<max:10>,      array of primitive, annotation discarded
        address: {city: string},       nested object
        items: Array<{id: number}>     array of objects
    }

Usage:
    ```python
    from compact_schema import parse, try_parse

    schema = parse("{name: string, tags: string[]}")
    schema["tags"]  # ArrayType(items=PrimitiveType(kind=PrimitiveKind.STRING))

    result = try_parse("{n: int}")
    if not result.is_valid:
        print(result.error)
    ```
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from compact_schema.errors import ParseError
from compact_schema.schema.primitives import PRIMITIVE_NAMES, is_primitive, resolve_primitive
from compact_schema.schema.splitter import split_top_level
from compact_schema.schema.text import (
    DuplicateKeyPolicy,
    join,
    merge_properties,
    remove_whitespace,
    trim,
    trim_left,
)
from compact_schema.schema.types import (
    ArrayType,
    ObjectType,
    PrimitiveType,
    SchemaNode,
    ValueDescriptor,
)

logger = logging.getLogger(__name__)

_ARRAY_OF_OBJECTS_PREFIX = "Array<"
_ARRAY_SUFFIX = "[]"
_ARRAY_WITH_RULES_MARKER = "[]<"

NESTING_TOO_DEEP = "Schema is nested too deeply to parse"


@dataclass(frozen=True)
class ParserOptions:
    """
    Parser configuration.

    Attributes:
        duplicate_keys: How to merge an object that declares a key twice.
            LAST_WINS (default) keeps the last declaration, FIRST_WINS the
            first, ERROR fails the parse.
    """

    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS

    @classmethod
    def from_name(cls, duplicate_keys: str) -> "ParserOptions":
        """
        Build options from a duplicate key policy name ("last", "first", "error").

        Raises:
            ValueError: If the name is not a known policy
        """
        try:
            policy = DuplicateKeyPolicy(duplicate_keys.lower())
        except ValueError:
            valid = join((p.value for p in DuplicateKeyPolicy), ", ")
            raise ValueError(f"Unknown duplicate key policy: {duplicate_keys} (expected one of: {valid})")
        return cls(duplicate_keys=policy)


DEFAULT_OPTIONS = ParserOptions()


@dataclass
class ParseResult:
    """
    Outcome of try_parse: exactly one of `schema` and `error` is set.

    Attributes:
        schema: Parsed schema on success
        error: Error chain on failure
    """

    schema: Optional[SchemaNode] = None
    error: Optional[ParseError] = None

    def __post_init__(self):
        if (self.schema is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of schema or error")

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def messages(self) -> Tuple[str, ...]:
        """Error chain messages, empty on success."""
        return self.error.messages if self.error is not None else ()

    def unwrap(self) -> SchemaNode:
        """Return the schema, or raise the stored ParseError."""
        if self.error is not None:
            raise self.error
        return self.schema


def parse(text: str, options: Optional[ParserOptions] = None) -> SchemaNode:
    """
    Parse compact schema notation into a SchemaNode tree.

    This is the main entry point. Whitespace is removed first, then the whole
    text must be one `{...}` object.

    Args:
        text: Schema text, e.g. "{name: string, tags: string[]}"
        options: Parser configuration (defaults to DEFAULT_OPTIONS)

    Returns:
        SchemaNode: Root of the parsed schema

    Raises:
        ParseError: If the text is not valid notation, or nests objects deeper
            than the interpreter recursion limit allows. Nothing is returned
            alongside the error.

    Example:
        ```python
        schema = parse("{addr: {city: string}}")
        schema["addr"].schema["city"]  # PrimitiveType(kind=PrimitiveKind.STRING)
        ```
    """
    options = options or DEFAULT_OPTIONS
    normalized = normalize(text)

    try:
        schema = parse_object(normalized, options)
    except ParseError as e:
        logger.info(f"Schema parse failed: {e.innermost}")
        raise
    except RecursionError:
        logger.info("Schema parse failed: nesting exceeds the recursion limit")
        raise ParseError([NESTING_TOO_DEEP]) from None

    logger.info(f"Parsed schema with {len(schema)} top-level properties")
    return schema


def try_parse(text: str, options: Optional[ParserOptions] = None) -> ParseResult:
    """
    Parse like `parse`, but return a ParseResult instead of raising.

    Example:
        ```python
        result = try_parse("notanobject")
        result.is_valid   # False
        result.messages   # ("Expected {...}, got 'notanobject'",)
        ```
    """
    try:
        return ParseResult(schema=parse(text, options))
    except ParseError as e:
        return ParseResult(error=e)


def normalize(text: str) -> str:
    """Remove every whitespace character from schema text."""
    return remove_whitespace(text)


def parse_object(text: str, options: ParserOptions = DEFAULT_OPTIONS) -> SchemaNode:
    """
    Parse one normalized `{...}` block into a SchemaNode.

    The first property that fails aborts the whole object.

    Args:
        text: Normalized object text including the outer braces
        options: Parser configuration

    Returns:
        SchemaNode: Parsed object

    Raises:
        ParseError: If text is not wrapped in braces or any property fails
    """
    if not (len(text) >= 2 and text.startswith("{") and text.endswith("}")):
        raise ParseError([f"Expected {{...}}, got '{text}'"])

    segments = split_top_level(text[1:-1])
    logger.debug(f"Parsing object with {len(segments)} properties: {text}")

    entries: List[Tuple[str, ValueDescriptor]] = []
    for segment in segments:
        segment = trim(segment)
        try:
            entries.append(_parse_entry(segment, options))
        except ParseError as e:
            raise e.wrap(f"Failed to parse property '{segment}'") from e

    return SchemaNode(properties=merge_properties(entries, options.duplicate_keys))


def parse_property(text: str) -> Tuple[str, str]:
    """
    Split a property at its first colon.

    Args:
        text: Property text, e.g. "name:string"

    Returns:
        Tuple of (key, raw_value); the value has leading whitespace trimmed

    Raises:
        ParseError: If there is no colon
    """
    key, separator, rest = text.partition(":")
    if not separator:
        raise ParseError([f"Expected key-value property, got '{text}'"])
    return key, trim_left(rest)


def classify_value(raw: str, options: ParserOptions = DEFAULT_OPTIONS) -> ValueDescriptor:
    """
    Decide which value shape `raw` denotes and parse it.

    Shapes are tried in a fixed order, first match wins:
        1. Array<{...}>   array of objects
        2. {...}          nested object
        3. Token[]        array of primitive
        4. Token[]<...>   array of primitive, rule annotation discarded
        5. Token<...>     primitive, rule annotation discarded
        6. Token          primitive

    Args:
        raw: Value text after the property colon
        options: Parser configuration, passed down to nested objects

    Returns:
        ValueDescriptor: Parsed value type

    Raises:
        ParseError: If a nested object fails or the token is not a primitive
    """
    if raw.startswith(_ARRAY_OF_OBJECTS_PREFIX + "{") and raw.endswith("}>"):
        inner = raw[len(_ARRAY_OF_OBJECTS_PREFIX):-1]
        return ArrayType(items=ObjectType(schema=parse_object(inner, options)))

    if len(raw) >= 2 and raw.startswith("{") and raw.endswith("}"):
        return ObjectType(schema=parse_object(raw, options))

    if raw.endswith(_ARRAY_SUFFIX):
        return ArrayType(items=parse_token(raw[:-len(_ARRAY_SUFFIX)]))

    if _ARRAY_WITH_RULES_MARKER in raw and raw.endswith(">"):
        token = raw.split(_ARRAY_WITH_RULES_MARKER, 1)[0]
        return ArrayType(items=parse_token(token))

    if "<" in raw and raw.endswith(">"):
        return parse_token(raw.split("<", 1)[0])

    return parse_token(raw)


def parse_token(token: str) -> PrimitiveType:
    """
    Resolve a bare token to a primitive type.

    Raises:
        ParseError: If the token is not a recognized primitive name
    """
    if not is_primitive(token):
        raise ParseError([f"Expected one of [{join(PRIMITIVE_NAMES, ', ')}] but got '{token}'"])
    return PrimitiveType(kind=resolve_primitive(token))


def _parse_entry(segment: str, options: ParserOptions) -> Tuple[str, ValueDescriptor]:
    key, raw_value = parse_property(segment)
    try:
        value = classify_value(raw_value, options)
    except ParseError as e:
        raise e.wrap(f"Failed to parse value of property '{key}'") from e
    return key, value
