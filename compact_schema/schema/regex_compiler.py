"""
Regex compiler - convert parsed schemas to regex patterns matching JSON instances.

The actual regex generation logic is implemented in each descriptor's
to_regex() method (see types.py). This module provides the convenience entry
point, optimization, and matching of JSON instances against a schema.

Usage:
    ```python
    import re
    from compact_schema.schema.regex_compiler import compile_to_regex

    regex = compile_to_regex("{name: string, tags: string[]}")
    assert re.fullmatch(regex, '{"name": "Ada", "tags": ["x", "y"]}')
    ```

Regex Strategy:
    - Objects: \\{"key1":value1,"key2":value2\\} in declaration order
    - Arrays: \\[item,item\\]
    - Strings: "[^"\\\\]*"
    - Numbers: -?(0|[1-9][0-9]*)(\\.[0-9]+)?([eE][+-]?[0-9]+)?
    - Booleans: (true|false)

Limitations:
    - Doesn't handle escaped quotes in strings
    - Object properties must appear in declaration order
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union

from compact_schema.schema.parser import ParserOptions, parse
from compact_schema.schema.types import SchemaNode

logger = logging.getLogger(__name__)


def compile_to_regex(
    schema: Union[SchemaNode, str],
    optimize: bool = True,
    options: Optional[ParserOptions] = None,
) -> str:
    """
    Compile a schema to a regular expression pattern.

    Args:
        schema: Parsed SchemaNode, or schema notation text to parse first
        optimize: If True, apply regex optimizations (default: True)
        options: Parser configuration used when schema is text

    Returns:
        str: Regular expression pattern matching JSON instances

    Raises:
        ParseError: If schema is text and fails to parse
    """
    if isinstance(schema, str):
        schema = parse(schema, options)

    regex = schema.to_regex()

    if optimize:
        regex = optimize_regex(regex)

    return regex


def optimize_regex(regex: str) -> str:
    """
    Apply optimizations to make regex shorter.

    Optimizations:
    - Reduce redundant whitespace patterns: \\s*\\s* -> \\s*

    These are conservative and never change what the pattern matches.
    """
    regex = re.sub(r'(\\s\*){2,}', r'\\s*', regex)
    return regex


@dataclass
class InstanceMatches:
    """
    Result of matching JSON instances against a schema's regex.

    Attributes:
        pattern: The compiled regex pattern
        matched: Instance texts the pattern fully matches
        unmatched: Instance texts it does not match
    """
    pattern: str
    matched: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)

    @property
    def all_matched(self) -> bool:
        return not self.unmatched


def match_instances(
    schema: Union[SchemaNode, str],
    instances: Iterable[Any],
    options: Optional[ParserOptions] = None,
) -> InstanceMatches:
    """
    Match JSON instances against the regex compiled from a schema.

    Args:
        schema: Parsed SchemaNode, or schema notation text to parse first
        instances: JSON texts, or Python values that are serialized with
            json.dumps before matching
        options: Parser configuration used when schema is text

    Returns:
        InstanceMatches: Instance texts split into matched and unmatched

    Example:
        ```python
        result = match_instances("{ok: boolean}", [{"ok": True}, '{"ok": 1}'])
        result.matched    # ['{"ok": true}']
        result.unmatched  # ['{"ok": 1}']
        ```
    """
    regex = compile_to_regex(schema, options=options)
    pattern = re.compile(regex)
    result = InstanceMatches(pattern=regex)

    for instance in instances:
        text = instance if isinstance(instance, str) else json.dumps(instance, ensure_ascii=False)
        if pattern.fullmatch(text):
            result.matched.append(text)
        else:
            result.unmatched.append(text)

    logger.debug(f"Matched {len(result.matched)} of {len(result.matched) + len(result.unmatched)} instances")
    return result
