"""
High-level Python API for compact_schema.

This module provides the main user-facing parse functions.
"""

from compact_schema.errors import ParseError
from compact_schema.schema.parser import ParseResult, ParserOptions, parse, try_parse

# Re-export for convenience
__all__ = ["parse", "try_parse", "ParseError", "ParseResult", "ParserOptions"]
