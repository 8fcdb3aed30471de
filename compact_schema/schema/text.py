"""
Generic text helpers shared by the parser components.

None of these know anything about the schema grammar; they are small,
stateless string and mapping utilities.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Tuple, TypeVar

from compact_schema.errors import ParseError

V = TypeVar("V")

_WHITESPACE = re.compile(r"\s+")


class DuplicateKeyPolicy(str, Enum):
    """What to do when one object declares the same property twice."""

    LAST_WINS = "last"
    FIRST_WINS = "first"
    ERROR = "error"


def remove_whitespace(text: str) -> str:
    """Strip every whitespace character, including ones inside tokens."""
    return _WHITESPACE.sub("", text)


def trim(text: str) -> str:
    return text.strip()


def trim_left(text: str) -> str:
    return text.lstrip()


def join(items: Iterable[str], separator: str) -> str:
    return separator.join(items)


def merge_properties(
    pairs: Iterable[Tuple[str, V]],
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
) -> Dict[str, V]:
    """
    Merge a sequence of single-key (key, value) pairs into one mapping.

    Args:
        pairs: Ordered (key, value) pairs
        policy: Duplicate key handling

    Returns:
        Dict: Merged mapping, keys in first-seen order

    Raises:
        ParseError: If a key repeats and policy is ERROR
    """
    merged: Dict[str, V] = {}
    for key, value in pairs:
        if key in merged:
            if policy == DuplicateKeyPolicy.ERROR:
                raise ParseError([f"Duplicate property '{key}'"])
            if policy == DuplicateKeyPolicy.FIRST_WINS:
                continue
        merged[key] = value
    return merged
