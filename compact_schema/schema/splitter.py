"""
Top-level property splitter.

Given the interior of one `{...}` block, cut it into property substrings at
commas that are not nested inside an inner `{...}`:

    "a:{x:number,y:number},b:string"  ->  ["a:{x:number,y:number}", "b:string"]

Only braces affect nesting. Unbalanced braces are not reported here; the
mis-segmented substring fails later when it is parsed as a property.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


def split_top_level(content: str) -> List[str]:
    """
    Split object content into property substrings at depth-zero commas.

    Args:
        content: Text between the outer braces (braces already stripped)

    Returns:
        List[str]: Property substrings in order; empty list for empty content
    """
    if not content:
        return []

    segments: List[str] = []
    depth = 0
    start = 0

    for index, char in enumerate(content):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            segments.append(content[start:index])
            start = index + 1

    segments.append(content[start:])

    if depth != 0:
        logger.debug(f"Unbalanced braces (depth {depth}) while splitting {content!r}")

    return segments
