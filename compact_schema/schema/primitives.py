"""
Primitive type vocabulary for the compact schema notation.

The notation recognizes exactly three primitive names. Order matters: it is
the order used when listing the names in error messages.
"""

from enum import Enum
from typing import Dict, Tuple


class PrimitiveKind(str, Enum):
    """Runtime value kind of a primitive type name."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


PRIMITIVE_NAMES: Tuple[str, ...] = tuple(kind.value for kind in PrimitiveKind)

_PYTHON_TYPES: Dict[PrimitiveKind, type] = {
    PrimitiveKind.STRING: str,
    PrimitiveKind.NUMBER: float,
    PrimitiveKind.BOOLEAN: bool,
}


def is_primitive(name: str) -> bool:
    """Check whether `name` is a recognized primitive type name."""
    return name in PRIMITIVE_NAMES


def resolve_primitive(name: str) -> PrimitiveKind:
    """
    Map a primitive type name to its kind.

    Args:
        name: Primitive name, e.g. "string"

    Returns:
        PrimitiveKind: The matching kind

    Raises:
        KeyError: If name is not a recognized primitive
    """
    if not is_primitive(name):
        raise KeyError(name)
    return PrimitiveKind(name)


def python_type(kind: PrimitiveKind) -> type:
    """Python type that values of this primitive kind take at runtime."""
    return _PYTHON_TYPES[kind]
