"""
Pydantic adapter - generate pydantic models from parsed schemas.

Every property becomes a required field. Nested objects become nested models
named after their parent and key, arrays become List[...], primitives map to
str / float / bool. Unknown keys are rejected and values are validated in
strict mode (no true -> 1.0 or 1 -> True coercion), matching the JSON Schema
rendering (additionalProperties: false).

Usage:
    ```python
    from compact_schema.schema.pydantic_adapter import to_pydantic_model

    User = to_pydantic_model("{name: string, address: {city: string}}", "User")
    user = User.model_validate({"name": "Ada", "address": {"city": "London"}})
    user.address.city  # "London"
    ```
"""

import keyword
import logging
import re
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, create_model

from compact_schema.schema.parser import ParserOptions, parse
from compact_schema.schema.primitives import python_type
from compact_schema.schema.types import ArrayType, ObjectType, PrimitiveType, SchemaNode, ValueDescriptor

logger = logging.getLogger(__name__)

_WORD = re.compile(r"[A-Za-z0-9]+")


def to_pydantic_model(
    schema: Union[SchemaNode, str],
    model_name: str = "Schema",
    options: Optional[ParserOptions] = None,
) -> Type[BaseModel]:
    """
    Build a pydantic model class for a schema.

    Args:
        schema: Parsed SchemaNode, or schema notation text to parse first
        model_name: Class name of the generated root model
        options: Parser configuration used when schema is text

    Returns:
        Type[BaseModel]: Generated model class

    Raises:
        ParseError: If schema is text and fails to parse
    """
    if isinstance(schema, str):
        schema = parse(schema, options)

    fields: Dict[str, Tuple[Any, Any]] = {}
    for key, descriptor in schema.items():
        annotation = python_annotation(descriptor, f"{model_name}{_pascal_case(key)}")
        name = _field_name(key)
        while name in fields:
            name += "_"
        fields[name] = (annotation, Field(..., alias=key))

    logger.debug(f"Creating model {model_name} with fields {list(fields)}")
    return create_model(
        model_name,
        __config__=ConfigDict(extra="forbid", strict=True),
        **fields,
    )


def python_annotation(descriptor: ValueDescriptor, name: str) -> Any:
    """
    Python type annotation for a value descriptor.

    Args:
        descriptor: Parsed value type
        name: Model name to use if the descriptor is (or contains) an object

    Returns:
        A type usable as a pydantic field annotation
    """
    if isinstance(descriptor, PrimitiveType):
        return python_type(descriptor.kind)
    if isinstance(descriptor, ObjectType):
        return to_pydantic_model(descriptor.schema, name)
    if isinstance(descriptor, ArrayType):
        return List[python_annotation(descriptor.items, name)]
    raise TypeError(f"Unsupported descriptor: {descriptor!r}")


def _field_name(key: str) -> str:
    # Keys that are not usable as attributes keep the key only as an alias
    if key.isidentifier() and not keyword.iskeyword(key) and not key.startswith("_") \
            and not key.startswith("model_") and not hasattr(BaseModel, key):
        return key
    words = _WORD.findall(key)
    return "field_" + "_".join(word.lower() for word in words) if words else "field_"


def _pascal_case(key: str) -> str:
    return "".join(word[:1].upper() + word[1:] for word in _WORD.findall(key))
