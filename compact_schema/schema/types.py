"""
Schema type definitions produced by the compact schema parser.

Type Hierarchy:
    SchemaNode: mapping from property name to ValueDescriptor
    ValueDescriptor (abstract)
    ├── PrimitiveType: string, number or boolean
    ├── ObjectType: nested SchemaNode
    └── ArrayType: homogeneous array of a primitive or an object

Rule annotations (`string<min:1>`) are recognized by the parser but never
stored, so nothing here carries them.

Each descriptor knows how to:
    - Render itself as JSON Schema (Draft 7)
    - Convert itself to a regex matching JSON instances
    - Render itself back to canonical compact notation
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, ItemsView, Iterator, KeysView

from compact_schema.schema.primitives import PrimitiveKind

_JSON_SCHEMA_TYPES = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.NUMBER: "number",
    PrimitiveKind.BOOLEAN: "boolean",
}


class ValueDescriptor(ABC):
    """
    Abstract base class for the parsed type of one property value.
    """

    @abstractmethod
    def to_json_schema(self) -> Dict[str, Any]:
        """
        Convert this descriptor to a JSON Schema (Draft 7) fragment.

        Returns:
            Dict: JSON Schema dictionary
        """

    @abstractmethod
    def to_regex(self) -> str:
        """
        Convert this descriptor to a regex pattern.

        Returns:
            str: Regular expression matching the JSON text of any value of
                this type, including quotes for strings, braces for objects
        """

    @abstractmethod
    def to_notation(self) -> str:
        """Render this descriptor as whitespace-free compact notation."""

    @abstractmethod
    def to_dict(self) -> Any:
        """Plain nested dict/list/str description, suitable for JSON display."""


@dataclass(frozen=True)
class PrimitiveType(ValueDescriptor):
    """
    A primitive value: string, number or boolean.

    Attributes:
        kind: Which primitive
    """

    kind: PrimitiveKind

    def to_json_schema(self) -> Dict[str, Any]:
        return {"type": _JSON_SCHEMA_TYPES[self.kind]}

    def to_regex(self) -> str:
        """
        Generate regex for a primitive value.

        Strategy:
            - Strings: "[^"\\\\]*" (no escaped quotes)
            - Numbers: JSON number grammar, optional fraction and exponent
            - Booleans: (true|false)
        """
        if self.kind == PrimitiveKind.STRING:
            return r'"[^"\\]*"'
        if self.kind == PrimitiveKind.NUMBER:
            return r'-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?'
        return r'(true|false)'

    def to_notation(self) -> str:
        return self.kind.value

    def to_dict(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ObjectType(ValueDescriptor):
    """
    A nested object value.

    Attributes:
        schema: The nested object's properties
    """

    schema: "SchemaNode"

    def to_json_schema(self) -> Dict[str, Any]:
        return self.schema.to_json_schema()

    def to_regex(self) -> str:
        return self.schema.to_regex()

    def to_notation(self) -> str:
        return self.schema.to_notation()

    def to_dict(self) -> Dict[str, Any]:
        return self.schema.to_dict()


@dataclass(frozen=True)
class ArrayType(ValueDescriptor):
    """
    A homogeneous array value.

    Attributes:
        items: Descriptor every element must match
    """

    items: ValueDescriptor

    def to_json_schema(self) -> Dict[str, Any]:
        return {"type": "array", "items": self.items.to_json_schema()}

    def to_regex(self) -> str:
        """
        Generate regex for array like: ["item1","item2","item3"]

        Strategy:
            - Start with opening bracket: \\[
            - Any number of items: (item(,item)*)?
            - End with closing bracket: \\]
        """
        item_pattern = self.items.to_regex()
        repetition = f'({item_pattern}(\\s*,\\s*{item_pattern})*)?'
        return f'\\[\\s*{repetition}\\s*\\]'

    def to_notation(self) -> str:
        if isinstance(self.items, ObjectType):
            return f"Array<{self.items.to_notation()}>"
        return f"{self.items.to_notation()}[]"

    def to_dict(self) -> list:
        return [self.items.to_dict()]


@dataclass(frozen=True)
class SchemaNode:
    """
    Parsed object schema: property names mapped to value descriptors.

    Keys are unique. Equality is structural and ignores declaration order,
    and hashing agrees with it.

    Example:
        ```python
        node = parse("{name: string, tags: string[]}")
        node["name"]        # PrimitiveType(kind=PrimitiveKind.STRING)
        "tags" in node      # True
        node.to_notation()  # "{name:string,tags:string[]}"
        ```

    Attributes:
        properties: Dict mapping property names to their descriptors
    """

    properties: Dict[str, ValueDescriptor] = field(default_factory=dict)

    def __getitem__(self, key: str) -> ValueDescriptor:
        return self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __hash__(self) -> int:
        return hash(frozenset(self.properties.items()))

    def keys(self) -> KeysView[str]:
        return self.properties.keys()

    def items(self) -> ItemsView[str, ValueDescriptor]:
        return self.properties.items()

    def to_json_schema(self) -> Dict[str, Any]:
        """
        Convert to a JSON Schema object definition.

        Every declared property is required and no others are allowed.
        """
        return {
            "type": "object",
            "properties": {key: value.to_json_schema() for key, value in self.properties.items()},
            "required": list(self.properties),
            "additionalProperties": False,
        }

    def to_regex(self) -> str:
        """
        Generate regex for object like: {"name":"value","age":123}

        Strategy:
            - Start with opening brace: \\{
            - For each property: <JSON-encoded key>\\s*:\\s*<value_regex>
            - Separate properties with commas and optional whitespace
            - End with closing brace: \\}

        Properties must appear in declaration order.
        """
        if not self.properties:
            return r'\{\s*\}'

        property_patterns = [
            f'{re.escape(json.dumps(key, ensure_ascii=False))}\\s*:\\s*{value.to_regex()}'
            for key, value in self.properties.items()
        ]
        inner = '\\s*,\\s*'.join(property_patterns)
        return f'\\{{\\s*{inner}\\s*\\}}'

    def to_notation(self) -> str:
        inner = ",".join(f"{key}:{value.to_notation()}" for key, value in self.properties.items())
        return f"{{{inner}}}"

    def to_dict(self) -> Dict[str, Any]:
        return {key: value.to_dict() for key, value in self.properties.items()}
