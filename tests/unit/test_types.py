"""
Unit tests for schema types and their renderings.
"""

from dataclasses import FrozenInstanceError

import pytest
from compact_schema import parse
from compact_schema.schema.primitives import (
    PRIMITIVE_NAMES,
    PrimitiveKind,
    is_primitive,
    python_type,
    resolve_primitive,
)
from compact_schema.schema.types import ArrayType, ObjectType, PrimitiveType, SchemaNode


class TestPrimitives:
    """Test the primitive vocabulary."""

    def test_names_in_order(self):
        """Test the stable name order used in error messages."""
        assert PRIMITIVE_NAMES == ("string", "number", "boolean")

    def test_membership(self):
        """Test primitive name recognition."""
        assert is_primitive("boolean")
        assert not is_primitive("int")
        assert not is_primitive("String")

    def test_resolve(self):
        """Test resolving names to kinds."""
        assert resolve_primitive("number") == PrimitiveKind.NUMBER

        with pytest.raises(KeyError):
            resolve_primitive("int")

    def test_python_types(self):
        """Test the runtime value kinds."""
        assert python_type(PrimitiveKind.STRING) is str
        assert python_type(PrimitiveKind.NUMBER) is float
        assert python_type(PrimitiveKind.BOOLEAN) is bool


class TestSchemaNode:
    """Test SchemaNode mapping behavior and renderings."""

    def test_mapping_access(self):
        """Test dict-like access to properties."""
        node = parse("{a: string, b: number}")

        assert "a" in node
        assert "z" not in node
        assert len(node) == 2
        assert list(node.keys()) == ["a", "b"]
        assert dict(node.items())["b"] == PrimitiveType(PrimitiveKind.NUMBER)

    def test_to_json_schema(self):
        """Test JSON Schema rendering of a nested schema."""
        node = parse("{name: string, tags: string[], address: {city: string}}")

        assert node.to_json_schema() == {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "address": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                    "required": ["city"],
                    "additionalProperties": False,
                },
            },
            "required": ["name", "tags", "address"],
            "additionalProperties": False,
        }

    def test_array_of_objects_json_schema(self):
        """Test JSON Schema rendering of Array<{...}>."""
        node = parse("{list: Array<{x: boolean}>}")

        assert node.to_json_schema()["properties"]["list"] == {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"x": {"type": "boolean"}},
                "required": ["x"],
                "additionalProperties": False,
            },
        }

    def test_to_notation(self):
        """Test canonical notation rendering."""
        node = parse("{ name: string<min:1>, tags: number[]<max:3>, addr: { city: string }, l: Array<{ x: boolean }> }")

        assert node.to_notation() == "{name:string,tags:number[],addr:{city:string},l:Array<{x:boolean}>}"

    def test_notation_reparses_equal(self):
        """Test that rendered notation parses back to an equal schema."""
        node = parse("{a: {b: Array<{c: string[]}>}, d: boolean}")

        assert parse(node.to_notation()) == node

    def test_to_dict(self):
        """Test plain description rendering."""
        node = parse("{a: string, b: number[], c: {d: boolean}, e: Array<{f: string}>}")

        assert node.to_dict() == {
            "a": "string",
            "b": ["number"],
            "c": {"d": "boolean"},
            "e": [{"f": "string"}],
        }

    def test_descriptor_equality(self):
        """Test structural equality of descriptors."""
        assert ArrayType(PrimitiveType(PrimitiveKind.STRING)) == ArrayType(PrimitiveType(PrimitiveKind.STRING))
        assert ObjectType(SchemaNode()) != ArrayType(ObjectType(SchemaNode()))

    def test_descriptors_are_frozen(self):
        """Test that parsed descriptors cannot be reassigned."""
        schema = parse("{a: string, b: {c: number}, d: boolean[]}")

        with pytest.raises(FrozenInstanceError):
            schema["a"].kind = PrimitiveKind.NUMBER
        with pytest.raises(FrozenInstanceError):
            schema["b"].schema = SchemaNode()
        with pytest.raises(FrozenInstanceError):
            schema["d"].items = PrimitiveType(PrimitiveKind.STRING)
        with pytest.raises(FrozenInstanceError):
            schema.properties = {}

    def test_descriptors_are_hashable(self):
        """Test that equal descriptors and nodes hash equally."""
        assert hash(PrimitiveType(PrimitiveKind.STRING)) == hash(PrimitiveType(PrimitiveKind.STRING))
        assert hash(parse("{a: string, b: number}")) == hash(parse("{b: number, a: string}"))

        nested = ObjectType(SchemaNode({"y": ArrayType(PrimitiveType(PrimitiveKind.BOOLEAN))}))
        assert len({parse("{x: {y: boolean[]}}")["x"], nested}) == 1
