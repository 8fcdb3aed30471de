"""
Unit tests for schema parser.
"""

import pytest
from compact_schema import ParseError, parse, try_parse
from compact_schema.schema import (
    ParserOptions,
    ParseResult,
    classify_value,
    normalize,
    parse_object,
    parse_property,
)
from compact_schema.schema.parser import NESTING_TOO_DEEP
from compact_schema.schema.primitives import PrimitiveKind
from compact_schema.schema.text import DuplicateKeyPolicy
from compact_schema.schema.types import ArrayType, ObjectType, PrimitiveType, SchemaNode

STRING = PrimitiveType(PrimitiveKind.STRING)
NUMBER = PrimitiveType(PrimitiveKind.NUMBER)
BOOLEAN = PrimitiveType(PrimitiveKind.BOOLEAN)

PRIMITIVES_ERROR = "Expected one of [string, number, boolean] but got '{}'"


class TestSchemaParser:
    """Test parsing of valid schema notation."""

    def test_parse_single_string(self):
        """Test parsing one string property."""
        schema = parse("{k: string}")

        assert isinstance(schema, SchemaNode)
        assert list(schema) == ["k"]
        assert schema["k"] == STRING

    def test_parse_all_primitives(self):
        """Test parsing string, number and boolean properties."""
        schema = parse("{a: string, b: number, c: boolean}")

        assert len(schema) == 3
        assert schema["a"] == STRING
        assert schema["b"] == NUMBER
        assert schema["c"] == BOOLEAN

    def test_parse_array_of_primitive(self):
        """Test parsing Token[]."""
        schema = parse("{tags: string[]}")

        assert schema["tags"] == ArrayType(items=STRING)

    def test_parse_nested_object(self):
        """Test parsing a nested object."""
        schema = parse("{addr: {city: string}}")

        assert isinstance(schema["addr"], ObjectType)
        assert schema["addr"].schema == SchemaNode({"city": STRING})

    def test_parse_array_of_objects(self):
        """Test parsing Array<{...}>."""
        schema = parse("{list: Array<{x: number}>}")

        assert schema["list"] == ArrayType(items=ObjectType(SchemaNode({"x": NUMBER})))

    def test_parse_primitive_with_rules(self):
        """Test that rule annotations on a primitive are discarded."""
        schema = parse("{name: string<min:1>, age: number<min:0>}")

        assert schema["name"] == STRING
        assert schema["age"] == NUMBER

    def test_parse_array_with_rules(self):
        """Test that rule annotations after [] are discarded."""
        schema = parse("{tags: string[]<maxItems:5>}")

        assert schema["tags"] == ArrayType(items=STRING)

    def test_parse_empty_object(self):
        """Test that {} parses to a node with no properties."""
        schema = parse("{}")

        assert len(schema) == 0
        assert schema == SchemaNode()

    def test_nested_commas_split_at_top_level_only(self):
        """Test that commas inside nested braces do not split properties."""
        schema = parse("{a: {x: number, y: number}, b: string}")

        assert list(schema) == ["a", "b"]
        assert schema["a"].schema == SchemaNode({"x": NUMBER, "y": NUMBER})
        assert schema["b"] == STRING

    def test_deeply_nested(self):
        """Test objects nested several levels deep."""
        schema = parse("{a: {b: {c: {d: boolean}}}}")

        assert schema["a"].schema["b"].schema["c"].schema["d"] == BOOLEAN

    def test_whitespace_insensitive(self):
        """Test that whitespace anywhere gives the same schema."""
        compact = parse("{name:string,tags:string[],addr:{city:string},list:Array<{x:number}>}")
        spaced = parse(
            " {\n  na me : str ing ,\ttags : string [ ] ,\n"
            "  addr : { city : string } ,\n  list : Array < { x : number } >\n} "
        )

        assert spaced == compact

    def test_idempotent(self):
        """Test that parsing the same text twice gives equal results."""
        text = "{a: string, b: {c: number[]}, d: Array<{e: boolean}>}"

        assert parse(text) == parse(text)

    def test_equality_ignores_declaration_order(self):
        """Test that property order does not affect equality."""
        assert parse("{a: string, b: number}") == parse("{b: number, a: string}")


class TestParseErrors:
    """Test error chains for invalid notation."""

    def test_unknown_primitive(self):
        """Test that an unknown token names the vocabulary and the property."""
        with pytest.raises(ParseError) as exc_info:
            parse("{n: int}")

        assert exc_info.value.messages == (
            "Failed to parse property 'n:int'",
            "Failed to parse value of property 'n'",
            PRIMITIVES_ERROR.format("int"),
        )

    def test_missing_colon(self):
        """Test that a property without ':' names the normalized substring."""
        with pytest.raises(ParseError) as exc_info:
            parse("{a string}")

        assert exc_info.value.messages == (
            "Failed to parse property 'astring'",
            "Expected key-value property, got 'astring'",
        )

    def test_not_an_object(self):
        """Test that input not wrapped in braces fails."""
        with pytest.raises(ParseError) as exc_info:
            parse("notanobject")

        assert exc_info.value.messages == ("Expected {...}, got 'notanobject'",)

    def test_single_open_brace_is_not_an_object(self):
        """Test that a lone brace is not mistaken for {...}."""
        with pytest.raises(ParseError) as exc_info:
            parse("{")

        assert exc_info.value.messages == ("Expected {...}, got '{'",)

    def test_nested_failure_wraps_each_level(self):
        """Test that a nested failure carries context from every level."""
        with pytest.raises(ParseError) as exc_info:
            parse("{addr: {city: str}}")

        assert exc_info.value.messages == (
            "Failed to parse property 'addr:{city:str}'",
            "Failed to parse value of property 'addr'",
            "Failed to parse property 'city:str'",
            "Failed to parse value of property 'city'",
            PRIMITIVES_ERROR.format("str"),
        )

    def test_array_of_objects_failure(self):
        """Test that failures inside Array<{...}> are wrapped."""
        with pytest.raises(ParseError) as exc_info:
            parse("{list: Array<{x: bogus}>}")

        messages = exc_info.value.messages
        assert messages[0] == "Failed to parse property 'list:Array<{x:bogus}>'"
        assert messages[1] == "Failed to parse value of property 'list'"
        assert messages[-1] == PRIMITIVES_ERROR.format("bogus")

    def test_unknown_array_element(self):
        """Test that Token[] checks the element token."""
        with pytest.raises(ParseError) as exc_info:
            parse("{xs: integer[]}")

        assert exc_info.value.innermost == PRIMITIVES_ERROR.format("integer")

    def test_nested_array_brackets_rejected(self):
        """Test that string[][] is not a recognized shape."""
        with pytest.raises(ParseError) as exc_info:
            parse("{xs: string[][]}")

        assert exc_info.value.innermost == PRIMITIVES_ERROR.format("string[]")

    def test_unknown_token_with_rules(self):
        """Test that Token<...> still checks the token."""
        with pytest.raises(ParseError) as exc_info:
            parse("{x: text<min:1>}")

        assert exc_info.value.innermost == PRIMITIVES_ERROR.format("text")

    def test_unbalanced_braces_surface_downstream(self):
        """Test that a missing closing brace fails when the value is parsed."""
        with pytest.raises(ParseError) as exc_info:
            parse("{a: {x: number}")

        assert exc_info.value.messages == (
            "Failed to parse property 'a:{x:number'",
            "Failed to parse value of property 'a'",
            PRIMITIVES_ERROR.format("{x:number"),
        )

    def test_trailing_comma(self):
        """Test that a trailing comma produces an empty property."""
        with pytest.raises(ParseError) as exc_info:
            parse("{a: string,}")

        assert exc_info.value.messages == (
            "Failed to parse property ''",
            "Expected key-value property, got ''",
        )

    def test_first_failing_property_aborts(self):
        """Test that only the first failing property is reported."""
        with pytest.raises(ParseError) as exc_info:
            parse("{a: foo, b: bar}")

        assert exc_info.value.outermost == "Failed to parse property 'a:foo'"

    def test_nesting_beyond_recursion_limit(self):
        """Test that very deep nesting fails with a ParseError."""
        deep = "{a:" * 1000 + "string" + "}" * 1000

        with pytest.raises(ParseError) as exc_info:
            parse(deep)

        assert exc_info.value.messages == (NESTING_TOO_DEEP,)

    def test_moderate_nesting_parses(self):
        """Test that ordinary nesting depths are unaffected."""
        schema = parse("{a:" * 50 + "boolean" + "}" * 50)

        for _ in range(49):
            schema = schema["a"].schema
        assert schema["a"] == BOOLEAN


class TestDuplicateKeys:
    """Test the duplicate property policies."""

    def test_last_wins_by_default(self):
        """Test that the last declaration wins by default."""
        schema = parse("{a: string, a: number}")

        assert schema == SchemaNode({"a": NUMBER})

    def test_first_wins(self):
        """Test the first-wins policy."""
        options = ParserOptions(duplicate_keys=DuplicateKeyPolicy.FIRST_WINS)
        schema = parse("{a: string, a: number}", options)

        assert schema == SchemaNode({"a": STRING})

    def test_error_policy(self):
        """Test that the error policy rejects duplicates."""
        with pytest.raises(ParseError) as exc_info:
            parse("{a: string, a: number}", ParserOptions.from_name("error"))

        assert exc_info.value.messages == ("Duplicate property 'a'",)

    def test_error_policy_in_nested_object(self):
        """Test that duplicate errors in nested objects are wrapped."""
        with pytest.raises(ParseError) as exc_info:
            parse("{o: {a: string, a: string}}", ParserOptions.from_name("error"))

        assert exc_info.value.messages == (
            "Failed to parse property 'o:{a:string,a:string}'",
            "Failed to parse value of property 'o'",
            "Duplicate property 'a'",
        )

    def test_options_from_name(self):
        """Test building options from policy names."""
        assert ParserOptions.from_name("FIRST").duplicate_keys == DuplicateKeyPolicy.FIRST_WINS
        assert ParserOptions.from_name("last") == ParserOptions()

    def test_options_from_unknown_name(self):
        """Test that an unknown policy name is rejected."""
        with pytest.raises(ValueError, match="Unknown duplicate key policy"):
            ParserOptions.from_name("merge")


class TestTryParse:
    """Test the result-returning entry point."""

    def test_success(self):
        """Test that a valid schema yields a result with a schema."""
        result = try_parse("{a: string}")

        assert result.is_valid is True
        assert result.error is None
        assert result.messages == ()
        assert result.unwrap() == SchemaNode({"a": STRING})

    def test_failure(self):
        """Test that an invalid schema yields a result with an error."""
        result = try_parse("notanobject")

        assert result.is_valid is False
        assert result.schema is None
        assert result.messages == ("Expected {...}, got 'notanobject'",)

        with pytest.raises(ParseError):
            result.unwrap()

    def test_deep_nesting_returns_error(self):
        """Test that recursion depth failures come back as a result."""
        result = try_parse("{a:" * 1000 + "number" + "}" * 1000)

        assert result.is_valid is False
        assert result.messages == (NESTING_TOO_DEEP,)

    def test_result_requires_exactly_one_variant(self):
        """Test that a result cannot hold both or neither variant."""
        with pytest.raises(ValueError):
            ParseResult()

        with pytest.raises(ValueError):
            ParseResult(schema=SchemaNode(), error=ParseError(["x"]))


class TestComponents:
    """Test the parser's internal steps directly."""

    def test_normalize(self):
        """Test that all whitespace is removed."""
        assert normalize(" { a :\n\tstring } ") == "{a:string}"

    def test_parse_property_splits_at_first_colon(self):
        """Test that rule annotations with colons stay in the value."""
        assert parse_property("age:number<min:0>") == ("age", "number<min:0>")

    def test_parse_property_trims_value(self):
        """Test that leading whitespace of the value is trimmed."""
        assert parse_property("a:  string") == ("a", "string")

    def test_parse_property_without_colon(self):
        """Test the missing colon error."""
        with pytest.raises(ParseError) as exc_info:
            parse_property("abc")

        assert exc_info.value.messages == ("Expected key-value property, got 'abc'",)

    def test_classify_value_priority(self):
        """Test that Array<{...}> wins over the rule annotation shape."""
        assert classify_value("Array<{x:number}>") == ArrayType(ObjectType(SchemaNode({"x": NUMBER})))
        assert classify_value("{x:number}") == ObjectType(SchemaNode({"x": NUMBER}))
        assert classify_value("number[]") == ArrayType(NUMBER)
        assert classify_value("number[]<min:1>") == ArrayType(NUMBER)
        assert classify_value("number<min:1>") == NUMBER
        assert classify_value("number") == NUMBER

    def test_parse_object_requires_braces(self):
        """Test that parse_object rejects text without outer braces."""
        with pytest.raises(ParseError) as exc_info:
            parse_object("a:string")

        assert exc_info.value.messages == ("Expected {...}, got 'a:string'",)
