#!/usr/bin/env python3
"""
Demo: Person record with nested fields.

This demonstrates parsing a person schema with:
- Primitive fields with rule annotations: name, age
- Nested object: address
- Array: hobbies
and then rendering it as JSON Schema, validating documents against it and
showing what a parse failure looks like.
"""

import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from compact_schema import ParseError, parse
from compact_schema.validation import format_parse_error, format_validation_errors, validate


SCHEMA = """
{
    name: string<minLength:2>,
    age: number<min:0>,
    address: {street: string, city: string},
    hobbies: string[]
}
"""


def main():
    print("=" * 60)
    print("compact-schema Demo: Person Record with Nested Fields")
    print("=" * 60)

    schema = parse(SCHEMA)
    print(f"\nCanonical notation:\n  {schema.to_notation()}")
    print(f"\nJSON Schema:\n{json.dumps(schema.to_json_schema(), indent=2)}")

    good = {"name": "Alice", "age": 28, "address": {"street": "1 Main St", "city": "Paris"}, "hobbies": ["chess"]}
    bad = {"name": "Alice", "age": "28", "address": {"street": "1 Main St"}, "hobbies": ["chess"]}

    for label, document in (("valid", good), ("invalid", bad)):
        result = validate(json.dumps(document), schema)
        print(f"\n{label} document -> is_valid={result.is_valid}")
        if not result.is_valid:
            print(format_validation_errors(result.errors))

    print()
    try:
        parse("{name: string, address: {city: text}}")
    except ParseError as e:
        print(format_parse_error(e))


if __name__ == "__main__":
    main()
