"""
Command-line interface module.

This module provides a rich terminal interface for compact_schema using Typer and Rich.

Commands:
    - parse: Parse schema notation and print it as a tree, JSON Schema,
      canonical notation or regex
    - validate: Validate a JSON document against a schema

Example Usage:
    ```bash
    compact-schema parse "{name: string, address: {city: string}}"

    compact-schema parse --file user.schema --format json-schema

    compact-schema validate "{name: string, tags: string[]}" --json user.json
    ```
"""

from .main import app

__all__ = ["app"]
