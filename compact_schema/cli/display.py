"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Schema trees
- Syntax-highlighted JSON
- Parse error chains and validation errors
- Success/failure indicators
"""

import json
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.tree import Tree

from compact_schema.errors import ParseError
from compact_schema.schema.types import ArrayType, ObjectType, SchemaNode, ValueDescriptor
from compact_schema.validation.validator import ValidationError


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{escape(title)}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_plain(text: str) -> None:
    """Print text verbatim, without markup or wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{escape(title)}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_schema_tree(schema: SchemaNode, title: str = "schema") -> None:
    """
    Print a parsed schema as a tree, one branch per nested object.

    Example output:
        schema
        ├── name: string
        ├── tags: string[]
        └── address: object
            └── city: string
    """
    tree = Tree(f"[bold cyan]{escape(title)}[/bold cyan]")
    _add_properties(tree, schema)
    console.print(tree)


def _add_properties(tree: Tree, schema: SchemaNode) -> None:
    for key, descriptor in schema.items():
        label = f"[cyan]{escape(key)}[/cyan]: {escape(_describe(descriptor))}"
        nested = _nested_schema(descriptor)
        branch = tree.add(label)
        if nested is not None:
            _add_properties(branch, nested)


def _describe(descriptor: ValueDescriptor) -> str:
    if isinstance(descriptor, ObjectType):
        return "object"
    if isinstance(descriptor, ArrayType):
        if isinstance(descriptor.items, ObjectType):
            return "Array<object>"
        return f"{_describe(descriptor.items)}[]"
    return descriptor.to_notation()


def _nested_schema(descriptor: ValueDescriptor) -> Optional[SchemaNode]:
    if isinstance(descriptor, ObjectType):
        return descriptor.schema
    if isinstance(descriptor, ArrayType):
        return _nested_schema(descriptor.items)
    return None


def print_parse_error(error: ParseError) -> None:
    """
    Print a parse error chain, outermost context first, indented by depth.

    Args:
        error: Parse failure to display
    """
    lines = [
        f"{'  ' * depth}[red]•[/red] {escape(message)}"
        for depth, message in enumerate(error.messages)
    ]
    console.print(Panel("\n".join(lines), title="[bold red]Parse Error[/bold red]", border_style="red"))


def print_validation_errors(errors: List[ValidationError]) -> None:
    """
    Print validation errors in a formatted list.

    Args:
        errors: List of validation errors
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Validation Errors:[/bold red]")
    for error in errors:
        console.print(f"  [red]•[/red] At {escape(error.path)}: {escape(error.message)}")
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
