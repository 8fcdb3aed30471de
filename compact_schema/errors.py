"""
Error chain raised by the compact schema parser.

A parse failure is reported as an ordered trail of messages. The innermost
cause is created first; every enclosing parser call that delegates to a
sub-parser wraps the failure with one more context message naming what it was
trying to parse. The final chain therefore reads outermost context first:

    Failed to parse property 'n:int'
      Failed to parse value of property 'n'
        Expected one of [string, number, boolean] but got 'int'

Usage:
    ```python
    from compact_schema import parse, ParseError

    try:
        parse("{n: int}")
    except ParseError as e:
        print(e.messages[0])   # "Failed to parse property 'n:int'"
        print(e.innermost)     # "Expected one of [...] but got 'int'"
    ```
"""

from typing import Iterable, Tuple


class ParseError(ValueError):
    """
    Structured parse failure carrying an ordered chain of context messages.

    Attributes:
        messages: Non-empty tuple of messages, outermost context first
    """

    def __init__(self, messages: Iterable[str]):
        messages = tuple(messages)
        if not messages:
            raise ValueError("ParseError requires at least one message")

        self.messages: Tuple[str, ...] = messages
        super().__init__(self._render())

    def wrap(self, message: str) -> "ParseError":
        """
        Return a new error with `message` prepended to this chain.

        The receiver is left untouched.

        Args:
            message: Context message for the enclosing parse step

        Returns:
            ParseError: New error with messages (message, *self.messages)
        """
        return ParseError((message,) + self.messages)

    @property
    def outermost(self) -> str:
        return self.messages[0]

    @property
    def innermost(self) -> str:
        return self.messages[-1]

    def _render(self) -> str:
        return "\n".join(
            f"{'  ' * depth}{message}" for depth, message in enumerate(self.messages)
        )

    def __repr__(self) -> str:
        return f"ParseError({list(self.messages)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.messages == other.messages

    def __hash__(self) -> int:
        return hash(self.messages)
