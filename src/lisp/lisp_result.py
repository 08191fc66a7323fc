"""
Result model for parsing: syntax error variants and the ParseResult tagged union.

Classes:
    LispSyntaxError: Base of the closed syntax error taxonomy.
    UnexpectedEndOfInput: Input ended while a token was still expected.
    UnexpectedToken: A token appeared where it cannot (currently only a stray `)`).
    ParseSuccess: Successful result holding the parsed node.
    ParseFailure: Failed result holding the syntax error.
    ParseError: Exception raised by `ParseResult.unwrap()` on a failure.

A ParseResult is exactly one of ParseSuccess or ParseFailure. There is no shared holder
with two optional fields, so "both set" and "neither set" cannot be represented.

Example:
    >>> result = ParseFailure(UnexpectedToken(")", position=0))
    >>> str(result)
    "Unexpected token ')' at position 0"
    >>> result.unwrap()
    Traceback (most recent call last):
    ...
    lisp.lisp_result.ParseError: Unexpected token ')' at position 0
"""

from abc import ABC, abstractmethod
from typing import Any, Union

from lisp.lisp_ast import Atom, Group, ParsedNode


class LispSyntaxError(ABC):
    """Base class for syntax error variants. Not an exception; see ParseError."""

    @abstractmethod
    def describe(self) -> str: ...

    def __str__(self) -> str:
        return self.describe()


class UnexpectedEndOfInput(LispSyntaxError):
    """The token sequence ran out while a group was open or a token was expected."""

    def describe(self) -> str:
        return "Unexpected end of input"

    def __repr__(self) -> str:
        return "UnexpectedEndOfInput()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, UnexpectedEndOfInput)

    def __hash__(self) -> int:
        return hash("UnexpectedEndOfInput")


class UnexpectedToken(LispSyntaxError):
    """A token that cannot appear at its position.

    Attributes:
        token (str): The offending token.
        position (int | None): Index of the token in the token sequence. Diagnostic only,
            it does not take part in equality.
    """

    def __init__(self, token: str, position: int | None = None) -> None:
        self.token = token
        self.position = position

    def describe(self) -> str:
        if self.position is None:
            return f"Unexpected token {self.token!r}"
        return f"Unexpected token {self.token!r} at position {self.position}"

    def __repr__(self) -> str:
        if self.position is None:
            return f"UnexpectedToken({self.token!r})"
        return f"UnexpectedToken({self.token!r}, position={self.position})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, UnexpectedToken) and self.token == other.token

    def __hash__(self) -> int:
        return hash(("UnexpectedToken", self.token))


class ParseError(SyntaxError):
    """Raised when a failed ParseResult is unwrapped.

    Attributes:
        error (LispSyntaxError): The variant that caused the failure.
    """

    def __init__(self, error: LispSyntaxError) -> None:
        super().__init__(error.describe())
        self.error = error


class ParseSuccess:
    """Successful parse.

    Attributes:
        node (ParsedNode): Root of the parsed tree.
    """

    def __init__(self, node: ParsedNode) -> None:
        if not isinstance(node, (Atom, Group)):
            raise TypeError(
                f"ParseSuccess requires an Atom or Group, got {type(node).__name__}"
            )
        self.node = node

    @property
    def error(self) -> None:
        return None

    def is_success(self) -> bool:
        return True

    def unwrap(self) -> ParsedNode:
        return self.node

    def __repr__(self) -> str:
        return f"ParseSuccess({self.node!r})"

    def __str__(self) -> str:
        return str(self.node)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, ParseSuccess) and self.node == other.node

    def __hash__(self) -> int:
        return hash(("ParseSuccess", self.node))


class ParseFailure:
    """Failed parse. No partial tree is kept.

    Attributes:
        error (LispSyntaxError): The first error encountered.
    """

    def __init__(self, error: LispSyntaxError) -> None:
        if not isinstance(error, LispSyntaxError):
            raise TypeError(
                f"ParseFailure requires a LispSyntaxError, got {type(error).__name__}"
            )
        self.error = error

    @property
    def node(self) -> None:
        return None

    def is_success(self) -> bool:
        return False

    def unwrap(self) -> ParsedNode:
        raise ParseError(self.error)

    def __repr__(self) -> str:
        return f"ParseFailure({self.error!r})"

    def __str__(self) -> str:
        return self.error.describe()

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, ParseFailure) and self.error == other.error

    def __hash__(self) -> int:
        return hash(("ParseFailure", self.error))


ParseResult = Union[ParseSuccess, ParseFailure]
"""Outcome of a parse: exactly one of ParseSuccess or ParseFailure."""


__all__ = [
    "LispSyntaxError",
    "ParseError",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
]
