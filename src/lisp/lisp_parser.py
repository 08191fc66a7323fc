"""
LISP Parser

Groups a flat token sequence into a tree of atoms and parenthesized groups.

Parser Behavior
---------------
- One datum per `parse()`: an atom, `()`, or a group with at least one child.
- Fail-fast: the first syntax error aborts the parse and is returned as a
  `ParseFailure`. No partial tree is ever returned and nothing is raised for
  malformed input.
- No backtracking: the cursor only moves forward.
- Nesting is tracked on an explicit stack of open groups instead of the Python call
  stack, so depth is limited only by memory.
- Tokens after the first datum are still read so that a stray `)` or an unclosed `(`
  anywhere in the input is reported. Balanced trailing datums are not part of the
  result; use `parse_all()` to keep them.

Entry Points
------------
- `parse(tokens)`: Parse the first datum.
- `parse_all(tokens)`: Parse every top-level datum into one Group.

Errors
------
UnexpectedEndOfInput
    Input ended while a group was open or when a datum was expected.
UnexpectedToken
    A `)` with no matching `(`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lisp.lisp_ast import Atom, Group, ParsedNode
from lisp.lisp_constants import CLOSE_PAREN, OPEN_PAREN
from lisp.lisp_result import (
    ParseFailure,
    ParseResult,
    ParseSuccess,
    UnexpectedEndOfInput,
    UnexpectedToken,
)

logger = logging.getLogger(__name__)


class Cursor:
    """Read position over a token tuple, owned by a single parse call.

    Attributes
    ----------
    tokens : tuple[str, ...]
        The tokens being read.
    position : int
        Index of the next unread token. Never decreases.
    """

    def __init__(self, tokens: tuple[str, ...]) -> None:
        self.tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def current(self) -> str | None:
        return self.peek(0)

    def peek(self, offset: int = 1) -> str | None:
        index = self.position + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def advance(self, count: int = 1) -> None:
        self.position += count


class Parser:
    """
    LISP Parser Class

    Holds an immutable copy of the token sequence. Every call to `parse()` or
    `parse_all()` creates its own Cursor, so a Parser carries no read state between
    calls.

    Attributes
    ----------
    tokens : tuple[str, ...]
        The token sequence produced by the tokenizer.

    Methods
    -------
    parse() -> ParseResult
        Parse the first datum and validate the rest of the input.
    parse_all() -> ParseResult
        Parse every top-level datum; the success node is a Group of them.
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        if isinstance(tokens, str):
            raise TypeError("Parser expects a sequence of tokens, not a str")
        self.tokens: tuple[str, ...] = tuple(tokens)
        for tok in self.tokens:
            if not isinstance(tok, str):
                raise TypeError(f"Tokens must be str, got {type(tok).__name__}")

    def parse(self) -> ParseResult:
        """Parse the first datum of the token sequence."""
        cursor = Cursor(self.tokens)
        first = self.parse_datum(cursor)
        if isinstance(first, ParseFailure):
            return first

        trailing = 0
        while not cursor.at_end():
            result = self.parse_datum(cursor)
            if isinstance(result, ParseFailure):
                return result
            trailing += 1
        if trailing:
            logger.debug("Ignoring %d trailing datum(s) after the first", trailing)
        return first

    def parse_all(self) -> ParseResult:
        """Parse every top-level datum into a single Group (empty input gives `()`)."""
        cursor = Cursor(self.tokens)
        nodes: list[ParsedNode] = []
        while not cursor.at_end():
            result = self.parse_datum(cursor)
            if isinstance(result, ParseFailure):
                return result
            nodes.append(result.node)
        return ParseSuccess(Group(nodes))

    def parse_datum(self, cursor: Cursor) -> ParseResult:
        """Parse one datum starting at the cursor and advance past it."""
        open_groups: list[list[ParsedNode]] = []

        while True:
            token = cursor.current()
            if token is None:
                return ParseFailure(UnexpectedEndOfInput())

            node: ParsedNode
            if token == CLOSE_PAREN:
                if not open_groups:
                    logger.debug("Stray %r at position %d", token, cursor.position)
                    return ParseFailure(UnexpectedToken(token, cursor.position))
                cursor.advance()
                node = Group(open_groups.pop())
            elif token != OPEN_PAREN:
                cursor.advance()
                node = Atom(token)
            elif cursor.peek() == CLOSE_PAREN:
                cursor.advance(2)
                node = Group([])
            else:
                cursor.advance()
                open_groups.append([])
                continue

            if not open_groups:
                return ParseSuccess(node)
            open_groups[-1].append(node)


def parse(tokens: Sequence[str]) -> ParseResult:
    """Parse the first datum of `tokens` with a fresh Parser."""
    return Parser(tokens).parse()


def parse_all(tokens: Sequence[str]) -> ParseResult:
    """Parse every top-level datum of `tokens` with a fresh Parser."""
    return Parser(tokens).parse_all()


__all__ = ["Cursor", "Parser", "parse", "parse_all"]
