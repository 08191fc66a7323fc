"""
Shared lexical constants for the LISP reader.

Only three characters carry structure in the notation: the token separator (a single
space) and the two parentheses. Everything else is part of an atom.
"""

SPACE = " "
OPEN_PAREN = "("
CLOSE_PAREN = ")"

STRUCTURAL_CHARS: frozenset[str] = frozenset({SPACE, OPEN_PAREN, CLOSE_PAREN})


def is_structural(char: str) -> bool:
    """Return True if `char` ends the pending atom."""
    return char in STRUCTURAL_CHARS


__all__ = ["CLOSE_PAREN", "OPEN_PAREN", "SPACE", "STRUCTURAL_CHARS", "is_structural"]
