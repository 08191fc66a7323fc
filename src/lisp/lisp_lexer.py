"""
Tokenizer for LISP S-expression text.

Splits raw text into an ordered list of token strings. A token is either a single
parenthesis or a maximal run of non-structural characters.

Classes:
    Tokenizer: Scans one input string with a `[start, end)` window.

Functions:
    tokenize(text): Convenience wrapper that builds a fresh Tokenizer.

Example:
    >>> tokenize("(1 (2 3))")
    ['(', '1', '(', '2', '3', ')', ')']

Notes:
    Only the space character separates atoms. Tabs and newlines are ordinary characters
    and stay inside the atom they appear in.
"""

from lisp.lisp_constants import SPACE, is_structural


class Tokenizer:
    """Single-pass scanner over one input string.

    Attributes:
        text (str): The raw input being tokenized.
    """

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Tokenizer expects str, got {type(text).__name__}")
        self.text = text

    def tokenize(self) -> list[str]:
        """Scan the input left to right and return its tokens.

        Returns:
            list[str]: Tokens in source order. Empty input yields an empty list.
        """
        text = self.text
        tokens: list[str] = []
        start = 0
        end = 0

        while end < len(text):
            char = text[end]
            if not is_structural(char):
                end += 1
                continue

            if start < end:
                tokens.append(text[start:end])
            if char != SPACE:
                tokens.append(char)
            start = end + 1
            end += 1

        if start < len(text):
            tokens.append(text[start:])
        return tokens


def tokenize(text: str) -> list[str]:
    """Tokenize `text` with a fresh Tokenizer."""
    return Tokenizer(text).tokenize()


__all__ = ["Tokenizer", "tokenize"]
