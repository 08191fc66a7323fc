"""
Entry points that run the full reader pipeline on a string.

Roughly speaking, interpretation consists of three steps:

1. tokenize: split the text into tokens.
   e.g. "(1 (2 3))" -> ["(", "1", "(", "2", "3", ")", ")"]
2. parse: group the tokens by parentheses.
   e.g. ["(", "1", "(", "2", "3", ")", ")"] -> [1, [2, 3]]
3. evaluate: not implemented.

Functions:
    interpret(text) -> ParseResult:
        Tokenize and parse the first datum of `text`.

    interpret_all(text) -> ParseResult:
        Tokenize and parse every top-level datum of `text` into one Group.

A fresh Tokenizer and Parser are built for every call; nothing is kept between calls.
"""

import logging

from lisp.lisp_lexer import Tokenizer
from lisp.lisp_parser import Parser
from lisp.lisp_result import ParseResult

logger = logging.getLogger(__name__)


def _read(text: str, all_data: bool) -> ParseResult:
    tokens = Tokenizer(text).tokenize()
    logger.debug("Tokenized %d character(s) into %d token(s)", len(text), len(tokens))
    parser = Parser(tokens)
    result = parser.parse_all() if all_data else parser.parse()
    if result.is_success():
        logger.debug("Parsed %s", type(result.node).__name__)
    else:
        logger.debug("Parse failed: %s", result.error)
    return result


def interpret(text: str) -> ParseResult:
    """Tokenize and parse `text`, returning the tagged result."""
    return _read(text, all_data=False)


def interpret_all(text: str) -> ParseResult:
    """Tokenize and parse all top-level data of `text` into a single Group."""
    return _read(text, all_data=True)


__all__ = ["interpret", "interpret_all"]
