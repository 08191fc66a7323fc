"""
Provides the `Formatter` class and emitter interface for rendering parse results as text.

Classes and Features:
    - Emitter (Protocol): Interface for all output emitters.
    - Formatter: Picks an emitter by output format name ("list", "sexpr", "json") and
      dispatches each result to the matching `emit_*` method.

Example:
    >>> Formatter("sexpr").format(interpret("((1 2) 3)"))
    '((1 2) 3)'

Raises:
    ValueError: If the output format is not supported.
    TypeError: If something other than a ParseResult is formatted.
    NotImplementedError: If the emitter lacks an `emit_*` method for a node kind.
"""

from collections.abc import Callable
from typing import Protocol

from lisp.emitters.json_emitter import JsonEmitter
from lisp.emitters.text_emitter import ListEmitter, SexprEmitter
from lisp.lisp_result import LispSyntaxError, ParseFailure, ParseResult, ParseSuccess


class Emitter(Protocol):  # pragma: no cover
    """Protocol for all result emitters.

    Methods:
        get_output(): Returns everything emitted so far as a string.
        emit_error(error): Renders a syntax error.
    """

    def get_output(self) -> str: ...  # pragma: no cover

    def emit_error(self, error: LispSyntaxError) -> None: ...  # pragma: no cover


EMITTERS: dict[str, Callable[[], Emitter]] = {
    "list": ListEmitter,
    "sexpr": SexprEmitter,
    "json": JsonEmitter,
}
"""Output format name to emitter factory."""


class Formatter:
    """Renders ParseResults with the emitter selected by format name.

    Attributes:
        target (str): Normalized output format name.
    """

    def __init__(self, target: str = "list") -> None:
        """Validate the output format.

        Args:
            target: One of the keys of EMITTERS, case-insensitive.

        Raises:
            ValueError: If the format is not supported.
        """
        target = target.lower()
        if target not in EMITTERS:
            raise ValueError(f"Unknown output format: {target!r}")
        self.target = target

    def format(self, *results: ParseResult) -> str:
        """Render one or more results, one per line, with a fresh emitter.

        Raises:
            TypeError: If an argument is not a ParseSuccess or ParseFailure.
        """
        if not all(isinstance(r, (ParseSuccess, ParseFailure)) for r in results):
            raise TypeError("All items must be ParseResult instances.")
        emitter = EMITTERS[self.target]()
        for result in results:
            self._visit(emitter, result)
        return emitter.get_output()

    def _visit(self, emitter: Emitter, result: ParseResult) -> None:
        if isinstance(result, ParseFailure):
            emitter.emit_error(result.error)
            return
        method_name = f"emit_{result.node.kind}"
        if not hasattr(emitter, method_name):
            raise NotImplementedError(
                f"No emitter method for node kind '{result.node.kind}' "
                f"(format {self.target!r})"
            )
        getattr(emitter, method_name)(result.node)


__all__ = ["EMITTERS", "Emitter", "Formatter"]
