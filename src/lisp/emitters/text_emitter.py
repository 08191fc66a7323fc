"""
Plain-text emitters for LISP parse results.

Classes:
    ListEmitter: Renders groups as bracket-and-comma listings, e.g. `[1, [2, 3]]`.
    SexprEmitter: Renders groups back into canonical S-expression text, e.g. `(1 (2 3))`.

Both emitters render atoms as their token and syntax errors as a human-readable label.
Output accumulates in `lines` and is joined by `get_output()`.
"""

from lisp.lisp_ast import Atom, Group
from lisp.lisp_result import LispSyntaxError


class ListEmitter:
    """Emits the bracket-and-comma listing of a tree.

    Attributes:
        lines (list[str]): One rendered entry per emitted result.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_atom(self, node: Atom) -> None:
        self.lines.append(node.token)

    def emit_group(self, node: Group) -> None:
        self.lines.append(str(node))

    def emit_error(self, error: LispSyntaxError) -> None:
        self.lines.append(error.describe())


class SexprEmitter(ListEmitter):
    """Emits canonical S-expression text: single spaces, parenthesized groups."""

    def emit_group(self, node: Group) -> None:
        self.lines.append(node.to_sexpr())
