"""
JSON emitter for LISP parse results.

Successful trees are written as nested `NodeDict` objects; failures as
`{"error": <variant name>, "message": <label>}` with the offending `token` and `position`
for unexpected tokens.

Trees are serialized from `walk()` events rather than through `json.dumps` on the whole
structure, so output depth is not bounded by the interpreter's recursion limit.
"""

import json
from typing import Any

from lisp.lisp_ast import EVENT_ATOM, EVENT_CLOSE, Atom, Group, ParsedNode, walk
from lisp.lisp_result import LispSyntaxError, UnexpectedToken

GROUP_PREFIX = '{"kind": "group", "children": ['
GROUP_SUFFIX = "]}"


def node_to_json(node: ParsedNode) -> str:
    """Serialize a tree to compact JSON, same separators as `json.dumps` defaults."""
    out: list[str] = []
    needs_sep = False
    for event, child in walk(node):
        if event == EVENT_CLOSE:
            out.append(GROUP_SUFFIX)
            needs_sep = True
            continue
        if needs_sep:
            out.append(", ")
        if event == EVENT_ATOM:
            assert isinstance(child, Atom)  # for mypy
            out.append(json.dumps(child.to_dict()))
            needs_sep = True
        else:
            out.append(GROUP_PREFIX)
            needs_sep = False
    return "".join(out)


class JsonEmitter:
    """Emits one JSON document per result.

    Attributes:
        lines (list[str]): Serialized documents.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_atom(self, node: Atom) -> None:
        self.lines.append(node_to_json(node))

    def emit_group(self, node: Group) -> None:
        self.lines.append(node_to_json(node))

    def emit_error(self, error: LispSyntaxError) -> None:
        payload: dict[str, Any] = {
            "error": type(error).__name__,
            "message": error.describe(),
        }
        if isinstance(error, UnexpectedToken):
            payload["token"] = error.token
            payload["position"] = error.position
        self.lines.append(json.dumps(payload))
