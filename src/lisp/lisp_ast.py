"""
Defines the parse tree produced by the LISP reader.

Classes:
    Atom:
        A leaf holding a single token string (a number, a symbol, anything that is not a
        parenthesis).

    Group:
        An ordered, possibly empty sequence of child nodes that was enclosed by `(` and `)`.
        The parentheses themselves never appear in the tree.

    NodeDict:
        TypedDict shape used when serializing nodes to plain dictionaries (JSON output,
        debugging).

Functions:
    walk(node):
        Iterative pre-order traversal yielding ("atom", Atom), ("open", Group) and
        ("close", None) events. Rendering, equality and hashing are all built on it so that
        very deep trees never exhaust the interpreter's call stack.

Example:
    >>> tree = Group([Atom("1"), Group([Atom("2"), Atom("3")])])
    >>> str(tree)
    '[1, [2, 3]]'
    >>> tree.to_sexpr()
    '(1 (2 3))'
"""

from collections.abc import Iterable, Iterator
from typing import Any, TypedDict, Union

from lisp.lisp_constants import CLOSE_PAREN, OPEN_PAREN

EVENT_ATOM = "atom"
EVENT_OPEN = "open"
EVENT_CLOSE = "close"


class NodeDict(TypedDict, total=False):
    """
    Serialized form of a parse tree node.

    Fields:
        kind (str): Either "atom" or "group".
        token (str): The atom's token (atoms only).
        children (list[NodeDict]): Child nodes in parse order (groups only).
    """

    kind: str
    token: str
    children: list["NodeDict"]


class Atom:
    """A single indivisible token.

    Attributes:
        kind (str): Always "atom".
        token (str): The raw token text.
    """

    kind = "atom"

    def __init__(self, token: str) -> None:
        if not isinstance(token, str):
            raise TypeError(f"Atom token must be str, got {type(token).__name__}")
        self.token = token

    def __repr__(self) -> str:
        return f"Atom({self.token!r})"

    def __str__(self) -> str:
        return self.token

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Atom) and self.token == other.token

    def __hash__(self) -> int:
        return hash((self.kind, self.token))

    def to_sexpr(self) -> str:
        return self.token

    def to_dict(self) -> NodeDict:
        return {"kind": self.kind, "token": self.token}


class Group:
    """A parenthesized, ordered collection of child nodes.

    `Group([])` is the empty list `()`. Children are stored as a tuple, so a group never
    changes after construction.

    Attributes:
        kind (str): Always "group".
        children (tuple[ParsedNode, ...]): Child nodes in parse order.

    Methods:
        to_sexpr(): Canonical text form, e.g. `(1 (2 3))`.
        to_dict(): Nested dictionaries, see NodeDict.
    """

    kind = "group"

    def __init__(self, children: Iterable["ParsedNode"] = ()) -> None:
        items = tuple(children)
        for child in items:
            if not isinstance(child, (Atom, Group)):
                raise TypeError(
                    f"Group children must be Atom or Group, got {type(child).__name__}"
                )
        self.children: tuple[ParsedNode, ...] = items

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["ParsedNode"]:
        return iter(self.children)

    def __getitem__(self, index: int) -> "ParsedNode":
        return self.children[index]

    def __repr__(self) -> str:
        return _render(self, repr, "Group([", "])", ", ")

    def __str__(self) -> str:
        return _render(self, str, "[", "]", ", ")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Group):
            return False
        if self is other:
            return True
        if len(self.children) != len(other.children):
            return False
        return _signature(self) == _signature(other)

    def __hash__(self) -> int:
        return hash(tuple(_signature(self)))

    def to_sexpr(self) -> str:
        return _render(self, str, OPEN_PAREN, CLOSE_PAREN, " ")

    def to_dict(self) -> NodeDict:
        root: list[NodeDict] = []
        stack: list[list[NodeDict]] = [root]
        for event, node in walk(self):
            if event == EVENT_ATOM:
                assert isinstance(node, Atom)  # for mypy
                stack[-1].append(node.to_dict())
            elif event == EVENT_OPEN:
                entry: NodeDict = {"kind": "group", "children": []}
                stack[-1].append(entry)
                stack.append(entry["children"])
            else:
                stack.pop()
        return root[0]


ParsedNode = Union[Atom, Group]
"""A node of the parse tree: an Atom or a Group."""


def walk(node: ParsedNode) -> Iterator[tuple[str, ParsedNode | None]]:
    """Yield traversal events for `node` in pre-order without recursion.

    Yields:
        ("atom", Atom) for every leaf, ("open", Group) when a group starts and
        ("close", None) when it ends.
    """
    stack: list[Iterator[ParsedNode]] = [iter((node,))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            if stack:
                yield EVENT_CLOSE, None
            continue
        if isinstance(child, Atom):
            yield EVENT_ATOM, child
        else:
            yield EVENT_OPEN, child
            stack.append(iter(child.children))


def _signature(node: ParsedNode) -> list[tuple[str, str | None]]:
    return [
        (event, n.token if isinstance(n, Atom) else None) for event, n in walk(node)
    ]


def _render(node: ParsedNode, fmt: Any, open_: str, close: str, sep: str) -> str:
    out: list[str] = []
    needs_sep = False
    for event, child in walk(node):
        if event == EVENT_CLOSE:
            out.append(close)
            needs_sep = True
            continue
        if needs_sep:
            out.append(sep)
        if event == EVENT_ATOM:
            out.append(fmt(child))
            needs_sep = True
        else:
            out.append(open_)
            needs_sep = False
    return "".join(out)


__all__ = ["Atom", "Group", "NodeDict", "ParsedNode", "walk"]
