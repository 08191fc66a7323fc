import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.strategies import composite

from lisp.lisp_ast import Atom, Group, ParsedNode
from lisp.lisp_lexer import tokenize
from lisp.lisp_parser import Cursor, Parser, parse, parse_all
from lisp.lisp_result import (
    ParseFailure,
    ParseSuccess,
    UnexpectedEndOfInput,
    UnexpectedToken,
)


def parse_text(text: str) -> ParsedNode:
    result = parse(tokenize(text))
    assert isinstance(result, ParseSuccess), result
    return result.node


def error_of(text: str) -> object:
    result = parse(tokenize(text))
    assert isinstance(result, ParseFailure), result
    return result.error


def test_parse_atom() -> None:
    assert parse_text("12") == Atom("12")


def test_parse_empty_group() -> None:
    assert parse_text("()") == Group([])


def test_parse_nested_groups() -> None:
    assert parse_text("((1 2) ((2) 3))") == Group(
        [
            Group([Atom("1"), Atom("2")]),
            Group([Group([Atom("2")]), Atom("3")]),
        ]
    )


def test_parse_group_with_empty_child() -> None:
    assert parse_text("(() a)") == Group([Group([]), Atom("a")])
    assert parse_text("(a ())") == Group([Atom("a"), Group([])])


def test_parse_single_child_group() -> None:
    assert parse_text("(x)") == Group([Atom("x")])


def test_unterminated_group() -> None:
    assert error_of("(1 2") == UnexpectedEndOfInput()


def test_lone_open_paren() -> None:
    assert error_of("(") == UnexpectedEndOfInput()


def test_nested_unterminated_group() -> None:
    assert error_of("((1 2)") == UnexpectedEndOfInput()
    assert error_of("(()") == UnexpectedEndOfInput()


def test_stray_close_paren() -> None:
    error = error_of(")")
    assert error == UnexpectedToken(")")
    assert isinstance(error, UnexpectedToken)
    assert error.position == 0


def test_empty_input() -> None:
    assert error_of("") == UnexpectedEndOfInput()
    assert error_of("    ") == UnexpectedEndOfInput()


def test_stray_close_after_datum_reports_its_position() -> None:
    error = error_of("(1 2))")
    assert error == UnexpectedToken(")")
    assert isinstance(error, UnexpectedToken)
    assert error.position == 4


def test_unclosed_group_after_datum() -> None:
    assert error_of("1 (") == UnexpectedEndOfInput()


def test_trailing_balanced_datums_are_ignored() -> None:
    assert parse_text("1 2") == Atom("1")
    assert parse_text("(a) (b c)") == Group([Atom("a")])


def test_failure_has_no_partial_tree() -> None:
    result = parse(tokenize("((1 2) (3"))
    assert isinstance(result, ParseFailure)
    assert result.node is None


def test_parse_all_collects_every_datum() -> None:
    result = parse_all(tokenize("(a) b ()"))
    assert result == ParseSuccess(Group([Group([Atom("a")]), Atom("b"), Group([])]))


def test_parse_all_empty_input() -> None:
    assert parse_all([]) == ParseSuccess(Group([]))


def test_parse_all_propagates_error() -> None:
    assert parse_all(tokenize("a ) b")) == ParseFailure(UnexpectedToken(")"))


def test_parser_is_reusable() -> None:
    parser = Parser(tokenize("(1 (2))"))
    first = parser.parse()
    second = parser.parse()
    assert first == second == ParseSuccess(Group([Atom("1"), Group([Atom("2")])]))


def test_parser_copies_tokens() -> None:
    tokens = tokenize("(1 2)")
    parser = Parser(tokens)
    tokens.clear()
    assert parser.parse() == ParseSuccess(Group([Atom("1"), Atom("2")]))


def test_parser_rejects_string_input() -> None:
    with pytest.raises(TypeError, match="not a str"):
        Parser("(1 2)")


def test_parser_rejects_non_string_tokens() -> None:
    with pytest.raises(TypeError, match="Tokens must be str"):
        Parser(["(", 1, ")"])  # type: ignore[list-item]


def test_parse_datum_advances_cursor() -> None:
    parser = Parser(tokenize("(a b) c"))
    cursor = Cursor(parser.tokens)
    assert parser.parse_datum(cursor) == ParseSuccess(Group([Atom("a"), Atom("b")]))
    assert cursor.position == 4
    assert parser.parse_datum(cursor) == ParseSuccess(Atom("c"))
    assert cursor.at_end()


def test_cursor_peek_past_end() -> None:
    cursor = Cursor(("(",))
    assert cursor.current() == "("
    assert cursor.peek() is None
    cursor.advance()
    assert cursor.current() is None
    assert cursor.at_end()


def test_deep_nesting_does_not_overflow() -> None:
    depth = 50000
    result = parse(tokenize("(" * depth + "x" + ")" * depth))
    assert isinstance(result, ParseSuccess)
    node = result.node
    for _ in range(depth):
        assert isinstance(node, Group)
        assert len(node) == 1
        node = node[0]
    assert node == Atom("x")


def test_deep_unterminated_nesting() -> None:
    depth = 50000
    assert error_of("(" * depth + "x") == UnexpectedEndOfInput()


@composite  # type: ignore[misc]
def trees(draw: st.DrawFn, max_depth: int = 4) -> ParsedNode:
    atom = st.text(alphabet="abcxyz0123456789+-*", min_size=1, max_size=5).map(Atom)
    if max_depth == 0 or draw(st.booleans()):
        return draw(atom)
    children = draw(st.lists(trees(max_depth=max_depth - 1), max_size=4))
    return Group(children)


@given(tree=trees())  # type: ignore[misc]
def test_canonical_form_reparses_to_equal_tree(tree: ParsedNode) -> None:
    assert parse(tokenize(tree.to_sexpr())) == ParseSuccess(tree)


@given(forest=st.lists(trees(), min_size=1, max_size=5))  # type: ignore[misc]
def test_balanced_input_never_fails(forest: list[ParsedNode]) -> None:
    text = " ".join(t.to_sexpr() for t in forest)
    assert parse(tokenize(text)) == ParseSuccess(forest[0])
    assert parse_all(tokenize(text)) == ParseSuccess(Group(forest))


@settings(deadline=None)  # type: ignore[misc]
@given(tree=trees(), extra=st.integers(min_value=1, max_value=3))  # type: ignore[misc]
def test_unmatched_close_fails_at_its_position(tree: ParsedNode, extra: int) -> None:
    tokens = tokenize(tree.to_sexpr()) + [")"] * extra
    result = parse(tokens)
    assert isinstance(result, ParseFailure)
    assert isinstance(result.error, UnexpectedToken)
    assert result.error.token == ")"
    assert result.error.position == len(tokens) - extra


@given(tree=trees(), missing=st.integers(min_value=1, max_value=3))  # type: ignore[misc]
def test_more_opens_than_closes_fails_with_end_of_input(
    tree: ParsedNode, missing: int
) -> None:
    text = "(" * missing + tree.to_sexpr()
    assert parse(tokenize(text)) == ParseFailure(UnexpectedEndOfInput())


@given(st.text(alphabet="() ab", max_size=40))  # type: ignore[misc]
def test_parse_never_raises(text: str) -> None:
    result = parse(tokenize(text))
    assert isinstance(result, (ParseSuccess, ParseFailure))
