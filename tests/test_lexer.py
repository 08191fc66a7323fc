import pytest
from hypothesis import given
from hypothesis import strategies as st

from lisp.lisp_lexer import Tokenizer, tokenize


def test_empty_input() -> None:
    assert tokenize("") == []


def test_single_atom() -> None:
    assert tokenize("12") == ["12"]


def test_empty_group() -> None:
    assert tokenize("()") == ["(", ")"]


def test_simple_group() -> None:
    assert tokenize("(1 2)") == ["(", "1", "2", ")"]


def test_repeated_spaces_produce_no_empty_tokens() -> None:
    assert tokenize("  a  b ") == ["a", "b"]


def test_only_spaces() -> None:
    assert tokenize("     ") == []


def test_nested_groups() -> None:
    assert tokenize("((1 2) ((2) 3))") == [
        "(",
        "(",
        "1",
        "2",
        ")",
        "(",
        "(",
        "2",
        ")",
        "3",
        ")",
        ")",
    ]


def test_parentheses_split_atoms_without_spaces() -> None:
    assert tokenize("a(b)c") == ["a", "(", "b", ")", "c"]


def test_adjacent_close_parens() -> None:
    assert tokenize("))") == [")", ")"]


def test_newlines_and_tabs_stay_inside_atoms() -> None:
    assert tokenize("a\tb\nc d") == ["a\tb\nc", "d"]


def test_multichar_atoms() -> None:
    assert tokenize("(define x 42)") == ["(", "define", "x", "42", ")"]


def test_tokenizer_class_matches_function() -> None:
    assert Tokenizer("(x y)").tokenize() == tokenize("(x y)")


def test_tokenizer_rejects_non_string() -> None:
    with pytest.raises(TypeError, match="expects str"):
        Tokenizer(["(", ")"])  # type: ignore[arg-type]


@given(st.text(max_size=100))  # type: ignore[misc]
def test_tokens_never_contain_structural_chars(text: str) -> None:
    for tok in tokenize(text):
        assert tok
        if tok in ("(", ")"):
            continue
        assert " " not in tok
        assert "(" not in tok
        assert ")" not in tok


@given(st.text(max_size=100))  # type: ignore[misc]
def test_tokens_preserve_non_space_characters(text: str) -> None:
    assert "".join(tokenize(text)) == text.replace(" ", "")


@given(st.lists(st.text(alphabet="abc123", min_size=1), max_size=10))  # type: ignore[misc]
def test_space_separated_atoms_round_trip(atoms: list[str]) -> None:
    assert tokenize(" ".join(atoms)) == atoms
