import pytest
from hypothesis import given
from hypothesis import strategies as st

from utilkit.string_funcs import (
    Alignment,
    add_padding,
    align,
    case_format,
    remove_newline,
    split,
    to_lower,
    to_upper,
    trim,
    trim_end,
    trim_front,
)

ASCII = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126))


def test_split_skips_empty_pieces():
    assert split("a,b,,c", 10, ",") == ["a", "b", "c"]


def test_split_honours_count():
    assert split("a b c d", 2, " ") == ["a", "b"]


def test_split_multiple_delimiters():
    assert split(";a;b,c,", 5, ",;") == ["a", "b", "c"]


def test_split_without_pieces():
    assert split(",,,", 3, ",") == []


def test_split_rejects_bad_count():
    with pytest.raises(ValueError):
        split("a b", 0, " ")


@given(ASCII, st.integers(1, 10))
def test_split_pieces_are_clean(text, count):
    pieces = split(text, count, " ,")
    assert len(pieces) <= count
    assert all(piece and " " not in piece and "," not in piece for piece in pieces)
    assert pieces == text.replace(",", " ").split()[:count]


def test_add_padding():
    assert add_padding("ab", 10, 2, 3, "*") == "**ab***"


def test_add_padding_truncates_to_width():
    result = add_padding("abc", 4, 2, 2, "-")
    assert len(result) == 4
    assert result.startswith("--")


def test_add_padding_rejects_bad_fill_and_lengths():
    with pytest.raises(ValueError):
        add_padding("ab", 10, 1, 1, "**")
    with pytest.raises(ValueError):
        add_padding("ab", 10, -1, 1, "*")


def test_align_center_puts_extra_at_back():
    assert align("ab", 5, Alignment.CENTER, "*") == "*ab**"


@given(ASCII.filter(lambda s: "." not in s), st.integers(0, 30))
def test_align_modes(text, extra):
    width = len(text) + extra
    left = align(text, width, Alignment.LEFT, ".")
    right = align(text, width, "r", ".")
    center = align(text, width, Alignment.CENTER, ".")
    assert len(left) == len(right) == len(center) == width
    assert left.startswith(text)
    assert right.endswith(text)
    front = len(center) - len(center.lstrip("."))
    back = len(center) - len(center.rstrip("."))
    if text:
        assert center[front:width - back] == text
        assert back - front in (0, 1)


def test_align_truncates_long_text():
    text = "abcdefgh"
    assert align(text, 3, Alignment.LEFT) == text[:3]


def test_align_rejects_unknown_mode():
    with pytest.raises(ValueError):
        align("ab", 5, "x")


def test_trims():
    assert trim("xxabcxx", "x") == "abc"
    assert trim_front("xxabcxx", "x") == "abcxx"
    assert trim_end("xxabcxx", "x") == "xxabc"
    assert trim("xxxx", "x") == ""


def test_trim_rejects_multi_char():
    with pytest.raises(ValueError):
        trim("abc", "ab")


@given(ASCII)
def test_case_changes_match_builtin_on_ascii(text):
    assert to_upper(text) == text.upper()
    assert to_lower(text) == text.lower()


def test_case_changes_leave_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_remove_newline():
    assert remove_newline("line\n") == "line"
    assert remove_newline("a\n\n") == "a\n"
    assert remove_newline("plain") == "plain"
    assert remove_newline("") == ""


def test_case_format():
    assert case_format("hELLO") == "Hello"
    assert case_format("") == ""


@given(ASCII.filter(bool))
def test_case_format_invariants(text):
    result = case_format(text)
    assert len(result) == len(text)
    assert result.lower() == text.lower()
    assert result[1:] == result[1:].lower()