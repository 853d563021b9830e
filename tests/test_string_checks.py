import pytest
from hypothesis import given
from hypothesis import strategies as st

from utilkit.string_checks import has_suffix, is_alpha, is_digit, is_double, is_int


def test_is_alpha():
    assert is_alpha("Hello")
    assert not is_alpha("")
    assert not is_alpha("abc1")
    assert not is_alpha("two words")


def test_is_digit():
    assert is_digit("0123")
    assert not is_digit("")
    assert not is_digit("12a")
    assert not is_digit("-1")


@given(st.integers(min_value=0))
def test_is_digit_for_non_negative_numbers(n):
    assert is_digit(str(n))


def test_is_int():
    assert is_int("-42")
    assert is_int("7")
    assert not is_int("-")
    assert not is_int("")
    assert not is_int("4-2")
    assert not is_int("1.0")


@given(st.integers())
def test_is_int_for_any_integer(n):
    assert is_int(str(n))


@pytest.mark.parametrize("text", ["3.14", "-0.5", "5.", ".5", "12", "-7"])
def test_is_double_accepts(text):
    assert is_double(text)


@pytest.mark.parametrize("text", [".", "", "-", "1.2.3", "1e5", "abc", "1.a"])
def test_is_double_rejects(text):
    assert not is_double(text)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_is_double_for_formatted_floats(x):
    assert is_double(f"{x:.3f}")


def test_has_suffix():
    assert has_suffix("data.csv", ".csv")
    assert not has_suffix("csv", ".csv")
    assert not has_suffix("data.txt", ".csv")
    assert has_suffix("anything", "")


@pytest.mark.parametrize(
    "func", [is_alpha, is_digit, is_int, is_double]
)
def test_none_is_rejected(func):
    with pytest.raises(TypeError):
        func(None)


def test_has_suffix_rejects_none():
    with pytest.raises(TypeError):
        has_suffix(None, ".csv")
    with pytest.raises(TypeError):
        has_suffix("file.csv", None)