import pytest

from utilkit.date import Date, is_leap_year, is_valid_date


@pytest.mark.parametrize("year", [2000, 2024, 1996, 2400])
def test_leap_years(year):
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1900, 2023, 2100, 2001])
def test_non_leap_years(year):
    assert not is_leap_year(year)


def test_february_29_in_leap_year():
    assert Date(29, 2, 2024).is_valid(1900, 2100)
    assert Date(29, 2, 2000).is_valid(1900, 2100)


def test_february_29_in_common_year():
    assert not Date(29, 2, 2023).is_valid(1900, 2100)
    assert not Date(29, 2, 1900).is_valid(1800, 2100)


@pytest.mark.parametrize("month", [4, 6, 9, 11])
def test_thirty_day_months(month):
    assert Date(30, month, 2020).is_valid(2000, 2030)
    assert not Date(31, month, 2020).is_valid(2000, 2030)


@pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
def test_thirty_one_day_months(month):
    assert Date(31, month, 2020).is_valid(2000, 2030)
    assert not Date(32, month, 2020).is_valid(2000, 2030)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    assert not Date(1, month, 2020).is_valid(2000, 2030)


def test_day_zero_invalid():
    assert not Date(0, 1, 2020).is_valid(2000, 2030)


def test_year_bounds_inclusive():
    assert Date(1, 1, 2000).is_valid(2000, 2030)
    assert Date(31, 12, 2030).is_valid(2000, 2030)
    assert not Date(31, 12, 1999).is_valid(2000, 2030)
    assert not Date(1, 1, 2031).is_valid(2000, 2030)


def test_function_and_method_agree():
    for date in [Date(29, 2, 2024), Date(31, 4, 2020), Date(15, 6, 1850)]:
        assert is_valid_date(date, 1900, 2100) == date.is_valid(1900, 2100)


def test_date_is_immutable_and_comparable():
    date = Date(1, 2, 2003)
    assert date == Date(1, 2, 2003)
    with pytest.raises(AttributeError):
        date.day = 5