import calendar
import datetime
from itertools import combinations

import pytest

from algonotes.dates import Date, DateInterval


def _as_date(d: datetime.date) -> Date:
    return Date(d.year, d.month, d.day)


def _calendar_days(start: datetime.date, count: int):
    return [start + datetime.timedelta(days=k) for k in range(count)]


def test_next_day_matches_calendar():
    for d in _calendar_days(datetime.date(2019, 12, 1), 500):
        assert _as_date(d).next_day() == _as_date(d + datetime.timedelta(days=1))


def test_previous_day_matches_calendar():
    for d in _calendar_days(datetime.date(1899, 12, 1), 500):
        assert _as_date(d).previous_day() == _as_date(d - datetime.timedelta(days=1))


def test_next_and_previous_are_inverse():
    for d in _calendar_days(datetime.date(2000, 1, 1), 400):
        date = _as_date(d)
        assert date.next_day().previous_day() == date


def test_leap_years_match_calendar():
    for year in list(range(1890, 2110)) + [1600, 1700, 1800, 2400]:
        assert Date(year, 1, 1).is_leap_year() == calendar.isleap(year)


def test_national_day():
    assert Date(2020, 10, 1).is_national_day()
    assert not Date(2020, 10, 2).is_national_day()
    assert not Date(2020, 1, 10).is_national_day()


def test_difference_of_example_dates():
    d1 = Date(2020, 1, 31)
    d2 = Date(2020, 10, 1)
    assert d2 - d1 == DateInterval(0, 8, 1)
    assert d1 - d2 == d2 - d1


def test_difference_of_equal_dates_is_empty():
    assert Date(2020, 5, 5) - Date(2020, 5, 5) == DateInterval()


def test_adding_difference_restores_later_date():
    samples = [
        Date(2019, 1, 31), Date(2019, 2, 28), Date(2020, 2, 29), Date(2020, 3, 1),
        Date(2020, 5, 20), Date(2020, 11, 15), Date(2021, 2, 20), Date(2021, 5, 10),
        Date(2021, 12, 31), Date(2023, 1, 1), Date(2024, 7, 30),
    ]
    for a, b in combinations(samples, 2):
        earlier, later = min(a, b), max(a, b)
        interval = later - earlier
        assert earlier + interval == later
        assert interval + earlier == later


def test_adding_days_only_matches_calendar():
    start = Date(2020, 1, 31)
    for days in range(0, 800, 37):
        expected = datetime.date(2020, 1, 31) + datetime.timedelta(days=days)
        assert start + DateInterval(days=days) == _as_date(expected)


def test_adding_months_clamps_day():
    assert Date(2021, 1, 31) + DateInterval(months=1) == Date(2021, 2, 28)


def test_str_uses_space_separated_fields():
    assert str(Date(2020, 1, 31)) == "2020 1 31"
    assert str(DateInterval(1, 2, 3)) == "1 2 3"


@pytest.mark.parametrize("fields", [(2021, 2, 29), (2020, 13, 1), (2020, 4, 31), (2020, 1, 0)])
def test_invalid_dates_raise(fields):
    with pytest.raises(ValueError):
        Date(*fields)


def test_arithmetic_with_wrong_types_raises():
    with pytest.raises(TypeError):
        Date(2020, 1, 1) + 5
    with pytest.raises(TypeError):
        Date(2020, 1, 1) - 5