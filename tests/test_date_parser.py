"""Tests for date parsing utilities."""

import pytest
from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta
from achparse.utils.date_parser import (
    get_date_range,
    parse_ach_date,
    parse_ach_datetime,
    parse_date,
)


class TestParseAchDate:
    def test_valid(self):
        assert parse_ach_date("140903") == date(2014, 9, 3)

    def test_blank(self):
        assert parse_ach_date("      ") is None

    @pytest.mark.parametrize("value", ["141332", "ABCDEF", "1409"])
    def test_invalid(self, value):
        assert parse_ach_date(value) is None

    def test_datetime(self):
        assert parse_ach_datetime("140902", "0123") == datetime(2014, 9, 2, 1, 23)

    def test_datetime_invalid_time(self):
        assert parse_ach_datetime("140902", "2561") is None


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_today():
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_last_month():
    """Should be first day of last month."""
    today = date.today()
    expected = (today - relativedelta(months=1)).replace(day=1)
    assert parse_date("last month") == expected


def test_parse_this_week():
    result = parse_date("this week")
    assert result.weekday() == 0
    assert result <= date.today()


def test_parse_next_week():
    result = parse_date("next week")
    assert result.weekday() == 0
    assert result > date.today()


def test_parse_last_year():
    assert parse_date("last year") == date(date.today().year - 1, 1, 1)


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_date("not a date at all")


def test_get_date_range_last_month():
    start, end = get_date_range("last-month")
    assert start.day == 1
    assert end == date.today().replace(day=1) - timedelta(days=1)


def test_get_date_range_unknown():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
