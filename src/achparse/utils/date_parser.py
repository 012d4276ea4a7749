"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

ACH_DATE_FORMAT = "%y%m%d"
ACH_TIME_FORMAT = "%H%M"


def parse_ach_date(value: str) -> Optional[date]:
    """Parse a YYMMDD date field.

    Args:
        value: Raw field text, possibly blank-padded

    Returns:
        Date object, or None if the field is blank or not a valid date
    """
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, ACH_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_ach_datetime(date_value: str, time_value: str) -> Optional[datetime]:
    """Combine a YYMMDD date field and an HHMM time field.

    A blank time is read as midnight. Returns None if either part is invalid.
    """
    day = parse_ach_date(date_value)
    if day is None:
        return None
    time_value = time_value.strip()
    if not time_value:
        return datetime.combine(day, datetime.min.time())
    try:
        clock = datetime.strptime(time_value, ACH_TIME_FORMAT).time()
    except ValueError:
        return None
    return datetime.combine(day, clock)


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms "today", "yesterday", "tomorrow", "last/this/next month",
    "last/this/next year" and "last/this/next week".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    for prefix, step in (("last ", -1), ("this ", 0), ("next ", 1)):
        if not date_str.startswith(prefix):
            continue
        period = date_str[len(prefix):]
        if period == "month":
            return (today + relativedelta(months=step)).replace(day=1)
        if period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=step)
        if period == "week":
            # Weeks start on Monday
            return today - timedelta(days=today.weekday()) + timedelta(weeks=step)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, this-week, last-month,
            last-year, last-week

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return (today.replace(day=1), today)
    if period == "this-year":
        return (today.replace(month=1, day=1), today)
    if period == "this-week":
        return (today - timedelta(days=today.weekday()), today)
    if period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)
    if period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)
    if period == "last-week":
        start_date = today - timedelta(days=today.weekday() + 7)
        return (start_date, start_date + timedelta(days=6))

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
        "this-week, last-month, last-year, last-week"
    )
