"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday", "this month" and "last month"
    (the latter two resolve to the first day of the month).

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
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``day``."""
    first = day.replace(day=1)
    last = first + relativedelta(months=1) - timedelta(days=1)
    return first, last


def month_range(month: str) -> tuple[date, date]:
    """Get start and end dates for a budget month.

    Accepts "2024-03", "2024-03-01", "March 2024", "this month" or
    "last month".

    Raises:
        ValueError: If the month cannot be parsed
    """
    month = month.strip()
    if month.lower() in ("this month", "last month"):
        return month_bounds(parse_date(month))

    # A missing day defaults to the 1st
    default = datetime.combine(date.today().replace(day=1), datetime.min.time())
    try:
        dt = date_parser.parse(month, default=default)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month}': {e}")
    return month_bounds(dt.date())


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: Period string (this-month, last-month)

    Returns:
        Tuple of (start_date, end_date) covering the whole month

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return month_bounds(today)

    elif period == "last-month":
        return month_bounds(today - relativedelta(months=1))

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: this-month, last-month")
