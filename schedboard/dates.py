"""ISO date string helpers.

Dates cross every boundary of the application as ``YYYY-MM-DD`` strings,
which sort lexicographically in chronological order.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def parse_date_parts(value: str) -> tuple[int, int, int] | None:
    """
    Split ``YYYY-MM-DD`` into integers without validating the calendar.

    Returns None when the string does not have three integer components.
    ``"2026-02-30"`` parses to ``(2026, 2, 30)``; callers decide what an
    impossible day means.
    """
    parts = value.split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return None
    return year, month, day


def parse_date(value: str) -> date | None:
    """Parse leniently, returning None for anything that is not a real date."""
    parts = parse_date_parts(value)
    if parts is None:
        return None
    try:
        return date(*parts)
    except ValueError:
        return None


def date_range(start: str, end: str) -> list[str]:
    """
    Every date from start to end, both inclusive, ascending.

    An end before the start gives an empty list. Both arguments must be
    valid ISO dates.
    """
    start_date = date.fromisoformat(start)
    days = days_between(start, end)
    return [format_date(start_date + timedelta(days=offset)) for offset in range(days + 1)]


def days_between(start: str, end: str) -> int:
    """Signed number of calendar days from start to end."""
    return (date.fromisoformat(end) - date.fromisoformat(start)).days


def to_jst_date_string(moment: datetime) -> str:
    """Calendar date of an instant as seen in Tokyo."""
    return format_date(moment.astimezone(JST).date())


def jst_today() -> str:
    """Today's date in Tokyo."""
    return to_jst_date_string(datetime.now(JST))
