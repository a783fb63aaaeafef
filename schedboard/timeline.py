"""Day columns for the schedule's Gantt header."""

from calendar import monthrange
from datetime import date

from schedboard.dates import date_range, days_between, format_date
from schedboard.holidays import HolidayCalendar, default_calendar, is_weekend
from schedboard.models import DayType, TimelineDay


def classify_day(value: str, calendar: HolidayCalendar = default_calendar) -> TimelineDay:
    """Classify one date, weekend taking precedence over holiday."""
    holiday_name = calendar.holiday_name(value)

    # Determine day type
    if is_weekend(value):
        day_type = DayType.WEEKEND
    elif holiday_name is not None:
        day_type = DayType.HOLIDAY
    else:
        day_type = DayType.WORKING_DAY

    return TimelineDay(date=value, day_type=day_type, holiday_name=holiday_name)


def build_timeline(
    start: str, end: str, calendar: HolidayCalendar = default_calendar
) -> list[TimelineDay]:
    """One classified column per date from start to end inclusive."""
    return [classify_day(value, calendar) for value in date_range(start, end)]


def default_range(today: date) -> tuple[str, str]:
    """
    Default visible window: start of last month to end of next month.

    Crosses year boundaries, so January opens on the previous December.
    """
    if today.month == 1:
        start = date(today.year - 1, 12, 1)
    else:
        start = date(today.year, today.month - 1, 1)

    if today.month == 12:
        next_year, next_month = today.year + 1, 1
    else:
        next_year, next_month = today.year, today.month + 1
    _, days_in_month = monthrange(next_year, next_month)
    end = date(next_year, next_month, days_in_month)

    return format_date(start), format_date(end)


def index_of(timeline: list[TimelineDay], value: str) -> int | None:
    """Column index of a date, or None when it is outside the timeline."""
    if not timeline:
        return None
    offset = days_between(timeline[0].date, value)
    if 0 <= offset < len(timeline):
        return offset
    return None
