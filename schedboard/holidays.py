"""Japanese public holiday calendar.

The table covers the Act on National Holidays from 1948 onward, including
the 2020/2021 Olympic shifts and the 2019 era-change ceremonies. Bridge
days (a weekday between two holidays) and substitute days (the first free
day after a holiday falling on Sunday) are derived after the statutory
dates are placed.
"""

import logging
import math
from datetime import MAXYEAR, MINYEAR, date, timedelta

from schedboard.dates import format_date, parse_date, parse_date_parts

logger = logging.getLogger(__name__)

MONDAY = 0
SATURDAY = 5
SUNDAY = 6

BRIDGE_HOLIDAY = "National Holiday"
SUBSTITUTE_HOLIDAY = "Substitute Holiday"
BRIDGE_HOLIDAY_SINCE = 1985
SUBSTITUTE_HOLIDAY_SINCE = 1973

# (month, day, name, in force from)
FIXED_HOLIDAYS = [
    (1, 1, "New Year's Day", 1949),
    (2, 11, "National Foundation Day", 1967),
    (2, 23, "Emperor's Birthday", 2020),
    (4, 29, "Showa Day", 1949),
    (5, 3, "Constitution Memorial Day", 1949),
    (5, 4, "Greenery Day", 2007),
    (5, 5, "Children's Day", 1949),
    (11, 3, "Culture Day", 1948),
    (11, 23, "Labor Thanksgiving Day", 1948),
]

# (year, month, day, name)
ONE_OFF_HOLIDAYS = [
    (1990, 11, 12, "Enthronement Ceremony"),
    (1993, 6, 9, "Crown Prince's Wedding"),
    (2019, 5, 1, "Accession Day"),
    (2019, 10, 22, "Enthronement Ceremony"),
]

# Tokyo Olympics moved three holidays around the opening and closing ceremonies
MARINE_DAY_OVERRIDES = {2020: (7, 23), 2021: (7, 22)}
MOUNTAIN_DAY_OVERRIDES = {2020: (8, 10), 2021: (8, 8)}
SPORTS_DAY_OVERRIDES = {2020: (7, 24), 2021: (7, 23)}


def _nth_monday(year: int, month: int, n: int) -> date:
    first = date(year, month, 1)
    offset = (MONDAY - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def _equinox_day(base: float, year: int) -> int:
    elapsed = year - 1980
    return math.floor(base + 0.242194 * elapsed - elapsed // 4)


def vernal_equinox_day(year: int) -> int:
    """Day of March on which the vernal equinox holiday falls."""
    return _equinox_day(20.8431, year)


def autumnal_equinox_day(year: int) -> int:
    """Day of September on which the autumnal equinox holiday falls."""
    return _equinox_day(23.2488, year)


def _statutory_holidays(year: int) -> dict[date, str]:
    """Fixed, moveable, equinox and one-off holidays for a year."""
    holidays: dict[date, str] = {}

    def add(month: int, day: int, name: str) -> None:
        holidays[date(year, month, day)] = name

    for month, day, name, since in FIXED_HOLIDAYS:
        if year >= since:
            add(month, day, name)

    if year >= 2000:
        holidays[_nth_monday(year, 1, 2)] = "Coming of Age Day"
    elif year >= 1949:
        add(1, 15, "Coming of Age Day")

    if year >= 1949:
        add(3, vernal_equinox_day(year), "Vernal Equinox Day")
    if year >= 1948:
        add(9, autumnal_equinox_day(year), "Autumnal Equinox Day")

    if year in MARINE_DAY_OVERRIDES:
        add(*MARINE_DAY_OVERRIDES[year], "Marine Day")
    elif year >= 2003:
        holidays[_nth_monday(year, 7, 3)] = "Marine Day"
    elif year >= 1996:
        add(7, 20, "Marine Day")

    if year in MOUNTAIN_DAY_OVERRIDES:
        add(*MOUNTAIN_DAY_OVERRIDES[year], "Mountain Day")
    elif year >= 2016:
        add(8, 11, "Mountain Day")

    if year >= 2003:
        holidays[_nth_monday(year, 9, 3)] = "Respect for the Aged Day"
    elif year >= 1966:
        add(9, 15, "Respect for the Aged Day")

    sports_day = "Sports Day" if year >= 2020 else "Health and Sports Day"
    if year in SPORTS_DAY_OVERRIDES:
        add(*SPORTS_DAY_OVERRIDES[year], sports_day)
    elif year >= 2000:
        holidays[_nth_monday(year, 10, 2)] = sports_day
    elif year >= 1966:
        add(10, 10, sports_day)

    if 1989 <= year <= 2018:
        add(12, 23, "Emperor's Birthday")
    for one_off_year, month, day, name in ONE_OFF_HOLIDAYS:
        if year == one_off_year:
            add(month, day, name)

    return holidays


def _add_bridge_holidays(year: int, holidays: dict[date, str]) -> None:
    if year < BRIDGE_HOLIDAY_SINCE:
        return
    bridges = []
    for holiday in sorted(holidays):
        candidate = holiday + timedelta(days=1)
        if candidate.year != year or candidate in holidays:
            continue
        if candidate + timedelta(days=1) in holidays:
            bridges.append(candidate)
    for bridge in bridges:
        holidays[bridge] = BRIDGE_HOLIDAY


def _add_substitute_holidays(year: int, holidays: dict[date, str]) -> None:
    if year < SUBSTITUTE_HOLIDAY_SINCE:
        return
    # Ascending order so a substitute placed earlier is skipped by later ones
    for holiday in sorted(holidays):
        if holiday.weekday() != SUNDAY:
            continue
        substitute = holiday + timedelta(days=1)
        while substitute in holidays:
            substitute += timedelta(days=1)
        holidays[substitute] = SUBSTITUTE_HOLIDAY


def compute_holidays(year: int) -> dict[str, str]:
    """Build the full holiday table for a year, ISO date to name, ascending."""
    if not MINYEAR <= year <= MAXYEAR:
        return {}
    holidays = _statutory_holidays(year)
    _add_bridge_holidays(year, holidays)
    _add_substitute_holidays(year, holidays)
    return {format_date(day): holidays[day] for day in sorted(holidays)}


def is_weekend(value: str) -> bool:
    """Whether a ``YYYY-MM-DD`` date is a Saturday or Sunday."""
    target_date = parse_date(value)
    if target_date is None:
        return False
    return target_date.weekday() in (SATURDAY, SUNDAY)


class HolidayCalendar:
    """Holiday lookups backed by a per-instance, year-keyed cache."""

    def __init__(self) -> None:
        self._tables: dict[int, dict[str, str]] = {}

    def _table(self, year: int) -> dict[str, str]:
        table = self._tables.get(year)
        if table is None:
            table = compute_holidays(year)
            logger.debug("Computed %d holidays for %d", len(table), year)
            self._tables[year] = table
        return table

    @property
    def cached_years(self) -> list[int]:
        """Years whose table has been computed, ascending."""
        return sorted(self._tables)

    def clear_cache(self) -> None:
        """Drop every cached year."""
        self._tables.clear()

    def holiday_set(self, year: int) -> frozenset[str]:
        """All holiday dates of a year."""
        return frozenset(self._table(year))

    def holidays_for_year(self, year: int) -> dict[str, str]:
        """Holiday dates of a year mapped to their names, ascending."""
        return dict(self._table(year))

    def holiday_name(self, value: str) -> str | None:
        """Name of the holiday on a date, or None."""
        parts = parse_date_parts(value)
        if parts is None:
            return None
        year, month, day = parts
        return self._table(year).get(f"{year:04d}-{month:02d}-{day:02d}")

    def is_holiday(self, value: str) -> bool:
        """Whether a date is a Japanese public holiday."""
        return self.holiday_name(value) is not None

    def is_non_working_day(self, value: str) -> bool:
        """
        Whether a date is a non-working day.

        A non-working day is:
        - A weekend (Saturday/Sunday)
        - A Japanese public holiday, including bridge and substitute days
        """
        return is_weekend(value) or self.is_holiday(value)


default_calendar = HolidayCalendar()


def is_japanese_holiday(value: str) -> bool:
    """Check if a date is a Japanese public holiday."""
    return default_calendar.is_holiday(value)


def get_holiday_name(value: str) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    return default_calendar.holiday_name(value)


def is_non_working_day(value: str) -> bool:
    """Check if a date is a weekend or a Japanese public holiday."""
    return default_calendar.is_non_working_day(value)


def holidays_for_year(year: int) -> dict[str, str]:
    """Holiday table of a year from the shared calendar."""
    return default_calendar.holidays_for_year(year)
