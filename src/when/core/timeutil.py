"""Calendar and clock arithmetic used by the parser.

Calendar units (year, month, week, day) move the wall clock: adding a day
across a daylight-saving change keeps the same local time. Clock units
(hour, minute, second) are true elapsed time and are added in UTC, so the
local time after a daylight-saving change differs by the size of the shift.

Out-of-range fields are normalised rather than rejected: month 13
is January of the next year and January 32nd is February 1st. Values are never
clamped, so January 31st plus one month is March 3rd (or 2nd in leap years).
"""

from datetime import datetime, timedelta, timezone, tzinfo

_UNITS: dict[str, str] = {
    "y": "year",
    "M": "month",
    "w": "week",
    "d": "day",
    "h": "hour",
    "m": "minute",
    "s": "second",
}

CALENDAR_UNITS = frozenset({"year", "month", "week", "day"})
CLOCK_UNITS = frozenset({"hour", "minute", "second"})


def normalize_unit(literal: str) -> str:
    """Map a unit as written (``"M"``, ``"Months"``, ``"s"``) to its canonical name.

    Short units are case sensitive (``m`` is minutes, ``M`` is months); long
    units are not.

    Raises:
        ValueError: If *literal* is not a known unit.
    """
    if literal in _UNITS:
        return _UNITS[literal]

    word = literal.lower()
    if word.endswith("s"):
        word = word[:-1]
    if word in CALENDAR_UNITS or word in CLOCK_UNITS:
        return word

    raise ValueError(f"Unknown unit: {literal!r}")


def make_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    tz: tzinfo | None = None,
) -> datetime:
    """Build a datetime, normalising out-of-range months and days.

    With a zone, a wall time skipped by a daylight-saving change is moved
    forward by the size of the gap (02:30 becomes 03:30 when clocks spring
    forward at 02:00).
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    first = datetime(year, month, 1, hour, minute, second, tzinfo=tz)
    result = first + timedelta(days=day - 1)
    if tz is None:
        return result
    return result.astimezone(timezone.utc).astimezone(tz)


def add_calendar(instant: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Add calendar years, months and days, keeping the wall clock."""
    result = make_datetime(
        instant.year + years,
        instant.month + months,
        instant.day + days,
        instant.hour,
        instant.minute,
        instant.second,
        instant.tzinfo,
    )
    return result.replace(microsecond=instant.microsecond)


def add_duration(instant: datetime, hours: int = 0, minutes: int = 0, seconds: int = 0) -> datetime:
    """Add elapsed hours, minutes and seconds.

    Aware datetimes are shifted in UTC and converted back to their zone.
    Naive datetimes carry no zone rules, so plain arithmetic is used.
    """
    delta = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if instant.tzinfo is None:
        return instant + delta
    return (instant.astimezone(timezone.utc) + delta).astimezone(instant.tzinfo)


def add_unit(instant: datetime, quantity: int, unit: str) -> datetime:
    """Add *quantity* of a canonical *unit* using calendar or clock arithmetic."""
    if unit == "year":
        return add_calendar(instant, years=quantity)
    if unit == "month":
        return add_calendar(instant, months=quantity)
    if unit == "week":
        return add_calendar(instant, days=7 * quantity)
    if unit == "day":
        return add_calendar(instant, days=quantity)
    if unit in CLOCK_UNITS:
        return add_duration(instant, **{f"{unit}s": quantity})
    raise ValueError(f"Unknown unit: {unit!r}")


def weekday_index(instant: datetime) -> int:
    """Day of the week with Sunday as 0 and Saturday as 6."""
    return (instant.weekday() + 1) % 7


def weekday_distance(current: int, target: int, *, strictly_future: bool = False) -> int:
    """Days from weekday *current* forward to weekday *target*.

    With *strictly_future* the result is never zero: the same weekday is a
    full week away.
    """
    days = (target - current + 7) % 7
    if strictly_future and days == 0:
        days = 7
    return days


def last_day_of_month(first: datetime, n: int = 1) -> datetime:
    """The *n*-th from last day of the month starting at *first* (n=1 is the last day)."""
    return add_calendar(first, months=1, days=-n)


def nth_weekday_of_month(first: datetime, weekday: int, n: int = 1) -> datetime:
    """The *n*-th *weekday* of the month starting at *first*."""
    days = weekday_distance(weekday_index(first), weekday)
    return add_calendar(first, days=days + 7 * (n - 1))


def nth_last_weekday_of_month(first: datetime, weekday: int, n: int = 1) -> datetime:
    """The *n*-th from last *weekday* of the month starting at *first*.

    Walks back from the last day of the month to the wanted weekday, then a
    further week for every step beyond the first.
    """
    last = last_day_of_month(first)
    days = weekday_distance(weekday, weekday_index(last))
    return add_calendar(last, days=-days - 7 * (n - 1))
