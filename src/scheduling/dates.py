from datetime import date, timedelta

SATURDAY = 5
SUNDAY = 6

# Supported calendar range, kept well inside date.min and date.max
EARLIEST_DATE = date(1900, 1, 1)
LATEST_DATE = date(9000, 12, 31)
MAX_DEADLINE_DAYS = 36500


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier)."""
    return (end - start).days


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def next_weekday(day: date) -> date:
    """Return ``day`` itself, or the first Monday after it when it falls on a weekend."""
    while is_weekend(day):
        day = add_days(day, 1)
    return day


def each_day(start: date, end: date) -> list[date]:
    """Every calendar day in the closed interval ``[start, end]``, ascending."""
    return [add_days(start, offset) for offset in range(days_between(start, end) + 1)]


def in_supported_range(day: date) -> bool:
    return EARLIEST_DATE <= day <= LATEST_DATE
