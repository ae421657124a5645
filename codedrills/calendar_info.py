"""Calendar facts about a date: week, weekday, day counts and trading days."""

from __future__ import annotations

_HOLIDAYS = {
    1: frozenset({1, 28, 29, 30, 31}),
    2: frozenset({1, 2, 3, 4}),
    4: frozenset({4, 5, 6}),
    5: frozenset({1, 2, 3, 4, 5, 31}),
    6: frozenset({1, 2}),
    10: frozenset({1, 2, 3, 4, 5, 6, 7, 8}),
}


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday of a date, 0 for Monday through 6 for Sunday."""
    if month < 3:
        month += 12
        year -= 1
    return (day + 2 * month + 3 * (month + 1) // 5 + year + year // 4 - year // 100 + year // 400) % 7


def _day_of_year(year: int, month: int, day: int) -> int:
    return day + sum(days_in_month(year, m) for m in range(1, month))


def _days_left(year: int, passed: int) -> int:
    return (366 if is_leap_year(year) else 365) - passed


def _week_number(year: int, day_number: int, left: int) -> int:
    if left <= day_of_week(year, 12, 31):
        return 1
    first = day_of_week(year, 1, 1)
    if first <= 4:
        return (day_number + first + 5) // 7
    return (day_number + first + 6) // 7 - 1


def _days_until_spring_festival(year: int, month: int, day: int, left: int) -> int:
    if month <= 1 and day <= 29:
        return _day_of_year(year, 1, 29) - _day_of_year(year, month, day)
    return left + _day_of_year(year + 1, 2, 17)


def _is_holiday(year: int, month: int, day: int) -> bool:
    if day_of_week(year, month, day) in (5, 6):
        return True
    return day in _HOLIDAYS.get(month, ())


def _days_until_next_open(year: int, month: int, day: int) -> int:
    skipped = 0
    while True:
        day += 1
        if day > days_in_month(year, month):
            day = 1
            month += 1
        if month > 12:
            month = 1
            year += 1
        if not _is_holiday(year, month, day):
            return skipped
        skipped += 1


def time_info(time: str) -> str:
    """Describe the date ``YYYY-MM-DD`` as six comma-separated numbers.

    They are: week of the year, weekday (1 = Monday), day of the year, days
    left in the year, days until the Spring Festival, and the number of
    closed days before the next trading day.
    """
    parts = time.split("-")
    if len(parts) < 3:
        raise ValueError(f"expected a date as YYYY-MM-DD, got {time!r}")
    year, month, day = (int(part) for part in parts[:3])

    day_number = _day_of_year(year, month, day)
    weekday = day_of_week(year, month, day)
    left = _days_left(year, day_number)
    week = _week_number(year, day_number, left)
    spring = _days_until_spring_festival(year, month, day, left)
    next_open = _days_until_next_open(year, month, day)
    return f"{week},{weekday + 1},{day_number},{left},{spring},{next_open}"