"""Calendar arithmetic over string-encoded calendar points.

All helpers are pure.  Blank or non-numeric components never raise: the
predicate answers ``False`` and the difference helpers answer ``None`` so
the caller can fail closed.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Protocol

from nestform.domain.values import parse_number


class YearPoint(Protocol):
    year: str


class MonthPoint(YearPoint, Protocol):
    month: str


class DatePoint(MonthPoint, Protocol):
    day: str


def to_date(point: DatePoint) -> date | None:
    """Build the exact calendar date named by *point*, or ``None``.

    No normalisation happens: 2023-02-30 is rejected rather than rolled
    over into March.
    """
    year = parse_number(point.year)
    month = parse_number(point.month)
    day = parse_number(point.day)
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date(point: DatePoint) -> bool:
    """Whether *point* names a real calendar day (leap years included)."""
    return to_date(point) is not None


def get_months_diff(from_: MonthPoint, to: MonthPoint) -> int | None:
    """Signed whole months from *from_* to *to*, ignoring the day."""
    start = _first_of_month(from_)
    end = _first_of_month(to)
    if start is None or end is None:
        return None
    return (end.year - start.year) * 12 + (end.month - start.month)


def get_years_diff(from_: YearPoint, to: YearPoint) -> int | None:
    """Signed ``to.year - from_.year``."""
    start = parse_number(from_.year)
    end = parse_number(to.year)
    if start is None or end is None:
        return None
    return end - start


def add_years(start: date, years: int) -> date | None:
    """Shift *start* by whole calendar years.

    29 February clamps to 28 February in a common year.  Returns ``None``
    when the result falls outside the representable range.
    """
    target = start.year + years
    if not date.min.year <= target <= date.max.year:
        return None
    last_day = calendar.monthrange(target, start.month)[1]
    return start.replace(year=target, day=min(start.day, last_day))


def is_within_years(from_: DatePoint, to: DatePoint, years: int) -> bool:
    """Whether *to* falls on or before *from_* plus *years* years."""
    start = to_date(from_)
    end = to_date(to)
    if start is None or end is None:
        return False
    limit = add_years(start, years)
    if limit is None:
        return years > 0
    return end <= limit


def _first_of_month(point: MonthPoint) -> date | None:
    year = parse_number(point.year)
    month = parse_number(point.month)
    if year is None or month is None:
        return None
    try:
        return date(year, month, 1)
    except ValueError:
        return None
