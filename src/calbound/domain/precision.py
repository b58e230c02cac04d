"""Precision primitives: truncate and ceil a datetime to calendar granularity.

Resolution note: ``datetime`` resolves microseconds, so one TICK is one
microsecond. Sources with 100 ns ticks end a year at ``.9999999``; here
the last representable instant of a year is ``23:59:59.999999``.

INVARIANT: ``end_of(t, p) == start_of(t, p) + 1 unit - TICK`` for every
precision, computed without ever constructing the next unit's start.
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from enum import StrEnum
from typing import Any

from calbound.domain.errors import OutOfRangeError

TICK = timedelta(microseconds=1)


class Precision(StrEnum):
    """Calendar granularity a datetime can be truncated to."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


# Fields zeroed (or reset to 1) when truncating to each precision.
_START_FIELDS: dict[Precision, dict[str, int]] = {
    Precision.YEAR: {"month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Precision.MONTH: {"day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Precision.DAY: {"hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Precision.HOUR: {"minute": 0, "second": 0, "microsecond": 0},
    Precision.MINUTE: {"second": 0, "microsecond": 0},
    Precision.SECOND: {"microsecond": 0},
}

_END_TIME: dict[str, int] = {"hour": 23, "minute": 59, "second": 59, "microsecond": 999_999}


def start_of(t: datetime, precision: Precision) -> datetime:
    """Truncate *t* to the first instant of its enclosing *precision* unit.

    ``tzinfo`` is carried over untouched; only wall-clock fields change.
    """
    return t.replace(**_START_FIELDS[Precision(precision)])


def end_of(t: datetime, precision: Precision) -> datetime:
    """Return the last representable instant of *t*'s enclosing unit."""
    precision = Precision(precision)
    fields: dict[str, Any]
    if precision is Precision.YEAR:
        fields = {"month": 12, "day": 31, **_END_TIME}
    elif precision is Precision.MONTH:
        fields = {"day": calendar.monthrange(t.year, t.month)[1], **_END_TIME}
    elif precision is Precision.DAY:
        fields = dict(_END_TIME)
    elif precision is Precision.HOUR:
        fields = {"minute": 59, "second": 59, "microsecond": 999_999}
    elif precision is Precision.MINUTE:
        fields = {"second": 59, "microsecond": 999_999}
    else:
        fields = {"microsecond": 999_999}
    return t.replace(**fields)


def add_years(t: datetime, years: int) -> datetime:
    """Shift *t* by whole calendar years, keeping month and wall-clock time.

    February 29 clamps to February 28 when the target year is not a leap
    year.

    Raises:
        OutOfRangeError: If the target year falls outside ``MINYEAR..MAXYEAR``.
    """
    target = t.year + years
    if not MINYEAR <= target <= MAXYEAR:
        msg = f"Adding {years} year(s) to {t.isoformat()} leaves the supported range"
        raise OutOfRangeError(msg, {"year": target, "min": MINYEAR, "max": MAXYEAR})
    day = t.day
    if t.month == 2 and day == 29 and not calendar.isleap(target):
        day = 28
    return t.replace(year=target, day=day)


def add_ticks(t: datetime, ticks: int) -> datetime:
    """Shift *t* by *ticks* microseconds.

    Raises:
        OutOfRangeError: If the result is not representable.
    """
    try:
        return t + TICK * ticks
    except OverflowError as exc:
        msg = f"Adding {ticks} tick(s) to {t.isoformat()} leaves the supported range"
        raise OutOfRangeError(msg, {"ticks": ticks}) from exc
