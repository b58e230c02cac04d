"""Year navigation: start and end instants of the current, next, or previous year.

Zone-naive functions work on the wall-clock fields of their input as-is and
carry its ``tzinfo`` through untouched. They do not consider time zones.

Zone-aware functions (``*_tz_year``) take a UTC instant and a zone, find the
year boundary as observed on the zone's wall clock, and return it in UTC.
Naive input is read as UTC and yields naive UTC; aware input yields a
``timezone.utc`` datetime.

INVARIANT: previous/next variants are always the current-year boundary
shifted by one year, never recomputed independently.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from calbound.domain.precision import Precision, add_ticks, add_years, end_of, start_of
from calbound.domain.types import Edge, Shift
from calbound.domain.zones import ZoneLike, as_naive_utc, resolve_zone

# --- Zone-naive ---


def to_start_of_year(t: datetime) -> datetime:
    """First instant of *t*'s year (January 1, 00:00:00)."""
    return start_of(t, Precision.YEAR)


def to_end_of_year(t: datetime) -> datetime:
    """Last representable instant of *t*'s year, one tick before the next year."""
    return end_of(t, Precision.YEAR)


def to_start_of_next_year(t: datetime) -> datetime:
    return add_years(to_start_of_year(t), 1)


def to_start_of_previous_year(t: datetime) -> datetime:
    return add_years(to_start_of_year(t), -1)


def to_end_of_next_year(t: datetime) -> datetime:
    return add_years(to_end_of_year(t), 1)


def to_end_of_previous_year(t: datetime) -> datetime:
    return add_years(to_end_of_year(t), -1)


# --- Zone-aware ---


def _match_awareness(result: datetime, source: datetime) -> datetime:
    """Attach UTC to a naive-UTC *result* when *source* was aware."""
    if source.tzinfo is None:
        return result
    return result.replace(tzinfo=timezone.utc)


def to_start_of_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """Start of the year as observed in *zone*, expressed in UTC.

    Raises:
        InvalidTimeZoneError: If *zone* cannot be resolved.
        OutOfRangeError: If a conversion leaves the supported range.
    """
    tz = resolve_zone(zone)
    local = tz.to_local(as_naive_utc(utc))
    return _match_awareness(tz.to_utc(to_start_of_year(local)), utc)


def to_start_of_next_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """Start of the following year as observed in *zone*, expressed in UTC."""
    tz = resolve_zone(zone)
    local = tz.to_local(as_naive_utc(utc))
    return _match_awareness(tz.to_utc(to_start_of_next_year(local)), utc)


def to_start_of_previous_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """Start of the preceding year in *zone*, expressed in UTC.

    The year is subtracted from the UTC result of :func:`to_start_of_tz_year`,
    not from local time. Across an offset change between the two years this
    can differ from the local boundary by the offset delta.
    """
    return add_years(to_start_of_tz_year(utc, zone), -1)


def to_end_of_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """Last instant of the year as observed in *zone*, expressed in UTC."""
    return add_ticks(to_start_of_next_tz_year(utc, zone), -1)


def to_end_of_previous_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """Last instant of the preceding year in *zone*, expressed in UTC."""
    return add_ticks(to_start_of_tz_year(utc, zone), -1)


def to_end_of_next_tz_year(utc: datetime, zone: ZoneLike | None) -> datetime:
    """One tick before the UTC start of the current zone year shifted a year ahead.

    The offset is taken from :func:`to_start_of_tz_year`, so the result is
    one tick before the start of the year *following* the zone year holding
    *utc*: the same instant :func:`to_end_of_tz_year` gives whenever the
    zone's offset is unchanged between the two years. Callers that need the
    last instant of the next zone year should use
    ``to_end_of_tz_year(to_start_of_next_tz_year(utc, zone), zone)``.
    """
    return add_ticks(add_years(to_start_of_tz_year(utc, zone), 1), -1)


# --- Lookup tables ---

NaiveNavigator = Callable[[datetime], datetime]
ZonedNavigator = Callable[[datetime, ZoneLike | None], datetime]

NAIVE_NAVIGATORS: dict[tuple[Edge, Shift], NaiveNavigator] = {
    (Edge.START, Shift.PREVIOUS): to_start_of_previous_year,
    (Edge.START, Shift.CURRENT): to_start_of_year,
    (Edge.START, Shift.NEXT): to_start_of_next_year,
    (Edge.END, Shift.PREVIOUS): to_end_of_previous_year,
    (Edge.END, Shift.CURRENT): to_end_of_year,
    (Edge.END, Shift.NEXT): to_end_of_next_year,
}

ZONED_NAVIGATORS: dict[tuple[Edge, Shift], ZonedNavigator] = {
    (Edge.START, Shift.PREVIOUS): to_start_of_previous_tz_year,
    (Edge.START, Shift.CURRENT): to_start_of_tz_year,
    (Edge.START, Shift.NEXT): to_start_of_next_tz_year,
    (Edge.END, Shift.PREVIOUS): to_end_of_previous_tz_year,
    (Edge.END, Shift.CURRENT): to_end_of_tz_year,
    (Edge.END, Shift.NEXT): to_end_of_next_tz_year,
}


# --- Windows ---

SHIFT_YEARS: dict[Shift, int] = {Shift.PREVIOUS: -1, Shift.CURRENT: 0, Shift.NEXT: 1}


def to_tz_year_window(
    utc: datetime,
    zone: ZoneLike | None,
    shift: Shift = Shift.CURRENT,
) -> tuple[datetime, datetime]:
    """Inclusive UTC ``(start, end)`` of a whole zone year.

    The year is picked on the zone's wall clock: *shift* moves the local
    January 1 holding *utc*, and both edges are converted from local time.
    Unlike :func:`to_start_of_previous_tz_year`, both edges therefore stay
    inside the selected local year when the zone's offset differs between
    years.
    """
    tz = resolve_zone(zone)
    local = tz.to_local(as_naive_utc(utc))
    local_start = add_years(to_start_of_year(local), SHIFT_YEARS[Shift(shift)])
    start = tz.to_utc(local_start)
    end = add_ticks(tz.to_utc(add_years(local_start, 1)), -1)
    return _match_awareness(start, utc), _match_awareness(end, utc)
