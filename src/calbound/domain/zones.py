"""Time zone conversion capability.

Zones are injected, read-only objects exposing two conversions over naive
datetimes: UTC wall-clock to zone wall-clock and back. Anything that
satisfies :class:`TimeZone` can be passed to the zone-aware navigation
functions, which keeps tests deterministic with synthetic zones.

DST gaps and folds follow ``zoneinfo``'s ``fold=0`` policy.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calbound.domain.errors import InvalidTimeZoneError, OutOfRangeError


@runtime_checkable
class TimeZone(Protocol):
    """Bidirectional civil-time conversion for one zone."""

    @property
    def name(self) -> str: ...

    def to_local(self, utc: datetime) -> datetime:
        """Convert a naive UTC datetime to naive zone wall-clock time."""
        ...

    def to_utc(self, local: datetime) -> datetime:
        """Convert naive zone wall-clock time to a naive UTC datetime."""
        ...


class TzInfoTimeZone:
    """Adapter turning any ``tzinfo`` into a :class:`TimeZone`."""

    def __init__(self, tz: tzinfo, name: str | None = None) -> None:
        self._tz = tz
        self._name = name or str(tz)

    @property
    def name(self) -> str:
        return self._name

    @property
    def tzinfo(self) -> tzinfo:
        return self._tz

    def to_local(self, utc: datetime) -> datetime:
        try:
            return utc.replace(tzinfo=timezone.utc).astimezone(self._tz).replace(tzinfo=None)
        except OverflowError as exc:
            msg = f"{utc.isoformat()} cannot be shown in zone {self._name}"
            raise OutOfRangeError(msg, {"zone": self._name}) from exc

    def to_utc(self, local: datetime) -> datetime:
        try:
            return local.replace(tzinfo=self._tz).astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError as exc:
            msg = f"{local.isoformat()} in zone {self._name} has no representable UTC instant"
            raise OutOfRangeError(msg, {"zone": self._name}) from exc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TzInfoTimeZone):
            return NotImplemented
        return self._tz == other._tz

    def __hash__(self) -> int:
        return hash(self._tz)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class ZoneInfoTimeZone(TzInfoTimeZone):
    """IANA time zone database zone, e.g. ``"America/New_York"``."""

    def __init__(self, key: str) -> None:
        key = key.strip()
        if not key:
            msg = "Time zone key must not be empty"
            raise InvalidTimeZoneError(msg)
        try:
            tz = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            msg = f"Unknown time zone: {key!r}"
            raise InvalidTimeZoneError(msg, {"zone": key}) from exc
        super().__init__(tz, key)


class FixedOffsetTimeZone(TzInfoTimeZone):
    """Constant UTC offset with no DST rules."""

    def __init__(self, offset: timedelta) -> None:
        try:
            tz = timezone(offset)
        except ValueError as exc:
            msg = f"UTC offset must be strictly within 24 hours, got {offset}"
            raise InvalidTimeZoneError(msg, {"offset": str(offset)}) from exc
        super().__init__(tz, tz.tzname(None))

    @classmethod
    def hours(cls, hours: float) -> FixedOffsetTimeZone:
        return cls(timedelta(hours=hours))


ZoneLike = TimeZone | tzinfo | str


def resolve_zone(zone: ZoneLike | None) -> TimeZone:
    """Resolve *zone* to a :class:`TimeZone`.

    Accepts a ready :class:`TimeZone`, any ``tzinfo`` instance, or an IANA
    key string.

    Raises:
        InvalidTimeZoneError: If *zone* is None, empty, unknown, or of an
            unsupported type.
    """
    if zone is None:
        msg = "A time zone is required"
        raise InvalidTimeZoneError(msg)
    if isinstance(zone, str):
        return ZoneInfoTimeZone(zone)
    if isinstance(zone, tzinfo):
        return TzInfoTimeZone(zone)
    if isinstance(zone, TimeZone):
        return zone
    msg = f"Cannot resolve a time zone from {type(zone).__name__}"
    raise InvalidTimeZoneError(msg, {"type": type(zone).__name__})


def as_naive_utc(t: datetime) -> datetime:
    """Return *t* as naive UTC. Naive input is taken to already be UTC."""
    if t.tzinfo is None or t.utcoffset() is None:
        return t.replace(tzinfo=None)
    try:
        return t.astimezone(timezone.utc).replace(tzinfo=None)
    except OverflowError as exc:
        msg = f"{t.isoformat()} has no representable UTC instant"
        raise OutOfRangeError(msg) from exc
