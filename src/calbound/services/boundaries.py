"""YearBoundaryService — pick and compute year boundaries for callers.

Wraps the pure navigation functions with zone defaulting from settings
and converts domain failures into structured results.
"""

from __future__ import annotations

import logging
from datetime import datetime

from calbound.config.settings import CalboundSettings
from calbound.domain.errors import BoundaryError
from calbound.domain.types import Edge, Shift
from calbound.domain.years import NAIVE_NAVIGATORS, to_tz_year_window
from calbound.domain.zones import TimeZone, ZoneLike, resolve_zone
from calbound.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class YearBoundaryService:
    """Year boundary lookups with the configured default zone.

    When a call passes no zone and ``settings.zone.default`` is unset,
    the zone-naive functions are used and the input's wall-clock fields
    are taken as-is.

    Zoned lookups pick the year on the zone's wall clock and convert both
    edges from local time, so ``start`` and ``end`` always bound the same
    local year, whatever the zone's offset history.
    """

    def __init__(self, settings: CalboundSettings | None = None) -> None:
        self._settings = settings or CalboundSettings.load()

    def boundary(
        self,
        instant: datetime,
        *,
        edge: Edge | str,
        shift: Shift | str = Shift.CURRENT,
        zone: ZoneLike | None = None,
    ) -> ServiceResult:
        """Compute one year boundary for *instant*."""
        op = "year_boundary"
        try:
            edge, shift = Edge(edge), Shift(shift)
        except ValueError as exc:
            return ServiceResult.failure(op, ServiceError(code="INVALID_SELECTION", message=str(exc)))

        tz: TimeZone | None = None
        try:
            tz = self._resolve(zone)
            if tz is None:
                value = NAIVE_NAVIGATORS[(edge, shift)](instant)
            else:
                start, end = to_tz_year_window(instant, tz, shift)
                value = start if edge is Edge.START else end
        except BoundaryError as exc:
            return self._failure(op, exc, tz)

        logger.debug(
            "Year boundary computed",
            extra={"op": op, "edge": str(edge), "shift": str(shift), "zone": _zone_name(tz)},
        )
        return ServiceResult.success(
            op, {"boundary": value}, edge=str(edge), shift=str(shift), zone=_zone_name(tz)
        )

    def window(
        self,
        instant: datetime,
        *,
        shift: Shift | str = Shift.CURRENT,
        zone: ZoneLike | None = None,
    ) -> ServiceResult:
        """Compute the inclusive ``[start, end]`` window of the selected year."""
        op = "year_window"
        try:
            shift = Shift(shift)
        except ValueError as exc:
            return ServiceResult.failure(op, ServiceError(code="INVALID_SELECTION", message=str(exc)))

        tz: TimeZone | None = None
        try:
            tz = self._resolve(zone)
            if tz is None:
                start = NAIVE_NAVIGATORS[(Edge.START, shift)](instant)
                end = NAIVE_NAVIGATORS[(Edge.END, shift)](instant)
            else:
                start, end = to_tz_year_window(instant, tz, shift)
        except BoundaryError as exc:
            return self._failure(op, exc, tz)

        return ServiceResult.success(
            op, {"start": start, "end": end}, shift=str(shift), zone=_zone_name(tz)
        )

    def _resolve(self, zone: ZoneLike | None) -> TimeZone | None:
        if zone is None:
            zone = self._settings.zone.default
        return None if zone is None else resolve_zone(zone)

    @staticmethod
    def _failure(op: str, exc: BoundaryError, tz: TimeZone | None) -> ServiceResult:
        logger.warning(
            "Year boundary lookup failed",
            extra={"op": op, "code": exc.code, "zone": _zone_name(tz)},
        )
        return ServiceResult.failure(op, ServiceError.from_boundary_error(exc))


def _zone_name(tz: TimeZone | None) -> str | None:
    return None if tz is None else tz.name
