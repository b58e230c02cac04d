"""calbound — calendar year boundary functions, optionally zone-aware."""

from calbound.domain.errors import BoundaryError, InvalidTimeZoneError, OutOfRangeError
from calbound.domain.precision import TICK, Precision, add_ticks, add_years, end_of, start_of
from calbound.domain.types import Edge, Shift
from calbound.domain.years import (
    to_end_of_next_tz_year,
    to_end_of_next_year,
    to_end_of_previous_tz_year,
    to_end_of_previous_year,
    to_end_of_tz_year,
    to_end_of_year,
    to_start_of_next_tz_year,
    to_start_of_next_year,
    to_start_of_previous_tz_year,
    to_start_of_previous_year,
    to_start_of_tz_year,
    to_start_of_year,
    to_tz_year_window,
)
from calbound.domain.zones import (
    FixedOffsetTimeZone,
    TimeZone,
    ZoneInfoTimeZone,
    resolve_zone,
)

__version__ = "0.1.0"

__all__ = [
    "TICK",
    "BoundaryError",
    "Edge",
    "FixedOffsetTimeZone",
    "InvalidTimeZoneError",
    "OutOfRangeError",
    "Precision",
    "Shift",
    "TimeZone",
    "ZoneInfoTimeZone",
    "add_ticks",
    "add_years",
    "end_of",
    "resolve_zone",
    "start_of",
    "to_end_of_next_tz_year",
    "to_end_of_next_year",
    "to_end_of_previous_tz_year",
    "to_end_of_previous_year",
    "to_end_of_tz_year",
    "to_end_of_year",
    "to_start_of_next_tz_year",
    "to_start_of_next_year",
    "to_start_of_previous_tz_year",
    "to_start_of_previous_year",
    "to_start_of_tz_year",
    "to_start_of_year",
    "to_tz_year_window",
]
