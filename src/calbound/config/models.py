"""Pydantic configuration models with code-baked defaults.

Each model is one TOML table; calbound.toml lists only the keys it
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from calbound.domain.errors import InvalidTimeZoneError
from calbound.domain.zones import ZoneInfoTimeZone


class ZoneConfig(BaseModel):
    """[zone] section."""

    model_config = {"frozen": True}

    default: str | None = None

    @field_validator("default")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfoTimeZone(value)
        except InvalidTimeZoneError as exc:
            raise ValueError(exc.message) from exc
        return value.strip()


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    verbose: bool = False
    json_output: bool = Field(default=False, alias="json")

