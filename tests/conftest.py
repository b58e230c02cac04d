"""Shared pytest fixtures and test helpers for calbound tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from calbound.config.settings import CalboundSettings
from calbound.domain.zones import FixedOffsetTimeZone


class ShiftedClockZone:
    """Synthetic zone whose wall clock runs a fixed delta ahead of UTC."""

    def __init__(self, delta: timedelta, name: str = "synthetic") -> None:
        self._delta = delta
        self.name = name

    def to_local(self, utc: datetime) -> datetime:
        return utc + self._delta

    def to_utc(self, local: datetime) -> datetime:
        return local - self._delta


@pytest.fixture
def shifted_clock_zone() -> type[ShiftedClockZone]:
    """Factory for synthetic zones: ``shifted_clock_zone(timedelta(hours=2))``."""
    return ShiftedClockZone


@pytest.fixture
def utc_minus_5() -> FixedOffsetTimeZone:
    return FixedOffsetTimeZone.hours(-5)


@pytest.fixture
def utc_plus_9() -> FixedOffsetTimeZone:
    return FixedOffsetTimeZone.hours(9)


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run with no CALBOUND_* env vars and cwd in an empty temp dir."""
    for key in list(os.environ):
        if key.startswith("CALBOUND_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def settings(isolated_env: Path) -> CalboundSettings:
    """Settings with code defaults only."""
    return CalboundSettings.load(start=isolated_env)
