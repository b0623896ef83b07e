"""Shared fixtures for CMMS core tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from cmms_core import const
from cmms_core.utils import dt_utils
from tests.helpers import make_schedule, make_window


@pytest.fixture(autouse=True)
def reset_default_timezone() -> Iterator[None]:
    """Keep the module-level default timezone at UTC between tests."""
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(ZoneInfo("UTC"))


@pytest.fixture
def standard_week() -> list[dict[str, Any]]:
    """Monday-Friday 07:00-17:00 with a 12:00-13:00 break, weekend off.

    Totals: 3000 work minutes, 300 break minutes, 2700 net (45 h).
    """
    return [
        make_schedule(
            weekday,
            []
            if weekday in const.WEEKEND_DAYS
            else [make_window("07:00", "17:00", [("12:00", "13:00")])],
        )
        for weekday in const.WEEKDAYS
    ]


@pytest.fixture
def night_window() -> dict[str, Any]:
    """A 22:00-06:00 window crossing midnight, no breaks."""
    return make_window("22:00", "06:00")


@pytest.fixture
def shift(standard_week: list[dict[str, Any]]) -> dict[str, Any]:
    """A complete shift payload around the standard week."""
    return {
        const.DATA_SHIFT_ID: 10,
        const.DATA_SHIFT_NAME: "Day shift",
        const.DATA_SHIFT_TIMEZONE: "UTC",
        const.DATA_SHIFT_SCHEDULES: standard_week,
    }
