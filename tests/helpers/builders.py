"""Builders for Shift and Routine payloads used across the test suites."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from cmms_core import const


def utc_dt(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Create a UTC datetime for testing."""
    return datetime(year, month, day, hour, minute, tzinfo=UTC)


def make_break(start: str, end: str) -> dict[str, Any]:
    """Build a break dict."""
    return {const.DATA_BREAK_START_TIME: start, const.DATA_BREAK_END_TIME: end}


def make_window(
    start: str,
    end: str,
    breaks: list[tuple[str, str]] | None = None,
    active: bool = True,
) -> dict[str, Any]:
    """Build a shift window dict; breaks given as (start, end) tuples."""
    return {
        const.DATA_WINDOW_START_TIME: start,
        const.DATA_WINDOW_END_TIME: end,
        const.DATA_WINDOW_ACTIVE: active,
        const.DATA_WINDOW_BREAKS: [make_break(s, e) for s, e in breaks or []],
    }


def make_schedule(weekday: str, windows: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a weekday schedule dict."""
    return {const.DATA_SCHEDULE_WEEKDAY: weekday, const.DATA_SCHEDULE_SHIFTS: windows}


def make_routine(**overrides: Any) -> dict[str, Any]:
    """Build a calendar-day routine; keyword overrides replace any field."""
    routine: dict[str, Any] = {
        const.DATA_ROUTINE_ID: 1,
        const.DATA_ROUTINE_NAME: "Lubricate conveyor bearings",
        const.DATA_ROUTINE_TRIGGER_TYPE: const.TRIGGER_TYPE_CALENDAR_DAYS,
        const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS: 7,
        const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS: None,
        const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT: None,
        const.DATA_ROUTINE_LAST_EXECUTION_RUNTIME_HOURS: None,
    }
    routine.update(overrides)
    return routine
