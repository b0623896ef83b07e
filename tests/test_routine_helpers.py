"""Tests for helpers/routine_helpers.py - validation, priority, labels."""

from __future__ import annotations

from typing import Any

import pytest

from cmms_core import const
from cmms_core.helpers import routine_helpers as rh
from tests.helpers import make_routine


def runtime_routine(**overrides: Any) -> dict[str, Any]:
    return make_routine(
        **{
            const.DATA_ROUTINE_TRIGGER_TYPE: const.TRIGGER_TYPE_RUNTIME_HOURS,
            const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS: 500,
            const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS: None,
            **overrides,
        }
    )


# =============================================================================
# TEST: VALIDATION
# =============================================================================


class TestValidateRoutineInputs:
    """Test the error-dict validator."""

    def test_valid_calendar_routine(self) -> None:
        routine = make_routine(
            advance_generation_days=30,
            priority_score=50,
            last_execution_completed_at="2024-01-01",
        )
        assert rh.validate_routine_inputs(routine) == {}

    def test_valid_runtime_routine(self) -> None:
        assert rh.validate_routine_inputs(runtime_routine()) == {}

    def test_missing_trigger_type(self) -> None:
        routine = make_routine(trigger_type=None)
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_TRIGGER_TYPE: const.ERROR_ROUTINE_TRIGGER_TYPE_REQUIRED
        }

    @pytest.mark.parametrize(
        ("hours", "error"),
        [
            (None, const.ERROR_ROUTINE_RUNTIME_HOURS_REQUIRED),
            (0, const.ERROR_ROUTINE_RUNTIME_HOURS_REQUIRED),
            ("500", const.ERROR_ROUTINE_RUNTIME_HOURS_REQUIRED),
            (10001, const.ERROR_ROUTINE_RUNTIME_HOURS_TOO_LARGE),
        ],
    )
    def test_runtime_hours(self, hours: Any, error: str) -> None:
        routine = runtime_routine(trigger_runtime_hours=hours)
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS: error
        }

    @pytest.mark.parametrize(
        ("days", "error"),
        [
            (None, const.ERROR_ROUTINE_CALENDAR_DAYS_REQUIRED),
            (0, const.ERROR_ROUTINE_CALENDAR_DAYS_REQUIRED),
            (7.5, const.ERROR_ROUTINE_CALENDAR_DAYS_REQUIRED),
            (366, const.ERROR_ROUTINE_CALENDAR_DAYS_TOO_LARGE),
        ],
    )
    def test_calendar_days(self, days: Any, error: str) -> None:
        routine = make_routine(trigger_calendar_days=days)
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS: error
        }

    def test_limits_are_inclusive(self) -> None:
        assert rh.validate_routine_inputs(make_routine(trigger_calendar_days=365)) == {}
        assert rh.validate_routine_inputs(runtime_routine(trigger_runtime_hours=10000)) == {}

    @pytest.mark.parametrize("advance", [0, 181, 2.5])
    def test_advance_days_out_of_range(self, advance: Any) -> None:
        routine = make_routine(advance_generation_days=advance)
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS: const.ERROR_ROUTINE_ADVANCE_DAYS_OUT_OF_RANGE
        }

    @pytest.mark.parametrize("priority", [-1, 101])
    def test_priority_out_of_range(self, priority: int) -> None:
        routine = make_routine(priority_score=priority)
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_PRIORITY_SCORE: const.ERROR_ROUTINE_PRIORITY_OUT_OF_RANGE
        }

    def test_unparseable_completion(self) -> None:
        routine = make_routine(last_execution_completed_at="yesterday")
        assert rh.validate_routine_inputs(routine) == {
            const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT: const.ERROR_ROUTINE_COMPLETED_AT_INVALID
        }

    def test_reports_every_field(self) -> None:
        routine = make_routine(
            trigger_calendar_days=0, priority_score=500, advance_generation_days=0
        )
        assert set(rh.validate_routine_inputs(routine)) == {
            const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS,
            const.DATA_ROUTINE_PRIORITY_SCORE,
            const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS,
        }


# =============================================================================
# TEST: PRIORITY
# =============================================================================


class TestPriorityFromScore:
    """Test score → level mapping."""

    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (100, const.PRIORITY_EMERGENCY),
            (90, const.PRIORITY_EMERGENCY),
            (89, const.PRIORITY_URGENT),
            (75, const.PRIORITY_URGENT),
            (60, const.PRIORITY_HIGH),
            (59, const.PRIORITY_NORMAL),
            (30, const.PRIORITY_NORMAL),
            (29, const.PRIORITY_LOW),
            (0, const.PRIORITY_LOW),
            (None, const.PRIORITY_NORMAL),
        ],
    )
    def test_levels(self, score: int | None, level: str) -> None:
        assert rh.priority_from_score(score) == level


# =============================================================================
# TEST: LABELS
# =============================================================================


class TestTriggerLabels:
    """Test trigger display labels."""

    @pytest.mark.parametrize(
        ("hours", "expected"),
        [(1, "1 hour"), (12, "12 hours"), (0.5, "1 hour"), (2.5, "3 hours")],
    )
    def test_format_trigger_hours(self, hours: float, expected: str) -> None:
        assert rh.format_trigger_hours(hours) == expected

    def test_runtime_interval(self) -> None:
        assert rh.format_trigger_interval(runtime_routine()) == "500h"
        assert rh.format_trigger_interval(runtime_routine(trigger_runtime_hours=12.5)) == "12.5h"

    def test_calendar_interval(self) -> None:
        assert rh.format_trigger_interval(make_routine(trigger_calendar_days=30)) == "30 days"
        assert rh.format_trigger_interval(make_routine(trigger_calendar_days=1)) == "1 day"

    def test_missing_trigger(self) -> None:
        assert rh.format_trigger_interval(make_routine(trigger_calendar_days=None)) == "N/A"
        assert rh.format_trigger_interval(make_routine(trigger_type="odometer")) == "N/A"
