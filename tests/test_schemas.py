"""Tests for schemas.py - voluptuous validation of Shift and Routine payloads."""

from __future__ import annotations

from typing import Any

import pytest
import voluptuous as vol

from cmms_core import const
from cmms_core.helpers.routine_helpers import validate_routine_inputs
from cmms_core.schemas import (
    ROUTINE_SCHEMA,
    SHIFT_SCHEMA,
    time_of_day,
    validate_shift_inputs,
)
from tests.helpers import make_routine, make_schedule, make_window

# =============================================================================
# TEST: FIELD VALIDATORS
# =============================================================================


class TestTimeOfDay:
    """Test the TimeOfDay field validator."""

    def test_normalizes_seconds(self) -> None:
        assert time_of_day("07:30:00") == "07:30"

    @pytest.mark.parametrize("value", ["24:00", "7:5", "noon", None, 730])
    def test_rejects(self, value: Any) -> None:
        with pytest.raises(vol.Invalid):
            time_of_day(value)


# =============================================================================
# TEST: SHIFT SCHEMA
# =============================================================================


class TestShiftSchema:
    """Test shift payload validation."""

    def test_valid_shift(self, shift: dict[str, Any]) -> None:
        assert validate_shift_inputs(shift) == {}

    def test_applies_defaults_and_normalizes(self) -> None:
        payload = {
            const.DATA_SHIFT_ID: 1,
            const.DATA_SHIFT_NAME: "  Night  ",
            const.DATA_SHIFT_SCHEDULES: [
                {
                    const.DATA_SCHEDULE_WEEKDAY: const.WEEKDAY_MONDAY,
                    const.DATA_SCHEDULE_SHIFTS: [
                        {
                            const.DATA_WINDOW_START_TIME: "22:00:00",
                            const.DATA_WINDOW_END_TIME: "06:00:00",
                        }
                    ],
                },
                {const.DATA_SCHEDULE_WEEKDAY: const.WEEKDAY_TUESDAY},
            ],
            "plant_id": 7,
        }

        result = SHIFT_SCHEMA(payload)

        assert result[const.DATA_SHIFT_NAME] == "Night"
        assert result["plant_id"] == 7
        monday, tuesday = result[const.DATA_SHIFT_SCHEDULES]
        assert monday[const.DATA_SCHEDULE_SHIFTS] == [make_window("22:00", "06:00")]
        assert tuesday[const.DATA_SCHEDULE_SHIFTS] == []

    def test_invalid_time(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_SCHEDULES][0][const.DATA_SCHEDULE_SHIFTS][0][
            const.DATA_WINDOW_START_TIME
        ] = "25:00"

        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_SCHEDULES: const.ERROR_TIME_OF_DAY_INVALID
        }

    def test_invalid_break_time(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_SCHEDULES][2][const.DATA_SCHEDULE_SHIFTS][0][
            const.DATA_WINDOW_BREAKS
        ][0][const.DATA_BREAK_END_TIME] = "13:75"

        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_SCHEDULES: const.ERROR_TIME_OF_DAY_INVALID
        }

    def test_duplicate_weekday(self) -> None:
        payload = {
            const.DATA_SHIFT_ID: 1,
            const.DATA_SHIFT_NAME: "Day",
            const.DATA_SHIFT_SCHEDULES: [
                make_schedule(const.WEEKDAY_MONDAY, []),
                make_schedule(const.WEEKDAY_MONDAY, []),
            ],
        }

        assert validate_shift_inputs(payload) == {
            const.DATA_SHIFT_SCHEDULES: const.ERROR_SHIFT_WEEKDAY_DUPLICATE
        }

    def test_more_than_seven_schedules(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_SCHEDULES].append(make_schedule(const.WEEKDAY_MONDAY, []))

        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_SCHEDULES: const.ERROR_SHIFT_SCHEDULES_INVALID
        }

    def test_unknown_weekday(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_SCHEDULES][6][const.DATA_SCHEDULE_WEEKDAY] = "Funday"

        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_SCHEDULES: const.ERROR_SHIFT_SCHEDULES_INVALID
        }

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, shift: dict[str, Any], name: str) -> None:
        shift[const.DATA_SHIFT_NAME] = name
        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_NAME: const.ERROR_SHIFT_NAME_REQUIRED
        }

    def test_missing_name(self, shift: dict[str, Any]) -> None:
        del shift[const.DATA_SHIFT_NAME]
        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_NAME: const.ERROR_SHIFT_NAME_REQUIRED
        }

    def test_invalid_timezone(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_TIMEZONE] = "Mars/Olympus"
        assert validate_shift_inputs(shift) == {
            const.DATA_SHIFT_TIMEZONE: const.ERROR_SHIFT_TIMEZONE_INVALID
        }

    def test_null_timezone_allowed(self, shift: dict[str, Any]) -> None:
        shift[const.DATA_SHIFT_TIMEZONE] = None
        assert validate_shift_inputs(shift) == {}

    def test_not_a_dict(self) -> None:
        assert validate_shift_inputs(["not", "a", "shift"]) == {  # type: ignore[arg-type]
            const.ERROR_KEY_BASE: const.ERROR_SHIFT_SCHEDULES_INVALID
        }


# =============================================================================
# TEST: ROUTINE SCHEMA
# =============================================================================


class TestRoutineSchema:
    """Test routine payload validation."""

    def test_valid_routine_gets_defaults(self) -> None:
        result = ROUTINE_SCHEMA(
            make_routine(last_execution_completed_at="2024-01-01T08:00:00+00:00")
        )
        assert result[const.DATA_ROUTINE_IS_ACTIVE] is True
        assert result[const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS] == 7

    def test_runtime_hours_coerced(self) -> None:
        result = ROUTINE_SCHEMA(
            make_routine(
                trigger_type=const.TRIGGER_TYPE_RUNTIME_HOURS,
                trigger_runtime_hours="250",
                trigger_calendar_days=None,
            )
        )
        assert result[const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS] == 250.0

    @pytest.mark.parametrize(
        "overrides",
        [
            {const.DATA_ROUTINE_TRIGGER_TYPE: "odometer"},
            {const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS: 400},
            {const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS: 0},
            {const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT: "garbage"},
            {const.DATA_ROUTINE_PRIORITY_SCORE: 101},
            {const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS: 181},
            {const.DATA_ROUTINE_LAST_EXECUTION_RUNTIME_HOURS: -1},
        ],
    )
    def test_rejects(self, overrides: dict[str, Any]) -> None:
        with pytest.raises(vol.Invalid):
            ROUTINE_SCHEMA(make_routine(**overrides))


class TestRoutineValidatorsAgree:
    """ROUTINE_SCHEMA and validate_routine_inputs share trigger limits."""

    @staticmethod
    def _schema_accepts(routine: dict[str, Any]) -> bool:
        try:
            ROUTINE_SCHEMA(routine)
        except vol.Invalid:
            return False
        return True

    @pytest.mark.parametrize(
        ("hours", "valid"),
        [(0.5, False), (1, True), (10000, True), (10000.5, False)],
    )
    def test_runtime_hours_boundaries(self, hours: float, valid: bool) -> None:
        routine = make_routine(
            trigger_type=const.TRIGGER_TYPE_RUNTIME_HOURS,
            trigger_runtime_hours=hours,
            trigger_calendar_days=None,
        )

        assert self._schema_accepts(routine) is valid
        assert (validate_routine_inputs(routine) == {}) is valid

    @pytest.mark.parametrize(
        ("days", "valid"), [(0, False), (1, True), (365, True), (366, False)]
    )
    def test_calendar_days_boundaries(self, days: int, valid: bool) -> None:
        routine = make_routine(trigger_calendar_days=days)

        assert self._schema_accepts(routine) is valid
        assert (validate_routine_inputs(routine) == {}) is valid
