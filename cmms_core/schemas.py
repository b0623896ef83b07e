# File: schemas.py
"""Voluptuous schemas for Shift and Routine snapshots.

Snapshots arrive from the API layer as plain dicts. These schemas check their
shape and normalize times ("07:00:00" → "07:00") before the engines see them;
interval invariants such as break containment are left to
ScheduleCalculator.validate_schedules, which reports them as warnings.

Unknown keys are allowed: API payloads carry more fields than the core uses.
"""

from __future__ import annotations

from datetime import date
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol

from . import const
from .utils.dt_utils import InvalidTimeOfDayError, dt_parse, normalize_time_string

# =============================================================================
# FIELD VALIDATORS
# =============================================================================


def time_of_day(value: Any) -> str:
    """Validate an "HH:MM" (or "HH:MM:SS") value and return it as "HH:MM"."""
    try:
        return normalize_time_string(value)
    except InvalidTimeOfDayError as err:
        raise vol.Invalid(const.ERROR_TIME_OF_DAY_INVALID) from err


def timezone_name(value: Any) -> str:
    """Validate an IANA timezone name such as "America/Chicago"."""
    if not isinstance(value, str) or not value:
        raise vol.Invalid(const.ERROR_SHIFT_TIMEZONE_INVALID)
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise vol.Invalid(const.ERROR_SHIFT_TIMEZONE_INVALID) from err
    return value


def timestamp(value: Any) -> Any:
    """Validate a stored date or ISO timestamp; the value is returned as-is."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or dt_parse(value) is None:
        raise vol.Invalid(const.ERROR_ROUTINE_COMPLETED_AT_INVALID)
    return value


def unique_weekdays(schedules: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Reject schedule lists naming the same weekday twice."""
    weekdays = [schedule[const.DATA_SCHEDULE_WEEKDAY] for schedule in schedules]
    if len(weekdays) != len(set(weekdays)):
        raise vol.Invalid(const.ERROR_SHIFT_WEEKDAY_DUPLICATE)
    return schedules


TIME_OF_DAY = vol.All(str, time_of_day)

NON_NEGATIVE_HOURS = vol.All(vol.Coerce(float), vol.Range(min=0))

# =============================================================================
# SHIFT SCHEMAS
# =============================================================================

BREAK_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_BREAK_START_TIME): TIME_OF_DAY,
        vol.Required(const.DATA_BREAK_END_TIME): TIME_OF_DAY,
    },
    extra=vol.ALLOW_EXTRA,
)

SHIFT_WINDOW_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_WINDOW_START_TIME): TIME_OF_DAY,
        vol.Required(const.DATA_WINDOW_END_TIME): TIME_OF_DAY,
        vol.Optional(const.DATA_WINDOW_ACTIVE, default=True): bool,
        vol.Optional(const.DATA_WINDOW_BREAKS, default=list): [BREAK_SCHEMA],
    },
    extra=vol.ALLOW_EXTRA,
)

SCHEDULE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_SCHEDULE_WEEKDAY): vol.In(const.WEEKDAYS),
        vol.Optional(const.DATA_SCHEDULE_SHIFTS, default=list): [SHIFT_WINDOW_SCHEMA],
    },
    extra=vol.ALLOW_EXTRA,
)

SHIFT_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_SHIFT_ID): vol.Any(int, str),
        vol.Required(const.DATA_SHIFT_NAME): vol.All(
            str, vol.Strip, vol.Length(min=1, msg=const.ERROR_SHIFT_NAME_REQUIRED)
        ),
        vol.Optional(const.DATA_SHIFT_TIMEZONE): vol.Any(None, timezone_name),
        vol.Required(const.DATA_SHIFT_SCHEDULES): vol.All(
            [SCHEDULE_SCHEMA],
            vol.Length(max=const.DAYS_PER_WEEK),
            unique_weekdays,
        ),
    },
    extra=vol.ALLOW_EXTRA,
)

# =============================================================================
# ROUTINE SCHEMA
# =============================================================================

ROUTINE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_ROUTINE_ID): vol.Any(int, str),
        vol.Required(const.DATA_ROUTINE_TRIGGER_TYPE): vol.In(const.TRIGGER_TYPES),
        vol.Optional(const.DATA_ROUTINE_NAME): str,
        vol.Optional(const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS): vol.Any(
            None,
            vol.All(
                vol.Coerce(float),
                vol.Range(
                    min=const.ROUTINE_TRIGGER_RUNTIME_HOURS_MIN,
                    max=const.ROUTINE_TRIGGER_RUNTIME_HOURS_MAX,
                ),
            ),
        ),
        vol.Optional(const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS): vol.Any(
            None,
            vol.All(
                int,
                vol.Range(
                    min=const.ROUTINE_TRIGGER_CALENDAR_DAYS_MIN,
                    max=const.ROUTINE_TRIGGER_CALENDAR_DAYS_MAX,
                ),
            ),
        ),
        vol.Optional(const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT): vol.Any(
            None, timestamp
        ),
        vol.Optional(const.DATA_ROUTINE_LAST_EXECUTION_RUNTIME_HOURS): vol.Any(
            None, NON_NEGATIVE_HOURS
        ),
        vol.Optional(const.DATA_ROUTINE_PRIORITY_SCORE): vol.Any(
            None,
            vol.All(
                int,
                vol.Range(
                    min=const.ROUTINE_PRIORITY_SCORE_MIN,
                    max=const.ROUTINE_PRIORITY_SCORE_MAX,
                ),
            ),
        ),
        vol.Optional(const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS): vol.Any(
            None,
            vol.All(
                int,
                vol.Range(
                    min=const.ROUTINE_ADVANCE_GENERATION_DAYS_MIN,
                    max=const.ROUTINE_ADVANCE_GENERATION_DAYS_MAX,
                ),
            ),
        ),
        vol.Optional(const.DATA_ROUTINE_IS_ACTIVE, default=True): bool,
    },
    extra=vol.ALLOW_EXTRA,
)

# =============================================================================
# VALIDATION WRAPPERS
# =============================================================================

_SHIFT_ERROR_KEYS = frozenset(
    {
        const.ERROR_SHIFT_NAME_REQUIRED,
        const.ERROR_SHIFT_TIMEZONE_INVALID,
        const.ERROR_SHIFT_WEEKDAY_DUPLICATE,
        const.ERROR_TIME_OF_DAY_INVALID,
    }
)


def validate_shift_inputs(shift: dict[str, Any]) -> dict[str, str]:
    """Validate a shift payload against SHIFT_SCHEMA.

    Args:
        shift: Shift dict as received from the API layer.

    Returns:
        Dictionary of errors (empty if validation passes). Keys are the
        top-level field at fault (or "base"), values are const.ERROR_* keys.
    """
    errors: dict[str, str] = {}

    if not isinstance(shift, dict):
        errors[const.ERROR_KEY_BASE] = const.ERROR_SHIFT_SCHEDULES_INVALID
        return errors

    try:
        SHIFT_SCHEMA(shift)
    except vol.MultipleInvalid as err:
        for error in err.errors:
            field = str(error.path[0]) if error.path else const.ERROR_KEY_BASE
            if error.error_message in _SHIFT_ERROR_KEYS:
                key = error.error_message
            elif field == const.DATA_SHIFT_NAME:
                key = const.ERROR_SHIFT_NAME_REQUIRED
            elif field == const.DATA_SHIFT_TIMEZONE:
                key = const.ERROR_SHIFT_TIMEZONE_INVALID
            else:
                key = const.ERROR_SHIFT_SCHEDULES_INVALID
            errors.setdefault(field, key)

    if errors:
        const.LOGGER.debug("Shift validation failed: %s", errors)
    return errors
