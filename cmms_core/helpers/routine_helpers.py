# File: helpers/routine_helpers.py
"""Helpers for maintenance-routine input validation and display.

Validation follows the error-dict pattern: each validator returns a dict of
{field_or_base: error_key}; an empty dict means the input is valid. Callers
map error keys to user-facing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import dt_parse
from ..utils.math_utils import round_half_up

if TYPE_CHECKING:
    from ..type_defs import RoutineData


# ----------------------------------------------------------------------------------
# VALIDATION
# ----------------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_routine_inputs(routine: RoutineData | dict[str, Any]) -> dict[str, str]:
    """Validate a routine's trigger and scheduling fields.

    Args:
        routine: Routine data keyed by const.DATA_ROUTINE_* names.

    Returns:
        Dictionary of errors (empty if validation passes).

    Validation rules:
        - trigger_type must be runtime_hours or calendar_days
        - runtime_hours routines need trigger_runtime_hours in 1-10000
        - calendar_days routines need trigger_calendar_days in 1-365
        - advance_generation_days (optional) in 1-180
        - priority_score (optional) in 0-100
        - last_execution_completed_at (optional) must parse as a date/timestamp
    """
    errors: dict[str, str] = {}

    trigger_type = routine.get(const.DATA_ROUTINE_TRIGGER_TYPE)
    if trigger_type not in const.TRIGGER_TYPES:
        errors[const.DATA_ROUTINE_TRIGGER_TYPE] = (
            const.ERROR_ROUTINE_TRIGGER_TYPE_REQUIRED
        )

    elif trigger_type == const.TRIGGER_TYPE_RUNTIME_HOURS:
        hours = routine.get(const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS)
        if not _is_number(hours) or hours < const.ROUTINE_TRIGGER_RUNTIME_HOURS_MIN:
            errors[const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS] = (
                const.ERROR_ROUTINE_RUNTIME_HOURS_REQUIRED
            )
        elif hours > const.ROUTINE_TRIGGER_RUNTIME_HOURS_MAX:
            errors[const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS] = (
                const.ERROR_ROUTINE_RUNTIME_HOURS_TOO_LARGE
            )

    else:
        days = routine.get(const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS)
        if (
            not isinstance(days, int)
            or isinstance(days, bool)
            or days < const.ROUTINE_TRIGGER_CALENDAR_DAYS_MIN
        ):
            errors[const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS] = (
                const.ERROR_ROUTINE_CALENDAR_DAYS_REQUIRED
            )
        elif days > const.ROUTINE_TRIGGER_CALENDAR_DAYS_MAX:
            errors[const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS] = (
                const.ERROR_ROUTINE_CALENDAR_DAYS_TOO_LARGE
            )

    advance = routine.get(const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS)
    if advance is not None and (
        not isinstance(advance, int)
        or isinstance(advance, bool)
        or not const.ROUTINE_ADVANCE_GENERATION_DAYS_MIN
        <= advance
        <= const.ROUTINE_ADVANCE_GENERATION_DAYS_MAX
    ):
        errors[const.DATA_ROUTINE_ADVANCE_GENERATION_DAYS] = (
            const.ERROR_ROUTINE_ADVANCE_DAYS_OUT_OF_RANGE
        )

    priority = routine.get(const.DATA_ROUTINE_PRIORITY_SCORE)
    if priority is not None and (
        not _is_number(priority)
        or not const.ROUTINE_PRIORITY_SCORE_MIN
        <= priority
        <= const.ROUTINE_PRIORITY_SCORE_MAX
    ):
        errors[const.DATA_ROUTINE_PRIORITY_SCORE] = (
            const.ERROR_ROUTINE_PRIORITY_OUT_OF_RANGE
        )

    completed_at = routine.get(const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT)
    if completed_at and dt_parse(completed_at) is None:
        errors[const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT] = (
            const.ERROR_ROUTINE_COMPLETED_AT_INVALID
        )

    return errors


# ----------------------------------------------------------------------------------
# PRIORITY
# ----------------------------------------------------------------------------------


def priority_from_score(score: float | None) -> str:
    """Map a 0-100 priority score to a priority level.

    Examples:
        priority_from_score(95) → "emergency"
        priority_from_score(None) → "normal"  (default score 50)
    """
    if score is None:
        score = const.DEFAULT_ROUTINE_PRIORITY_SCORE

    for threshold, level in const.PRIORITY_SCORE_THRESHOLDS:
        if score >= threshold:
            return level
    return const.PRIORITY_LOW


# ----------------------------------------------------------------------------------
# DISPLAY
# ----------------------------------------------------------------------------------


def format_trigger_hours(hours: float) -> str:
    """Format a runtime threshold, e.g. "1 hour" or "12 hours".

    Fractional values round half up.
    """
    count = round_half_up(hours)
    label = const.LABEL_HOUR if count == 1 else const.LABEL_HOURS
    return f"{count} {label}"


def format_trigger_interval(routine: RoutineData) -> str:
    """Short label for a routine's trigger: "500h" or "30 days".

    Returns "N/A" when the trigger is missing.
    """
    trigger_type = routine.get(const.DATA_ROUTINE_TRIGGER_TYPE)

    if trigger_type == const.TRIGGER_TYPE_RUNTIME_HOURS:
        hours = routine.get(const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS)
        if _is_number(hours) and hours > 0:
            return f"{hours:g}h"

    elif trigger_type == const.TRIGGER_TYPE_CALENDAR_DAYS:
        days = routine.get(const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS)
        if _is_number(days) and days > 0:
            label = const.LABEL_DAY if days == 1 else const.LABEL_DAYS
            return f"{days:g} {label}"

    return const.DISPLAY_NOT_AVAILABLE
