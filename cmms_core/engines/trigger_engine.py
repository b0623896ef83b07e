"""Trigger Engine - Due-date and due-state computation for maintenance routines.

This engine provides stateless calculations for:
- Next due date / due state of runtime-hour and calendar-day triggers
- Remaining hours and elapsed-progress figures
- "N work days" labels for runtime thresholds

Routines are read-only snapshots; `now` is always passed in by the caller so
results are reproducible. Runtime triggers are converted to calendar time
through the average daily working hours of the asset's shift schedule
(weekly work hours / 7), which makes their due dates estimates.

ARCHITECTURE: Pure logic engine. All functions are static methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
import math
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import as_local, as_utc, dt_days_between, dt_parse, dt_wall_clock
from ..utils.math_utils import (
    calculate_percentage,
    round_half_up,
    round_hours,
    safe_divide,
)

if TYPE_CHECKING:
    from ..type_defs import RoutineData


# =============================================================================
# DUE STATUS DATA STRUCTURE
# =============================================================================


@dataclass
class DueStatus:
    """Due-state result for one routine.

    Attributes:
        state: One of const.DUE_STATE_*
        next_due_date: Calendar date shown to users (None unless computable)
        next_due_at: Aware timestamp the routine falls due
        days_until_due: ceil((next_due_at - now) / 1 day); <= 0 means overdue
        display_days: Same delta rounded half up, for labels
        is_estimate: True when derived from shift hours rather than the calendar
        reason: One of const.DUE_REASON_*
    """

    state: str
    reason: str
    next_due_date: date | None = None
    next_due_at: datetime | None = None
    days_until_due: int | None = None
    display_days: int | None = None
    is_estimate: bool = False

    @property
    def is_due(self) -> bool:
        """True for routines needing attention now or within the threshold."""
        return self.state in (const.DUE_STATE_DUE_SOON, const.DUE_STATE_OVERDUE)


# =============================================================================
# TRIGGER SCHEDULER
# =============================================================================


class TriggerScheduler:
    """Pure logic engine for maintenance-routine triggers.

    All methods are static - no instance state.
    """

    # =========================================================================
    # Routine Accessors
    # =========================================================================

    @staticmethod
    def _is_positive_number(value: object) -> bool:
        return (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
            and value > 0
        )

    @staticmethod
    def trigger_threshold(routine: RoutineData) -> float | None:
        """Return the routine's positive trigger threshold, or None if invalid.

        Runtime routines read trigger_runtime_hours, calendar routines read
        trigger_calendar_days. Unknown trigger types are invalid.
        """
        trigger_type = routine.get(const.DATA_ROUTINE_TRIGGER_TYPE)
        if trigger_type == const.TRIGGER_TYPE_RUNTIME_HOURS:
            value = routine.get(const.DATA_ROUTINE_TRIGGER_RUNTIME_HOURS)
        elif trigger_type == const.TRIGGER_TYPE_CALENDAR_DAYS:
            value = routine.get(const.DATA_ROUTINE_TRIGGER_CALENDAR_DAYS)
        else:
            return None

        if not TriggerScheduler._is_positive_number(value):
            return None
        return float(value)  # type: ignore[arg-type]

    @staticmethod
    def is_runtime_trigger(routine: RoutineData) -> bool:
        return (
            routine.get(const.DATA_ROUTINE_TRIGGER_TYPE)
            == const.TRIGGER_TYPE_RUNTIME_HOURS
        )

    @staticmethod
    def _last_completed_at(routine: RoutineData) -> datetime | None:
        return dt_parse(routine.get(const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT))

    @staticmethod
    def _runtime_used(
        routine: RoutineData, current_runtime_hours: float | None
    ) -> float | None:
        """Runtime accrued since the last execution, or None if unknown."""
        last_runtime = routine.get(const.DATA_ROUTINE_LAST_EXECUTION_RUNTIME_HOURS)
        if current_runtime_hours is None or last_runtime is None:
            return None
        return max(0.0, current_runtime_hours - last_runtime)

    # =========================================================================
    # Due Status
    # =========================================================================

    @staticmethod
    def compute_due_status(
        routine: RoutineData,
        now: datetime,
        weekly_work_hours: float | None = None,
        current_runtime_hours: float | None = None,
    ) -> DueStatus:
        """Compute the due state of a routine at `now`.

        Evaluation order:
        1. Missing/non-positive trigger threshold → UNKNOWN
        2. Runtime trigger without positive weekly shift hours → UNKNOWN
        3. No (parseable) last execution → NEVER_EXECUTED
        4. Due date past the datetime range → UNKNOWN
        5. Otherwise next_due_at is projected and classified:
           OVERDUE when days_until_due <= 0, DUE_SOON up to the threshold,
           OK beyond it.

        Args:
            routine: Routine snapshot
            now: Reference time (naive values use the default timezone)
            weekly_work_hours: Net weekly work hours of the asset's shift, as
                               from ScheduleCalculator.weekly_runtime_hours
                               (required for runtime triggers)
            current_runtime_hours: Latest runtime reading of the asset; when
                                   the routine stores its runtime at last
                                   execution, the remaining runtime is
                                   projected from now

        Returns:
            DueStatus
        """
        routine_id = routine.get(const.DATA_ROUTINE_ID)
        threshold = TriggerScheduler.trigger_threshold(routine)
        if threshold is None:
            const.LOGGER.debug(
                "TriggerScheduler: routine %s has no valid trigger", routine_id
            )
            return DueStatus(
                state=const.DUE_STATE_UNKNOWN, reason=const.DUE_REASON_INVALID_TRIGGER
            )

        is_runtime = TriggerScheduler.is_runtime_trigger(routine)
        if is_runtime and (weekly_work_hours is None or weekly_work_hours <= 0):
            return DueStatus(
                state=const.DUE_STATE_UNKNOWN,
                reason=const.DUE_REASON_NO_SHIFT_HOURS,
                is_estimate=True,
            )

        anchor = TriggerScheduler._last_completed_at(routine)
        if anchor is None:
            return DueStatus(
                state=const.DUE_STATE_NEVER_EXECUTED,
                reason=const.DUE_REASON_NEEDS_BASELINE,
                is_estimate=is_runtime,
            )

        now_utc = as_utc(now)
        # Wall-clock origin of the displayed date
        display_origin = dt_wall_clock(
            routine.get(const.DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT)
        )
        origin = anchor

        if not is_runtime:
            days = float(threshold)
            reason = const.DUE_REASON_EXACT_CALENDAR
        else:
            hours_per_day = weekly_work_hours / const.DAYS_PER_WEEK  # type: ignore[operator]
            runtime_used = TriggerScheduler._runtime_used(routine, current_runtime_hours)
            if runtime_used is None:
                days = threshold / hours_per_day
                reason = const.DUE_REASON_ESTIMATED_FROM_SHIFT
            else:
                days = (threshold - runtime_used) / hours_per_day
                reason = const.DUE_REASON_ESTIMATED_FROM_RUNTIME
                origin = now_utc
                display_origin = as_local(now_utc).replace(tzinfo=None)

        try:
            delta = timedelta(days=days)
            next_due_at = origin + delta
            next_due_date = (display_origin + delta).date() if display_origin else None
        except OverflowError:
            const.LOGGER.warning(
                "TriggerScheduler: routine %s due date is beyond the calendar range "
                "(%.1f days)",
                routine_id,
                days,
            )
            return DueStatus(
                state=const.DUE_STATE_UNKNOWN,
                reason=const.DUE_REASON_OUT_OF_RANGE,
                is_estimate=is_runtime,
            )

        raw_days = dt_days_between(now_utc, next_due_at)
        days_until_due = math.ceil(raw_days)

        if days_until_due <= 0:
            state = const.DUE_STATE_OVERDUE
        elif days_until_due <= const.DUE_SOON_THRESHOLD_DAYS:
            state = const.DUE_STATE_DUE_SOON
        else:
            state = const.DUE_STATE_OK

        const.LOGGER.debug(
            "TriggerScheduler: routine %s %s (due %s, %d day(s), %s)",
            routine_id,
            state,
            next_due_date,
            days_until_due,
            reason,
        )

        return DueStatus(
            state=state,
            reason=reason,
            next_due_date=next_due_date,
            next_due_at=next_due_at,
            days_until_due=days_until_due,
            display_days=round_half_up(raw_days),
            is_estimate=is_runtime,
        )

    # =========================================================================
    # Remaining / Progress
    # =========================================================================

    @staticmethod
    def hours_until_due(
        routine: RoutineData,
        now: datetime,
        current_runtime_hours: float | None = None,
    ) -> float | None:
        """Return hours left before the routine falls due, floored at zero.

        Runtime triggers count operating hours, calendar triggers count
        elapsed wall time. A never-executed routine is due now (0.0).

        Returns:
            Remaining hours, or None when the trigger is invalid, the due
            date is out of range, or the runtime readings needed are missing.
        """
        threshold = TriggerScheduler.trigger_threshold(routine)
        if threshold is None:
            return None

        anchor = TriggerScheduler._last_completed_at(routine)
        if anchor is None:
            return 0.0

        if TriggerScheduler.is_runtime_trigger(routine):
            runtime_used = TriggerScheduler._runtime_used(routine, current_runtime_hours)
            if runtime_used is None:
                return None
            return round_hours(max(0.0, threshold - runtime_used))

        try:
            next_due_at = anchor + timedelta(days=threshold)
        except OverflowError:
            return None
        remaining = (next_due_at - as_utc(now)) / timedelta(hours=1)
        return round_hours(max(0.0, remaining))

    @staticmethod
    def progress_percentage(
        routine: RoutineData,
        now: datetime,
        current_runtime_hours: float | None = None,
    ) -> float:
        """Return the elapsed share of the trigger interval (0-100).

        100 when never executed; 0 when not computable.
        """
        threshold = TriggerScheduler.trigger_threshold(routine)
        if threshold is None:
            return 0.0

        anchor = TriggerScheduler._last_completed_at(routine)
        if anchor is None:
            return 100.0

        if TriggerScheduler.is_runtime_trigger(routine):
            runtime_used = TriggerScheduler._runtime_used(routine, current_runtime_hours)
            if runtime_used is None:
                return 0.0
            return calculate_percentage(runtime_used, threshold)

        return calculate_percentage(dt_days_between(anchor, now), threshold)

    # =========================================================================
    # Labels
    # =========================================================================

    @staticmethod
    def format_elapsed_as_work_days(
        hours: float, shift_weekly_hours: float | None
    ) -> str | None:
        """Express a runtime figure as work days of the asset's shift.

        Examples (50 h/week shift → 7.14 h/day):
            format_elapsed_as_work_days(5, 50) → "less than 1 work day"
            format_elapsed_as_work_days(500, 50) → "70 work days"

        Returns:
            Label, or None when the shift has no working hours.
        """
        if shift_weekly_hours is None:
            return None

        work_days = safe_divide(hours, shift_weekly_hours / const.DAYS_PER_WEEK)
        if work_days is None:
            return None
        if work_days < 1:
            return const.LABEL_LESS_THAN_ONE_WORK_DAY

        count = round_half_up(work_days)
        label = const.LABEL_WORK_DAY if count == 1 else const.LABEL_WORK_DAYS
        return f"{count} {label}"
