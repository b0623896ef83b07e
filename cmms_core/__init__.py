"""CMMS core: shift-schedule arithmetic and maintenance-trigger scheduling.

Pure calculation package. Callers load Shift and Routine snapshots, validate
them with `schemas`, then use the engines:

    weekly_hours = ScheduleCalculator.weekly_runtime_hours(shift["schedules"])
    status = TriggerScheduler.compute_due_status(
        routine, now, weekly_work_hours=weekly_hours
    )

Runtime triggers take the net weekly hours (breaks excluded).
"""

from .engines import (
    DueStatus,
    RuntimeAccumulator,
    RuntimeDetails,
    ScheduleCalculator,
    ScheduleTotals,
    ScheduleWarning,
    TimeSpan,
    TriggerScheduler,
)
from .schemas import ROUTINE_SCHEMA, SHIFT_SCHEMA, validate_shift_inputs
from .utils.dt_utils import InvalidTimeOfDayError

__all__ = [
    "ROUTINE_SCHEMA",
    "SHIFT_SCHEMA",
    "DueStatus",
    "InvalidTimeOfDayError",
    "RuntimeAccumulator",
    "RuntimeDetails",
    "ScheduleCalculator",
    "ScheduleTotals",
    "ScheduleWarning",
    "TimeSpan",
    "TriggerScheduler",
    "validate_shift_inputs",
]
