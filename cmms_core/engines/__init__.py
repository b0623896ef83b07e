"""Engine modules for the CMMS core.

Contains specialized computation engines:
- schedule_engine: Shift-calendar interval arithmetic and validation
- trigger_engine: Maintenance-routine due dates and due states
- runtime_engine: Asset runtime accumulation from shift calendars
"""

# Use relative imports within package to avoid mypy module resolution issues
from .runtime_engine import RuntimeAccumulator, RuntimeDetails
from .schedule_engine import (
    ScheduleCalculator,
    ScheduleTotals,
    ScheduleWarning,
    TimeSpan,
)
from .trigger_engine import DueStatus, TriggerScheduler

__all__ = [
    "DueStatus",
    "RuntimeAccumulator",
    "RuntimeDetails",
    "ScheduleCalculator",
    "ScheduleTotals",
    "ScheduleWarning",
    "TimeSpan",
    "TriggerScheduler",
]
