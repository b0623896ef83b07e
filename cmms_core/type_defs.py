"""Type definitions for CMMS core data structures.

TypedDict is used for the snapshots the core receives from its caller (shift
calendars and maintenance routines as retrieved from the API). Keys are fixed
at design time, so every boundary shape gets a TypedDict.

Results produced by the engines are dataclasses defined next to the engine
that returns them (see engines/schedule_engine.py and engines/trigger_engine.py).

IMPORTANT: This file must NOT import from engines/ or helpers/ to avoid
circular dependencies. Only import from typing.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation of payloads lives
in schemas.py.
"""

from typing import Literal, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

TimeOfDayStr = str  # "HH:MM", 24-hour, zero-padded, e.g. "07:30"
Minutes = int  # Minutes since midnight, 0-1439
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00+00:00"
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"

Weekday = Literal[
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

TriggerType = Literal["runtime_hours", "calendar_days"]

DueState = Literal["never_executed", "ok", "due_soon", "overdue", "unknown"]


# =============================================================================
# Shift Calendar
# =============================================================================


class BreakData(TypedDict):
    """A non-working interval nested inside a shift window.

    end_time < start_time means the break continues past midnight.
    """

    start_time: TimeOfDayStr
    end_time: TimeOfDayStr


class ShiftWindowData(TypedDict):
    """One contiguous working period within a weekday.

    Inactive windows are kept for display but ignored by every calculation.
    """

    start_time: TimeOfDayStr
    end_time: TimeOfDayStr
    active: bool
    breaks: list[BreakData]


class ScheduleData(TypedDict):
    """All windows of one weekday. An empty shifts list is a day off."""

    weekday: Weekday
    shifts: list[ShiftWindowData]


class ShiftData(TypedDict):
    """A named weekly shift calendar (exactly one ScheduleData per weekday)."""

    id: int | str
    name: str
    timezone: NotRequired[str | None]
    schedules: list[ScheduleData]


# =============================================================================
# Maintenance Routines
# =============================================================================


class RoutineData(TypedDict):
    """Read-only snapshot of a maintenance routine.

    last_execution_* fields are written by the execution-completion workflow,
    never by this package.
    """

    id: int | str
    trigger_type: TriggerType
    name: NotRequired[str]
    trigger_runtime_hours: NotRequired[float | None]
    trigger_calendar_days: NotRequired[int | None]
    last_execution_completed_at: NotRequired[ISODatetime | ISODate | None]
    last_execution_runtime_hours: NotRequired[float | None]
    priority_score: NotRequired[int | None]
    advance_generation_days: NotRequired[int | None]
    is_active: NotRequired[bool]


# =============================================================================
# Display Contracts
# =============================================================================


class ScheduleTotalsDisplay(TypedDict):
    """Formatted weekly totals, e.g. {"work": "47h 30m", ...}."""

    work: str
    breaks: str
    net: str
