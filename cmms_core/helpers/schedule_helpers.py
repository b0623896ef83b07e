# File: helpers/schedule_helpers.py
"""Helpers for building and editing shift calendars.

These functions back a shift editor: default templates, suggested windows and
breaks, day copying and normalization of values read back from storage. They
never mutate their inputs; every function returns new data.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from .. import const
from ..engines.schedule_engine import ScheduleCalculator
from ..utils.dt_utils import (
    add_minutes,
    format_minutes,
    normalize_time_string,
)

if TYPE_CHECKING:
    from ..engines.schedule_engine import ScheduleTotals
    from ..type_defs import (
        BreakData,
        ScheduleData,
        ScheduleTotalsDisplay,
        ShiftData,
        ShiftWindowData,
    )


# ----------------------------------------------------------------------------------
# BUILDERS
# ----------------------------------------------------------------------------------


def build_break(start_time: str, end_time: str) -> BreakData:
    """Build a break dict with normalized "HH:MM" values."""
    return {
        const.DATA_BREAK_START_TIME: normalize_time_string(start_time),
        const.DATA_BREAK_END_TIME: normalize_time_string(end_time),
    }


def build_window(
    start_time: str,
    end_time: str,
    breaks: list[BreakData] | None = None,
    active: bool = True,
) -> ShiftWindowData:
    """Build a shift window dict with normalized "HH:MM" values."""
    return {
        const.DATA_WINDOW_START_TIME: normalize_time_string(start_time),
        const.DATA_WINDOW_END_TIME: normalize_time_string(end_time),
        const.DATA_WINDOW_ACTIVE: active,
        const.DATA_WINDOW_BREAKS: [
            build_break(b[const.DATA_BREAK_START_TIME], b[const.DATA_BREAK_END_TIME])
            for b in breaks or []
        ],
    }


def build_default_window() -> ShiftWindowData:
    """Return the template window: 07:00-17:00 with a 12:00-13:00 break."""
    return build_window(
        const.DEFAULT_WINDOW_START_TIME,
        const.DEFAULT_WINDOW_END_TIME,
        [build_break(const.DEFAULT_BREAK_START_TIME, const.DEFAULT_BREAK_END_TIME)],
    )


def build_default_week() -> list[ScheduleData]:
    """Return the "5x10" template week.

    Monday-Friday get the default window, Saturday and Sunday are days off.
    """
    return [
        {
            const.DATA_SCHEDULE_WEEKDAY: weekday,
            const.DATA_SCHEDULE_SHIFTS: []
            if weekday in const.WEEKEND_DAYS
            else [build_default_window()],
        }
        for weekday in const.WEEKDAYS
    ]


def build_default_shift(
    shift_id: int, name: str = const.DEFAULT_SHIFT_NAME, timezone: str | None = None
) -> ShiftData:
    """Return a new shift on the default week."""
    shift: ShiftData = {
        const.DATA_SHIFT_ID: shift_id,
        const.DATA_SHIFT_NAME: name,
        const.DATA_SHIFT_SCHEDULES: build_default_week(),
    }
    if timezone is not None:
        shift[const.DATA_SHIFT_TIMEZONE] = timezone
    return shift


def ensure_full_week(schedules: list[ScheduleData]) -> list[ScheduleData]:
    """Return seven schedules ordered Monday..Sunday.

    Missing weekdays are filled with an empty (day off) schedule. When a
    weekday appears more than once, the first entry wins. Unknown weekday
    names are dropped.
    """
    by_weekday: dict[str, ScheduleData] = {}
    for schedule in schedules:
        weekday = schedule.get(const.DATA_SCHEDULE_WEEKDAY)
        if weekday in const.WEEKDAYS and weekday not in by_weekday:
            by_weekday[weekday] = schedule
        elif weekday not in const.WEEKDAYS:
            const.LOGGER.warning("Dropping schedule with unknown weekday %r", weekday)

    return [
        {
            const.DATA_SCHEDULE_WEEKDAY: weekday,
            const.DATA_SCHEDULE_SHIFTS: copy.deepcopy(
                by_weekday[weekday].get(const.DATA_SCHEDULE_SHIFTS) or []
            )
            if weekday in by_weekday
            else [],
        }
        for weekday in const.WEEKDAYS
    ]


# ----------------------------------------------------------------------------------
# SUGGESTIONS
# ----------------------------------------------------------------------------------


def suggest_next_window(windows: list[ShiftWindowData]) -> ShiftWindowData:
    """Suggest the next window to append to a day.

    An empty day gets the default window. Otherwise the suggestion starts
    where the last window ends, lasts 9 hours and carries a 1-hour break
    4 hours in.
    """
    if not windows:
        return build_default_window()

    start = windows[-1][const.DATA_WINDOW_END_TIME]
    break_start = add_minutes(
        start, const.SUGGESTED_WINDOW_BREAK_OFFSET_HOURS * const.MINUTES_PER_HOUR
    )
    return build_window(
        start,
        add_minutes(
            start, const.SUGGESTED_WINDOW_LENGTH_HOURS * const.MINUTES_PER_HOUR
        ),
        [
            build_break(
                break_start,
                add_minutes(
                    break_start,
                    const.SUGGESTED_WINDOW_BREAK_LENGTH_HOURS
                    * const.MINUTES_PER_HOUR,
                ),
            )
        ],
    )


def suggest_break(window: ShiftWindowData) -> BreakData | None:
    """Suggest a break that fits in the window.

    A window without breaks gets a 30-minute break centred in the window.
    Otherwise a 15-minute break is centred in the largest free gap.

    Returns:
        The break, or None when there is no room for one.
    """
    breaks = window.get(const.DATA_WINDOW_BREAKS) or []
    window_start = window[const.DATA_WINDOW_START_TIME]

    if not breaks:
        length = const.SUGGESTED_FIRST_BREAK_MINUTES
        duration = ScheduleCalculator.window_duration(window)
        if duration < length:
            return None
        start = add_minutes(window_start, duration // 2 - length // 2)
        return build_break(start, add_minutes(start, length))

    gap = ScheduleCalculator.find_largest_gap(window)
    length = const.SUGGESTED_GAP_BREAK_MINUTES
    if gap is None or gap.duration_minutes < length:
        return None

    start = add_minutes(gap.start, gap.duration_minutes // 2 - length // 2)
    return build_break(start, add_minutes(start, length))


# ----------------------------------------------------------------------------------
# EDITING
# ----------------------------------------------------------------------------------


def copy_day_schedule(
    schedules: list[ScheduleData],
    source_weekday: str,
    target_weekdays: list[str],
) -> list[ScheduleData]:
    """Copy one weekday's windows onto other weekdays.

    Returns a full Monday..Sunday week; the input is not modified. Targets
    receive independent deep copies, so later edits to one day never leak
    into another.

    Raises:
        ValueError: if source_weekday or a target is not a weekday name.
    """
    unknown = [
        day for day in [source_weekday, *target_weekdays] if day not in const.WEEKDAYS
    ]
    if unknown:
        raise ValueError(f"Unknown weekday(s): {', '.join(map(str, unknown))}")

    week = ensure_full_week(schedules)
    source_windows = next(
        s[const.DATA_SCHEDULE_SHIFTS]
        for s in week
        if s[const.DATA_SCHEDULE_WEEKDAY] == source_weekday
    )
    for schedule in week:
        weekday = schedule[const.DATA_SCHEDULE_WEEKDAY]
        if weekday in target_weekdays and weekday != source_weekday:
            schedule[const.DATA_SCHEDULE_SHIFTS] = copy.deepcopy(source_windows)

    const.LOGGER.debug(
        "Copied %s schedule to %s", source_weekday, ", ".join(target_weekdays)
    )
    return week


def normalize_time_strings(schedules: list[ScheduleData]) -> list[ScheduleData]:
    """Return schedules with every time trimmed to "HH:MM".

    Storage layers often return TIME columns as "HH:MM:SS".

    Raises:
        InvalidTimeOfDayError: if any time is malformed.
    """
    return [
        {
            const.DATA_SCHEDULE_WEEKDAY: schedule[const.DATA_SCHEDULE_WEEKDAY],
            const.DATA_SCHEDULE_SHIFTS: [
                build_window(
                    window[const.DATA_WINDOW_START_TIME],
                    window[const.DATA_WINDOW_END_TIME],
                    window.get(const.DATA_WINDOW_BREAKS),
                    bool(window.get(const.DATA_WINDOW_ACTIVE, True)),
                )
                for window in schedule.get(const.DATA_SCHEDULE_SHIFTS) or []
            ],
        }
        for schedule in schedules
    ]


# ----------------------------------------------------------------------------------
# DISPLAY
# ----------------------------------------------------------------------------------


def format_schedule_totals(totals: ScheduleTotals) -> ScheduleTotalsDisplay:
    """Format weekly totals for display, e.g. {"work": "47h 30m", ...}."""
    return {
        "work": format_minutes(totals.weekly_work_minutes),
        "breaks": format_minutes(totals.weekly_break_minutes),
        "net": format_minutes(totals.net_weekly_minutes),
    }
