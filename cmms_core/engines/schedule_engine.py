"""Schedule Engine - Pure interval arithmetic over weekly shift calendars.

This engine provides stateless calculations for:
- Window and break durations (midnight-aware)
- Weekly work / break / net totals
- Break containment and overlap checks
- Window overlap detection within one weekday
- Largest break-free gap search (used to suggest new breaks)

Every interval is mapped onto a monotonic minute axis before comparison: when
end < start the interval crosses midnight and its end is extended by 1440.
Breaks are anchored on their parent window, so a break sitting in the
after-midnight part of a crossing window (01:00-02:00 inside 22:00-06:00) is
shifted onto the same axis as the window.

ARCHITECTURE: Pure logic engine. All functions are static methods operating on
passed-in snapshots; inputs are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import (
    minutes_between,
    minutes_to_time,
    normalize_interval,
    time_to_minutes,
)
from ..utils.math_utils import round_hours

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..type_defs import BreakData, ScheduleData, ShiftWindowData


# =============================================================================
# RESULT DATA STRUCTURES
# =============================================================================


@dataclass
class TimeSpan:
    """A span of wall-clock time, e.g. the widest free gap in a window.

    end may be earlier than start when the span crosses midnight.
    """

    start: str
    end: str

    @property
    def duration_minutes(self) -> int:
        """Length of the span in minutes."""
        return minutes_between(time_to_minutes(self.start), time_to_minutes(self.end))


@dataclass
class ScheduleTotals:
    """Weekly totals for a shift calendar, in minutes.

    Attributes:
        weekly_work_minutes: Sum of active window durations
        weekly_break_minutes: Sum of break durations inside active windows
        net_weekly_minutes: work - breaks
    """

    weekly_work_minutes: int = 0
    weekly_break_minutes: int = 0
    net_weekly_minutes: int = 0

    @property
    def work_hours(self) -> float:
        return round_hours(self.weekly_work_minutes / const.MINUTES_PER_HOUR)

    @property
    def break_hours(self) -> float:
        return round_hours(self.weekly_break_minutes / const.MINUTES_PER_HOUR)

    @property
    def net_hours(self) -> float:
        return round_hours(self.net_weekly_minutes / const.MINUTES_PER_HOUR)


@dataclass
class ScheduleWarning:
    """A validation finding for one window or break.

    Warnings are reported as data and never auto-corrected.

    Attributes:
        code: One of const.WARNING_*
        weekday: Weekday the finding belongs to
        window_index: Index of the window within the weekday
        break_index: Index of the break (break warnings only)
        other_index: Index of the conflicting window or break (overlaps only)
    """

    code: str
    weekday: str
    window_index: int
    break_index: int | None = None
    other_index: int | None = None


# =============================================================================
# SCHEDULE CALCULATOR
# =============================================================================


class ScheduleCalculator:
    """Pure logic engine for shift-calendar arithmetic.

    All methods are static - no instance state.
    """

    # =========================================================================
    # Interval Mapping
    # =========================================================================

    @staticmethod
    def is_window_active(window: ShiftWindowData) -> bool:
        return bool(window.get(const.DATA_WINDOW_ACTIVE, True))

    @staticmethod
    def windows_of(schedule: ScheduleData) -> list[ShiftWindowData]:
        return schedule.get(const.DATA_SCHEDULE_SHIFTS) or []

    @staticmethod
    def breaks_of(window: ShiftWindowData) -> list[BreakData]:
        return window.get(const.DATA_WINDOW_BREAKS) or []

    @staticmethod
    def window_interval(window: ShiftWindowData) -> tuple[int, int]:
        """Return the window as [start, end) on the extended minute axis."""
        return normalize_interval(
            time_to_minutes(window[const.DATA_WINDOW_START_TIME]),
            time_to_minutes(window[const.DATA_WINDOW_END_TIME]),
        )

    @staticmethod
    def break_interval(window: ShiftWindowData, brk: BreakData) -> tuple[int, int]:
        """Return the break as [start, end) on its window's minute axis."""
        window_start, window_end = ScheduleCalculator.window_interval(window)
        start, end = normalize_interval(
            time_to_minutes(brk[const.DATA_BREAK_START_TIME]),
            time_to_minutes(brk[const.DATA_BREAK_END_TIME]),
        )
        # After-midnight part of a crossing window
        if window_end > const.MINUTES_PER_DAY and start < window_start:
            start += const.MINUTES_PER_DAY
            end += const.MINUTES_PER_DAY
        return start, end

    @staticmethod
    def _intervals_intersect(a: tuple[int, int], b: tuple[int, int]) -> bool:
        # Empty intervals never intersect anything
        if a[0] == a[1] or b[0] == b[1]:
            return False
        return a[0] < b[1] and b[0] < a[1]

    # =========================================================================
    # Durations & Totals
    # =========================================================================

    @staticmethod
    def duration_minutes(start: str, end: str) -> int:
        """Return the duration between two "HH:MM" values, crossing midnight.

        Examples:
            duration_minutes("07:00", "17:00") → 600
            duration_minutes("22:00", "06:00") → 480
        """
        return minutes_between(time_to_minutes(start), time_to_minutes(end))

    @staticmethod
    def window_duration(window: ShiftWindowData) -> int:
        """Gross duration of a window in minutes (ignores active flag)."""
        return ScheduleCalculator.duration_minutes(
            window[const.DATA_WINDOW_START_TIME], window[const.DATA_WINDOW_END_TIME]
        )

    @staticmethod
    def window_break_minutes(window: ShiftWindowData) -> int:
        """Sum of break durations in a window (ignores active flag)."""
        return sum(
            ScheduleCalculator.duration_minutes(
                brk[const.DATA_BREAK_START_TIME], brk[const.DATA_BREAK_END_TIME]
            )
            for brk in ScheduleCalculator.breaks_of(window)
        )

    @staticmethod
    def _active_windows(schedules: list[ScheduleData]) -> Iterator[ShiftWindowData]:
        for schedule in schedules:
            for window in ScheduleCalculator.windows_of(schedule):
                if ScheduleCalculator.is_window_active(window):
                    yield window

    @staticmethod
    def weekly_work_minutes(schedules: list[ScheduleData]) -> int:
        """Sum of active window durations across all weekdays."""
        return sum(
            ScheduleCalculator.window_duration(window)
            for window in ScheduleCalculator._active_windows(schedules)
        )

    @staticmethod
    def weekly_break_minutes(schedules: list[ScheduleData]) -> int:
        """Sum of break durations inside active windows across all weekdays."""
        return sum(
            ScheduleCalculator.window_break_minutes(window)
            for window in ScheduleCalculator._active_windows(schedules)
        )

    @staticmethod
    def net_weekly_minutes(schedules: list[ScheduleData]) -> int:
        """Weekly work minutes minus weekly break minutes."""
        return ScheduleCalculator.weekly_work_minutes(
            schedules
        ) - ScheduleCalculator.weekly_break_minutes(schedules)

    @staticmethod
    def calculate_totals(schedules: list[ScheduleData]) -> ScheduleTotals:
        """Calculate work, break and net weekly minutes in one pass.

        Args:
            schedules: Weekday schedules of a shift (any order, days may be missing)

        Returns:
            ScheduleTotals with minute figures (hour properties derived)
        """
        totals = ScheduleTotals()
        for window in ScheduleCalculator._active_windows(schedules):
            totals.weekly_work_minutes += ScheduleCalculator.window_duration(window)
            totals.weekly_break_minutes += ScheduleCalculator.window_break_minutes(
                window
            )
        totals.net_weekly_minutes = (
            totals.weekly_work_minutes - totals.weekly_break_minutes
        )

        const.LOGGER.debug(
            "ScheduleCalculator: weekly totals work=%d break=%d net=%d",
            totals.weekly_work_minutes,
            totals.weekly_break_minutes,
            totals.net_weekly_minutes,
        )
        return totals

    @staticmethod
    def work_hours_per_day(schedules: list[ScheduleData]) -> float:
        """Average gross working hours per calendar day (weekly work / 60 / 7)."""
        return (
            ScheduleCalculator.weekly_work_minutes(schedules)
            / const.MINUTES_PER_HOUR
            / const.DAYS_PER_WEEK
        )

    @staticmethod
    def weekly_runtime_hours(schedules: list[ScheduleData]) -> float:
        """Net weekly operating hours, each window floored at zero.

        This is the figure used to estimate runtime-triggered routines: a
        window whose breaks exceed it contributes nothing rather than
        subtracting from other windows.
        """
        total_minutes = sum(
            max(
                0,
                ScheduleCalculator.window_duration(window)
                - ScheduleCalculator.window_break_minutes(window),
            )
            for window in ScheduleCalculator._active_windows(schedules)
        )
        return round_hours(total_minutes / const.MINUTES_PER_HOUR)

    # =========================================================================
    # Validation Checks
    # =========================================================================

    @staticmethod
    def is_break_valid(window: ShiftWindowData, brk: BreakData) -> bool:
        """Return True if the break lies entirely within its window.

        Examples (window 22:00-06:00):
            23:00-01:00 → True
            01:00-02:00 → True
            05:00-07:00 → False
        """
        window_start, window_end = ScheduleCalculator.window_interval(window)
        break_start, break_end = ScheduleCalculator.break_interval(window, brk)
        return window_start <= break_start and break_end <= window_end

    @staticmethod
    def windows_overlap(a: ShiftWindowData, b: ShiftWindowData) -> bool:
        """Return True if two windows' [start, end) intervals intersect.

        Symmetric; ignores the active flag (callers filter inactive windows).
        """
        return ScheduleCalculator._intervals_intersect(
            ScheduleCalculator.window_interval(a),
            ScheduleCalculator.window_interval(b),
        )

    @staticmethod
    def find_overlapping_windows(
        windows: list[ShiftWindowData], index: int
    ) -> set[int]:
        """Return indices of active windows overlapping windows[index].

        The window at index is never reported against itself. An inactive
        target overlaps nothing.
        """
        target = windows[index]
        if not ScheduleCalculator.is_window_active(target):
            return set()

        return {
            other_index
            for other_index, other in enumerate(windows)
            if other_index != index
            and ScheduleCalculator.is_window_active(other)
            and ScheduleCalculator.windows_overlap(target, other)
        }

    @staticmethod
    def _overlapping_break_indices(
        window: ShiftWindowData, brk: BreakData, break_index: int
    ) -> Iterator[int]:
        target = ScheduleCalculator.break_interval(window, brk)
        for other_index, other in enumerate(ScheduleCalculator.breaks_of(window)):
            if other_index == break_index:
                continue
            if ScheduleCalculator._intervals_intersect(
                target, ScheduleCalculator.break_interval(window, other)
            ):
                yield other_index

    @staticmethod
    def find_overlapping_breaks(
        window: ShiftWindowData, brk: BreakData, break_index: int
    ) -> bool:
        """Return True if brk overlaps any other break of the window.

        Args:
            window: Parent window holding the break list
            brk: Break under test
            break_index: Position of brk in the window's breaks (skipped);
                         pass -1 for a break not yet added to the window
        """
        return any(
            True
            for _ in ScheduleCalculator._overlapping_break_indices(
                window, brk, break_index
            )
        )

    @staticmethod
    def find_invalid_breaks(window: ShiftWindowData) -> set[int]:
        """Return indices of breaks not contained in the window."""
        return {
            break_index
            for break_index, brk in enumerate(ScheduleCalculator.breaks_of(window))
            if not ScheduleCalculator.is_break_valid(window, brk)
        }

    @staticmethod
    def validate_schedules(schedules: list[ScheduleData]) -> list[ScheduleWarning]:
        """Collect every window-overlap and break warning of a shift calendar.

        Each overlapping pair is reported once, from its lower index. Inactive
        windows produce no warnings.
        """
        warnings: list[ScheduleWarning] = []

        for schedule in schedules:
            weekday = schedule[const.DATA_SCHEDULE_WEEKDAY]
            windows = ScheduleCalculator.windows_of(schedule)

            for window_index, window in enumerate(windows):
                if not ScheduleCalculator.is_window_active(window):
                    continue

                for other_index in sorted(
                    ScheduleCalculator.find_overlapping_windows(windows, window_index)
                ):
                    if other_index > window_index:
                        warnings.append(
                            ScheduleWarning(
                                code=const.WARNING_WINDOW_OVERLAP,
                                weekday=weekday,
                                window_index=window_index,
                                other_index=other_index,
                            )
                        )

                breaks = ScheduleCalculator.breaks_of(window)
                for break_index, brk in enumerate(breaks):
                    if not ScheduleCalculator.is_break_valid(window, brk):
                        warnings.append(
                            ScheduleWarning(
                                code=const.WARNING_BREAK_OUT_OF_BOUNDS,
                                weekday=weekday,
                                window_index=window_index,
                                break_index=break_index,
                            )
                        )
                    for other_index in ScheduleCalculator._overlapping_break_indices(
                        window, brk, break_index
                    ):
                        if other_index > break_index:
                            warnings.append(
                                ScheduleWarning(
                                    code=const.WARNING_BREAK_OVERLAP,
                                    weekday=weekday,
                                    window_index=window_index,
                                    break_index=break_index,
                                    other_index=other_index,
                                )
                            )

        if warnings:
            const.LOGGER.debug(
                "ScheduleCalculator: %d schedule warning(s) found", len(warnings)
            )
        return warnings

    # =========================================================================
    # Gap Search
    # =========================================================================

    @staticmethod
    def find_largest_gap(window: ShiftWindowData) -> TimeSpan | None:
        """Return the widest break-free span of a window.

        Gaps considered: window start to first break, between consecutive
        breaks, last break to window end. Breaks are ordered by their offset
        from the window start. Ties keep the earliest gap.

        Returns:
            The whole window when it has no breaks; None when the window has
            zero duration or no gap is positive.
        """
        window_start, window_end = ScheduleCalculator.window_interval(window)
        span = window_end - window_start
        if span == 0:
            return None

        breaks = ScheduleCalculator.breaks_of(window)
        if not breaks:
            return TimeSpan(
                start=window[const.DATA_WINDOW_START_TIME],
                end=window[const.DATA_WINDOW_END_TIME],
            )

        # Breaks are clipped to the window; parts outside it leave no mark
        offsets = []
        for brk in breaks:
            break_start, break_end = ScheduleCalculator.break_interval(window, brk)
            clipped_start = min(max(break_start - window_start, 0), span)
            clipped_end = min(max(break_end - window_start, 0), span)
            if clipped_end > clipped_start:
                offsets.append((clipped_start, clipped_end - clipped_start))
        offsets.sort()

        best_start = best_end = 0
        cursor = 0
        for offset, length in offsets:
            if offset - cursor > best_end - best_start:
                best_start, best_end = cursor, offset
            cursor = max(cursor, offset + length)
        if span - cursor > best_end - best_start:
            best_start, best_end = cursor, span

        if best_end - best_start <= 0:
            return None

        return TimeSpan(
            start=minutes_to_time(window_start + best_start),
            end=minutes_to_time(window_start + best_end),
        )
