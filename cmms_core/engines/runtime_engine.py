"""Runtime Engine - Asset operating-hour accumulation from shift calendars.

Assets report their runtime meter manually. Between readings, the asset is
assumed to run whenever its shift calendar has an active window, minus breaks.
This engine provides:
- accumulated_shift_hours: net shift hours between two instants
- current_runtime: last reading plus accumulated shift hours

Days are walked with `dateutil.rrule` in the shift's timezone, starting the
day before the range so windows that began the previous evening and cross
midnight are counted.

ARCHITECTURE: Pure logic engine. `now` is always passed in by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.rrule import DAILY, rrule

from .. import const
from ..utils.dt_utils import as_local, as_utc, dt_parse, get_default_timezone
from ..utils.math_utils import round_hours
from .schedule_engine import ScheduleCalculator

if TYPE_CHECKING:
    from ..type_defs import ScheduleData, ShiftData


# =============================================================================
# RUNTIME DETAILS DATA STRUCTURE
# =============================================================================


@dataclass
class RuntimeDetails:
    """Breakdown of an asset's current runtime estimate.

    Attributes:
        current_runtime_hours: last_reported_hours + accumulated_shift_hours
        last_reported_hours: Most recent manual meter reading
        accumulated_shift_hours: Net shift hours since that reading
        has_shift: Whether a shift calendar contributed
        shift_name: Name of that shift calendar
        last_measurement_at: When the reading was taken
        calculation_method: One of const.RUNTIME_METHOD_*
    """

    current_runtime_hours: float
    calculation_method: str
    last_reported_hours: float | None = None
    accumulated_shift_hours: float = 0.0
    has_shift: bool = False
    shift_name: str | None = None
    last_measurement_at: datetime | None = None


# =============================================================================
# RUNTIME ACCUMULATOR
# =============================================================================


class RuntimeAccumulator:
    """Pure logic engine for runtime accumulation.

    All methods are static - no instance state.
    """

    @staticmethod
    def resolve_timezone(timezone: str | ZoneInfo | None) -> ZoneInfo:
        """Return the shift's ZoneInfo, falling back to the default timezone."""
        if isinstance(timezone, ZoneInfo):
            return timezone
        if timezone:
            try:
                return ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError):
                const.LOGGER.warning(
                    "RuntimeAccumulator: Unknown timezone %r, using default", timezone
                )
        return get_default_timezone()

    @staticmethod
    def _clipped_seconds(
        start: datetime, end: datetime, range_start: datetime, range_end: datetime
    ) -> float:
        """Seconds of [start, end) that fall inside [range_start, range_end)."""
        overlap_start = max(start, range_start)
        overlap_end = min(end, range_end)
        if overlap_end <= overlap_start:
            return 0.0
        return (overlap_end - overlap_start).total_seconds()

    @staticmethod
    def accumulated_shift_hours(
        schedules: list[ScheduleData],
        start: datetime,
        end: datetime,
        timezone: str | ZoneInfo | None = None,
    ) -> float:
        """Return net working hours the shift accrues between start and end.

        Args:
            schedules: Weekday schedules of the shift
            start: Range start (naive values use the default timezone)
            end: Range end
            timezone: Zone the schedule's wall-clock times are expressed in

        Returns:
            Hours rounded to const.RUNTIME_HOURS_PRECISION; 0.0 for an empty
            or inverted range.
        """
        tz_info = RuntimeAccumulator.resolve_timezone(timezone)
        range_start = as_local(dt_parse(start) or start, tz_info)
        range_end = as_local(dt_parse(end) or end, tz_info)
        if range_end <= range_start:
            return 0.0
        # Clip on UTC instants; wall-clock subtraction ignores DST offsets
        utc_start = as_utc(range_start)
        utc_end = as_utc(range_end)

        windows_by_weekday: dict[str, list] = {}
        for schedule in schedules:
            windows_by_weekday.setdefault(
                schedule[const.DATA_SCHEDULE_WEEKDAY], []
            ).extend(
                window
                for window in ScheduleCalculator.windows_of(schedule)
                if ScheduleCalculator.is_window_active(window)
            )

        first_day = datetime.combine(
            range_start.date() - timedelta(days=1), time.min
        )
        last_day = datetime.combine(range_end.date(), time.min)

        total_seconds = 0.0
        for day in rrule(DAILY, dtstart=first_day, until=last_day):
            midnight = day.replace(tzinfo=tz_info)
            weekday = const.WEEKDAYS[day.weekday()]

            for window in windows_by_weekday.get(weekday, []):
                window_start, window_end = ScheduleCalculator.window_interval(window)
                window_from = as_utc(midnight + timedelta(minutes=window_start))
                window_to = as_utc(midnight + timedelta(minutes=window_end))

                worked = RuntimeAccumulator._clipped_seconds(
                    window_from, window_to, utc_start, utc_end
                )
                if worked <= 0:
                    continue

                # Breaks only count where they fall inside both window and range
                clip_start = max(window_from, utc_start)
                clip_end = min(window_to, utc_end)
                for brk in ScheduleCalculator.breaks_of(window):
                    break_start, break_end = ScheduleCalculator.break_interval(
                        window, brk
                    )
                    worked -= RuntimeAccumulator._clipped_seconds(
                        as_utc(midnight + timedelta(minutes=break_start)),
                        as_utc(midnight + timedelta(minutes=break_end)),
                        clip_start,
                        clip_end,
                    )

                total_seconds += max(0.0, worked)

        hours = round_hours(total_seconds / 3600, const.RUNTIME_HOURS_PRECISION)
        const.LOGGER.debug(
            "RuntimeAccumulator: %.1f shift hours between %s and %s",
            hours,
            range_start,
            range_end,
        )
        return hours

    @staticmethod
    def current_runtime(
        last_reported_hours: float | None,
        measured_at: datetime | str | None,
        now: datetime,
        shift: ShiftData | None = None,
    ) -> RuntimeDetails:
        """Estimate an asset's current runtime meter value.

        Args:
            last_reported_hours: Latest manual reading (None if never measured)
            measured_at: When that reading was taken
            now: Reference time
            shift: Shift calendar of the asset, if any

        Returns:
            RuntimeDetails. Without a reading the runtime is 0.0
            (no_measurements); without a shift the reading is returned
            unchanged (manual_only).
        """
        measured_dt = dt_parse(measured_at)
        if last_reported_hours is None or measured_dt is None:
            return RuntimeDetails(
                current_runtime_hours=0.0,
                calculation_method=const.RUNTIME_METHOD_NO_MEASUREMENTS,
                has_shift=shift is not None,
                shift_name=shift.get(const.DATA_SHIFT_NAME) if shift else None,
            )

        schedules = shift.get(const.DATA_SHIFT_SCHEDULES) if shift else None
        if not shift or not schedules:
            return RuntimeDetails(
                current_runtime_hours=round_hours(
                    last_reported_hours, const.RUNTIME_HOURS_PRECISION
                ),
                calculation_method=const.RUNTIME_METHOD_MANUAL_ONLY,
                last_reported_hours=last_reported_hours,
                has_shift=shift is not None,
                shift_name=shift.get(const.DATA_SHIFT_NAME) if shift else None,
                last_measurement_at=measured_dt,
            )

        accumulated = RuntimeAccumulator.accumulated_shift_hours(
            schedules,
            measured_dt,
            now,
            shift.get(const.DATA_SHIFT_TIMEZONE),
        )
        return RuntimeDetails(
            current_runtime_hours=round_hours(
                last_reported_hours + accumulated, const.RUNTIME_HOURS_PRECISION
            ),
            calculation_method=const.RUNTIME_METHOD_MANUAL_PLUS_SHIFT,
            last_reported_hours=last_reported_hours,
            accumulated_shift_hours=accumulated,
            has_shift=True,
            shift_name=shift.get(const.DATA_SHIFT_NAME),
            last_measurement_at=measured_dt,
        )
