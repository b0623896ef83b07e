# File: utils/dt_utils.py
"""Date and time utilities for the CMMS core.

Pure Python date/time functions with no package-level imports, so every
function can be unit tested in isolation.

⚠️ UTILS PURITY: NO imports from engines/, helpers/ or const.py.
   Uses standard library: datetime, zoneinfo, plus dateutil.

Functions:
    - set_default_timezone / get_default_timezone: Configure naive-input zone
    - dt_now_utc: Current UTC datetime
    - as_utc / as_local: Timezone conversion
    - time_to_minutes: Parse "HH:MM" into minutes since midnight
    - minutes_to_time: Format minutes since midnight as "HH:MM"
    - validate_minutes: Range-check a TimeOfDay minute value
    - minutes_between: Midnight-aware duration between two TimeOfDay values
    - normalize_interval: Extend an interval's end past 1440 when it wraps
    - add_minutes: Shift an "HH:MM" value, wrapping at midnight
    - normalize_time_string: Trim "HH:MM:SS" to "HH:MM"
    - is_valid_time_of_day: Boolean form of time_to_minutes
    - format_minutes: Human-readable duration ("7h 30m")
    - dt_parse: Parse stored timestamps / dates into aware datetimes
    - dt_parse_date: Extract the calendar date embedded in a stored value
    - dt_wall_clock: Stored value as a naive wall-clock datetime
    - dt_days_between: Fractional days between two datetimes
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta
import logging
import re
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.parser import isoparse

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440

# Display constant
DISPLAY_NOT_AVAILABLE = "N/A"

# "HH:MM" with optional ":SS" (seconds are accepted and discarded)
_TIME_OF_DAY_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

# Date-only values ("YYYY-MM-DD") are anchored at start of day
_DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidTimeOfDayError(ValueError):
    """Raised when a TimeOfDay value is malformed or outside 00:00-23:59.

    This signals a caller bug, not a domain state: well-formed schedules never
    trigger it.

    Attributes:
        value: The offending input (string or minute count)
    """

    def __init__(self, value: object) -> None:
        """Initialize InvalidTimeOfDayError.

        Args:
            value: The offending input (string or minute count)
        """
        self.value = value
        super().__init__(f"Invalid time of day: {value!r} (expected HH:MM, 00:00-23:59)")


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone used for naive timestamps.

    Call this once at application startup with the plant's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware)."""
    return datetime.now(UTC)


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC timezone.

    Args:
        dt_obj: Datetime object; naive values are assumed to be in the
                default timezone.

    Returns:
        Datetime in UTC timezone
    """
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=DEFAULT_TIME_ZONE)
    return dt_obj.astimezone(UTC)


def as_local(dt_obj: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Convert a datetime to local timezone.

    Args:
        dt_obj: Datetime object; naive values are assumed to be UTC.
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Datetime in local timezone
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(tz_info)


# ==============================================================================
# TimeOfDay Arithmetic
# ==============================================================================


def time_to_minutes(value: str) -> int:
    """Parse an "HH:MM" string into minutes since midnight.

    Seconds ("HH:MM:SS", as some databases return TIME columns) are accepted
    and discarded.

    Args:
        value: Time string

    Returns:
        Minutes since midnight, 0-1439

    Raises:
        InvalidTimeOfDayError: if the string is malformed or out of range.

    Examples:
        time_to_minutes("07:30") → 450
        time_to_minutes("23:59:59") → 1439
    """
    if not isinstance(value, str):
        raise InvalidTimeOfDayError(value)

    match = _TIME_OF_DAY_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeOfDayError(value)

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTimeOfDayError(value)

    return hour * MINUTES_PER_HOUR + minute


def minutes_to_time(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM".

    Values outside a single day wrap around midnight, so results of interval
    arithmetic (e.g. 1500 = 01:00 next day) format correctly.

    Examples:
        minutes_to_time(450) → "07:30"
        minutes_to_time(1500) → "01:00"
    """
    wrapped = minutes % MINUTES_PER_DAY
    hours, mins = divmod(wrapped, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def validate_minutes(minutes: int) -> int:
    """Return minutes unchanged if it is a valid TimeOfDay (0-1439).

    Raises:
        InvalidTimeOfDayError: for non-integers or out-of-range values.
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidTimeOfDayError(minutes)
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise InvalidTimeOfDayError(minutes)
    return minutes


def minutes_between(start: int, end: int) -> int:
    """Return the duration from start to end, crossing midnight if end < start.

    Args:
        start: Start TimeOfDay in minutes (0-1439)
        end: End TimeOfDay in minutes (0-1439)

    Returns:
        Duration in minutes, 0-1439. Zero only when start == end.

    Examples:
        minutes_between(420, 1020) → 600   # 07:00-17:00
        minutes_between(1320, 360) → 480   # 22:00-06:00
    """
    validate_minutes(start)
    validate_minutes(end)
    if end >= start:
        return end - start
    return end - start + MINUTES_PER_DAY


def normalize_interval(start: int, end: int) -> tuple[int, int]:
    """Map an interval onto a monotonic axis.

    When end < start the interval crosses midnight and its end is extended
    past 1440, so [start, end) stays a plain numeric range.

    Examples:
        normalize_interval(420, 1020) → (420, 1020)
        normalize_interval(1320, 360) → (1320, 1800)
    """
    validate_minutes(start)
    validate_minutes(end)
    if end < start:
        return start, end + MINUTES_PER_DAY
    return start, end


def add_minutes(value: str, minutes: int) -> str:
    """Add minutes to an "HH:MM" value, wrapping around midnight.

    Examples:
        add_minutes("23:30", 45) → "00:15"
    """
    return minutes_to_time(time_to_minutes(value) + minutes)


def normalize_time_string(value: str) -> str:
    """Return value as a zero-padded "HH:MM" string (seconds dropped).

    Raises:
        InvalidTimeOfDayError: if the string is malformed or out of range.

    Examples:
        normalize_time_string("7:05:00") → "07:05"
    """
    return minutes_to_time(time_to_minutes(value))


def is_valid_time_of_day(value: object) -> bool:
    """Return True if value parses as an "HH:MM" TimeOfDay."""
    try:
        time_to_minutes(value)  # type: ignore[arg-type]
    except InvalidTimeOfDayError:
        return False
    return True


def format_minutes(minutes: int | None) -> str:
    """Format a minute count as a compact duration string.

    Returns:
        "45m", "8h", "7h 30m", or "N/A" for None/zero/negative.

    Examples:
        format_minutes(2850) → "47h 30m"
        format_minutes(0) → "N/A"
    """
    if not minutes or minutes <= 0:
        return DISPLAY_NOT_AVAILABLE
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours}h" if remaining == 0 else f"{hours}h {remaining}m"


# ==============================================================================
# Timestamp Parsing
# ==============================================================================


def dt_parse(
    dt_input: str | date | datetime | None,
    default_tzinfo: ZoneInfo | None = None,
) -> datetime | None:
    """Normalize a stored date/timestamp into a timezone-aware datetime.

    Accepts:
    - "2025-04-07" (date-only, anchored at 00:00 in the default timezone)
    - "2025-04-07T14:30:00-03:00" or "2025-04-07 14:30:00" (ISO 8601)
    - date and datetime objects

    Naive values take default_tzinfo (or DEFAULT_TIME_ZONE).

    Returns:
        Aware datetime, or None if the input is empty or unparseable.
    """
    if not dt_input:
        return None

    tz_info = default_tzinfo or DEFAULT_TIME_ZONE
    result: datetime

    if isinstance(dt_input, datetime):
        result = dt_input
    elif isinstance(dt_input, date):
        result = datetime.combine(dt_input, time.min)
    elif isinstance(dt_input, str):
        try:
            result = isoparse(dt_input.strip())
        except (ValueError, OverflowError) as exc:
            _LOGGER.warning("Could not parse timestamp %r: %s", dt_input, exc)
            return None
    else:
        _LOGGER.warning("Unsupported timestamp type: %s", type(dt_input))
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=tz_info)
    return result


def dt_wall_clock(dt_input: str | date | datetime | None) -> datetime | None:
    """Return the wall-clock value embedded in a stored date/timestamp.

    The result is naive and never converted between timezones:
    "2024-01-01T23:30:00-03:00" stays 2024-01-01 23:30 even though that
    instant is already Jan 2 in UTC. Used to derive displayed dates.
    """
    if not dt_input:
        return None

    if isinstance(dt_input, datetime):
        return dt_input.replace(tzinfo=None)
    if isinstance(dt_input, date):
        return datetime.combine(dt_input, time.min)
    if not isinstance(dt_input, str):
        return None

    value = dt_input.strip()
    try:
        if _DATE_ONLY_PATTERN.match(value):
            return datetime.combine(date.fromisoformat(value), time.min)
        return isoparse(value).replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None


def dt_parse_date(dt_input: str | date | datetime | None) -> date | None:
    """Return the calendar date embedded in a stored value.

    Examples:
        dt_parse_date("2024-01-01") → date(2024, 1, 1)
        dt_parse_date("2024-01-01T23:30:00-03:00") → date(2024, 1, 1)
    """
    wall_clock = dt_wall_clock(dt_input)
    return wall_clock.date() if wall_clock else None


def dt_days_between(start: datetime, end: datetime) -> float:
    """Return (end - start) in fractional days; negative if end is earlier."""
    return (as_utc(end) - as_utc(start)) / timedelta(days=1)
