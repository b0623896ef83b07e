# File: const.py
"""Constants for the CMMS shift-schedule and maintenance-trigger core.

This file centralizes data keys, defaults, thresholds, error keys and display
labels so the engines, helpers and schemas share a single source of truth.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General
# ------------------------------------------------------------------------------------------------
# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Time Arithmetic
# ------------------------------------------------------------------------------------------------
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY  # 1440
DAYS_PER_WEEK = 7

# ------------------------------------------------------------------------------------------------
# Weekdays
# ------------------------------------------------------------------------------------------------
WEEKDAY_MONDAY = "Monday"
WEEKDAY_TUESDAY = "Tuesday"
WEEKDAY_WEDNESDAY = "Wednesday"
WEEKDAY_THURSDAY = "Thursday"
WEEKDAY_FRIDAY = "Friday"
WEEKDAY_SATURDAY = "Saturday"
WEEKDAY_SUNDAY = "Sunday"

# Ordered Monday..Sunday, index matches datetime.weekday()
WEEKDAYS = [
    WEEKDAY_MONDAY,
    WEEKDAY_TUESDAY,
    WEEKDAY_WEDNESDAY,
    WEEKDAY_THURSDAY,
    WEEKDAY_FRIDAY,
    WEEKDAY_SATURDAY,
    WEEKDAY_SUNDAY,
]

WEEKEND_DAYS = frozenset({WEEKDAY_SATURDAY, WEEKDAY_SUNDAY})

# ------------------------------------------------------------------------------------------------
# Shift Data Keys
# ------------------------------------------------------------------------------------------------
DATA_SHIFT_ID = "id"
DATA_SHIFT_NAME = "name"
DATA_SHIFT_TIMEZONE = "timezone"
DATA_SHIFT_SCHEDULES = "schedules"

DATA_SCHEDULE_WEEKDAY = "weekday"
DATA_SCHEDULE_SHIFTS = "shifts"

DATA_WINDOW_START_TIME = "start_time"
DATA_WINDOW_END_TIME = "end_time"
DATA_WINDOW_ACTIVE = "active"
DATA_WINDOW_BREAKS = "breaks"

DATA_BREAK_START_TIME = "start_time"
DATA_BREAK_END_TIME = "end_time"

# ------------------------------------------------------------------------------------------------
# Shift Defaults (the "5x10" template)
# ------------------------------------------------------------------------------------------------
DEFAULT_SHIFT_NAME = "5x10"
DEFAULT_WINDOW_START_TIME = "07:00"
DEFAULT_WINDOW_END_TIME = "17:00"
DEFAULT_BREAK_START_TIME = "12:00"
DEFAULT_BREAK_END_TIME = "13:00"

# Suggested window appended after the last window of a day
SUGGESTED_WINDOW_LENGTH_HOURS = 9
SUGGESTED_WINDOW_BREAK_OFFSET_HOURS = 4
SUGGESTED_WINDOW_BREAK_LENGTH_HOURS = 1

# Suggested break inserted into a window
SUGGESTED_FIRST_BREAK_MINUTES = 30
SUGGESTED_GAP_BREAK_MINUTES = 15

# ------------------------------------------------------------------------------------------------
# Schedule Warning Codes
# ------------------------------------------------------------------------------------------------
WARNING_WINDOW_OVERLAP = "window_overlap"
WARNING_BREAK_OUT_OF_BOUNDS = "break_out_of_bounds"
WARNING_BREAK_OVERLAP = "break_overlap"

# ------------------------------------------------------------------------------------------------
# Routine Data Keys
# ------------------------------------------------------------------------------------------------
DATA_ROUTINE_ID = "id"
DATA_ROUTINE_NAME = "name"
DATA_ROUTINE_TRIGGER_TYPE = "trigger_type"
DATA_ROUTINE_TRIGGER_RUNTIME_HOURS = "trigger_runtime_hours"
DATA_ROUTINE_TRIGGER_CALENDAR_DAYS = "trigger_calendar_days"
DATA_ROUTINE_LAST_EXECUTION_COMPLETED_AT = "last_execution_completed_at"
DATA_ROUTINE_LAST_EXECUTION_RUNTIME_HOURS = "last_execution_runtime_hours"
DATA_ROUTINE_PRIORITY_SCORE = "priority_score"
DATA_ROUTINE_ADVANCE_GENERATION_DAYS = "advance_generation_days"
DATA_ROUTINE_IS_ACTIVE = "is_active"

# Trigger Types
TRIGGER_TYPE_RUNTIME_HOURS = "runtime_hours"
TRIGGER_TYPE_CALENDAR_DAYS = "calendar_days"
TRIGGER_TYPES = [TRIGGER_TYPE_RUNTIME_HOURS, TRIGGER_TYPE_CALENDAR_DAYS]

# ------------------------------------------------------------------------------------------------
# Due States
# ------------------------------------------------------------------------------------------------
DUE_STATE_NEVER_EXECUTED = "never_executed"
DUE_STATE_OK = "ok"
DUE_STATE_DUE_SOON = "due_soon"
DUE_STATE_OVERDUE = "overdue"
DUE_STATE_UNKNOWN = "unknown"

# Routines due within this many days (inclusive) are DUE_SOON
DUE_SOON_THRESHOLD_DAYS = 7

# Due Reasons
DUE_REASON_EXACT_CALENDAR = "exact_calendar_count"
DUE_REASON_ESTIMATED_FROM_SHIFT = "estimated_from_shift"
DUE_REASON_ESTIMATED_FROM_RUNTIME = "estimated_from_runtime"
DUE_REASON_NEEDS_BASELINE = "needs_baseline"
DUE_REASON_INVALID_TRIGGER = "invalid_trigger"
DUE_REASON_NO_SHIFT_HOURS = "no_shift_hours"
DUE_REASON_OUT_OF_RANGE = "due_date_out_of_range"

# ------------------------------------------------------------------------------------------------
# Routine Limits & Defaults
# ------------------------------------------------------------------------------------------------
ROUTINE_TRIGGER_RUNTIME_HOURS_MIN = 1
ROUTINE_TRIGGER_RUNTIME_HOURS_MAX = 10000
ROUTINE_TRIGGER_CALENDAR_DAYS_MIN = 1
ROUTINE_TRIGGER_CALENDAR_DAYS_MAX = 365
ROUTINE_ADVANCE_GENERATION_DAYS_MIN = 1
ROUTINE_ADVANCE_GENERATION_DAYS_MAX = 180
ROUTINE_PRIORITY_SCORE_MIN = 0
ROUTINE_PRIORITY_SCORE_MAX = 100

DEFAULT_ROUTINE_PRIORITY_SCORE = 50

# Priority Levels
PRIORITY_EMERGENCY = "emergency"
PRIORITY_URGENT = "urgent"
PRIORITY_HIGH = "high"
PRIORITY_NORMAL = "normal"
PRIORITY_LOW = "low"

# Minimum score per level, checked top-down
PRIORITY_SCORE_THRESHOLDS = [
    (90, PRIORITY_EMERGENCY),
    (75, PRIORITY_URGENT),
    (60, PRIORITY_HIGH),
    (30, PRIORITY_NORMAL),
]

# ------------------------------------------------------------------------------------------------
# Runtime Calculation
# ------------------------------------------------------------------------------------------------
RUNTIME_METHOD_NO_MEASUREMENTS = "no_measurements"
RUNTIME_METHOD_MANUAL_ONLY = "manual_only"
RUNTIME_METHOD_MANUAL_PLUS_SHIFT = "manual_plus_shift"

# Accumulated shift hours are rounded to this many decimals
RUNTIME_HOURS_PRECISION = 1

# ------------------------------------------------------------------------------------------------
# Error Keys (validation results)
# ------------------------------------------------------------------------------------------------
ERROR_KEY_BASE = "base"

ERROR_SHIFT_NAME_REQUIRED = "shift_name_required"
ERROR_SHIFT_TIMEZONE_INVALID = "shift_timezone_invalid"
ERROR_SHIFT_SCHEDULES_INVALID = "shift_schedules_invalid"
ERROR_SHIFT_WEEKDAY_DUPLICATE = "shift_weekday_duplicate"
ERROR_TIME_OF_DAY_INVALID = "time_of_day_invalid"

ERROR_ROUTINE_TRIGGER_TYPE_REQUIRED = "routine_trigger_type_required"
ERROR_ROUTINE_RUNTIME_HOURS_REQUIRED = "routine_runtime_hours_required"
ERROR_ROUTINE_RUNTIME_HOURS_TOO_LARGE = "routine_runtime_hours_too_large"
ERROR_ROUTINE_CALENDAR_DAYS_REQUIRED = "routine_calendar_days_required"
ERROR_ROUTINE_CALENDAR_DAYS_TOO_LARGE = "routine_calendar_days_too_large"
ERROR_ROUTINE_ADVANCE_DAYS_OUT_OF_RANGE = "routine_advance_days_out_of_range"
ERROR_ROUTINE_PRIORITY_OUT_OF_RANGE = "routine_priority_out_of_range"
ERROR_ROUTINE_COMPLETED_AT_INVALID = "routine_completed_at_invalid"

# ------------------------------------------------------------------------------------------------
# Display Labels
# ------------------------------------------------------------------------------------------------
DISPLAY_NOT_AVAILABLE = "N/A"
LABEL_LESS_THAN_ONE_WORK_DAY = "less than 1 work day"
LABEL_WORK_DAY = "work day"
LABEL_WORK_DAYS = "work days"
LABEL_HOUR = "hour"
LABEL_HOURS = "hours"
LABEL_DAY = "day"
LABEL_DAYS = "days"
