# File: utils/math_utils.py
"""Math and calculation utilities for the CMMS core.

Pure Python math functions with no package-level imports.

⚠️ UTILS PURITY: NO imports from engines/, helpers/ or const.py.

Functions:
    - round_half_up: Display rounding (0.5 always rounds up)
    - round_hours: Consistent rounding of hour figures
    - calculate_percentage: Progress percentage with clamping
    - clamp: Bound a value to a range
    - safe_divide: Division that reports "not computable" instead of raising
"""

from __future__ import annotations

import logging
import math

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

# Default float precision for hour figures
DATA_FLOAT_PRECISION = 2


# ==============================================================================
# Rounding
# ==============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's round() uses banker's rounding (round(2.5) == 2). Day counts
    shown to users round halves up instead.

    Examples:
        round_half_up(2.5) → 3
        round_half_up(2.49) → 2
        round_half_up(-2.5) → -2
    """
    return math.floor(value + 0.5)


def round_hours(value: float, precision: int = DATA_FLOAT_PRECISION) -> float:
    """Round an hour value to the configured precision.

    Examples:
        round_hours(47.4999) → 47.5
        round_hours(12.3456, 1) → 12.3
    """
    return round(value, precision)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
    """
    return max(min_val, min(value, max_val))


def calculate_percentage(
    current: float,
    target: float,
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Calculate a progress percentage clamped to 0-100.

    Args:
        current: Current progress value
        target: Target/total value

    Returns:
        Percentage (0-100), or 0.0 if target is not positive

    Examples:
        calculate_percentage(15, 30) → 50.0
        calculate_percentage(45, 30) → 100.0
        calculate_percentage(5, 0) → 0.0
    """
    if target <= 0:
        return 0.0
    return round(clamp((current / target) * 100, 0.0, 100.0), precision)


def safe_divide(numerator: float, denominator: float | None) -> float | None:
    """Divide, returning None when the denominator is missing or not positive.

    Examples:
        safe_divide(10, 4) → 2.5
        safe_divide(10, 0) → None
    """
    if denominator is None or denominator <= 0:
        _LOGGER.debug("safe_divide: non-positive denominator %s", denominator)
        return None
    return numerator / denominator
