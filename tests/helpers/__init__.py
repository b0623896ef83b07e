"""Test helpers for CMMS core tests.

This module re-exports the payload builders for convenient imports:

    from tests.helpers import make_routine, make_schedule, make_window

See builders.py for full documentation.
"""

from tests.helpers.builders import (
    make_break,
    make_routine,
    make_schedule,
    make_window,
    utc_dt,
)

__all__ = [
    "make_break",
    "make_routine",
    "make_schedule",
    "make_window",
    "utc_dt",
]
