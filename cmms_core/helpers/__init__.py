# File: helpers/__init__.py
"""Editor and validation helpers for the CMMS core.

These build on the engines: templates and suggestions for shift editors,
routine input validation and display labels.

Submodules:
    - schedule_helpers: Default week, suggested windows/breaks, copy day
    - routine_helpers: Routine validation, priority levels, trigger labels

Usage:
    from . import schedule_helpers as sh
    from .routine_helpers import validate_routine_inputs
"""

from . import routine_helpers, schedule_helpers

__all__ = ["routine_helpers", "schedule_helpers"]
