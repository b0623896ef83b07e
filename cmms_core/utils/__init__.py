# File: utils/__init__.py
"""Pure Python utilities for the CMMS core.

This module contains functions with no imports from the rest of the package,
so they can be unit tested in isolation.

Submodules:
    - dt_utils: TimeOfDay arithmetic, timestamp parsing, day math
    - math_utils: Rounding, clamping, percentages

Usage:
    from . import dt_utils
    from .math_utils import round_half_up
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
