# File: utils/__init__.py
"""Pure Python utilities for Stellar Missions.

Submodules:
    - dt_utils: Date/time parsing, local-day boundaries, ISO weeks, clock
    - math_utils: Clamping and progress percentages

Usage:
    from . import dt_utils
    from .math_utils import clamp_progress
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
