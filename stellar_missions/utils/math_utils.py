# File: utils/math_utils.py
"""Math and calculation utilities for Stellar Missions.

Pure Python math functions, unit tested without any coordinator.

Functions:
    - clamp: Bound a value to a range
    - clamp_progress: Bound mission progress to [0, target]
    - calculate_percentage: Progress percentage calculations
"""

from __future__ import annotations

from ..const import DATA_FLOAT_PRECISION


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
        clamp(50, 0, 100) → 50
    """
    return max(min_val, min(value, max_val))


def clamp_progress(value: int, target: int) -> int:
    """Clamp integer progress into [0, target].

    Examples:
        clamp_progress(12, 10) → 10
        clamp_progress(-3, 10) → 0
    """
    return int(clamp(value, 0, max(target, 0)))


def calculate_percentage(
    current: float,
    target: float,
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Calculate progress percentage with proper rounding.

    Returns:
        Percentage (0-100), or 0.0 if target is 0

    Examples:
        calculate_percentage(50, 100) → 50.0
        calculate_percentage(1, 3) → 33.33
        calculate_percentage(5, 0) → 0.0  # Division by zero protection
    """
    if target <= 0:
        return 0.0
    return round(clamp(current / target, 0.0, 1.0) * 100, precision)
