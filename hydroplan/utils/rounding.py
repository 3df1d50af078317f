"""Rounding helpers shared by the converters and the plan engine.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Plan
quantities round half away from zero instead, so that a 0.5 ml or 0.5 s
boundary always resolves upward and matches what athletes see in the app.
"""

import math


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves upward.

    Args:
        value: Non-negative finite number

    Returns:
        Nearest integer, with .5 rounded up
    """
    return math.floor(value + 0.5)


def round_half_up_to(value: float, decimals: int) -> float:
    """Round a non-negative value to a fixed number of decimals, halves upward.

    Args:
        value: Non-negative finite number
        decimals: Number of decimal places to keep

    Returns:
        Rounded value
    """
    scale = 10**decimals
    scaled = value * scale
    # Floats this large carry no fractional digits
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale
