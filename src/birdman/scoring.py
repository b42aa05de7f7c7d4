"""
scoring.py: Distance record and difficulty tables.
"""

from .constants import FLAP_IMPULSE_BANDS, MIN_FLAP_IMPULSE, RECORD_UNIT


def base_flap_impulse(x: int) -> int:
    """Upward impulse magnitude for a flap at world-X ``x``, before damage."""
    for upper_bound, impulse in FLAP_IMPULSE_BANDS:
        if x < upper_bound:
            return impulse
    return MIN_FLAP_IMPULSE


def flap_impulse(x: int, damaged_count: int) -> int:
    """
    Velocity change applied by a flap. Negative is upwards.
    Every damage taken so far divides the impulse; the result truncates
    towards zero so weak flaps never round up.
    """
    return -(base_flap_impulse(x) // (damaged_count + 1))


def record_from_x(x: int) -> int:
    """Distance in metres, truncated towards zero."""
    return int(x / RECORD_UNIT)


def format_int_comma(n: int) -> str:
    """12345 -> '12,345'"""
    return f"{n:,}"
