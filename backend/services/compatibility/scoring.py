"""Numeric helpers shared by the matchers and the aggregator."""

import math


def round_half_up(value: float) -> int:
    """Round halves up (62.5 -> 63). Built-in round() rounds halves to even."""
    return int(math.floor(value + 0.5))


def shortfall_score(held: float, required: float, floor: int) -> int:
    """Proportional credit for a requirement met only in part.

    ``held`` is strictly below ``required``; the result is clamped to
    ``[floor, 99]`` so a partial match never reads as a full one.
    """
    if required <= 0:
        raise ValueError(f"required amount must be positive, got {required}")
    return min(99, max(floor, round_half_up(100 * held / required)))


def format_years(years: float) -> str:
    """'1 year', '2.5 years', '0 years'."""
    value = round_half_up(years * 10) / 10
    text = f"{value:g}"
    return f"{text} year" if value == 1 else f"{text} years"
