# flightleg/utils/rounding.py
"""
Operational rounding. Python's round() rounds halves to even, which would
move published figures (e.g. 0.5 kg of contingency fuel) the wrong way.
"""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return int(math.floor(value + 0.5))


def ceil_to(value: float, step: float) -> float:
    """Round value up to the next multiple of step."""
    return math.ceil(value / step) * step
