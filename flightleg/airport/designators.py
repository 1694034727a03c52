# flightleg/airport/designators.py
"""Runway designator arithmetic ("25R" <-> 250 deg, "25R" <-> "07L")."""
import re

_SUFFIX_SWAP = {'L': 'R', 'R': 'L', 'C': 'C'}


def _split(designator: str):
    match = re.match(r'^\s*(\d{1,2})\s*([LRC]?)\s*$', designator.upper())
    if not match:
        return None, ''
    return int(match.group(1)), match.group(2)


def heading_from_designator(designator: str) -> int:
    """Magnetic heading implied by the designator number. Unparseable input gives 0."""
    number, _ = _split(designator)
    return number * 10 if number is not None else 0


def reciprocal_designator(designator: str) -> str:
    """Opposite-end designator, swapping L and R. Unparseable input is returned as is."""
    number, suffix = _split(designator)
    if number is None:
        return designator
    reciprocal = number + 18
    if reciprocal > 36:
        reciprocal -= 36
    return f"{reciprocal:02d}{_SUFFIX_SWAP.get(suffix, '')}"
