# flightleg/weather/calculations.py
"""
Visibility, ceiling and runway wind-component math used by the dispatch checks
and by runway selection.
"""
import math
from typing import Dict, Optional, Union

from ..constants import UnitConstants
from ..utils import round_half_up
from .data_models import Metar, Visibility, parse_wind_direction

CEILING_COVERAGES = ('BKN', 'OVC', 'VV')


def visibility_meters(visibility: Visibility) -> float:
    if visibility.unit.upper() == 'SM':
        return visibility.value * UnitConstants.METERS_PER_STATUTE_MILE
    return visibility.value


def ceiling_ft(metar: Metar) -> Optional[float]:
    """Base of the first broken, overcast or obscured layer that reports a base."""
    for cloud in metar.clouds:
        if cloud.coverage.upper() in CEILING_COVERAGES and cloud.base_ft is not None:
            return cloud.base_ft
    return None


def _is_calm_or_variable(direction: Union[float, str], speed_kts: float) -> bool:
    return parse_wind_direction(direction) is None or speed_kts == 0


def calculate_wind_components(runway_heading: float, direction: Union[float, str], speed_kts: float) -> Dict[str, int]:
    """
    Headwind (positive from ahead) and crosswind magnitude for a runway, in
    whole knots. Variable or calm wind has no components.
    """
    if _is_calm_or_variable(direction, speed_kts):
        return {'headwind': 0, 'crosswind': 0}
    relative = ((float(direction) - runway_heading + 540) % 360) - 180
    angle = math.radians(relative)
    return {
        'headwind': round_half_up(speed_kts * math.cos(angle)),
        'crosswind': abs(round_half_up(speed_kts * math.sin(angle))),
    }


def calculate_runway_wind_components(runway_heading: float, direction: Union[float, str], speed_kts: float) -> Dict[str, int]:
    """As calculate_wind_components, plus the tailwind magnitude (0 when there is a headwind)."""
    if _is_calm_or_variable(direction, speed_kts):
        return {'headwind': 0, 'crosswind': 0, 'tailwind': 0}
    angle = math.radians((float(direction) - runway_heading + 360) % 360)
    headwind = speed_kts * math.cos(angle)
    return {
        'headwind': round_half_up(headwind),
        'crosswind': round_half_up(abs(speed_kts * math.sin(angle))),
        'tailwind': round_half_up(abs(headwind)) if headwind < 0 else 0,
    }
