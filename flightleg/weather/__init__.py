# flightleg/weather/__init__.py
"""
weather - decoded METAR value types and the wind/visibility math built on them
"""
from .data_models import Metar, WindReport, Visibility, CloudLayer, VARIABLE_WIND, parse_wind_direction
from .calculations import (
    visibility_meters, ceiling_ft, calculate_wind_components, calculate_runway_wind_components
)

__all__ = [
    'Metar', 'WindReport', 'Visibility', 'CloudLayer', 'VARIABLE_WIND', 'parse_wind_direction',
    'visibility_meters', 'ceiling_ft', 'calculate_wind_components', 'calculate_runway_wind_components'
]
