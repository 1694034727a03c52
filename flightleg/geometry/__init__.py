# flightleg/geometry/__init__.py
"""
Geometry kernel: great-circle distance/bearing, runway-anchored positioning,
interpolation and projection, plus turn and wind-triangle helpers.
"""
from .data_models import Coordinate, RunwayUnitVector, ZERO_VECTOR
from .coordinates import (
    haversine_distance_nm, calculate_bearing, distance_nm, distance_ft, heading,
    interpolate_great_circle, destination_point, heading_difference
)
from .runway import runway_unit_vector, position_on_runway
from .flight_dynamics import (
    standard_rate_bank_angle, wind_components_for_course, ground_speed, wind_correction_angle
)

__all__ = [
    'Coordinate', 'RunwayUnitVector', 'ZERO_VECTOR',
    'haversine_distance_nm', 'calculate_bearing', 'distance_nm', 'distance_ft', 'heading',
    'interpolate_great_circle', 'destination_point', 'heading_difference',
    'runway_unit_vector', 'position_on_runway',
    'standard_rate_bank_angle', 'wind_components_for_course', 'ground_speed', 'wind_correction_angle',
]
