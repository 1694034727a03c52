# flightleg/airport/__init__.py
"""
airport - runway models, designator helpers and wind-based runway selection
"""
from .data_models import RunwayEnd, Runway, SelectedRunway
from .designators import heading_from_designator, reciprocal_designator
from .selection import find_opposite_end, find_end, evaluate_runway_end, rank_runways, select_best_runway
from .exceptions import AirportError, RunwayEndNotFoundError

__all__ = [
    'RunwayEnd', 'Runway', 'SelectedRunway',
    'heading_from_designator', 'reciprocal_designator',
    'find_opposite_end', 'find_end', 'evaluate_runway_end', 'rank_runways', 'select_best_runway',
    'AirportError', 'RunwayEndNotFoundError'
]
