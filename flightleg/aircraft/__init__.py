# flightleg/aircraft/__init__.py
"""
aircraft - canonical performance profile and the built-in type registry
"""
from .data_models import AircraftPerformanceProfile
from .constants import AircraftConstants
from .core import (
    AircraftRegistry, AIRCRAFT_REGISTRY, derive_reference_speeds, build_profile,
    get_aircraft_profile, get_all_aircraft_profiles
)
from .exceptions import AircraftError, UnknownAircraftError

__all__ = [
    'AircraftPerformanceProfile',
    'AircraftConstants',
    'AircraftRegistry',
    'AIRCRAFT_REGISTRY',
    'derive_reference_speeds',
    'build_profile',
    'get_aircraft_profile',
    'get_all_aircraft_profiles',
    'AircraftError',
    'UnknownAircraftError'
]
