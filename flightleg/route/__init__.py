# flightleg/route/__init__.py
"""
route - runway-to-runway route generation
"""
from .core import RouteGenerator, ROUTE_GENERATOR, generate_route, generate_waypoint_name, round_altitude
from .data_models import RouteWaypoint, FlightRoute
from .constants import RouteConstants

__all__ = [
    'RouteGenerator',
    'ROUTE_GENERATOR',
    'generate_route',
    'generate_waypoint_name',
    'round_altitude',
    'RouteWaypoint',
    'FlightRoute',
    'RouteConstants'
]
