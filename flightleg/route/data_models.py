# flightleg/route/data_models.py
"""
Route structures handed from the route generator to the snapshot builder.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..geometry import Coordinate


@dataclass(frozen=True)
class RouteWaypoint:
    """A single point of the planned route with its leg figures."""
    id: str
    name: str
    type: str                         # THRESHOLD / DEPARTURE / SID / ENROUTE / STAR / APPROACH / THRESHOLD_ARR
    position: Coordinate
    altitude_ft: float
    speed_kts: float
    distance_from_prev_nm: float = 0.0
    cumulative_distance_nm: float = 0.0
    time_from_prev_min: float = 0.0
    cumulative_time_min: float = 0.0
    course_deg: float = 0.0


@dataclass
class FlightRoute:
    """A complete runway-to-runway route."""
    departure_icao: str
    arrival_icao: str
    departure_runway: str
    arrival_runway: str
    waypoints: List[RouteWaypoint]
    total_distance_nm: float
    estimated_time_min: float
    cruise_altitude_ft: float
    notes: List[str] = field(default_factory=list)

    @property
    def positions(self) -> List[Tuple[float, float]]:
        return [(wp.position.lat, wp.position.lon) for wp in self.waypoints]

    def find(self, waypoint_id: str) -> Optional[RouteWaypoint]:
        return next((wp for wp in self.waypoints if wp.id == waypoint_id), None)
