# flightleg/route/core.py
"""
Runway-anchored route generation.

Every route starts at the departure runway threshold and ends at the arrival
runway threshold, never at an airport reference point. In between it lays a
straight climb-out, a SID exit, great-circle en-route points, a STAR entry and
a final approach fix on the extended landing centerline.
"""
import logging
import math
from typing import List, Optional

import numpy as np

from ..airport import SelectedRunway
from ..utils import round_half_up
from ..geometry import (
    Coordinate, distance_nm, heading, heading_difference, interpolate_great_circle, destination_point
)
from .constants import RouteConstants
from .data_models import RouteWaypoint, FlightRoute

logger = logging.getLogger(__name__)


def round_altitude(altitude_ft: float, step_ft: int = 100) -> int:
    """Nearest multiple of step_ft, halves rounding up."""
    return round_half_up(altitude_ft / step_ft) * step_ft


def generate_waypoint_name(index: int) -> str:
    """Deterministic pronounceable five-letter fix name."""
    consonants, vowels = RouteConstants.NAME_CONSONANTS, RouteConstants.NAME_VOWELS
    seed = (index * 7 + 3) % 100
    return (consonants[seed % len(consonants)] + vowels[(seed * 2) % len(vowels)] +
            consonants[(seed * 3) % len(consonants)] + vowels[(seed * 5) % len(vowels)] +
            consonants[(seed * 7) % len(consonants)])


class RouteGenerator:
    """Builds a FlightRoute between two selected runway ends."""

    def __init__(self, constants=RouteConstants):
        self.c = constants

    def generate(self, departure_icao: str, arrival_icao: str,
                 departure_runway: SelectedRunway, arrival_runway: SelectedRunway,
                 cruise_altitude_ft: Optional[float] = None,
                 cruise_speed_kts: Optional[float] = None) -> FlightRoute:
        c = self.c
        cruise_alt = cruise_altitude_ft or c.DEFAULT_CRUISE_ALTITUDE_FT
        cruise_speed = cruise_speed_kts or c.DEFAULT_CRUISE_SPEED_KTS

        dep_end, arr_end = departure_runway.end, arrival_runway.end
        dep_thr, arr_thr = dep_end.threshold, arr_end.threshold
        dep_heading = dep_end.heading_deg
        approach_bearing = (arr_end.heading_deg + 180) % 360
        total_nm = distance_nm(dep_thr, arr_thr)
        bearing_to_arrival = heading(dep_thr, arr_thr)

        waypoints: List[RouteWaypoint] = []
        notes = []

        # 1. Departure threshold, stationary
        waypoints.append(RouteWaypoint(
            id='THR_DEP', name=f"RWY {departure_runway.designator}", type='THRESHOLD',
            position=dep_thr, altitude_ft=dep_end.elevation_ft, speed_kts=0, course_deg=dep_heading,
        ))

        # 2. Straight climb-out on runway heading
        climb_out_alt = max(c.CLIMB_OUT_ALTITUDE_FT, dep_end.elevation_ft + 1500)
        self._append(waypoints, 'DEP01', f"{departure_icao}DEP", 'DEPARTURE',
                     destination_point(dep_thr, dep_heading, c.CLIMB_OUT_DISTANCE_NM),
                     climb_out_alt, c.CLIMB_OUT_SPEED_KTS, c.CLIMB_OUT_SPEED_KTS)

        if total_nm >= c.MIN_ENROUTE_ROUTE_NM:
            # 3. SID exit, a quarter of the way through the turn towards the destination
            turn = heading_difference(dep_heading, bearing_to_arrival)
            sid_bearing = (dep_heading + turn * 0.25) % 360
            sid_alt = max(climb_out_alt, min(c.SPEED_LIMIT_ALTITUDE_FT, cruise_alt * c.SID_ALTITUDE_CRUISE_RATIO))
            self._append(waypoints, 'SID01', f"{departure_icao}SID", 'SID',
                         destination_point(dep_thr, sid_bearing, c.SID_DISTANCE_NM),
                         sid_alt, c.SID_SPEED_KTS, c.SID_SPEED_KTS)

            # 4. En-route points along the threshold-to-threshold great circle
            self._append_enroute(waypoints, dep_thr, arr_thr, total_nm, cruise_alt, cruise_speed)

            # 5. STAR entry
            star_alt = min(c.STAR_ALTITUDE_FT, cruise_alt)
            self._append(waypoints, 'STAR01', f"{arrival_icao}ARR", 'STAR',
                         interpolate_great_circle(dep_thr, arr_thr, (total_nm - c.STAR_ENTRY_DISTANCE_NM) / total_nm),
                         star_alt, c.SPEED_LIMIT_KTS, c.STAR_LEG_SPEED_KTS)
        else:
            notes.append(f"Short route ({total_nm:.1f} nm): SID, en-route and STAR points omitted")
            logger.info(notes[-1])

        # 6. Final approach fix on the extended centerline
        self._append(waypoints, 'APP01', 'FAF', 'APPROACH',
                     destination_point(arr_thr, approach_bearing, c.FAF_DISTANCE_NM),
                     arr_end.elevation_ft + c.FAF_ALTITUDE_FT, c.FAF_SPEED_KTS, c.FAF_LEG_SPEED_KTS)

        # 7. Arrival threshold
        self._append(waypoints, 'THR_ARR', f"RWY {arrival_runway.designator}", 'THRESHOLD_ARR',
                     arr_thr, arr_end.elevation_ft, c.THRESHOLD_SPEED_KTS, c.THRESHOLD_SPEED_KTS,
                     course=arr_end.heading_deg)

        route = FlightRoute(
            departure_icao=departure_icao,
            arrival_icao=arrival_icao,
            departure_runway=departure_runway.designator,
            arrival_runway=arrival_runway.designator,
            waypoints=waypoints,
            total_distance_nm=waypoints[-1].cumulative_distance_nm,
            estimated_time_min=waypoints[-1].cumulative_time_min,
            cruise_altitude_ft=cruise_alt,
            notes=notes,
        )
        logger.info(f"Route {departure_icao}/{departure_runway.designator} -> {arrival_icao}/{arrival_runway.designator}: "
                    f"{len(waypoints)} waypoints, {route.total_distance_nm:.1f} nm, {route.estimated_time_min:.0f} min")
        return route

    def _append_enroute(self, waypoints: List[RouteWaypoint], dep_thr: Coordinate, arr_thr: Coordinate, total_nm: float,
                        cruise_alt: float, cruise_speed: float) -> None:
        c = self.c
        start = c.SID_DISTANCE_NM
        end = total_nm - c.STAR_ENTRY_DISTANCE_NM
        length = end - start
        if length <= 0:
            return

        transition_nm = max(0.0, (cruise_alt - c.SPEED_LIMIT_ALTITUDE_FT) / c.CLIMB_GRADIENT_FT_PER_NM)
        toc = start + transition_nm
        tod = end - transition_nm
        count = int(min(c.MAX_ENROUTE_WAYPOINTS,
                        max(c.MIN_ENROUTE_WAYPOINTS, math.ceil(length / c.ENROUTE_SPACING_NM))))
        fractions = np.arange(1, count + 1) / (count + 1)

        for i, fraction in enumerate(fractions):
            along = start + length * float(fraction)
            if along < toc:
                progress = min(1.0, (along - start) / transition_nm) if transition_nm > 0 else 1.0
                altitude = c.SPEED_LIMIT_ALTITUDE_FT + (cruise_alt - c.SPEED_LIMIT_ALTITUDE_FT) * progress
            elif along > tod:
                progress = min(1.0, (along - tod) / transition_nm) if transition_nm > 0 else 1.0
                altitude = cruise_alt - (cruise_alt - c.SPEED_LIMIT_ALTITUDE_FT) * progress
            else:
                altitude = cruise_alt
            altitude = min(cruise_alt, round_altitude(altitude))
            speed = cruise_speed if altitude > c.SPEED_LIMIT_ALTITUDE_FT else c.SPEED_LIMIT_KTS
            self._append(waypoints, f"ENR{i + 1:02d}", generate_waypoint_name(i), 'ENROUTE',
                         interpolate_great_circle(dep_thr, arr_thr, along / total_nm),
                         altitude, speed, speed)

    def _append(self, waypoints: List[RouteWaypoint], wp_id: str, name: str, wp_type: str, position: Coordinate, altitude_ft: float,
                speed_kts: float, leg_speed_kts: float, course: Optional[float] = None) -> None:
        prev = waypoints[-1]
        leg_nm = distance_nm(prev.position, position)
        leg_min = leg_nm / leg_speed_kts * 60 if leg_speed_kts > 0 else 0.0
        waypoints.append(RouteWaypoint(
            id=wp_id,
            name=name,
            type=wp_type,
            position=position,
            altitude_ft=altitude_ft,
            speed_kts=speed_kts,
            distance_from_prev_nm=leg_nm,
            cumulative_distance_nm=prev.cumulative_distance_nm + leg_nm,
            time_from_prev_min=leg_min,
            cumulative_time_min=prev.cumulative_time_min + leg_min,
            course_deg=heading(prev.position, position) if course is None else course,
        ))


ROUTE_GENERATOR = RouteGenerator()


def generate_route(departure_icao: str, arrival_icao: str,
                   departure_runway: SelectedRunway, arrival_runway: SelectedRunway,
                   cruise_altitude_ft: Optional[float] = None,
                   cruise_speed_kts: Optional[float] = None) -> FlightRoute:
    return ROUTE_GENERATOR.generate(departure_icao, arrival_icao, departure_runway, arrival_runway,
                                    cruise_altitude_ft, cruise_speed_kts)
