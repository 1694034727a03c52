# flightleg/simulation/snapshot.py
"""
Freezes a complete planning state into a SimulationSnapshot.

Building the snapshot also builds the phase table: the ground boundaries come
from the takeoff kinematics of the aircraft, the route boundaries from the
waypoint altitudes and fixed distances before the arrival threshold.
"""
import logging
import time
from typing import List, Sequence

import numpy as np

from ..constants import UnitConstants
from ..geometry import distance_nm, distance_ft, heading, runway_unit_vector
from ..aircraft import AircraftPerformanceProfile
from ..airport import SelectedRunway, find_opposite_end, RunwayEndNotFoundError
from ..route import FlightRoute
from ..weather import Metar
from .constants import SimulationConstants
from .data_models import (
    FlightPhase, RunwayGeometry, PerformanceSubset, SnapshotWaypoint, EnrouteWind,
    PhaseTable, SimulationSnapshot, PlanningState
)
from .exceptions import SnapshotError

logger = logging.getLogger(__name__)

MOVING_PHASES = tuple(p for p in FlightPhase if FlightPhase.LINEUP < p < FlightPhase.COMPLETE)

DEPARTURE_WAYPOINT_TYPES = {'THRESHOLD', 'DEPARTURE', 'SID'}
ARRIVAL_WAYPOINT_TYPES = {'THRESHOLD_ARR', 'ARRIVAL', 'STAR', 'APPROACH'}


def map_waypoint_type(route_type: str) -> str:
    """Folds the route generator's waypoint types into DEPARTURE / ENROUTE / ARRIVAL."""
    route_type = (route_type or '').upper()
    if route_type in DEPARTURE_WAYPOINT_TYPES:
        return 'DEPARTURE'
    if route_type in ARRIVAL_WAYPOINT_TYPES:
        return 'ARRIVAL'
    return 'ENROUTE'


def ground_acceleration_for(takeoff_distance_ft: float) -> float:
    """Longer takeoff distances mean heavier aircraft and slower acceleration (kt/s)."""
    for min_distance_ft, acceleration in SimulationConstants.GROUND_ACCELERATION_BANDS:
        if takeoff_distance_ft > min_distance_ft:
            return acceleration
    return SimulationConstants.DEFAULT_GROUND_ACCELERATION_KTS_S


def validate_planning_state(planning: PlanningState) -> List[str]:
    """Returns every reason the planning state cannot be simulated. Empty means ready."""
    errors = []
    if not planning.departure_icao:
        errors.append('Departure airport required')
    if not planning.arrival_icao:
        errors.append('Arrival airport required')

    if planning.departure_runway is None:
        errors.append('Departure runway required')
    elif planning.departure_runway.end is None or planning.departure_runway.end.threshold is None:
        errors.append('Departure runway missing threshold coordinates')

    if planning.arrival_runway is None:
        errors.append('Arrival runway required')
    elif planning.arrival_runway.end is None or planning.arrival_runway.end.threshold is None:
        errors.append('Arrival runway missing threshold coordinates')

    if planning.aircraft is None:
        errors.append('Aircraft selection required')

    if planning.route is None:
        errors.append('Flight route required')
    elif len(planning.route.waypoints) < 2:
        errors.append('Route must have at least 2 waypoints')
    return errors


def _liftoff_distance_ft(perf: PerformanceSubset, liftoff_ias_kts: float) -> float:
    """Runway-axis distance flown from wheels-off until the climb is established."""
    c = SimulationConstants
    h = c.LIFTOFF_STEP_SEC
    target_ias = max(liftoff_ias_kts, perf.v2_kts + c.LIFTOFF_SPEED_MARGIN_KTS)
    stable_vs = c.VS_STABILITY_FACTOR * perf.initial_climb_rate_fpm
    ias, vs, agl, dist_ft, elapsed = liftoff_ias_kts, 0.0, 0.0, 0.0, 0.0
    while (agl < c.INITIAL_CLIMB_AGL_FT or vs < stable_vs) and elapsed < c.MAX_PROFILE_SEC:
        new_ias = min(target_ias, ias + c.LIFTOFF_ACCELERATION_KTS_S * h)
        vs = min(perf.initial_climb_rate_fpm, vs + c.VS_RAMP_FPM_PER_SEC * h)
        agl += vs * h / 60
        dist_ft += (ias + new_ias) / 2 * UnitConstants.KTS_TO_FPS * h
        ias = new_ias
        elapsed += h
    return dist_ft


def landing_roll_nm(perf: PerformanceSubset) -> float:
    """Rollout from touchdown at approach speed down to runway-exit speed, plus a short margin."""
    c = SimulationConstants
    braking = max(0.0, perf.approach_speed_kts ** 2 - c.RUNWAY_EXIT_SPEED_KTS ** 2) / (2 * c.LANDING_DECELERATION_KTS_S)
    margin = perf.approach_speed_kts * c.LANDING_ROLL_MARGIN_SEC
    return (braking + margin) / UnitConstants.SECONDS_PER_HOUR


def _repair_boundaries(starts: Sequence[float], lo: float, hi: float) -> List[float]:
    """Forces strictly increasing starts inside [lo, hi), first one pinned to lo."""
    n = len(starts)
    gap = min(SimulationConstants.MIN_PHASE_SPAN_NM, (hi - lo) / (n + 1))
    out = [float(s) for s in np.clip(starts, lo, hi)]
    out[0] = lo
    for i in range(1, n):
        out[i] = max(out[i], out[i - 1] + gap)
    limit = hi - gap
    for i in range(n - 1, 0, -1):
        out[i] = min(out[i], limit)
        limit = out[i] - gap
    return out


def build_phase_table(perf: PerformanceSubset, waypoints: Sequence[SnapshotWaypoint],
                      total_nm: float, departure_elevation_ft: float) -> PhaseTable:
    c = SimulationConstants
    ft_per_nm = UnitConstants.FEET_PER_NAUTICAL_MILE
    kts_to_fps = UnitConstants.KTS_TO_FPS

    # Ground roll at constant acceleration, then half acceleration through rotation
    accel_fps2 = perf.ground_acceleration_kts_s * kts_to_fps
    d_v1 = (perf.v1_kts * kts_to_fps) ** 2 / (2 * accel_fps2)
    d_vr = (perf.vr_kts * kts_to_fps) ** 2 / (2 * accel_fps2)
    rotate_accel = perf.ground_acceleration_kts_s * c.ROTATION_ACCELERATION_FACTOR
    t_rotate = max(c.LIFTOFF_PITCH_DEG / perf.rotation_pitch_rate_deg_s,
                   max(0.0, perf.v2_kts - perf.vr_kts) / rotate_accel)
    d_liftoff = d_vr + (perf.vr_kts * t_rotate + 0.5 * rotate_accel * t_rotate ** 2) * kts_to_fps
    d_airborne = d_liftoff + _liftoff_distance_ft(perf, perf.vr_kts + rotate_accel * t_rotate)
    s_air = d_airborne / ft_per_nm

    if total_nm <= s_air:
        raise SnapshotError([f"Route of {total_nm:.2f} nm is shorter than the takeoff path ({s_air:.2f} nm)"])

    max_alt = max(wp.altitude_ft for wp in waypoints)
    at_max = [wp.cumulative_distance_nm for wp in waypoints if wp.altitude_ft >= max_alt]
    climb_start = next((wp.cumulative_distance_nm for wp in waypoints[1:] if wp.cumulative_distance_nm > s_air), s_air)

    starts = [
        0.0,                                        # TAKEOFF_ROLL
        d_v1 / ft_per_nm,                           # V1
        d_vr / ft_per_nm,                           # ROTATE
        d_liftoff / ft_per_nm,                      # LIFTOFF
        s_air,                                      # INITIAL_CLIMB
        climb_start,                                # CLIMB
        at_max[0],                                  # CRUISE (top of climb)
        at_max[-1],                                 # DESCENT (top of descent)
        total_nm - c.APPROACH_START_NM,             # APPROACH
        total_nm - c.FINAL_START_NM,                # FINAL
        total_nm - c.TAXI_IN_START_NM - landing_roll_nm(perf),  # LANDING (touchdown)
        total_nm - c.TAXI_IN_START_NM,              # TAXI_IN
    ]
    return PhaseTable(
        phases=MOVING_PHASES,
        starts_nm=tuple(_repair_boundaries(starts, 0.0, total_nm)),
        total_nm=total_nm,
        airborne_altitude_ft=departure_elevation_ft + c.INITIAL_CLIMB_AGL_FT,
    )


class SnapshotBuilder:
    """Turns a PlanningState into an immutable SimulationSnapshot."""

    def __init__(self, constants=SimulationConstants):
        self.c = constants

    def build(self, planning: PlanningState) -> SimulationSnapshot:
        errors = validate_planning_state(planning)
        if errors:
            logger.warning(f"Snapshot rejected: {', '.join(errors)}")
            raise SnapshotError(errors)

        departure = self._runway_geometry(planning.departure_icao, planning.departure_runway)
        arrival = self._runway_geometry(planning.arrival_icao, planning.arrival_runway)
        aircraft = self._performance(planning.aircraft)
        waypoints = self._waypoints(planning.route)
        total_nm = waypoints[-1].cumulative_distance_nm
        self._check_anchoring(departure, arrival, waypoints)

        table = build_phase_table(aircraft, waypoints, total_nm, departure.elevation_ft)
        liftoff_ft = table.start_of(FlightPhase.LIFTOFF) * UnitConstants.FEET_PER_NAUTICAL_MILE
        if liftoff_ft > departure.length_ft:
            logger.warning(f"Liftoff at {liftoff_ft:.0f} ft is beyond the end of runway "
                           f"{departure.designator} ({departure.length_ft:.0f} ft)")

        snapshot = SimulationSnapshot(
            departure=departure,
            arrival=arrival,
            aircraft=aircraft,
            waypoints=waypoints,
            total_distance_nm=total_nm,
            phase_table=table,
            wind=self._enroute_wind(planning.departure_metar),
            created_at=time.time(),
        )
        logger.info(f"Snapshot {departure.airport_icao}/{departure.designator} -> "
                    f"{arrival.airport_icao}/{arrival.designator} ({aircraft.icao_type}): "
                    f"{len(waypoints)} waypoints, {total_nm:.1f} nm")
        return snapshot

    def _runway_geometry(self, icao: str, selected: SelectedRunway) -> RunwayGeometry:
        end = selected.end
        opposite = end.opposite_threshold
        if opposite is None:
            try:
                opposite = find_opposite_end(selected.runway, selected.designator).threshold
            except RunwayEndNotFoundError as e:
                raise SnapshotError([str(e)]) from e

        length_ft = selected.runway.length_ft
        if distance_nm(end.threshold, opposite) > 0:
            runway_heading = heading(end.threshold, opposite)
        else:
            runway_heading = end.heading_deg
        if not length_ft:
            length_ft = distance_ft(end.threshold, opposite)

        return RunwayGeometry(
            airport_icao=icao,
            designator=selected.designator,
            threshold=end.threshold,
            opposite_threshold=opposite,
            heading_deg=runway_heading,
            length_ft=length_ft,
            length_nm=length_ft * UnitConstants.FT_TO_NM,
            unit_vector=runway_unit_vector(end.threshold, opposite),
            elevation_ft=end.elevation_ft,
        )

    def _performance(self, aircraft: AircraftPerformanceProfile) -> PerformanceSubset:
        c = self.c
        return PerformanceSubset(
            icao_type=aircraft.icao_code,
            v1_kts=aircraft.v1_kts,
            vr_kts=aircraft.vr_kts,
            v2_kts=aircraft.v2_kts,
            vref_kts=aircraft.vref_kts,
            approach_speed_kts=aircraft.vref_kts + c.APPROACH_SPEED_INCREMENT_KTS,
            ground_acceleration_kts_s=ground_acceleration_for(aircraft.takeoff_distance_ft),
            rotation_pitch_rate_deg_s=c.ROTATION_PITCH_RATE_DEG_S,
            initial_climb_pitch_deg=c.INITIAL_CLIMB_PITCH_DEG,
            initial_climb_rate_fpm=c.INITIAL_CLIMB_RATE_FPM,
            cruise_speed_kts=aircraft.cruise_speed_kts,
        )

    def _waypoints(self, route: FlightRoute) -> tuple:
        positions = [wp.position for wp in route.waypoints]
        legs = [distance_nm(a, b) for a, b in zip(positions, positions[1:])]
        cumulative = np.concatenate(([0.0], np.cumsum(legs)))
        return tuple(
            SnapshotWaypoint(
                id=wp.id,
                position=wp.position,
                altitude_ft=wp.altitude_ft,
                type=map_waypoint_type(wp.type),
                cumulative_distance_nm=float(cumulative[i]),
            )
            for i, wp in enumerate(route.waypoints)
        )

    def _check_anchoring(self, departure: RunwayGeometry, arrival: RunwayGeometry, waypoints) -> None:
        tolerance = self.c.THRESHOLD_MATCH_TOLERANCE_NM
        if distance_nm(waypoints[0].position, departure.threshold) > tolerance:
            logger.warning(f"Route does not start at the runway {departure.designator} threshold")
        if distance_nm(waypoints[-1].position, arrival.threshold) > tolerance:
            logger.warning(f"Route does not end at the runway {arrival.designator} threshold")

    @staticmethod
    def _enroute_wind(metar: Metar):
        if metar is None or metar.wind.is_variable or metar.wind.speed_kts <= 0:
            return None
        return EnrouteWind(direction_deg=float(metar.wind.direction), speed_kts=float(metar.wind.speed_kts))


SNAPSHOT_BUILDER = SnapshotBuilder()


def build_snapshot(planning: PlanningState) -> SimulationSnapshot:
    return SNAPSHOT_BUILDER.build(planning)
