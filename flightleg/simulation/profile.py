# flightleg/simulation/profile.py
"""
Time-sampled flight profile for a snapshot.

Airspeed, ground speed and pitch are integrated once, at a fixed step, from the
start of the takeoff roll to the arrival threshold. Position and altitude are
functions of the distance flown, so any elapsed time maps to exactly one state
whether it is reached by ticking or by seeking.
"""
import logging
import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from ..constants import UnitConstants
from ..geometry import (
    Coordinate, distance_nm, heading, heading_difference, interpolate_great_circle,
    ground_speed, standard_rate_bank_angle
)
from .constants import SimulationConstants
from .data_models import FlightPhase, PerformanceSubset, SimulationSnapshot

logger = logging.getLogger(__name__)


class RouteTrack:
    """The snapshot route as arrays over cumulative distance."""

    def __init__(self, snapshot: SimulationSnapshot):
        table = snapshot.phase_table
        self.positions = [wp.position for wp in snapshot.waypoints]
        self.cumulative = np.array([wp.cumulative_distance_nm for wp in snapshot.waypoints])
        self.total_nm = snapshot.total_distance_nm
        self.leg_courses = np.array([heading(a, b) for a, b in zip(self.positions, self.positions[1:])])

        # Altitude knots: the end of LIFTOFF replaces every waypoint behind it,
        # touchdown replaces every waypoint after it
        self.departure_elevation_ft = snapshot.departure.elevation_ft
        self.liftoff_nm = table.start_of(FlightPhase.LIFTOFF)
        self.airborne_nm = table.airborne_start_nm
        self.airborne_altitude_ft = table.airborne_altitude_ft
        self.touchdown_nm = table.start_of(FlightPhase.LANDING)
        arrival_elevation_ft = snapshot.arrival.elevation_ft
        altitudes = np.array([wp.altitude_ft for wp in snapshot.waypoints])
        between = (self.cumulative > self.airborne_nm) & (self.cumulative < self.touchdown_nm)
        self.knots_nm = np.concatenate(([self.airborne_nm], self.cumulative[between],
                                        [self.touchdown_nm, self.total_nm]))
        self.knots_ft = np.concatenate(([self.airborne_altitude_ft], altitudes[between],
                                        [arrival_elevation_ft, arrival_elevation_ft]))

    def leg_index(self, s_nm: float) -> int:
        i = int(np.searchsorted(self.cumulative, s_nm, side='right')) - 1
        return min(max(i, 0), len(self.positions) - 2)

    def position_at(self, s_nm: float) -> Coordinate:
        i = self.leg_index(s_nm)
        length = self.cumulative[i + 1] - self.cumulative[i]
        fraction = (s_nm - self.cumulative[i]) / length if length > 0 else 1.0
        return interpolate_great_circle(self.positions[i], self.positions[i + 1], fraction)

    def course_at(self, s_nm: float) -> float:
        return float(self.leg_courses[self.leg_index(s_nm)])

    def heading_to_next(self, s_nm: float, position: Coordinate) -> float:
        i = self.leg_index(s_nm)
        target = self.positions[i + 1]
        if distance_nm(position, target) < 1e-6:
            return float(self.leg_courses[i])
        return heading(position, target)

    def altitude_at(self, s_nm: float) -> float:
        if s_nm <= self.liftoff_nm:
            return self.departure_elevation_ft
        if s_nm < self.airborne_nm:
            fraction = (s_nm - self.liftoff_nm) / (self.airborne_nm - self.liftoff_nm)
            return self.departure_elevation_ft + (self.airborne_altitude_ft - self.departure_elevation_ft) * fraction
        return float(np.interp(s_nm, self.knots_nm, self.knots_ft))

    def bank_at(self, s_nm: float, airspeed_kts: float) -> float:
        """Standard-rate bank while inside the anticipation distance of a turn point."""
        c = SimulationConstants
        i = self.leg_index(s_nm)
        if i + 1 >= len(self.positions) - 1:
            return 0.0
        if self.cumulative[i + 1] - s_nm > c.TURN_ANTICIPATION_NM:
            return 0.0
        turn = heading_difference(self.leg_courses[i], self.leg_courses[i + 1])
        if abs(turn) <= c.MIN_TURN_DEG:
            return 0.0
        return math.copysign(standard_rate_bank_angle(airspeed_kts), turn)


@dataclass
class FlightProfile:
    """Samples of one run, indexed by elapsed seconds."""
    track: RouteTrack
    times: np.ndarray
    distances_nm: np.ndarray
    airspeeds_kts: np.ndarray
    ground_speeds_kts: np.ndarray
    pitches_deg: np.ndarray
    vertical_speeds_fpm: np.ndarray
    stalled: bool = False

    @property
    def total_time_sec(self) -> float:
        return float(self.times[-1])

    def sample(self, elapsed_sec: float) -> dict:
        t = min(max(elapsed_sec, 0.0), self.total_time_sec)
        return {
            'distance_nm': float(np.interp(t, self.times, self.distances_nm)),
            'airspeed_kts': float(np.interp(t, self.times, self.airspeeds_kts)),
            'ground_speed_kts': float(np.interp(t, self.times, self.ground_speeds_kts)),
            'pitch_deg': float(np.interp(t, self.times, self.pitches_deg)),
            'vertical_speed_fpm': float(np.interp(t, self.times, self.vertical_speeds_fpm)),
        }


def target_airspeed(phase: FlightPhase, altitude_ft: float, perf: PerformanceSubset) -> float:
    c = SimulationConstants
    below_limit = min(c.SPEED_LIMIT_KTS, perf.cruise_speed_kts)
    if phase in (FlightPhase.INITIAL_CLIMB, FlightPhase.CLIMB):
        return perf.cruise_speed_kts if altitude_ft >= c.SPEED_LIMIT_ALTITUDE_FT else below_limit
    if phase is FlightPhase.CRUISE:
        return perf.cruise_speed_kts
    if phase is FlightPhase.DESCENT:
        if altitude_ft > c.SPEED_LIMIT_ALTITUDE_FT:
            return min(perf.cruise_speed_kts, c.DESCENT_SPEED_KTS)
        return below_limit
    if phase is FlightPhase.APPROACH:
        return max(c.APPROACH_MIN_SPEED_KTS, perf.approach_speed_kts + c.APPROACH_SPEED_MARGIN_KTS)
    if phase is FlightPhase.FINAL:
        return perf.approach_speed_kts
    if phase is FlightPhase.LANDING:
        return c.RUNWAY_EXIT_SPEED_KTS
    return c.TAXI_SPEED_KTS


def next_airspeed(phase: FlightPhase, ias: float, altitude_ft: float, perf: PerformanceSubset, h: float) -> float:
    c = SimulationConstants
    if phase <= FlightPhase.V1:
        return ias + perf.ground_acceleration_kts_s * h
    if phase is FlightPhase.ROTATE:
        return ias + perf.ground_acceleration_kts_s * c.ROTATION_ACCELERATION_FACTOR * h
    if phase is FlightPhase.LIFTOFF:
        return min(ias + c.LIFTOFF_ACCELERATION_KTS_S * h, max(ias, perf.v2_kts + c.LIFTOFF_SPEED_MARGIN_KTS))

    target = target_airspeed(phase, altitude_ft, perf)
    if ias < target:
        return min(target, ias + c.AIRBORNE_ACCELERATION_KTS_S * h)
    decel = c.LANDING_DECELERATION_KTS_S if phase >= FlightPhase.LANDING else c.AIRBORNE_DECELERATION_KTS_S
    return max(target, ias - decel * h)


def next_pitch(phase: FlightPhase, pitch: float, vs_fpm: float, gs_kts: float,
               perf: PerformanceSubset, h: float) -> float:
    c = SimulationConstants
    if phase <= FlightPhase.V1:
        return 0.0
    if phase is FlightPhase.ROTATE:
        return min(c.LIFTOFF_PITCH_DEG, pitch + perf.rotation_pitch_rate_deg_s * h)
    if phase is FlightPhase.LIFTOFF:
        target = perf.initial_climb_pitch_deg
    elif phase >= FlightPhase.LANDING:
        target = 0.0
    else:
        flight_path = math.degrees(math.atan2(vs_fpm, max(gs_kts, 1.0) * UnitConstants.KTS_TO_FPM))
        target = min(c.MAX_PITCH_DEG, max(c.MIN_PITCH_DEG, flight_path))
    step = perf.rotation_pitch_rate_deg_s * h
    return pitch + min(step, max(-step, target - pitch))


@lru_cache(maxsize=32)
def build_flight_profile(snapshot: SimulationSnapshot) -> FlightProfile:
    c = SimulationConstants
    perf = snapshot.aircraft
    table = snapshot.phase_table
    wind = snapshot.wind
    track = RouteTrack(snapshot)
    total = snapshot.total_distance_nm
    h = c.PROFILE_STEP_SEC

    # LINEUP hold: stationary on the threshold
    t, s, ias, gs, pitch = c.LINEUP_HOLD_SEC, 0.0, 0.0, 0.0, 0.0
    alt = track.altitude_at(0.0)
    times, dists, speeds, grounds, pitches, climbs = [0.0, t], [0.0, 0.0], [0.0, 0.0], [0.0, 0.0], [0.0, 0.0], [0.0, 0.0]
    stalled = False

    while s < total:
        if t >= c.MAX_PROFILE_SEC:
            stalled = True
            break
        phase = max(table.phase_at(s), FlightPhase.TAKEOFF_ROLL)
        new_ias = next_airspeed(phase, ias, alt, perf, h)
        if wind is not None and phase.is_airborne:
            new_gs = ground_speed(new_ias, track.course_at(s), wind.direction_deg, wind.speed_kts)
        else:
            new_gs = new_ias
        ds = (gs + new_gs) / 2 * h / UnitConstants.SECONDS_PER_HOUR
        if ds <= 0 and new_ias == ias:
            stalled = True
            break

        step = h
        if s + ds >= total:
            step = h * (total - s) / ds
            new_s = total
        else:
            new_s = s + ds
        new_alt = track.altitude_at(new_s)
        vs = (new_alt - alt) / step * 60
        new_pitch = next_pitch(phase, pitch, vs, new_gs, perf, step)

        t += step
        s, ias, gs, pitch, alt = new_s, new_ias, new_gs, new_pitch, new_alt
        times.append(t)
        dists.append(s)
        speeds.append(ias)
        grounds.append(gs)
        pitches.append(pitch)
        climbs.append(vs)

    if stalled:
        logger.warning(f"Profile stalled at {s:.2f}/{total:.2f} nm after {t:.0f}s; "
                       f"jumping to the arrival threshold")
        t += h
        times.append(t)
        dists.append(total)
        speeds.append(0.0)
        grounds.append(0.0)
        pitches.append(0.0)
        climbs.append(0.0)

    logger.debug(f"Profile for {perf.icao_type}: {len(times)} samples, {t:.0f}s, {total:.1f} nm")
    return FlightProfile(
        track=track,
        times=np.array(times),
        distances_nm=np.array(dists),
        airspeeds_kts=np.array(speeds),
        ground_speeds_kts=np.array(grounds),
        pitches_deg=np.array(pitches),
        vertical_speeds_fpm=np.array(climbs),
        stalled=stalled,
    )
