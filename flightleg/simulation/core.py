# flightleg/simulation/core.py
"""
Phase engine. State is derived from elapsed time over the cached flight
profile, so advance() and seek() agree for the same elapsed time. PhaseEngine
wraps the pure functions with playback controls and callbacks.
"""
import logging
import math
from dataclasses import replace
from typing import Callable, Optional

from ..constants import UnitConstants
from ..geometry import position_on_runway, wind_correction_angle
from .constants import SimulationConstants
from .data_models import FlightPhase, PhaseState, SimulationOutput, SimulationSnapshot
from .exceptions import EngineConstructionError
from .profile import build_flight_profile

logger = logging.getLogger(__name__)

PhaseChangeCallback = Callable[[FlightPhase, FlightPhase], None]
CompleteCallback = Callable[[], None]


def validate_snapshot(snapshot: SimulationSnapshot) -> None:
    """Raises EngineConstructionError for the first value the engine cannot run with."""
    if len(snapshot.waypoints) < 2:
        raise EngineConstructionError('waypoints', len(snapshot.waypoints), "Route needs at least 2 waypoints")
    perf = snapshot.aircraft
    for name in ('v1_kts', 'vr_kts', 'v2_kts', 'vref_kts', 'approach_speed_kts', 'ground_acceleration_kts_s',
                 'rotation_pitch_rate_deg_s', 'initial_climb_rate_fpm', 'cruise_speed_kts'):
        value = getattr(perf, name)
        if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
            raise EngineConstructionError(name, value, "Performance value must be positive")
    if not snapshot.departure.length_ft or snapshot.departure.length_ft <= 0:
        raise EngineConstructionError('departure.length_ft', snapshot.departure.length_ft,
                                      "Runway length must be positive")
    if not snapshot.total_distance_nm > 0:
        raise EngineConstructionError('total_distance_nm', snapshot.total_distance_nm,
                                      "Route length must be positive")


def clamp_speed_multiplier(multiplier: float) -> float:
    c = SimulationConstants
    if not isinstance(multiplier, (int, float)) or math.isnan(multiplier):
        return 1.0
    return min(c.MAX_SPEED_MULTIPLIER, max(c.MIN_SPEED_MULTIPLIER, float(multiplier)))


def derive_state(snapshot: SimulationSnapshot, elapsed_sec: float, is_playing: bool = False,
                 is_paused: bool = False, speed_multiplier: float = 1.0) -> PhaseState:
    """The state of a run after elapsed_sec of simulated time."""
    profile = build_flight_profile(snapshot)
    total_time = profile.total_time_sec
    elapsed_sec = min(max(elapsed_sec, 0.0), total_time)

    if elapsed_sec >= total_time:
        arrival = snapshot.arrival
        return PhaseState(
            phase=FlightPhase.COMPLETE,
            ground_distance_ft=0.0,
            route_distance_nm=snapshot.total_distance_nm,
            position=arrival.threshold,
            heading_deg=arrival.heading_deg,
            pitch_deg=0.0,
            bank_deg=0.0,
            indicated_airspeed_kts=0.0,
            ground_speed_kts=0.0,
            altitude_ft=arrival.elevation_ft,
            vertical_speed_fpm=0.0,
            elapsed_sec=total_time,
            progress=1.0,
            is_playing=False,
            is_paused=False,
            speed_multiplier=speed_multiplier,
        )

    sample = profile.sample(elapsed_sec)
    track = profile.track
    s = sample['distance_nm']
    phase = snapshot.phase_table.phase_at(s)
    ias = sample['airspeed_kts']
    altitude = track.altitude_at(s)

    if phase.is_ground:
        departure = snapshot.departure
        ground_ft = s * UnitConstants.FEET_PER_NAUTICAL_MILE
        position = position_on_runway(departure.threshold, departure.unit_vector, ground_ft)
        heading_deg = departure.heading_deg
        route_nm, bank = 0.0, 0.0
    else:
        ground_ft = 0.0
        route_nm = s
        position = track.position_at(s)
        heading_deg = track.heading_to_next(s, position)
        wind = snapshot.wind
        if wind is not None and phase.is_airborne:
            heading_deg = (heading_deg + wind_correction_angle(ias, heading_deg, wind.direction_deg,
                                                               wind.speed_kts)) % 360
        bank = track.bank_at(s, ias) if phase.is_airborne else 0.0

    return PhaseState(
        phase=phase,
        ground_distance_ft=ground_ft,
        route_distance_nm=route_nm,
        position=position,
        heading_deg=heading_deg,
        pitch_deg=sample['pitch_deg'],
        bank_deg=bank,
        indicated_airspeed_kts=ias,
        ground_speed_kts=sample['ground_speed_kts'],
        altitude_ft=altitude,
        vertical_speed_fpm=sample['vertical_speed_fpm'],
        elapsed_sec=elapsed_sec,
        progress=elapsed_sec / total_time,
        is_playing=is_playing,
        is_paused=is_paused,
        speed_multiplier=speed_multiplier,
    )


def initial_state(snapshot: SimulationSnapshot) -> PhaseState:
    """LINEUP on the departure threshold, stopped."""
    return derive_state(snapshot, 0.0)


def advance(snapshot: SimulationSnapshot, state: PhaseState, dt: float) -> PhaseState:
    """
    Moves a playing run forward by dt real seconds. dt is capped at one second
    before the speed multiplier applies; a stopped, paused or complete run is
    returned unchanged.
    """
    if not state.is_playing or state.phase is FlightPhase.COMPLETE:
        return state
    if not isinstance(dt, (int, float)) or not math.isfinite(dt) or dt <= 0:
        return state
    dt = min(dt, SimulationConstants.MAX_TICK_SEC)
    return derive_state(snapshot, state.elapsed_sec + dt * state.speed_multiplier,
                        state.is_playing, state.is_paused, state.speed_multiplier)


def seek(snapshot: SimulationSnapshot, progress: float) -> PhaseState:
    """The stopped state at a fraction of the run, progress clamped to [0, 1]."""
    if not isinstance(progress, (int, float)) or math.isnan(progress):
        progress = 0.0
    progress = min(1.0, max(0.0, float(progress)))
    profile = build_flight_profile(snapshot)
    return derive_state(snapshot, progress * profile.total_time_sec)


class PhaseEngine:
    """
    Playback controller for one snapshot.

    Not thread-safe: tick() and seek() are the only mutating entry points and a
    single owner (the host animation clock) drives them.
    """

    def __init__(self, snapshot: SimulationSnapshot,
                 on_phase_change: Optional[PhaseChangeCallback] = None,
                 on_complete: Optional[CompleteCallback] = None):
        validate_snapshot(snapshot)
        self.snapshot = snapshot
        self.on_phase_change = on_phase_change
        self.on_complete = on_complete
        self._profile = build_flight_profile(snapshot)
        self._state = initial_state(snapshot)
        self._completion_signaled = False
        logger.info(f"Phase engine ready: {snapshot.aircraft.icao_type} "
                    f"{snapshot.departure.airport_icao} -> {snapshot.arrival.airport_icao}, "
                    f"{self._profile.total_time_sec:.0f}s simulated")

    @property
    def state(self) -> PhaseState:
        return replace(self._state)

    @property
    def total_time_sec(self) -> float:
        return self._profile.total_time_sec

    @property
    def profile_stalled(self) -> bool:
        """True when the wind stopped the aircraft and the run jumps to the arrival threshold."""
        return self._profile.stalled

    def get_output(self) -> SimulationOutput:
        return SimulationOutput.from_state(self._state)

    # ===== CONTROLS =====
    def play(self) -> None:
        if self._state.phase is FlightPhase.COMPLETE:
            logger.debug("play() ignored: run is complete")
            return
        self._state.is_playing = True
        self._state.is_paused = False

    def pause(self) -> None:
        if self._state.is_playing:
            self._state.is_playing = False
            self._state.is_paused = True

    def stop(self) -> None:
        """Halts and rewinds to LINEUP. The speed multiplier is kept."""
        multiplier = self._state.speed_multiplier
        self._state = replace(initial_state(self.snapshot), speed_multiplier=multiplier)
        self._completion_signaled = False
        logger.info("Simulation stopped")

    def reset(self) -> None:
        """Back to the freshly constructed state."""
        self._state = initial_state(self.snapshot)
        self._completion_signaled = False
        logger.info("Simulation reset")

    def set_speed_multiplier(self, multiplier: float) -> float:
        self._state.speed_multiplier = clamp_speed_multiplier(multiplier)
        return self._state.speed_multiplier

    def seek(self, progress: float) -> SimulationOutput:
        old = self._state
        new = seek(self.snapshot, progress)
        if new.phase is not FlightPhase.COMPLETE:
            new.is_playing, new.is_paused = old.is_playing, old.is_paused
        new.speed_multiplier = old.speed_multiplier
        self._state = new
        if new.phase is not old.phase:
            self._notify_phase_change(old.phase, new.phase)
        self._check_complete()
        return self.get_output()

    def tick(self, dt: float) -> SimulationOutput:
        old_phase = self._state.phase
        self._state = advance(self.snapshot, self._state, dt)
        new_phase = self._state.phase
        # Every phase passed during a long tick is reported in order
        for phase in range(old_phase + 1, new_phase + 1):
            self._notify_phase_change(FlightPhase(phase - 1), FlightPhase(phase))
        self._check_complete()
        return self.get_output()

    # ===== CALLBACKS =====
    def _notify_phase_change(self, old: FlightPhase, new: FlightPhase) -> None:
        logger.debug(f"Phase {old.name} -> {new.name}")
        if self.on_phase_change is not None:
            self.on_phase_change(old, new)

    def _check_complete(self) -> None:
        if self._state.phase is not FlightPhase.COMPLETE or self._completion_signaled:
            return
        self._completion_signaled = True
        logger.info(f"Simulation complete after {self._state.elapsed_sec:.0f}s")
        if self.on_complete is not None:
            self.on_complete()
