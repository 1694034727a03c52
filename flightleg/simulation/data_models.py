# flightleg/simulation/data_models.py
"""
Snapshot, state and output structures for the phase engine.

The snapshot is frozen and built only from hashable parts, so it can key the
flight-profile cache. PhaseState is the mutable per-run state; SimulationOutput
is the read-only view handed to renderers.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from ..geometry import Coordinate, RunwayUnitVector
from ..aircraft import AircraftPerformanceProfile
from ..airport import SelectedRunway
from ..route import FlightRoute
from ..weather import Metar


class FlightPhase(IntEnum):
    """Flight phases in the only order a run passes through them."""
    LINEUP = 0
    TAKEOFF_ROLL = 1
    V1 = 2
    ROTATE = 3
    LIFTOFF = 4
    INITIAL_CLIMB = 5
    CLIMB = 6
    CRUISE = 7
    DESCENT = 8
    APPROACH = 9
    FINAL = 10
    LANDING = 11
    TAXI_IN = 12
    COMPLETE = 13

    @property
    def is_ground(self) -> bool:
        """Phases positioned along the departure runway"""
        return self <= FlightPhase.LIFTOFF

    @property
    def is_airborne(self) -> bool:
        """Phases where the wind drifts the aircraft"""
        return FlightPhase.INITIAL_CLIMB <= self <= FlightPhase.FINAL


@dataclass(frozen=True)
class RunwayGeometry:
    """One runway end, frozen with the geometry derived from its two thresholds."""
    airport_icao: str
    designator: str
    threshold: Coordinate
    opposite_threshold: Coordinate
    heading_deg: float
    length_ft: float
    length_nm: float
    unit_vector: RunwayUnitVector
    elevation_ft: float


@dataclass(frozen=True)
class PerformanceSubset:
    """The part of an aircraft profile the phase engine reads."""
    icao_type: str
    v1_kts: float
    vr_kts: float
    v2_kts: float
    vref_kts: float
    approach_speed_kts: float
    ground_acceleration_kts_s: float
    rotation_pitch_rate_deg_s: float
    initial_climb_pitch_deg: float
    initial_climb_rate_fpm: float
    cruise_speed_kts: float


@dataclass(frozen=True)
class SnapshotWaypoint:
    id: str
    position: Coordinate
    altitude_ft: float
    type: str                               # DEPARTURE / ENROUTE / ARRIVAL
    cumulative_distance_nm: float


@dataclass(frozen=True)
class EnrouteWind:
    direction_deg: float                    # direction the wind blows from, true
    speed_kts: float


@dataclass(frozen=True)
class PhaseTable:
    """
    Start distances of every moving phase along a single path coordinate
    (nm from the departure threshold). The ground phases run along the
    runway, everything from INITIAL_CLIMB on runs along the route.
    """
    phases: Tuple[FlightPhase, ...]
    starts_nm: Tuple[float, ...]
    total_nm: float
    airborne_altitude_ft: float             # altitude at the end of LIFTOFF

    @property
    def airborne_start_nm(self) -> float:
        return self.start_of(FlightPhase.INITIAL_CLIMB)

    def start_of(self, phase: FlightPhase) -> float:
        if phase is FlightPhase.LINEUP:
            return 0.0
        if phase is FlightPhase.COMPLETE:
            return self.total_nm
        return self.starts_nm[self.phases.index(phase)]

    def phase_at(self, distance_nm: float) -> FlightPhase:
        if distance_nm <= 0:
            return FlightPhase.LINEUP
        if distance_nm >= self.total_nm:
            return FlightPhase.TAXI_IN
        index = 0
        for i, start in enumerate(self.starts_nm):
            if start <= distance_nm:
                index = i
            else:
                break
        return self.phases[index]


@dataclass(frozen=True)
class SimulationSnapshot:
    """Immutable planning data for one simulation run."""
    departure: RunwayGeometry
    arrival: RunwayGeometry
    aircraft: PerformanceSubset
    waypoints: Tuple[SnapshotWaypoint, ...]
    total_distance_nm: float
    phase_table: PhaseTable
    wind: Optional[EnrouteWind] = None
    created_at: float = field(default=0.0, compare=False)


@dataclass
class PlanningState:
    """Everything the planner has chosen, possibly incomplete."""
    departure_icao: Optional[str] = None
    arrival_icao: Optional[str] = None
    departure_runway: Optional[SelectedRunway] = None
    arrival_runway: Optional[SelectedRunway] = None
    aircraft: Optional[AircraftPerformanceProfile] = None
    route: Optional[FlightRoute] = None
    departure_metar: Optional[Metar] = None


@dataclass
class PhaseState:
    """Mutable state of one run."""
    phase: FlightPhase
    ground_distance_ft: float
    route_distance_nm: float
    position: Coordinate
    heading_deg: float
    pitch_deg: float
    bank_deg: float
    indicated_airspeed_kts: float
    ground_speed_kts: float
    altitude_ft: float
    vertical_speed_fpm: float
    elapsed_sec: float
    progress: float
    is_playing: bool = False
    is_paused: bool = False
    speed_multiplier: float = 1.0


@dataclass(frozen=True)
class SimulationOutput:
    """Read-only view of the current state for renderers."""
    position: Coordinate
    heading_deg: float
    altitude_ft: float
    ground_speed_kts: float
    phase: FlightPhase
    is_playing: bool
    indicated_airspeed_kts: float
    vertical_speed_fpm: float
    pitch_deg: float
    bank_deg: float
    progress: float
    elapsed_sec: float

    @classmethod
    def from_state(cls, state: PhaseState) -> 'SimulationOutput':
        return cls(
            position=state.position,
            heading_deg=state.heading_deg,
            altitude_ft=state.altitude_ft,
            ground_speed_kts=state.ground_speed_kts,
            phase=state.phase,
            is_playing=state.is_playing,
            indicated_airspeed_kts=state.indicated_airspeed_kts,
            vertical_speed_fpm=state.vertical_speed_fpm,
            pitch_deg=state.pitch_deg,
            bank_deg=state.bank_deg,
            progress=state.progress,
            elapsed_sec=state.elapsed_sec,
        )
