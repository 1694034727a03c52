# flightleg/simulation/__init__.py
"""
simulation - snapshot building and the deterministic phase engine
"""
from .data_models import (
    FlightPhase, RunwayGeometry, PerformanceSubset, SnapshotWaypoint, EnrouteWind, PhaseTable,
    SimulationSnapshot, PlanningState, PhaseState, SimulationOutput
)
from .snapshot import (
    SnapshotBuilder, SNAPSHOT_BUILDER, build_snapshot, validate_planning_state, build_phase_table,
    map_waypoint_type, ground_acceleration_for, landing_roll_nm
)
from .profile import FlightProfile, RouteTrack, build_flight_profile
from .core import (
    PhaseEngine, initial_state, advance, seek, derive_state, validate_snapshot, clamp_speed_multiplier
)
from .constants import SimulationConstants
from .exceptions import SimulationError, SnapshotError, EngineConstructionError

__all__ = [
    'FlightPhase', 'RunwayGeometry', 'PerformanceSubset', 'SnapshotWaypoint', 'EnrouteWind', 'PhaseTable',
    'SimulationSnapshot', 'PlanningState', 'PhaseState', 'SimulationOutput',
    'SnapshotBuilder', 'SNAPSHOT_BUILDER', 'build_snapshot', 'validate_planning_state', 'build_phase_table',
    'map_waypoint_type', 'ground_acceleration_for', 'landing_roll_nm',
    'FlightProfile', 'RouteTrack', 'build_flight_profile',
    'PhaseEngine', 'initial_state', 'advance', 'seek', 'derive_state', 'validate_snapshot',
    'clamp_speed_multiplier',
    'SimulationConstants',
    'SimulationError', 'SnapshotError', 'EngineConstructionError'
]
