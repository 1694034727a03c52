# flightleg/geometry/runway.py
"""
Runway-anchored 1D -> 2D positioning.

Ground phases place the aircraft with position_on_runway() only, never by
interpolating along route waypoints, so takeoff and landing rolls stay on the
centerline.
"""
from ..constants import UnitConstants
from .coordinates import distance_nm
from .data_models import Coordinate, RunwayUnitVector, ZERO_VECTOR

# Runways shorter than this are degenerate; their unit vector is zero.
MIN_RUNWAY_LENGTH_NM = 0.001


def runway_unit_vector(threshold: Coordinate, opposite_threshold: Coordinate) -> RunwayUnitVector:
    length_nm = distance_nm(threshold, opposite_threshold)
    if length_nm < MIN_RUNWAY_LENGTH_NM:
        return ZERO_VECTOR
    return RunwayUnitVector(
        d_lat_per_nm=(opposite_threshold.lat - threshold.lat) / length_nm,
        d_lon_per_nm=(opposite_threshold.lon - threshold.lon) / length_nm,
    )


def position_on_runway(threshold: Coordinate, unit_vector: RunwayUnitVector, distance_ft: float) -> Coordinate:
    if distance_ft == 0.0 or unit_vector.is_zero:
        return threshold
    dist_nm = distance_ft * UnitConstants.FT_TO_NM
    return Coordinate(
        lat=threshold.lat + unit_vector.d_lat_per_nm * dist_nm,
        lon=threshold.lon + unit_vector.d_lon_per_nm * dist_nm,
    )
