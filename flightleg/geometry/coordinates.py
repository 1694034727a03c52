# flightleg/geometry/coordinates.py
"""
Great-circle geometry on a spherical earth. Logging is omitted here as these
are high-frequency, low-level functions called from every simulation tick.
None of these functions raise; degenerate input returns an identity result.
"""
import math
from ..constants import UnitConstants
from .data_models import Coordinate

# Angular separation (radians) below which two points are treated as coincident.
_MIN_ANGULAR_SEPARATION_RAD = 1e-10


def haversine_distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    dlon = lon2_rad - lon1_rad; dlat = lat2_rad - lat1_rad
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return UnitConstants.EARTH_RADIUS_NM * c


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlon = math.radians(lon2 - lon1)
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    initial_bearing = math.atan2(y, x)
    return (math.degrees(initial_bearing) + 360) % 360


def distance_nm(a: Coordinate, b: Coordinate) -> float:
    """Haversine great-circle distance in nautical miles. Symmetric, zero for a == b."""
    if a == b:
        return 0.0
    return haversine_distance_nm(a.lat, a.lon, b.lat, b.lon)


def distance_ft(a: Coordinate, b: Coordinate) -> float:
    return distance_nm(a, b) * UnitConstants.FEET_PER_NAUTICAL_MILE


def heading(a: Coordinate, b: Coordinate) -> float:
    """Initial true bearing from a to b, normalized to [0, 360)."""
    bearing = calculate_bearing(a.lat, a.lon, b.lat, b.lon)
    return 0.0 if bearing >= 360.0 else bearing


def interpolate_great_circle(a: Coordinate, b: Coordinate, fraction: float) -> Coordinate:
    """
    Spherical linear interpolation between a and b. The fraction is clamped to
    [0, 1]; the end points are returned exactly, and a is returned when the two
    points are (nearly) coincident.
    """
    f = max(0.0, min(1.0, fraction))
    if f == 0.0:
        return a
    if f == 1.0:
        return b

    lat1, lon1 = math.radians(a.lat), math.radians(a.lon)
    lat2, lon2 = math.radians(b.lat), math.radians(b.lon)

    h = math.sin((lat2 - lat1) / 2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2)**2
    d = 2 * math.asin(math.sqrt(min(1.0, max(0.0, h))))
    if d < _MIN_ANGULAR_SEPARATION_RAD:
        return a

    sin_d = math.sin(d)
    coef_a = math.sin((1 - f) * d) / sin_d
    coef_b = math.sin(f * d) / sin_d

    x = coef_a * math.cos(lat1) * math.cos(lon1) + coef_b * math.cos(lat2) * math.cos(lon2)
    y = coef_a * math.cos(lat1) * math.sin(lon1) + coef_b * math.cos(lat2) * math.sin(lon2)
    z = coef_a * math.sin(lat1) + coef_b * math.sin(lat2)

    return Coordinate(
        lat=math.degrees(math.atan2(z, math.sqrt(x * x + y * y))),
        lon=math.degrees(math.atan2(y, x)),
    )


def destination_point(origin: Coordinate, bearing_deg: float, dist_nm: float) -> Coordinate:
    """Forward geodesic projection. Longitude is normalized to [-180, 180)."""
    lat_rad = math.radians(origin.lat); lon_rad = math.radians(origin.lon); bearing_rad = math.radians(bearing_deg)
    angular_distance = dist_nm / UnitConstants.EARTH_RADIUS_NM
    sin_lat = math.sin(lat_rad) * math.cos(angular_distance) + \
        math.cos(lat_rad) * math.sin(angular_distance) * math.cos(bearing_rad)
    dest_lat_rad = math.asin(min(1.0, max(-1.0, sin_lat)))
    dest_lon_rad = lon_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular_distance) * math.cos(lat_rad),
                                        math.cos(angular_distance) - math.sin(lat_rad) * math.sin(dest_lat_rad))
    return Coordinate(
        lat=math.degrees(dest_lat_rad),
        lon=(math.degrees(dest_lon_rad) + 540) % 360 - 180,
    )


def heading_difference(from_deg: float, to_deg: float) -> float:
    """Signed turn from one heading to another, in (-180, 180]. Positive is a right turn."""
    diff = (to_deg - from_deg) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff
