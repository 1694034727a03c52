# flightleg/geometry/flight_dynamics.py
"""Turn and wind-triangle helpers used by the phase engine."""
import math
from typing import Tuple

MIN_BANK_ANGLE_DEG = 15.0
MAX_BANK_ANGLE_DEG = 30.0
BANK_PER_KNOT = 0.075


def standard_rate_bank_angle(speed_kts: float) -> float:
    """Heuristic bank angle for a 3 deg/s turn: 200 kt gives 15 deg, 400 kt gives 30 deg."""
    return min(MAX_BANK_ANGLE_DEG, max(MIN_BANK_ANGLE_DEG, speed_kts * BANK_PER_KNOT))


def wind_components_for_course(course_deg: float, wind_from_deg: float, wind_speed_kts: float) -> Tuple[float, float]:
    """
    Splits a wind into (along_track, crosswind) for a given course.
    along_track is positive for a tailwind. crosswind is positive when the wind
    blows from the right of the course.
    """
    if wind_speed_kts <= 0.0:
        return 0.0, 0.0
    wind_to_rad = math.radians((wind_from_deg + 180.0) % 360.0 - course_deg)
    along_track = wind_speed_kts * math.cos(wind_to_rad)
    crosswind = -wind_speed_kts * math.sin(wind_to_rad)
    return along_track, crosswind


def ground_speed(true_airspeed_kts: float, course_deg: float, wind_from_deg: float, wind_speed_kts: float) -> float:
    """
    Wind-triangle ground speed, sqrt(TAS^2 - crosswind^2) + tailwind, clamped to >= 0.
    Zero airspeed or a crosswind at least as strong as the airspeed gives 0.
    """
    if true_airspeed_kts <= 0.0 or not math.isfinite(true_airspeed_kts):
        return 0.0
    along_track, crosswind = wind_components_for_course(course_deg, wind_from_deg, wind_speed_kts)
    if abs(crosswind) >= true_airspeed_kts:
        return 0.0
    return max(0.0, math.sqrt(true_airspeed_kts**2 - crosswind**2) + along_track)


def wind_correction_angle(true_airspeed_kts: float, course_deg: float, wind_from_deg: float, wind_speed_kts: float) -> float:
    """Crab angle into the wind, in degrees. Add it to the course to get the heading."""
    if true_airspeed_kts <= 0.0 or wind_speed_kts <= 0.0:
        return 0.0
    _, crosswind = wind_components_for_course(course_deg, wind_from_deg, wind_speed_kts)
    ratio = max(-1.0, min(1.0, crosswind / true_airspeed_kts))
    return math.degrees(math.asin(ratio))
