# flightleg/aircraft/core.py
"""
In-memory aircraft performance registry keyed by ICAO type code.
Reference speeds are not part of the raw profile data; they are derived from
cruise TAS the same way for every type.
"""
import logging
from typing import Dict, List, Optional, Tuple

from ..utils import round_half_up
from .constants import AircraftConstants
from .data_models import AircraftPerformanceProfile
from .exceptions import UnknownAircraftError

logger = logging.getLogger(__name__)


def derive_reference_speeds(cruise_speed_kts: float) -> Tuple[int, int, int, int]:
    """Returns (V1, VR, V2, Vref) in knots for a given cruise TAS."""
    vr = round_half_up(cruise_speed_kts * AircraftConstants.VR_CRUISE_RATIO)
    v1 = round_half_up(vr * AircraftConstants.V1_VR_RATIO)
    v2 = vr + AircraftConstants.V2_VR_INCREMENT_KTS
    vref = round_half_up(cruise_speed_kts * AircraftConstants.VREF_CRUISE_RATIO)
    return v1, vr, v2, vref


def build_profile(icao_code: str, data: Dict) -> AircraftPerformanceProfile:
    """Converts one raw AircraftConstants.PROFILES entry into the canonical profile."""
    v1, vr, v2, vref = derive_reference_speeds(data['CRUISE_SPEED'])
    flows = data['FUEL_FLOW']
    return AircraftPerformanceProfile(
        icao_code=icao_code,
        name=data['NAME'],
        oew_kg=data['OEW'],
        mtow_kg=data['MTOW'],
        mlw_kg=data['MLW'],
        mzfw_kg=data['MZFW'],
        max_fuel_capacity_kg=data['MAX_FUEL'],
        max_range_nm=data['MAX_RANGE_NM'],
        cruise_speed_kts=data['CRUISE_SPEED'],
        cruise_altitude_ft=data['CRUISE_ALT'],
        taxi_fuel_flow_kg_hr=flows['TAXI'],
        climb_fuel_flow_kg_hr=flows['CLIMB'],
        cruise_fuel_flow_kg_hr=flows['CRUISE'],
        descent_fuel_flow_kg_hr=flows['DESCENT'],
        holding_fuel_flow_kg_hr=flows['HOLDING'],
        takeoff_distance_ft=data['TAKEOFF_DIST_FT'],
        landing_distance_ft=data['LANDING_DIST_FT'],
        max_crosswind_kt=data['MAX_CROSSWIND'],
        max_tailwind_kt=data['MAX_TAILWIND'],
        cat_i_min_visibility_m=data.get('CAT_I_VIS_M', AircraftConstants.CAT_I['MIN_VISIBILITY_M']),
        cat_i_min_ceiling_ft=data.get('CAT_I_CEILING_FT', AircraftConstants.CAT_I['MIN_CEILING_FT']),
        v1_kts=v1,
        vr_kts=vr,
        v2_kts=v2,
        vref_kts=vref,
    )


class AircraftRegistry:
    """Lookup of AircraftPerformanceProfile by ICAO type code (case-insensitive)."""

    def __init__(self, profiles: Optional[Dict[str, Dict]] = None):
        source = AircraftConstants.PROFILES if profiles is None else profiles
        self._profiles: Dict[str, AircraftPerformanceProfile] = {
            code.upper(): build_profile(code.upper(), data) for code, data in source.items()
        }
        logger.debug(f"Aircraft registry loaded with {len(self._profiles)} types")

    def get(self, icao_code: str) -> AircraftPerformanceProfile:
        key = (icao_code or '').strip().upper()
        try:
            return self._profiles[key]
        except KeyError:
            raise UnknownAircraftError(icao_code) from None

    def register(self, profile: AircraftPerformanceProfile) -> None:
        self._profiles[profile.icao_code.upper()] = profile

    def all(self) -> List[AircraftPerformanceProfile]:
        return list(self._profiles.values())

    def __contains__(self, icao_code: str) -> bool:
        return (icao_code or '').strip().upper() in self._profiles


AIRCRAFT_REGISTRY = AircraftRegistry()


def get_aircraft_profile(icao_code: str) -> AircraftPerformanceProfile:
    return AIRCRAFT_REGISTRY.get(icao_code)


def get_all_aircraft_profiles() -> List[AircraftPerformanceProfile]:
    return AIRCRAFT_REGISTRY.all()
