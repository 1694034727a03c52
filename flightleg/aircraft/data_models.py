# flightleg/aircraft/data_models.py
"""
The one canonical aircraft shape. Dispatch uses the weights, fuel flows and
limits; the simulation uses the reference speeds, distances and cruise figures.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class AircraftPerformanceProfile:
    icao_code: str
    name: str

    # Weights (kg)
    oew_kg: float
    mtow_kg: float
    mlw_kg: float
    mzfw_kg: float
    max_fuel_capacity_kg: float

    # Performance
    max_range_nm: float
    cruise_speed_kts: float
    cruise_altitude_ft: float

    # Fuel flow per phase (kg/hr)
    taxi_fuel_flow_kg_hr: float
    climb_fuel_flow_kg_hr: float
    cruise_fuel_flow_kg_hr: float
    descent_fuel_flow_kg_hr: float
    holding_fuel_flow_kg_hr: float

    # Runway requirements (ft)
    takeoff_distance_ft: float
    landing_distance_ft: float

    # Wind limits (kt)
    max_crosswind_kt: float
    max_tailwind_kt: float

    # CAT I approach minima
    cat_i_min_visibility_m: float
    cat_i_min_ceiling_ft: float

    # Reference speeds (KIAS)
    v1_kts: float
    vr_kts: float
    v2_kts: float
    vref_kts: float
