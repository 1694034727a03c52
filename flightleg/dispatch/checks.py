# flightleg/dispatch/checks.py
"""
Individual dispatch rules. Each is a pure predicate returning a CheckResult;
none of them raise. Missing weather is a pass ("assume VMC").
"""
from typing import Optional

from ..aircraft import AircraftPerformanceProfile
from ..utils import round_half_up
from ..weather import Metar, visibility_meters, ceiling_ft, calculate_wind_components
from .constants import DispatchPolicy, DEFAULT_POLICY
from .data_models import CheckResult, FuelPlan

NO_METAR_MESSAGE = 'No METAR - assuming VMC'


def fmt(value) -> str:
    """Numbers in messages print without a trailing '.0' when whole."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _no_metar() -> CheckResult:
    return CheckResult(passed=True, value='N/A', limit='N/A', message=NO_METAR_MESSAGE)


def check_range(route_distance_nm: float, aircraft: AircraftPerformanceProfile,
                policy: DispatchPolicy = DEFAULT_POLICY) -> CheckResult:
    effective_range = aircraft.max_range_nm * policy.range_factor
    passed = route_distance_nm <= effective_range
    return CheckResult(
        passed=passed,
        value=route_distance_nm,
        limit=effective_range,
        message=(f"Route {fmt(route_distance_nm)} nm within range (max {round_half_up(effective_range)} nm)" if passed
                 else f"Route {fmt(route_distance_nm)} nm EXCEEDS effective range of {round_half_up(effective_range)} nm"),
    )


def check_fuel(fuel_plan: FuelPlan, aircraft: AircraftPerformanceProfile) -> CheckResult:
    block = fuel_plan.block_fuel_kg
    capacity = aircraft.max_fuel_capacity_kg
    passed = block <= capacity
    return CheckResult(
        passed=passed,
        value=block,
        limit=capacity,
        message=(f"Fuel {block} kg within capacity (max {fmt(capacity)} kg)" if passed
                 else f"Fuel {block} kg EXCEEDS tank capacity of {fmt(capacity)} kg"),
    )


def _check_weight(label: str, limit_label: str, weight_kg: float, limit_kg: float) -> CheckResult:
    passed = weight_kg <= limit_kg
    return CheckResult(
        passed=passed,
        value=weight_kg,
        limit=limit_kg,
        message=(f"{label} {fmt(weight_kg)} kg within {limit_label} (max {fmt(limit_kg)} kg)" if passed
                 else f"{label} {fmt(weight_kg)} kg EXCEEDS {limit_label} of {fmt(limit_kg)} kg"),
    )


def check_tow(tow_kg: float, aircraft: AircraftPerformanceProfile) -> CheckResult:
    return _check_weight('TOW', 'MTOW', tow_kg, aircraft.mtow_kg)


def check_lw(lw_kg: float, aircraft: AircraftPerformanceProfile) -> CheckResult:
    return _check_weight('LW', 'MLW', lw_kg, aircraft.mlw_kg)


def check_zfw(zfw_kg: float, aircraft: AircraftPerformanceProfile) -> CheckResult:
    return _check_weight('ZFW', 'MZFW', zfw_kg, aircraft.mzfw_kg)


def _check_runway(runway_length_ft: float, runway_surface: str, required_ft: float,
                  aircraft: AircraftPerformanceProfile, policy: DispatchPolicy, operation: str) -> CheckResult:
    surface_ok = (runway_surface or '').upper() in policy.paved_surfaces
    length_ok = runway_length_ft >= required_ft
    if not surface_ok:
        message = f'Runway surface "{runway_surface}" not suitable for {aircraft.icao_code}'
    elif not length_ok:
        qualifier = '' if operation == 'takeoff' else ' for landing'
        message = f"Runway {fmt(runway_length_ft)} ft too short{qualifier} (need {round_half_up(required_ft)} ft)"
    else:
        message = f"Runway {fmt(runway_length_ft)} ft adequate for {operation}"
    return CheckResult(passed=surface_ok and length_ok, value=runway_length_ft, limit=required_ft, message=message)


def check_departure_runway(runway_length_ft: float, runway_surface: str, aircraft: AircraftPerformanceProfile,
                           policy: DispatchPolicy = DEFAULT_POLICY) -> CheckResult:
    required = aircraft.takeoff_distance_ft * policy.runway_length_factor
    return _check_runway(runway_length_ft, runway_surface, required, aircraft, policy, 'takeoff')


def check_arrival_runway(runway_length_ft: float, runway_surface: str, aircraft: AircraftPerformanceProfile,
                         policy: DispatchPolicy = DEFAULT_POLICY) -> CheckResult:
    required = aircraft.landing_distance_ft * policy.runway_length_factor
    return _check_runway(runway_length_ft, runway_surface, required, aircraft, policy, 'landing')


def check_departure_weather(metar: Optional[Metar], policy: DispatchPolicy = DEFAULT_POLICY) -> CheckResult:
    if metar is None:
        return _no_metar()
    vis = metar.visibility
    minimum = policy.departure_min_visibility_m
    passed = visibility_meters(vis) >= minimum
    return CheckResult(
        passed=passed,
        value=f"{fmt(vis.value)} {vis.unit}",
        limit=f"{fmt(minimum)}m",
        message=(f"Departure visibility {fmt(vis.value)} {vis.unit} above minima" if passed
                 else f"Departure visibility {fmt(vis.value)} {vis.unit} BELOW minima"),
    )


def check_arrival_weather(metar: Optional[Metar], aircraft: AircraftPerformanceProfile) -> CheckResult:
    if metar is None:
        return _no_metar()
    vis = metar.visibility
    ceiling = ceiling_ft(metar)
    vis_ok = visibility_meters(vis) >= aircraft.cat_i_min_visibility_m
    ceiling_ok = ceiling is None or ceiling >= aircraft.cat_i_min_ceiling_ft

    if not vis_ok:
        message = f"Arrival visibility {fmt(vis.value)} {vis.unit} BELOW CAT I minima"
    elif not ceiling_ok:
        message = f"Arrival ceiling {fmt(ceiling)} ft BELOW CAT I minima ({fmt(aircraft.cat_i_min_ceiling_ft)} ft)"
    else:
        message = "Arrival weather above CAT I minima"

    value = f"{fmt(vis.value)}{vis.unit}"
    if ceiling is not None:
        value = f"{fmt(ceiling)}ft / {value}"
    return CheckResult(
        passed=vis_ok and ceiling_ok,
        value=value,
        limit=f"{fmt(aircraft.cat_i_min_ceiling_ft)}ft / {fmt(aircraft.cat_i_min_visibility_m)}m",
        message=message,
    )


def check_crosswind(departure_runway_heading: float, arrival_runway_heading: float,
                    departure_metar: Optional[Metar], arrival_metar: Optional[Metar],
                    aircraft: AircraftPerformanceProfile) -> CheckResult:
    """Worst crosswind over both runways, using the gust when one is reported."""
    max_crosswind = 0
    location = ''
    for name, runway_heading, metar in (('departure', departure_runway_heading, departure_metar),
                                        ('arrival', arrival_runway_heading, arrival_metar)):
        if metar is None:
            continue
        components = calculate_wind_components(runway_heading, metar.wind.direction, metar.wind.effective_speed_kts)
        if components['crosswind'] > max_crosswind:
            max_crosswind = components['crosswind']
            location = name

    limit = aircraft.max_crosswind_kt
    passed = max_crosswind <= limit
    return CheckResult(
        passed=passed,
        value=max_crosswind,
        limit=limit,
        message=(f"Crosswind {max_crosswind} kt within limits" if passed
                 else f"Crosswind {max_crosswind} kt at {location} EXCEEDS limit of {fmt(limit)} kt"),
    )
