# flightleg/dispatch/fuel.py
"""
Phase-segmented fuel plan and the weight summary derived from it.
"""
from ..aircraft import AircraftPerformanceProfile
from ..utils import round_half_up, ceil_to
from .constants import DispatchPolicy, DEFAULT_POLICY
from .data_models import FuelPlan, WeightSummary


def cruise_distance_nm(route_distance_nm: float, policy: DispatchPolicy = DEFAULT_POLICY) -> float:
    return max(0.0, route_distance_nm - policy.climb_distance_nm - policy.descent_distance_nm)


def calculate_fuel_plan(route_distance_nm: float, aircraft: AircraftPerformanceProfile,
                        policy: DispatchPolicy = DEFAULT_POLICY) -> FuelPlan:
    """
    Taxi, climb and descent burn fixed times at their phase flows; the rest of
    the route is flown at cruise flow. Components are rounded to whole kg,
    block fuel is the unrounded total rounded up to the loading step.
    """
    cruise_time_hr = cruise_distance_nm(route_distance_nm, policy) / aircraft.cruise_speed_kts

    taxi = policy.taxi_time_hr * aircraft.taxi_fuel_flow_kg_hr
    climb = policy.climb_time_hr * aircraft.climb_fuel_flow_kg_hr
    cruise = cruise_time_hr * aircraft.cruise_fuel_flow_kg_hr
    descent = policy.descent_time_hr * aircraft.descent_fuel_flow_kg_hr

    trip = climb + cruise + descent
    contingency = trip * policy.contingency_ratio
    alternate = policy.alternate_time_hr * aircraft.cruise_fuel_flow_kg_hr
    final_reserve = policy.final_reserve_time_hr * aircraft.holding_fuel_flow_kg_hr
    total = taxi + trip + contingency + alternate + final_reserve

    return FuelPlan(
        taxi_out_fuel_kg=round_half_up(taxi),
        trip_fuel_kg=round_half_up(trip),
        contingency_fuel_kg=round_half_up(contingency),
        alternate_fuel_kg=round_half_up(alternate),
        final_reserve_fuel_kg=round_half_up(final_reserve),
        total_required_kg=round_half_up(total),
        block_fuel_kg=int(ceil_to(total, policy.block_fuel_rounding_kg)),
    )


def calculate_weights(aircraft: AircraftPerformanceProfile, payload_kg: float, fuel_plan: FuelPlan) -> WeightSummary:
    """Landing weight removes only the fuel burned before touchdown (taxi-out and trip)."""
    zfw = aircraft.oew_kg + payload_kg
    tow = zfw + fuel_plan.block_fuel_kg
    burned = fuel_plan.taxi_out_fuel_kg + fuel_plan.trip_fuel_kg
    return WeightSummary(
        oew_kg=aircraft.oew_kg,
        payload_kg=payload_kg,
        zfw_kg=zfw,
        block_fuel_kg=fuel_plan.block_fuel_kg,
        tow_kg=tow,
        trip_fuel_kg=fuel_plan.trip_fuel_kg,
        landing_fuel_kg=fuel_plan.block_fuel_kg - burned,
        lw_kg=tow - burned,
    )
