# flightleg/dispatch/core.py
"""
Dispatch evaluation: fuel plan, weights, per-rule checks and the GO/NO-GO
decision. Pure and side-effect free apart from debug logging; identical input
always produces an identical DispatchResult.
"""
import logging
from typing import List, Optional

from ..utils import round_half_up
from .checks import (
    check_range, check_fuel, check_tow, check_lw, check_zfw,
    check_departure_runway, check_arrival_runway,
    check_departure_weather, check_arrival_weather, check_crosswind, fmt
)
from .constants import DispatchPolicy, DEFAULT_POLICY
from .data_models import DispatchInput, DispatchChecks, DispatchResult, ComputedSummary
from .fuel import calculate_fuel_plan, calculate_weights, cruise_distance_nm

logger = logging.getLogger(__name__)


class DispatchEvaluator:
    """Applies one DispatchPolicy to any number of DispatchInputs."""

    def __init__(self, policy: DispatchPolicy = DEFAULT_POLICY):
        self.policy = policy

    def evaluate(self, dispatch_input: DispatchInput) -> DispatchResult:
        policy = self.policy
        aircraft = dispatch_input.aircraft
        distance = dispatch_input.route_distance_nm

        fuel_plan = calculate_fuel_plan(distance, aircraft, policy)
        weights = calculate_weights(aircraft, dispatch_input.payload_kg, fuel_plan)

        checks = DispatchChecks(
            range=check_range(distance, aircraft, policy),
            fuel=check_fuel(fuel_plan, aircraft),
            tow_weight=check_tow(weights.tow_kg, aircraft),
            lw_weight=check_lw(weights.lw_kg, aircraft),
            zfw_weight=check_zfw(weights.zfw_kg, aircraft),
            departure_runway=check_departure_runway(
                dispatch_input.departure_runway_length_ft, dispatch_input.departure_runway_surface, aircraft, policy),
            arrival_runway=check_arrival_runway(
                dispatch_input.arrival_runway_length_ft, dispatch_input.arrival_runway_surface, aircraft, policy),
            departure_weather=check_departure_weather(dispatch_input.departure_metar, policy),
            arrival_weather=check_arrival_weather(dispatch_input.arrival_metar, aircraft),
            crosswind=check_crosswind(
                dispatch_input.departure_runway_heading, dispatch_input.arrival_runway_heading,
                dispatch_input.departure_metar, dispatch_input.arrival_metar, aircraft),
        )

        reasons = [check.message for check in checks.as_dict().values() if not check.passed]

        warnings: List[str] = []
        range_margin = aircraft.max_range_nm * policy.range_factor - distance
        if range_margin < policy.low_range_margin_nm and checks.range.passed:
            warnings.append(f"Low range margin: only {round_half_up(range_margin)} nm reserve")

        fuel_margin = aircraft.max_fuel_capacity_kg - fuel_plan.block_fuel_kg
        if fuel_margin < policy.low_fuel_margin_kg and checks.fuel.passed:
            warnings.append(f"Low fuel margin: only {fmt(fuel_margin)} kg extra capacity")

        tow_margin = aircraft.mtow_kg - weights.tow_kg
        if tow_margin < policy.low_tow_margin_kg and checks.tow_weight.passed:
            warnings.append(f"TOW near MTOW limit: only {fmt(tow_margin)} kg margin")

        cruise_time_min = cruise_distance_nm(distance, policy) / aircraft.cruise_speed_kts * 60
        flight_time_min = policy.climb_time_min + cruise_time_min + policy.descent_time_min

        result = DispatchResult(
            feasible=not reasons,
            reasons=tuple(reasons),
            warnings=tuple(warnings),
            computed=ComputedSummary(
                trip_fuel_kg=fuel_plan.trip_fuel_kg,
                reserve_fuel_kg=fuel_plan.contingency_fuel_kg + fuel_plan.alternate_fuel_kg + fuel_plan.final_reserve_fuel_kg,
                block_fuel_kg=fuel_plan.block_fuel_kg,
                tow_kg=weights.tow_kg,
                lw_kg=weights.lw_kg,
                range_margin_nm=round_half_up(range_margin),
                flight_time_min=round_half_up(flight_time_min),
                fuel_margin_kg=fuel_margin,
            ),
            fuel_plan=fuel_plan,
            weights=weights,
            checks=checks,
        )
        logger.debug(f"Dispatch {aircraft.icao_code} {fmt(distance)} nm: {result.status} "
                     f"({len(reasons)} reasons, {len(warnings)} warnings)")
        return result


DISPATCH_EVALUATOR = DispatchEvaluator()


def evaluate(dispatch_input: DispatchInput, policy: Optional[DispatchPolicy] = None) -> DispatchResult:
    """Evaluates with the default policy unless one is given."""
    if policy is None:
        return DISPATCH_EVALUATOR.evaluate(dispatch_input)
    return DispatchEvaluator(policy).evaluate(dispatch_input)
