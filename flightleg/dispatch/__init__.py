# flightleg/dispatch/__init__.py
"""
dispatch - fuel plan, weights and GO/NO-GO checks for a single flight leg
"""
from .core import DispatchEvaluator, DISPATCH_EVALUATOR, evaluate
from .constants import DispatchPolicy, DEFAULT_POLICY
from .data_models import (
    DispatchInput, FuelPlan, WeightSummary, CheckResult, DispatchChecks, ComputedSummary, DispatchResult
)
from .fuel import calculate_fuel_plan, calculate_weights
from .checks import (
    check_range, check_fuel, check_tow, check_lw, check_zfw,
    check_departure_runway, check_arrival_runway,
    check_departure_weather, check_arrival_weather, check_crosswind
)

__all__ = [
    'DispatchEvaluator', 'DISPATCH_EVALUATOR', 'evaluate',
    'DispatchPolicy', 'DEFAULT_POLICY',
    'DispatchInput', 'FuelPlan', 'WeightSummary', 'CheckResult', 'DispatchChecks', 'ComputedSummary', 'DispatchResult',
    'calculate_fuel_plan', 'calculate_weights',
    'check_range', 'check_fuel', 'check_tow', 'check_lw', 'check_zfw',
    'check_departure_runway', 'check_arrival_runway',
    'check_departure_weather', 'check_arrival_weather', 'check_crosswind',
]
