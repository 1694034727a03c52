# flightleg/dispatch/data_models.py
"""
Inputs and outputs of the dispatch evaluator. Everything is frozen so two
evaluations of the same input compare equal field by field.
"""
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple, Union

from ..aircraft import AircraftPerformanceProfile
from ..weather import Metar

CheckValue = Union[float, int, str]


@dataclass(frozen=True)
class DispatchInput:
    aircraft: AircraftPerformanceProfile
    route_distance_nm: float
    payload_kg: float
    departure_runway_length_ft: float
    departure_runway_surface: str
    departure_runway_heading: float
    arrival_runway_length_ft: float
    arrival_runway_surface: str
    arrival_runway_heading: float
    departure_metar: Optional[Metar] = None
    arrival_metar: Optional[Metar] = None
    departure_icao: str = ''
    arrival_icao: str = ''
    departure_elevation_ft: float = 0.0
    arrival_elevation_ft: float = 0.0


@dataclass(frozen=True)
class FuelPlan:
    taxi_out_fuel_kg: int           # taxi-out allowance
    trip_fuel_kg: int               # climb + cruise + descent
    contingency_fuel_kg: int        # share of trip fuel
    alternate_fuel_kg: int          # cruise flow for the alternate allowance
    final_reserve_fuel_kg: int      # holding flow for the final reserve
    total_required_kg: int
    block_fuel_kg: int              # total rounded up for loading


@dataclass(frozen=True)
class WeightSummary:
    oew_kg: float
    payload_kg: float
    zfw_kg: float
    block_fuel_kg: int
    tow_kg: float
    trip_fuel_kg: int
    landing_fuel_kg: int
    lw_kg: float


@dataclass(frozen=True)
class CheckResult:
    passed: bool
    value: CheckValue
    limit: CheckValue
    message: str


@dataclass(frozen=True)
class DispatchChecks:
    range: CheckResult
    fuel: CheckResult
    tow_weight: CheckResult
    lw_weight: CheckResult
    zfw_weight: CheckResult
    departure_runway: CheckResult
    arrival_runway: CheckResult
    departure_weather: CheckResult
    arrival_weather: CheckResult
    crosswind: CheckResult

    def as_dict(self) -> Dict[str, CheckResult]:
        """Checks in evaluation order, keyed by name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ComputedSummary:
    trip_fuel_kg: int
    reserve_fuel_kg: int
    block_fuel_kg: int
    tow_kg: float
    lw_kg: float
    range_margin_nm: int
    flight_time_min: int
    fuel_margin_kg: float


@dataclass(frozen=True)
class DispatchResult:
    feasible: bool
    reasons: Tuple[str, ...]
    warnings: Tuple[str, ...]
    computed: ComputedSummary
    fuel_plan: FuelPlan
    weights: WeightSummary
    checks: DispatchChecks

    @property
    def status(self) -> str:
        """GO, CONDITIONAL (feasible with warnings) or NO-GO."""
        if not self.feasible:
            return 'NO-GO'
        return 'CONDITIONAL' if self.warnings else 'GO'
