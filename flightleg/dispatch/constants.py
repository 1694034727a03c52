# flightleg/dispatch/constants.py
"""
Dispatch policy knobs. These are heuristic planning figures kept for
compatibility with published results, not regulatory values.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DispatchPolicy:
    # ===== FUEL PROFILE =====
    taxi_time_hr: float = 0.25
    climb_distance_nm: float = 80.0
    climb_time_hr: float = 0.35
    descent_distance_nm: float = 100.0
    descent_time_hr: float = 0.4
    contingency_ratio: float = 0.05
    alternate_time_hr: float = 0.5
    final_reserve_time_hr: float = 0.5
    block_fuel_rounding_kg: float = 100.0

    # ===== SAFETY FACTORS =====
    range_factor: float = 0.92
    runway_length_factor: float = 1.15
    departure_min_visibility_m: float = 400.0
    paved_surfaces: Tuple[str, ...] = ('ASP', 'ASPH', 'CON', 'CONC', 'PEM')

    # ===== WARNING MARGINS =====
    low_range_margin_nm: float = 100.0
    low_fuel_margin_kg: float = 500.0
    low_tow_margin_kg: float = 1000.0

    @property
    def climb_time_min(self) -> float:
        return self.climb_time_hr * 60

    @property
    def descent_time_min(self) -> float:
        return self.descent_time_hr * 60


DEFAULT_POLICY = DispatchPolicy()
