# flightleg/airport/selection.py
"""
Runway end selection by wind. Every end of every open runway is scored;
suitable ends come first, then the one with the most headwind.
"""
import logging
from typing import List, Optional, Sequence, Union

from ..weather import calculate_runway_wind_components
from .data_models import Runway, RunwayEnd, SelectedRunway
from .exceptions import RunwayEndNotFoundError

logger = logging.getLogger(__name__)


def find_opposite_end(runway: Runway, designator: str) -> RunwayEnd:
    for end in runway.ends:
        if end.designator != designator:
            return end
    raise RunwayEndNotFoundError(designator)


def find_end(runway: Runway, designator: str) -> RunwayEnd:
    for end in runway.ends:
        if end.designator.upper() == designator.upper():
            return end
    raise RunwayEndNotFoundError(designator, message="No runway end")


def evaluate_runway_end(runway: Runway, end: RunwayEnd, wind_direction: Union[float, str], wind_speed_kts: float,
                        required_length_ft: float, max_crosswind_kts: float, max_tailwind_kts: float) -> SelectedRunway:
    components = calculate_runway_wind_components(end.heading_deg, wind_direction, wind_speed_kts)
    issues = []
    if runway.length_ft < required_length_ft:
        issues.append(f"Runway too short: {runway.length_ft}ft < {required_length_ft}ft required")
    if components['crosswind'] > max_crosswind_kts:
        issues.append(f"Crosswind {components['crosswind']}kt exceeds limit {max_crosswind_kts}kt")
    if components['tailwind'] > max_tailwind_kts:
        issues.append(f"Tailwind {components['tailwind']}kt exceeds limit {max_tailwind_kts}kt")
    return SelectedRunway(
        designator=end.designator,
        runway=runway,
        end=end,
        wind_components=components,
        is_suitable=not issues,
        issues=issues,
    )


def rank_runways(runways: Sequence[Runway], wind_direction: Union[float, str], wind_speed_kts: float,
                 required_length_ft: float, max_crosswind_kts: float, max_tailwind_kts: float) -> List[SelectedRunway]:
    candidates = [
        evaluate_runway_end(runway, end, wind_direction, wind_speed_kts,
                            required_length_ft, max_crosswind_kts, max_tailwind_kts)
        for runway in runways if not runway.is_closed
        for end in runway.ends
    ]
    # Stable sort keeps database order between equal candidates
    candidates.sort(key=lambda c: (not c.is_suitable, -c.wind_components['headwind']))
    return candidates


def select_best_runway(runways: Sequence[Runway], wind_direction: Union[float, str], wind_speed_kts: float,
                       required_length_ft: float, max_crosswind_kts: float, max_tailwind_kts: float) -> Optional[SelectedRunway]:
    candidates = rank_runways(runways, wind_direction, wind_speed_kts,
                              required_length_ft, max_crosswind_kts, max_tailwind_kts)
    if not candidates:
        logger.warning("No open runway available for selection")
        return None
    best = candidates[0]
    best.is_preferred = True
    if not best.is_suitable:
        logger.warning(f"Best runway {best.designator} is not suitable: {'; '.join(best.issues)}")
    return best
