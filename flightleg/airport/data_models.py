# flightleg/airport/data_models.py
"""
Runway structures. A Runway is the physical strip; each of its two RunwayEnds
is a direction of use with its own threshold and declared distances.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..geometry import Coordinate


@dataclass(frozen=True)
class RunwayEnd:
    designator: str
    heading_deg: float                          # true heading of the direction of use
    threshold: Coordinate
    elevation_ft: float = 0.0
    opposite_threshold: Optional[Coordinate] = None
    tora_ft: Optional[float] = None
    toda_ft: Optional[float] = None
    asda_ft: Optional[float] = None
    lda_ft: Optional[float] = None


@dataclass(frozen=True)
class Runway:
    """A physical runway with both ends."""
    airport_icao: str
    ends: Tuple[RunwayEnd, ...]
    length_ft: float
    surface: str = 'ASP'
    width_ft: Optional[float] = None
    status: str = 'OPEN'

    @property
    def is_closed(self) -> bool:
        return self.status.upper() == 'CLOSED'


@dataclass
class SelectedRunway:
    """One runway end chosen for a departure or arrival, with the wind picture that chose it."""
    designator: str
    runway: Runway
    end: RunwayEnd
    wind_components: Dict[str, int] = field(default_factory=lambda: {'headwind': 0, 'crosswind': 0, 'tailwind': 0})
    is_suitable: bool = True
    issues: List[str] = field(default_factory=list)
    is_preferred: bool = False
