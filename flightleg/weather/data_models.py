# flightleg/weather/data_models.py
"""
Already-decoded METAR content. Fetching and decoding reports happens upstream;
these types only carry the fields the dispatch checks and the simulation read.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

VARIABLE_WIND = 'VRB'


def parse_wind_direction(direction: Any) -> Optional[float]:
    """Numeric wind direction in degrees, or None for VRB, VAR, missing or unreadable values."""
    if isinstance(direction, bool):
        return None
    try:
        value = float(direction)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class WindReport:
    direction: Union[float, str]    # degrees true (wind FROM) or 'VRB'
    speed_kts: float
    gust_kts: Optional[float] = None

    @property
    def is_variable(self) -> bool:
        return parse_wind_direction(self.direction) is None

    @property
    def effective_speed_kts(self) -> float:
        """Gust speed when one is reported, otherwise the mean wind."""
        return self.gust_kts if self.gust_kts else self.speed_kts


@dataclass(frozen=True)
class Visibility:
    value: float
    unit: str = 'M'                 # 'SM' or 'M'


@dataclass(frozen=True)
class CloudLayer:
    coverage: str                   # FEW / SCT / BKN / OVC / VV
    base_ft: Optional[float] = None


@dataclass(frozen=True)
class Metar:
    wind: WindReport
    visibility: Visibility
    clouds: Tuple[CloudLayer, ...] = field(default_factory=tuple)
    station: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Metar']:
        """
        Builds a Metar from the decoded structure
        {wind: {direction, speedKts, gustKts?}, visibility: {value, unit}, clouds: [{coverage, baseFt}]}.
        snake_case keys are accepted as well. None stays None (treated as VMC).
        """
        if data is None:
            return None
        wind = data.get('wind') or {}
        vis = data.get('visibility') or {}
        direction = parse_wind_direction(wind.get('direction', 0))
        if direction is None:
            direction = VARIABLE_WIND
        gust = wind.get('gustKts', wind.get('gust_kts'))
        clouds = tuple(
            CloudLayer(
                coverage=str(layer.get('coverage', '')).upper(),
                base_ft=layer.get('baseFt', layer.get('base_ft')),
            )
            for layer in data.get('clouds') or []
        )
        return cls(
            wind=WindReport(
                direction=direction,
                speed_kts=float(wind.get('speedKts', wind.get('speed_kts', 0))),
                gust_kts=float(gust) if gust is not None else None,
            ),
            visibility=Visibility(value=float(vis.get('value', 9999)), unit=str(vis.get('unit', 'M')).upper()),
            clouds=clouds,
            station=data.get('station'),
        )
