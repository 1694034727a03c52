# flightleg/geometry/data_models.py
"""
Value types shared by the geometry kernel and everything built on it.
Both are frozen so they can sit inside the immutable simulation snapshot.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A point on the earth's surface in decimal degrees. No altitude."""
    lat: float
    lon: float


@dataclass(frozen=True)
class RunwayUnitVector:
    """Change in latitude/longitude (degrees) per nautical mile along a runway centerline."""
    d_lat_per_nm: float
    d_lon_per_nm: float

    @property
    def is_zero(self) -> bool:
        return self.d_lat_per_nm == 0.0 and self.d_lon_per_nm == 0.0


ZERO_VECTOR = RunwayUnitVector(0.0, 0.0)
