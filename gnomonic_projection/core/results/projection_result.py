"""
Result classes for the gnomonic projection.

A projection call always returns a ``GnomonicResult``. Quantities that could
not be determined are None, and ``status`` says why:

- OK: all fields populated
- OUT_OF_DOMAIN: forward projection of a point at or beyond the singular
  radius (M12 <= 0); x and y are None, azimuth and rk are still reported
- NOT_CONVERGED: reverse projection did not converge; lat, lon, azimuth and
  rk are None, x and y keep the caller's input
"""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


def _defined(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


class ProjectionStatus(Enum):
    """Outcome of a single projection call."""
    OK = "ok"
    OUT_OF_DOMAIN = "out_of_domain"
    NOT_CONVERGED = "not_converged"


@dataclass
class GnomonicResult:
    """
    One forward or reverse projection.

    Attributes:
        lat0: Latitude of the projection center (degrees)
        lon0: Longitude of the projection center (degrees)
        lat: Latitude of the point (degrees), None if undetermined
        lon: Longitude of the point (degrees), None if undetermined
        x: Easting of the point (meters), None if undetermined
        y: Northing of the point (meters), None if undetermined
        azimuth: Azimuth of the geodesic at the point (degrees)
        rk: Reciprocal of the azimuthal scale at the point
        status: Outcome of the call
        iterations: Geodesic-line position queries made (reverse only)
        message: Explanation when status is not OK
    """

    lat0: float
    lon0: float
    lat: Optional[float] = None
    lon: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    azimuth: Optional[float] = None
    rk: Optional[float] = None
    status: ProjectionStatus = ProjectionStatus.OK
    iterations: int = 0
    message: Optional[str] = None

    def __post_init__(self):
        """Convert string status to enum if needed."""
        if isinstance(self.status, str):
            self.status = ProjectionStatus(self.status.lower())

    @property
    def success(self) -> bool:
        """True if every field of the result is determined."""
        return self.status == ProjectionStatus.OK

    @property
    def has_planar(self) -> bool:
        """True if x and y are available."""
        return _defined(self.x) and _defined(self.y)

    @property
    def has_geographic(self) -> bool:
        """True if lat and lon are available."""
        return _defined(self.lat) and _defined(self.lon)

    @property
    def rho(self) -> Optional[float]:
        """Distance from the center on the projection plane."""
        if not self.has_planar:
            return None
        return math.hypot(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize result to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "lat0": self.lat0,
            "lon0": self.lon0,
            "lat": _json_safe_value(self.lat),
            "lon": _json_safe_value(self.lon),
            "x": _json_safe_value(self.x),
            "y": _json_safe_value(self.y),
            "azimuth": _json_safe_value(self.azimuth),
            "rk": _json_safe_value(self.rk),
            "status": self.status.value,
            "iterations": self.iterations,
            "message": self.message,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize result to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GnomonicResult':
        """Create GnomonicResult from dictionary."""
        return cls(
            lat0=data["lat0"],
            lon0=data["lon0"],
            lat=data.get("lat"),
            lon=data.get("lon"),
            x=data.get("x"),
            y=data.get("y"),
            azimuth=data.get("azimuth"),
            rk=data.get("rk"),
            status=data.get("status", ProjectionStatus.OK.value),
            iterations=data.get("iterations", 0),
            message=data.get("message"),
        )

    def __repr__(self) -> str:
        """Return string representation of the result."""
        def fmt(value, spec):
            return "None" if value is None else format(value, spec)

        return (
            f"GnomonicResult({self.status.value}, lat={fmt(self.lat, '.9f')}, "
            f"lon={fmt(self.lon, '.9f')}, x={fmt(self.x, '.3f')}, y={fmt(self.y, '.3f')})"
        )
