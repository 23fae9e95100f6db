"""
Ellipsoid parameters.

Conventions:
- equatorial_radius (a): meters for Earth presets, > 0
- flattening (f): dimensionless, in (-1, 1); negative for prolate ellipsoids
"""

import math
from dataclasses import dataclass
from typing import Dict, Any


class InvalidEllipsoidError(ValueError):
    """Raised when ellipsoid parameters are outside their valid range."""


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid defined by equatorial radius and flattening.

    Attributes:
        equatorial_radius: Semi-major axis a
        flattening: Flattening f = (a - b) / a
    """

    equatorial_radius: float
    flattening: float

    def __post_init__(self):
        """Validate parameters after initialization."""
        a = float(self.equatorial_radius)
        f = float(self.flattening)
        if not math.isfinite(a) or a <= 0:
            raise InvalidEllipsoidError(f"Equatorial radius must be positive and finite, got {a}")
        if not math.isfinite(f) or not -1.0 < f < 1.0:
            raise InvalidEllipsoidError(f"Flattening must be in (-1, 1), got {f}")
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "equatorial_radius", a)
        object.__setattr__(self, "flattening", f)

    @property
    def a(self) -> float:
        """Alias for equatorial_radius."""
        return self.equatorial_radius

    @property
    def f(self) -> float:
        """Alias for flattening."""
        return self.flattening

    @property
    def polar_radius(self) -> float:
        """Semi-minor axis b = a (1 - f)."""
        return self.equatorial_radius * (1.0 - self.flattening)

    @property
    def inverse_flattening(self) -> float:
        """1/f, infinite for a sphere."""
        if self.flattening == 0:
            return math.inf
        return 1.0 / self.flattening

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ellipsoid to dictionary."""
        return {
            "equatorial_radius": self.equatorial_radius,
            "flattening": self.flattening,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ellipsoid':
        """
        Create an Ellipsoid from a dictionary.

        Accepts ``a``/``f`` short keys and ``inverse_flattening`` in place
        of ``flattening``.

        Raises:
            KeyError: If the radius or the flattening is missing
            InvalidEllipsoidError: If the values are out of range
        """
        a = data.get("equatorial_radius", data.get("a"))
        if a is None:
            raise KeyError("equatorial_radius")

        if "flattening" in data or "f" in data:
            f = data.get("flattening", data.get("f"))
        elif "inverse_flattening" in data:
            inv_f = float(data["inverse_flattening"])
            f = 0.0 if math.isinf(inv_f) else 1.0 / inv_f
        else:
            raise KeyError("flattening")

        return cls(equatorial_radius=float(a), flattening=float(f))

    def __repr__(self) -> str:
        """Return string representation of the ellipsoid."""
        return f"Ellipsoid(a={self.equatorial_radius:.3f}, 1/f={self.inverse_flattening:.9f})"


WGS84 = Ellipsoid(equatorial_radius=6378137.0, flattening=1 / 298.257223563)
