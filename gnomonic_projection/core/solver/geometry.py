"""gnomonic_projection.core.solver.geometry

Degree-based geometry helpers for the gnomonic projection.

Conventions:
  - Planar coordinates: x = easting, y = northing
  - Azimuth: North = 0, clockwise positive, degrees
  - Polar form (rho, azimuth) with rho >= 0

Implementation detail:
  - Sine/cosine and atan2 in degrees come from GeographicLib's ``Math``,
    which reduces the argument exactly before converting to radians.
  - Azimuth is computed as ``atan2d(x, y)`` (east as y, north as x).
"""

from __future__ import annotations

import math
from typing import Tuple

from geographiclib.geomath import Math


def sincosd(angle: float) -> Tuple[float, float]:
    """Sine and cosine of an angle in degrees."""
    return Math.sincosd(angle)


def atan2d(y: float, x: float) -> float:
    """atan2 in degrees, result in [-180, 180]."""
    return Math.atan2d(y, x)


def normalize_longitude(lon: float) -> float:
    """Reduce a longitude to [-180, 180]."""
    return Math.AngNormalize(lon)


def wrap_360(angle: float) -> float:
    """Normalize angle to [0, 360)."""
    a = angle % 360.0
    # -0.0 % 360 and tiny negatives can land exactly on 360
    if a >= 360.0:
        a -= 360.0
    return a


def polar_to_planar(rho: float, azimuth: float) -> Tuple[float, float]:
    """(rho, azimuth) -> (x, y)."""
    s, c = sincosd(azimuth)
    return (rho * s, rho * c)


def planar_to_polar(x: float, y: float) -> Tuple[float, float]:
    """(x, y) -> (rho, azimuth), azimuth in [-180, 180]."""
    return (math.hypot(x, y), atan2d(x, y))
