"""
Gnomonic Projection - ellipsoidal gnomonic map projection

Forward and reverse gnomonic projection centered on an arbitrary point of an
ellipsoid, built on a capability-gated geodesic engine. Every geodesic
through the center of the projection maps to a straight line.

Conventions:
- Angles: Degrees (latitude, longitude, azimuth)
- Azimuth: North = 0, clockwise positive
- Coordinates: Easting (x), Northing (y) on the tangent plane
- Distance: Same unit as the equatorial radius (meters for WGS84)
- Undetermined values: None, with the reason in ``GnomonicResult.status``
"""

import logging

__version__ = "1.0.0"

from .core.models import Capability, Ellipsoid, InvalidEllipsoidError, ProjectionOptions, WGS84
from .core.engine import GeodesicEngine, GeodesicLine, GeographicLibEngine
from .core.results import GnomonicResult, ProjectionStatus
from .core.solver import Gnomonic, BatchResult, forward_batch, reverse_batch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",

    # Models
    "Capability",
    "Ellipsoid",
    "InvalidEllipsoidError",
    "ProjectionOptions",
    "WGS84",

    # Engines
    "GeodesicEngine",
    "GeodesicLine",
    "GeographicLibEngine",

    # Results
    "GnomonicResult",
    "ProjectionStatus",

    # Projection
    "Gnomonic",
    "BatchResult",
    "forward_batch",
    "reverse_batch",
]
