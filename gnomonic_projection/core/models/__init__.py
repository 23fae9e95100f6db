"""
Data models for the gnomonic projection.

This module provides the core data structures:
- Capability: Bit-mask vocabulary for geodesic queries
- Ellipsoid: Validated equatorial radius / flattening pair
- ProjectionOptions: Configuration for the inverse solver
"""

from .capabilities import (
    Capability,
    combine,
    includes,
    effective,
    series_bits,
    output_bits,
    describe,
    from_names,
)
from .ellipsoid import Ellipsoid, InvalidEllipsoidError, WGS84
from .options import ProjectionOptions

__all__ = [
    # Capabilities
    "Capability",
    "combine",
    "includes",
    "effective",
    "series_bits",
    "output_bits",
    "describe",
    "from_names",

    # Ellipsoid
    "Ellipsoid",
    "InvalidEllipsoidError",
    "WGS84",

    # Options
    "ProjectionOptions",
]
