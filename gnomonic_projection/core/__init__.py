"""
Core module for the gnomonic projection.

This module contains the projection solver, the capability vocabulary and
the geodesic engine interface. It has no GUI or I/O dependencies.
"""

from .models import (
    Capability,
    combine,
    includes,
    effective,
    series_bits,
    output_bits,
    describe,
    from_names,
    Ellipsoid,
    InvalidEllipsoidError,
    WGS84,
    ProjectionOptions,
)

from .engine import (
    GeodesicEngine,
    GeodesicLine,
    GeodesicSample,
    InverseSolution,
    GeographicLibEngine,
)

from .results import GnomonicResult, ProjectionStatus

from .solver import Gnomonic, BatchResult, forward_batch, reverse_batch

__all__ = [
    # Models
    "Capability",
    "combine",
    "includes",
    "effective",
    "series_bits",
    "output_bits",
    "describe",
    "from_names",
    "Ellipsoid",
    "InvalidEllipsoidError",
    "WGS84",
    "ProjectionOptions",

    # Engines
    "GeodesicEngine",
    "GeodesicLine",
    "GeodesicSample",
    "InverseSolution",
    "GeographicLibEngine",

    # Results
    "GnomonicResult",
    "ProjectionStatus",

    # Solvers
    "Gnomonic",
    "BatchResult",
    "forward_batch",
    "reverse_batch",
]
