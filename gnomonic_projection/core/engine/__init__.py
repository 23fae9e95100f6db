"""Geodesic engines: the abstract interface and the GeographicLib adapter."""

from .base import GeodesicEngine, GeodesicLine, GeodesicSample, InverseSolution
from .geographiclib_engine import GeographicLibEngine, GeographicLibLine

__all__ = [
    "GeodesicEngine",
    "GeodesicLine",
    "GeodesicSample",
    "InverseSolution",
    "GeographicLibEngine",
    "GeographicLibLine",
]
