"""gnomonic_projection.core.engine.geographiclib_engine

Geodesic engine backed by GeographicLib (``geographiclib`` on PyPI).

GeographicLib uses the same capability bit values as
``gnomonic_projection.core.models.capabilities``, so masks are passed
through unchanged. ``Geodesic`` and ``GeodesicLine`` objects are immutable
after construction, which makes the adapter safe to share between threads.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from geographiclib.geodesic import Geodesic

from ..models.capabilities import Capability
from ..models.ellipsoid import Ellipsoid, WGS84
from .base import GeodesicEngine, GeodesicLine, GeodesicSample, InverseSolution


def _sample_from_dict(data: Dict[str, Any]) -> GeodesicSample:
    return GeodesicSample(
        lat2=data.get("lat2"),
        lon2=data.get("lon2"),
        azi2=data.get("azi2"),
        s12=data.get("s12"),
        reduced_length=data.get("m12"),
        geodesic_scale=data.get("M12"),
        geodesic_scale_21=data.get("M21"),
        area=data.get("S12"),
    )


class GeographicLibLine(GeodesicLine):
    """Wrapper around ``geographiclib.geodesicline.GeodesicLine``."""

    def __init__(self, line: Any):
        self._line = line

    @property
    def capabilities(self) -> int:
        return self._line.caps

    def position(self, s12: float, mask: int) -> GeodesicSample:
        return _sample_from_dict(self._line.Position(s12, int(mask)))


class GeographicLibEngine(GeodesicEngine):
    """
    Geodesic engine using GeographicLib's series solution.

    Args:
        ellipsoid: Ellipsoid to work on (default: WGS84)
    """

    def __init__(self, ellipsoid: Optional[Ellipsoid] = None):
        self._ellipsoid = ellipsoid or WGS84
        self._geod = Geodesic(self._ellipsoid.equatorial_radius, self._ellipsoid.flattening)

    @classmethod
    def wgs84(cls) -> 'GeographicLibEngine':
        """Engine for the WGS84 ellipsoid."""
        return cls(WGS84)

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float,
                mask: int = Capability.STANDARD) -> InverseSolution:
        data = self._geod.Inverse(lat1, lon1, lat2, lon2, int(mask))
        return InverseSolution(
            lat1=data["lat1"],
            lon1=data["lon1"],
            lat2=data["lat2"],
            lon2=data["lon2"],
            a12=data.get("a12"),
            azi1=data.get("azi1"),
            azi2=data.get("azi2"),
            s12=data.get("s12"),
            reduced_length=data.get("m12"),
            geodesic_scale=data.get("M12"),
            geodesic_scale_21=data.get("M21"),
            area=data.get("S12"),
        )

    def line(self, lat1: float, lon1: float, azi1: float,
             mask: int = Capability.STANDARD | Capability.DISTANCE_IN) -> GeographicLibLine:
        return GeographicLibLine(self._geod.Line(lat1, lon1, azi1, int(mask)))

    def __repr__(self) -> str:
        return f"GeographicLibEngine({self._ellipsoid!r})"
