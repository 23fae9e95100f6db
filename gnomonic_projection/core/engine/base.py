"""
Geodesic engine interface.

The gnomonic projector does not solve geodesic problems itself; it talks to
an engine through the abstract classes below. Any engine that honours this
contract can be plugged in (the GeographicLib adapter, or a scripted mock in
tests).

Conventions:
- Angles: degrees (latitudes, longitudes, azimuths)
- Lengths: same unit as the equatorial radius (meters for WGS84)
- Masks: integers built from ``Capability`` constants; only the fields
  implied by a mask are guaranteed, the others may be None

Thread safety: the projector calls an engine from whichever thread calls
the projector. Engines shared between threads must support concurrent
read-only queries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..models.ellipsoid import Ellipsoid


@dataclass(frozen=True)
class GeodesicSample:
    """
    Position along a geodesic line at arclength s12.

    Attributes:
        lat2: Latitude of the point (degrees)
        lon2: Longitude of the point (degrees)
        azi2: Forward azimuth at the point (degrees)
        s12: Distance from the start of the line
        reduced_length: Reduced length m12
        geodesic_scale: Geodesic scale M12
        geodesic_scale_21: Geodesic scale M21
        area: Area under the geodesic S12
    """

    lat2: Optional[float] = None
    lon2: Optional[float] = None
    azi2: Optional[float] = None
    s12: Optional[float] = None
    reduced_length: Optional[float] = None
    geodesic_scale: Optional[float] = None
    geodesic_scale_21: Optional[float] = None
    area: Optional[float] = None


@dataclass(frozen=True)
class InverseSolution:
    """Solution of the inverse geodesic problem between two points."""

    lat1: float
    lon1: float
    lat2: float
    lon2: float
    a12: Optional[float] = None  # arc length on the auxiliary sphere (degrees)
    azi1: Optional[float] = None
    azi2: Optional[float] = None
    s12: Optional[float] = None
    reduced_length: Optional[float] = None
    geodesic_scale: Optional[float] = None
    geodesic_scale_21: Optional[float] = None
    area: Optional[float] = None


class GeodesicLine(ABC):
    """A geodesic fixed at a start point and azimuth, queried by arclength."""

    @property
    @abstractmethod
    def capabilities(self) -> int:
        """Capability mask the line was constructed with."""

    @abstractmethod
    def position(self, s12: float, mask: int) -> GeodesicSample:
        """
        Evaluate the line at distance s12 from its start point.

        Args:
            s12: Distance along the line
            mask: Requested outputs; effectively ANDed with ``capabilities``

        Returns:
            GeodesicSample with the requested fields populated
        """


class GeodesicEngine(ABC):
    """Solver for geodesic problems on one ellipsoid."""

    @property
    @abstractmethod
    def ellipsoid(self) -> Ellipsoid:
        """Ellipsoid the engine works on."""

    @property
    def equatorial_radius(self) -> float:
        """Equatorial radius a."""
        return self.ellipsoid.equatorial_radius

    @property
    def flattening(self) -> float:
        """Flattening f."""
        return self.ellipsoid.flattening

    @abstractmethod
    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float,
                mask: int) -> InverseSolution:
        """Solve the inverse problem from (lat1, lon1) to (lat2, lon2)."""

    @abstractmethod
    def line(self, lat1: float, lon1: float, azi1: float, mask: int) -> GeodesicLine:
        """Construct a reusable geodesic line from (lat1, lon1) at azimuth azi1."""
