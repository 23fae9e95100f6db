"""gnomonic_projection.core.solver.gnomonic

Ellipsoidal gnomonic projection (forward and reverse).

The projection is centered at (lat0, lon0). A point at geodesic distance s12
and initial azimuth azi1 from the center lands at distance rho = m12 / M12
from the origin of the tangent plane, in direction azi1. Every geodesic
through the center therefore maps to a straight line.

Forward is closed form: one inverse geodesic query.

Reverse has no closed form. It takes the geodesic from the center whose
initial azimuth is the bearing of (x, y) and solves m12(s) / M12(s) = rho
for the arclength s with a Newton iteration. Beyond rho = a the equivalent
equation M12(s) / m12(s) = 1 / rho is solved instead, which stays well
scaled as the point approaches the singular radius.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..engine.base import GeodesicEngine, GeodesicSample
from ..engine.geographiclib_engine import GeographicLibEngine
from ..models.capabilities import Capability
from ..models.ellipsoid import Ellipsoid, WGS84
from ..models.options import ProjectionOptions
from ..results.projection_result import GnomonicResult, ProjectionStatus
from .geometry import atan2d, polar_to_planar


logger = logging.getLogger(__name__)

FORWARD_CAPABILITIES = Capability.AZIMUTH | Capability.GEODESIC_SCALE | Capability.REDUCED_LENGTH

REVERSE_CAPABILITIES = (
    Capability.LATITUDE
    | Capability.LONGITUDE
    | Capability.AZIMUTH
    | Capability.DISTANCE_IN
    | Capability.REDUCED_LENGTH
    | Capability.GEODESIC_SCALE
)


class Gnomonic:
    """
    Gnomonic projection on an ellipsoid.

    The projector is immutable; ``forward`` and ``reverse`` keep all their
    state in local variables, so one instance can serve several threads as
    long as the engine allows concurrent read-only queries.

    Args:
        engine: Geodesic engine (default: GeographicLib on WGS84)
        options: Solver options (defaults if None)

    Raises:
        InvalidEllipsoidError: If the engine reports an invalid ellipsoid
    """

    def __init__(self, engine: Optional[GeodesicEngine] = None,
                 options: Optional[ProjectionOptions] = None):
        self._engine = engine if engine is not None else GeographicLibEngine.wgs84()
        self._options = options or ProjectionOptions.default()
        # Engines report raw (a, f); validated here.
        self._ellipsoid = Ellipsoid(self._engine.equatorial_radius, self._engine.flattening)
        self._a = self._ellipsoid.equatorial_radius
        self._f = self._ellipsoid.flattening
        logger.debug("Gnomonic projection on %r", self._ellipsoid)

    @classmethod
    def wgs84(cls, options: Optional[ProjectionOptions] = None) -> 'Gnomonic':
        """Projection on the WGS84 ellipsoid."""
        return cls(GeographicLibEngine(WGS84), options)

    @classmethod
    def from_ellipsoid(cls, equatorial_radius: float, flattening: float,
                       options: Optional[ProjectionOptions] = None) -> 'Gnomonic':
        """Projection on an arbitrary ellipsoid, using the GeographicLib engine."""
        return cls(GeographicLibEngine(Ellipsoid(equatorial_radius, flattening)), options)

    @property
    def engine(self) -> GeodesicEngine:
        return self._engine

    @property
    def options(self) -> ProjectionOptions:
        return self._options

    @property
    def equatorial_radius(self) -> float:
        return self._a

    @property
    def flattening(self) -> float:
        return self._f

    @property
    def tolerance(self) -> float:
        """Convergence threshold on the arclength correction (length units)."""
        return self._options.eps * self._a

    def forward(self, lat0: float, lon0: float, lat: float, lon: float) -> GnomonicResult:
        """Project a geographic point onto the plane tangent at (lat0, lon0).

        Args:
            lat0, lon0: Projection center (degrees)
            lat, lon: Point to project (degrees)

        Returns:
            GnomonicResult with x, y (meters), azimuth at the point and rk.
            If the point lies at or beyond the singular radius (M12 <= 0)
            the status is OUT_OF_DOMAIN and x, y are None.
        """
        inv = self._engine.inverse(lat0, lon0, lat, lon, FORWARD_CAPABILITIES)
        result = GnomonicResult(
            lat0=lat0,
            lon0=lon0,
            lat=lat,
            lon=lon,
            azimuth=inv.azi2,
            rk=inv.geodesic_scale,
        )

        if inv.geodesic_scale > 0.0:
            rho = inv.reduced_length / inv.geodesic_scale
            result.x, result.y = polar_to_planar(rho, inv.azi1)
        else:
            result.status = ProjectionStatus.OUT_OF_DOMAIN
            result.message = f"Point beyond the projection limit (M12 = {inv.geodesic_scale:.6g})"
            logger.debug("forward: (%.9f, %.9f) out of domain from (%.9f, %.9f), M12=%g",
                         lat, lon, lat0, lon0, inv.geodesic_scale)

        return result

    def reverse(self, lat0: float, lon0: float, x: float, y: float) -> GnomonicResult:
        """Recover the geographic point from its gnomonic coordinates.

        Args:
            lat0, lon0: Projection center (degrees)
            x, y: Easting and northing on the tangent plane (meters)

        Returns:
            GnomonicResult with lat, lon, azimuth and rk. If the iteration
            does not converge the status is NOT_CONVERGED and those fields
            are None; x and y are always the input values.
        """
        result = GnomonicResult(lat0=lat0, lon0=lon0, x=x, y=y)

        azi0 = atan2d(x, y)
        rho = math.hypot(x, y)
        s = self._a * math.atan(rho / self._a)
        little = rho <= self._a
        if not little:
            rho = 1.0 / rho

        line = self._engine.line(lat0, lon0, azi0, REVERSE_CAPABILITIES)
        tolerance = self.tolerance
        converged = False
        sample: Optional[GeodesicSample] = None

        for it in range(1, self._options.max_iterations + 1):
            sample = line.position(s, REVERSE_CAPABILITIES)
            result.iterations = it
            # One extra query after convergence so the reported sample is
            # taken at the corrected arclength.
            if converged:
                break

            if little:
                denominator = sample.geodesic_scale
            else:
                denominator = sample.reduced_length
            if denominator == 0.0:
                result.message = f"Degenerate geodesic scale at s = {s:.6g}"
                logger.debug("reverse: zero denominator at s=%g (little=%s)", s, little)
                break

            if little:
                ds = (sample.reduced_length / sample.geodesic_scale - rho) * sample.geodesic_scale ** 2
            else:
                ds = (rho - sample.geodesic_scale / sample.reduced_length) * sample.reduced_length ** 2
            s -= ds
            logger.debug("reverse: iteration %d, s=%.6f, ds=%.3e", it, s, ds)

            if abs(ds) <= tolerance:
                converged = True

        if not converged:
            result.status = ProjectionStatus.NOT_CONVERGED
            if result.message is None:
                result.message = f"No convergence after {result.iterations} iterations"
            logger.debug("reverse: (%.3f, %.3f) from (%.9f, %.9f): %s",
                         x, y, lat0, lon0, result.message)
            return result

        result.lat = sample.lat2
        result.lon = sample.lon2
        result.azimuth = sample.azi2
        result.rk = sample.geodesic_scale
        return result

    def __repr__(self) -> str:
        return f"Gnomonic({self._engine!r}, max_iterations={self._options.max_iterations})"
