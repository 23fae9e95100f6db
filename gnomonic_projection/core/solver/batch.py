"""gnomonic_projection.core.solver.batch

Array front-end for the gnomonic projection.

Inputs are broadcast against each other with numpy, each element is
projected with ``Gnomonic.forward`` / ``Gnomonic.reverse``, and the results
are gathered into float arrays. Undetermined values are NaN in the arrays;
``valid`` tells which elements succeeded, and the per-point
``GnomonicResult`` objects are kept in ``results``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from ..results.projection_result import GnomonicResult, ProjectionStatus
from .gnomonic import Gnomonic


def _as_float(value) -> float:
    return np.nan if value is None else float(value)


@dataclass
class BatchResult:
    """Projection of many points about one or more centers."""

    lat0: np.ndarray
    lon0: np.ndarray
    lat: np.ndarray
    lon: np.ndarray
    x: np.ndarray
    y: np.ndarray
    azimuth: np.ndarray
    rk: np.ndarray
    valid: np.ndarray
    status: np.ndarray
    results: List[GnomonicResult] = field(default_factory=list)

    @property
    def shape(self) -> tuple:
        return self.valid.shape

    @property
    def count_valid(self) -> int:
        return int(np.count_nonzero(self.valid))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary of lists (NaN becomes None)."""
        def as_list(arr: np.ndarray) -> list:
            return [None if np.isnan(v) else float(v) for v in arr.ravel()]

        return {
            "shape": list(self.shape),
            "lat0": as_list(self.lat0),
            "lon0": as_list(self.lon0),
            "lat": as_list(self.lat),
            "lon": as_list(self.lon),
            "x": as_list(self.x),
            "y": as_list(self.y),
            "azimuth": as_list(self.azimuth),
            "rk": as_list(self.rk),
            "valid": [bool(v) for v in self.valid.ravel()],
            "status": [s.value for s in self.status.ravel()],
        }


def _collect(results: List[GnomonicResult], shape: tuple) -> BatchResult:
    def column(name: str) -> np.ndarray:
        return np.array([_as_float(getattr(r, name)) for r in results], dtype=float).reshape(shape)

    status = np.empty(len(results), dtype=object)
    for i, r in enumerate(results):
        status[i] = r.status

    return BatchResult(
        lat0=column("lat0"),
        lon0=column("lon0"),
        lat=column("lat"),
        lon=column("lon"),
        x=column("x"),
        y=column("y"),
        azimuth=column("azimuth"),
        rk=column("rk"),
        valid=np.array([r.status == ProjectionStatus.OK for r in results], dtype=bool).reshape(shape),
        status=status.reshape(shape),
        results=results,
    )


def forward_batch(projection: Gnomonic, lat0, lon0, lat, lon) -> BatchResult:
    """Forward-project arrays of points.

    Args:
        projection: Gnomonic projector
        lat0, lon0: Center(s), scalars or array-likes (degrees)
        lat, lon: Points, scalars or array-likes (degrees)

    Returns:
        BatchResult with the broadcast shape of the inputs
    """
    lat0, lon0, lat, lon = np.broadcast_arrays(
        np.asarray(lat0, dtype=float),
        np.asarray(lon0, dtype=float),
        np.asarray(lat, dtype=float),
        np.asarray(lon, dtype=float),
    )
    results = [
        projection.forward(float(c_lat), float(c_lon), float(p_lat), float(p_lon))
        for c_lat, c_lon, p_lat, p_lon in zip(lat0.ravel(), lon0.ravel(), lat.ravel(), lon.ravel())
    ]
    return _collect(results, lat.shape)


def reverse_batch(projection: Gnomonic, lat0, lon0, x, y) -> BatchResult:
    """Reverse-project arrays of planar coordinates.

    Args:
        projection: Gnomonic projector
        lat0, lon0: Center(s), scalars or array-likes (degrees)
        x, y: Planar coordinates, scalars or array-likes (meters)

    Returns:
        BatchResult with the broadcast shape of the inputs
    """
    lat0, lon0, x, y = np.broadcast_arrays(
        np.asarray(lat0, dtype=float),
        np.asarray(lon0, dtype=float),
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
    )
    results = [
        projection.reverse(float(c_lat), float(c_lon), float(px), float(py))
        for c_lat, c_lon, px, py in zip(lat0.ravel(), lon0.ravel(), x.ravel(), y.ravel())
    ]
    return _collect(results, x.shape)
