"""
Options for the gnomonic projection.

This module defines configuration for the inverse (reverse) projection
solver: the iteration bound and the convergence tolerance.
"""

import math
import sys
from dataclasses import dataclass
from typing import Dict, Any


MACHINE_EPSILON = sys.float_info.epsilon


@dataclass
class ProjectionOptions:
    """
    Configuration options for the gnomonic inverse solver.

    Attributes:
        max_iterations: Maximum number of geodesic-line position queries
            made by the reverse projection (default: 10)
        tolerance_scale: Factor applied to sqrt(machine epsilon) to get the
            relative convergence tolerance Eps (default: 0.01). The solver
            stops once the arclength correction is at most Eps * a.
    """

    max_iterations: int = 10
    tolerance_scale: float = 0.01

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        if not self.tolerance_scale > 0 or not math.isfinite(self.tolerance_scale):
            raise ValueError("tolerance_scale must be positive")

    @property
    def eps(self) -> float:
        """Relative convergence tolerance Eps = tolerance_scale * sqrt(machine epsilon)."""
        return self.tolerance_scale * math.sqrt(MACHINE_EPSILON)

    @classmethod
    def default(cls) -> 'ProjectionOptions':
        """Create options with default values."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "max_iterations": self.max_iterations,
            "tolerance_scale": self.tolerance_scale,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectionOptions':
        """
        Create ProjectionOptions from dictionary.

        Missing keys fall back to defaults, unknown keys are ignored.
        """
        defaults = cls()
        return cls(
            max_iterations=int(data.get("max_iterations", defaults.max_iterations)),
            tolerance_scale=float(data.get("tolerance_scale", defaults.tolerance_scale)),
        )
