"""Result structures for the gnomonic projection."""

from .projection_result import GnomonicResult, ProjectionStatus

__all__ = [
    "GnomonicResult",
    "ProjectionStatus",
]
