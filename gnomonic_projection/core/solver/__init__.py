"""gnomonic_projection.core.solver

Gnomonic forward/reverse projection and its array front-end.
"""

from .gnomonic import Gnomonic, FORWARD_CAPABILITIES, REVERSE_CAPABILITIES
from .batch import BatchResult, forward_batch, reverse_batch

__all__ = [
    "Gnomonic",
    "FORWARD_CAPABILITIES",
    "REVERSE_CAPABILITIES",
    "BatchResult",
    "forward_batch",
    "reverse_batch",
]
