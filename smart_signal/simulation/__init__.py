"""Lane state and the intersection cycle engine."""

from .intersection import Intersection, IntersectionSnapshot, LaneSnapshot, PhaseResult
from .lane import Lane

__all__ = [
    "Intersection",
    "IntersectionSnapshot",
    "Lane",
    "LaneSnapshot",
    "PhaseResult",
]
