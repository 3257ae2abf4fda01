"""Demand-sized signal timing for a simulated intersection."""

from .config import SignalConfig
from .simulation import Intersection, IntersectionSnapshot, Lane, LaneSnapshot, PhaseResult
from .system import SignalSimulation
from .timing import GreenTimePolicy, green_time

__all__ = [
    "GreenTimePolicy",
    "Intersection",
    "IntersectionSnapshot",
    "Lane",
    "LaneSnapshot",
    "PhaseResult",
    "SignalConfig",
    "SignalSimulation",
    "green_time",
]
