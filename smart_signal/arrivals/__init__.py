"""Sources of vehicles arriving between signal cycles."""

from .base import ArrivalSource
from .scripted import ScriptedArrivals
from .uniform import UniformArrivals

__all__ = ["ArrivalSource", "ScriptedArrivals", "UniformArrivals"]
