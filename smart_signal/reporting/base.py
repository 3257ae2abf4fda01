"""Reporter strategy abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

CYCLE_START = "cycle_start"
CYCLE_END = "cycle_end"
FINISHED = "finished"


class Reporter(ABC):
    """Present the state of the simulation as it progresses.

    ``render`` receives a context with an ``event`` key (one of
    ``CYCLE_START``, ``CYCLE_END`` or ``FINISHED``), the 1-based ``cycle``
    number and the current ``snapshot``. ``CYCLE_END`` contexts also carry the
    ``phases`` returned by the engine.
    """

    @abstractmethod
    def render(self, context: Dict[str, object]) -> None:
        """Handle a single simulation event."""

    @abstractmethod
    def close(self) -> None:
        """Dispose of any resources such as windows or files."""
