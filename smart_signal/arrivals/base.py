"""Arrival source abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class ArrivalSource(ABC):
    """Abstract interface for anything that can feed vehicles into the lanes."""

    @abstractmethod
    def next_arrivals(self, lane_count: int) -> List[int]:
        """Return the number of vehicles joining each lane before the next cycle."""

    def close(self) -> None:
        return None
