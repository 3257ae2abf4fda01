"""Per-approach queue counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Lane:
    """Counters for a single approach of the intersection.

    Attributes
    ----------
    vehicles_waiting:
        Vehicles currently queued at the stop line. Never negative.
    total_wait_seconds:
        Vehicle-seconds of delay accumulated while the lane was red.
    vehicles_served:
        Vehicles that have crossed the stop line since the lane was created.
    """

    vehicles_waiting: int = 0
    total_wait_seconds: int = 0
    vehicles_served: int = 0

    def add_vehicles(self, count: int) -> None:
        """Queue ``count`` more vehicles; negative counts are treated as zero."""

        self.vehicles_waiting += max(0, count)

    def discharge(self, rate: int) -> int:
        """Let up to ``rate`` vehicles leave and return how many did."""

        if self.vehicles_waiting <= 0:
            return 0
        departed = min(rate, self.vehicles_waiting)
        self.vehicles_waiting -= departed
        self.vehicles_served += departed
        return departed

    def accrue_wait(self) -> None:
        # one second of red for every vehicle still in the queue
        if self.vehicles_waiting > 0:
            self.total_wait_seconds += self.vehicles_waiting
