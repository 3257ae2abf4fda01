"""Aggregate statistics derived from an intersection snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from ..simulation.intersection import IntersectionSnapshot


@dataclass(slots=True)
class SimulationStatistics:
    """Totals across all lanes at the time the snapshot was taken."""

    name: str
    cycles: int
    total_served: int = 0
    total_wait_seconds: int = 0
    average_wait_per_vehicle: float = 0.0

    @classmethod
    def from_snapshot(cls, snapshot: IntersectionSnapshot) -> "SimulationStatistics":
        total_served = sum(lane.served for lane in snapshot.lanes)
        total_wait = sum(lane.total_wait_seconds for lane in snapshot.lanes)
        average = total_wait / total_served if total_served > 0 else 0.0
        return cls(
            name=snapshot.name,
            cycles=snapshot.cycles_completed,
            total_served=total_served,
            total_wait_seconds=total_wait,
            average_wait_per_vehicle=average,
        )
