"""Cycle engine for a single signalised intersection."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Sequence, Tuple

from ..timing import LANES, VEHICLE_PASS_PER_SEC, GreenTimePolicy
from .lane import Lane

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 63


@dataclass(frozen=True, slots=True)
class PhaseResult:
    """Outcome of one green phase within a cycle."""

    lane_index: int
    green_seconds: int
    vehicles_served: int


@dataclass(frozen=True, slots=True)
class LaneSnapshot:
    waiting: int
    served: int
    total_wait_seconds: int


@dataclass(frozen=True, slots=True)
class IntersectionSnapshot:
    """Read-only copy of the intersection counters used for reporting."""

    name: str
    cycles_completed: int
    lanes: Tuple[LaneSnapshot, ...]


class Intersection:
    """Fixed-rotation signal with demand-sized green phases.

    Every call to :meth:`advance_cycle` gives each lane exactly one green
    phase, in lane order. A phase lasts ``policy.phase_length(waiting)``
    one-second ticks. On each tick the green lane discharges at most
    ``vehicles_per_second`` vehicles while every other lane accrues one
    vehicle-second of delay per queued vehicle.
    """

    def __init__(
        self,
        name: str,
        lane_count: int = LANES,
        *,
        policy: GreenTimePolicy | None = None,
        vehicles_per_second: int = VEHICLE_PASS_PER_SEC,
    ) -> None:
        if lane_count < 1:
            raise ValueError("an intersection needs at least one lane")
        self.name = name[:NAME_MAX_LENGTH]
        self.policy = policy or GreenTimePolicy()
        self.vehicles_per_second = vehicles_per_second
        self._lanes: List[Lane] = [Lane() for _ in range(lane_count)]
        self._cycles_completed = 0

    @classmethod
    def create(
        cls,
        name: str,
        lane_count: int = LANES,
        *,
        policy: GreenTimePolicy | None = None,
        vehicles_per_second: int = VEHICLE_PASS_PER_SEC,
    ) -> "Intersection":
        return cls(
            name,
            lane_count,
            policy=policy,
            vehicles_per_second=vehicles_per_second,
        )

    @property
    def lanes(self) -> Tuple[Lane, ...]:
        return tuple(self._lanes)

    @property
    def lane_count(self) -> int:
        return len(self._lanes)

    @property
    def cycles_completed(self) -> int:
        return self._cycles_completed

    def set_initial_queue(self, lane_index: int, count: int) -> None:
        """Seed a lane's queue before the first cycle; negatives become zero."""

        self._lanes[lane_index].vehicles_waiting = max(0, count)

    def set_initial_queues(self, counts: Sequence[int]) -> None:
        self._check_width(counts, "initial queues")
        for index, count in enumerate(counts):
            self.set_initial_queue(index, count)

    def advance_cycle(self) -> Tuple[PhaseResult, ...]:
        """Run one full rotation and return a summary of each green phase."""

        phases = []
        for lane_idx, green_lane in enumerate(self._lanes):
            green = self.policy.phase_length(green_lane.vehicles_waiting)
            served = 0
            for _ in range(green):
                served += green_lane.discharge(self.vehicles_per_second)
                for other_idx, lane in enumerate(self._lanes):
                    if other_idx != lane_idx:
                        lane.accrue_wait()
            logger.debug(
                "%s: lane %d green for %ds, served %d", self.name, lane_idx + 1, green, served
            )
            phases.append(PhaseResult(lane_idx, green, served))

        self._cycles_completed += 1
        return tuple(phases)

    def inject_arrivals(self, arrivals: Sequence[int]) -> None:
        """Queue new vehicles on every lane between cycles."""

        self._check_width(arrivals, "arrivals")
        for lane, count in zip(self._lanes, arrivals):
            lane.add_vehicles(count)

    def snapshot(self) -> IntersectionSnapshot:
        return IntersectionSnapshot(
            name=self.name,
            cycles_completed=self._cycles_completed,
            lanes=tuple(
                LaneSnapshot(
                    waiting=lane.vehicles_waiting,
                    served=lane.vehicles_served,
                    total_wait_seconds=lane.total_wait_seconds,
                )
                for lane in self._lanes
            ),
        )

    def _check_width(self, values: Sequence[int], label: str) -> None:
        if len(values) != len(self._lanes):
            raise ValueError(
                f"expected {len(self._lanes)} {label}, got {len(values)}"
            )
