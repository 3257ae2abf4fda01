"""High level orchestration of a simulation run."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .arrivals.base import ArrivalSource
from .arrivals.uniform import UniformArrivals
from .config import SignalConfig
from .reporting.base import CYCLE_END, CYCLE_START, FINISHED, Reporter
from .reporting.console import ConsoleReporter
from .simulation.intersection import Intersection, IntersectionSnapshot

logger = logging.getLogger(__name__)


class SignalSimulation:
    """Drive an :class:`Intersection` through a number of cycles.

    Arrivals are injected after every cycle and each registered reporter is
    told about the start and end of every cycle and about the final state.
    """

    def __init__(
        self,
        config: SignalConfig,
        *,
        arrivals: ArrivalSource | None = None,
        reporters: Sequence[Reporter] | None = None,
    ) -> None:
        config.validate()
        self.config = config
        self.intersection = Intersection(
            config.name,
            config.lanes,
            policy=config.policy(),
            vehicles_per_second=config.vehicles_per_second,
        )
        self.arrivals = arrivals or UniformArrivals(
            config.max_arrivals_per_lane, seed=config.seed
        )
        self.reporters: List[Reporter] = (
            list(reporters) if reporters is not None else [ConsoleReporter()]
        )

    def set_initial_queues(self, counts: Sequence[int]) -> None:
        self.intersection.set_initial_queues(counts)

    def _emit(self, context: Dict[str, object]) -> None:
        for reporter in self.reporters:
            reporter.render(context)

    def _run_cycle(self, cycle: int) -> None:
        intersection = self.intersection
        self._emit({"event": CYCLE_START, "cycle": cycle, "snapshot": intersection.snapshot()})
        phases = intersection.advance_cycle()
        intersection.inject_arrivals(self.arrivals.next_arrivals(intersection.lane_count))
        self._emit(
            {
                "event": CYCLE_END,
                "cycle": cycle,
                "snapshot": intersection.snapshot(),
                "phases": phases,
            }
        )

    def run(self, cycles: int) -> IntersectionSnapshot:
        """Run ``cycles`` cycles and return the final snapshot."""

        if cycles < 1:
            raise ValueError("cycles must be a positive number")

        logger.info(
            "Simulating %d cycles at intersection %s (%d lanes)",
            cycles,
            self.intersection.name,
            self.intersection.lane_count,
        )
        try:
            for cycle in range(1, cycles + 1):
                self._run_cycle(cycle)
        except KeyboardInterrupt:
            logger.info(
                "Simulation interrupted by user after %d complete cycles; "
                "lanes may reflect a partially run cycle",
                self.intersection.cycles_completed,
            )

        try:
            final = self.intersection.snapshot()
            self._emit({"event": FINISHED, "cycle": final.cycles_completed, "snapshot": final})
            return final
        finally:
            self.close()

    def close(self) -> None:
        for reporter in self.reporters:
            reporter.close()
        self.arrivals.close()
