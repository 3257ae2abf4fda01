"""Append-only text log of end-of-run statistics."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Dict

from ..simulation.intersection import IntersectionSnapshot
from .base import FINISHED, Reporter
from .stats import SimulationStatistics

logger = logging.getLogger(__name__)


def format_statistics_block(stats: SimulationStatistics, timestamp: float) -> str:
    """Render the human readable block appended to the statistics file."""

    return (
        f"=== Stats for intersection '{stats.name}' at {time.ctime(timestamp)}\n"
        f"Cycles run: {stats.cycles}\n"
        f"Total vehicles served: {stats.total_served}\n"
        f"Total wait seconds (sum over vehicles): {stats.total_wait_seconds}\n"
        f"Average wait time per vehicle: {stats.average_wait_per_vehicle:.2f} seconds\n"
        "\n"
    )


def append_statistics(
    snapshot: IntersectionSnapshot,
    path: str | Path,
    time_func: Callable[[], float] = time.time,
) -> bool:
    """Append the statistics for ``snapshot`` to ``path``.

    Returns ``False`` when the file cannot be written. The failure is logged
    and otherwise ignored so that a finished run is never lost to a bad path.
    """

    stats = SimulationStatistics.from_snapshot(snapshot)
    block = format_statistics_block(stats, time_func())
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(block)
    except OSError as exc:
        logger.error("Could not write statistics to %s: %s", path, exc)
        return False

    logger.info("Statistics saved to %s", path)
    return True


class StatsFileReporter(Reporter):
    """Reporter that persists the final statistics when the run finishes."""

    def __init__(
        self, path: str | Path, time_func: Callable[[], float] | None = None
    ) -> None:
        self.path = Path(path)
        self.time_func = time_func or time.time
        self.saved = False

    def render(self, context: Dict[str, object]) -> None:
        if context["event"] != FINISHED:
            return
        snapshot = context["snapshot"]
        self.saved = append_statistics(snapshot, self.path, self.time_func)  # type: ignore[arg-type]

    def close(self) -> None:  # pragma: no cover - file is closed after each write
        return None
