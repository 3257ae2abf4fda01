"""Plain text status output."""

from __future__ import annotations

import sys
from typing import Dict, List, TextIO

from ..simulation.intersection import IntersectionSnapshot
from .base import CYCLE_END, CYCLE_START, FINISHED, Reporter


def format_state(snapshot: IntersectionSnapshot) -> List[str]:
    """Return the status table printed before and after each cycle."""

    lines = [f"Intersection: {snapshot.name} | Cycles: {snapshot.cycles_completed}"]
    for index, lane in enumerate(snapshot.lanes, start=1):
        lines.append(
            f" Lane {index} -> waiting: {lane.waiting}, served: {lane.served}, "
            f"total_wait_secs: {lane.total_wait_seconds}"
        )
    return lines


class ConsoleReporter(Reporter):
    """Write the intersection state to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.stream)

    def render(self, context: Dict[str, object]) -> None:
        event = context["event"]
        snapshot = context["snapshot"]
        if event == CYCLE_START:
            self._write(["", f"--- Starting cycle {context['cycle']} ---"])
        elif event == FINISHED:
            self._write(["", "Simulation finished. Final state:"])
        elif event != CYCLE_END:
            return
        self._write(format_state(snapshot))  # type: ignore[arg-type]

    def close(self) -> None:
        self.stream.flush()
