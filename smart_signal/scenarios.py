"""Predefined demand scenarios for the signal simulation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .arrivals.scripted import ScriptedArrivals


@dataclass(frozen=True)
class SignalScenario:
    """Describes a repeatable demand pattern for every lane of an intersection."""

    name: str
    description: str
    initial_queues: Tuple[int, ...]
    arrivals: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.initial_queues:
            raise ValueError("A scenario must describe at least one lane")
        width = len(self.initial_queues)
        if any(len(row) != width for row in self.arrivals):
            raise ValueError("Every arrival row must cover all lanes")

    @property
    def lanes(self) -> int:
        return len(self.initial_queues)

    @property
    def cycles(self) -> int:
        return len(self.arrivals)

    def arrival_source(self) -> ScriptedArrivals:
        return ScriptedArrivals(self.arrivals)


def load_predefined_scenarios() -> List[SignalScenario]:
    """Return curated scenarios that cover common demand patterns."""

    morning_rush = SignalScenario(
        name="morning-rush",
        description=(
            "Heavy inbound queue on lane 1 with light side-street demand. "
            "Lane 1 hits the green cap while the others run on base green."
        ),
        initial_queues=(24, 2, 3, 1),
        arrivals=(
            (6, 0, 1, 0),
            (7, 1, 0, 1),
            (5, 0, 1, 0),
            (6, 1, 1, 0),
            (4, 0, 0, 1),
            (3, 1, 0, 0),
        ),
    )

    balanced = SignalScenario(
        name="balanced",
        description=(
            "Light, even traffic on all approaches; useful for checking that "
            "idle lanes still receive their base green."
        ),
        initial_queues=(2, 2, 2, 2),
        arrivals=(
            (1, 1, 1, 1),
            (0, 2, 0, 2),
            (2, 0, 2, 0),
            (1, 1, 1, 1),
        ),
    )

    alternating_surges = SignalScenario(
        name="alternating-surges",
        description=(
            "Demand alternates between the north-south and east-west pairs, "
            "exercising the per-lane green sizing from cycle to cycle."
        ),
        initial_queues=(0, 8, 0, 8),
        arrivals=(
            (8, 0, 8, 0),
            (0, 8, 0, 8),
            (8, 0, 8, 0),
            (0, 8, 0, 8),
        ),
    )

    return [morning_rush, balanced, alternating_surges]


def find_scenario(name: str) -> SignalScenario:
    for scenario in load_predefined_scenarios():
        if scenario.name == name:
            return scenario
    raise KeyError(name)
