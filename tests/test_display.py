"""Headless checks of the pygame queue view."""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

try:  # pragma: no cover - optional test dependency
    import pygame
except ImportError:  # pragma: no cover - gracefully handle headless environments
    pygame = None

from smart_signal.reporting import CYCLE_END, CYCLE_START, FINISHED
from smart_signal.reporting.display import longest_green_lane
from smart_signal.simulation import Intersection, PhaseResult


def test_longest_green_lane_picks_first_of_ties():
    assert longest_green_lane(()) is None
    assert longest_green_lane(
        (PhaseResult(0, 11, 3), PhaseResult(1, 5, 0), PhaseResult(2, 40, 40), PhaseResult(3, 7, 1))
    ) == 2
    assert longest_green_lane((PhaseResult(0, 5, 0), PhaseResult(1, 5, 0))) == 0


@pytest.mark.skipif(pygame is None, reason="display reporter requires pygame")
def test_pygame_reporter_renders_cycle_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from smart_signal.reporting.display import PygameReporter

    reporter = PygameReporter(width=320, height=240, fps=1000)
    intersection = Intersection("Display")
    intersection.set_initial_queues([3, 0, 50, 1])
    try:
        reporter.render({"event": CYCLE_START, "cycle": 1, "snapshot": intersection.snapshot()})
        phases = intersection.advance_cycle()
        reporter.render(
            {
                "event": CYCLE_END,
                "cycle": 1,
                "snapshot": intersection.snapshot(),
                "phases": phases,
            }
        )
        assert longest_green_lane(reporter._phases) == 2
        reporter.render({"event": FINISHED, "cycle": 1, "snapshot": intersection.snapshot()})
    finally:
        reporter.close()
