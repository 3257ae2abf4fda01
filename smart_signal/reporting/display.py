"""Pygame view of the lane queues."""

from __future__ import annotations

import logging
from typing import Dict, Sequence, Tuple

from ..simulation.intersection import IntersectionSnapshot, PhaseResult
from .base import CYCLE_END, FINISHED, Reporter
from .stats import SimulationStatistics

logger = logging.getLogger(__name__)

try:  # pragma: no cover - optional runtime dependency
    import pygame
except Exception as exc:  # pragma: no cover - degrade gracefully
    pygame = None  # type: ignore[assignment]
    _PYGAME_IMPORT_ERROR = exc
else:  # pragma: no cover - environment dependent
    _PYGAME_IMPORT_ERROR = None

COLOR_BACKGROUND = (25, 28, 33)
COLOR_TEXT = (235, 235, 235)
COLOR_BAR = (70, 180, 255)
COLOR_BAR_EDGE = (54, 58, 63)
COLOR_SERVED = (0, 200, 0)
COLOR_WAIT = (230, 210, 0)


def longest_green_lane(phases: Sequence[PhaseResult]) -> int | None:
    """Return the lane that held green longest in the last cycle.

    Ties go to the lane served first in the rotation.
    """

    if not phases:
        return None
    return max(phases, key=lambda phase: (phase.green_seconds, -phase.lane_index)).lane_index


class PygameReporter(Reporter):
    """Draw one queue bar per lane together with the last green durations."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        fps: int = 2,
        max_queue: int = 40,
    ) -> None:
        if pygame is None:
            raise RuntimeError(
                "pygame is required for PygameReporter but could not be imported"
            ) from _PYGAME_IMPORT_ERROR

        pygame.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Smart Signal - Simulation")
        self.clock = pygame.time.Clock()
        self.width = width
        self.height = height
        self.fps = max(1, fps)
        self.max_queue = max(1, max_queue)
        self.font_small = pygame.font.Font(None, 20)
        self.font_label = pygame.font.Font(None, 26)
        self._phases: Tuple[PhaseResult, ...] = ()
        logger.debug("Opened %dx%d pygame window at %d fps", width, height, self.fps)

    def _draw_lanes(self, snapshot: IntersectionSnapshot) -> None:
        count = len(snapshot.lanes)
        margin = 40
        slot = (self.width - 2 * margin) // count
        bar_width = int(slot * 0.6)
        floor = self.height - 120
        ceiling = 120
        greens = {phase.lane_index: phase.green_seconds for phase in self._phases}
        highlighted = longest_green_lane(self._phases)

        for index, lane in enumerate(snapshot.lanes):
            left = margin + index * slot + (slot - bar_width) // 2
            filled = min(lane.waiting, self.max_queue) / self.max_queue
            bar_height = int((floor - ceiling) * filled)
            outline = pygame.Rect(left, ceiling, bar_width, floor - ceiling)
            edge = COLOR_SERVED if index == highlighted else COLOR_BAR_EDGE
            pygame.draw.rect(self.surface, edge, outline, 3, border_radius=6)
            if bar_height:
                bar = pygame.Rect(left, floor - bar_height, bar_width, bar_height)
                pygame.draw.rect(self.surface, COLOR_BAR, bar, border_radius=6)

            label = self.font_label.render(f"Lane {index + 1}", True, COLOR_TEXT)
            self.surface.blit(label, label.get_rect(midtop=(outline.centerx, floor + 10)))
            lines: Sequence[Tuple[str, Tuple[int, int, int]]] = (
                (f"waiting {lane.waiting}", COLOR_TEXT),
                (f"served {lane.served}", COLOR_SERVED),
                (f"wait {lane.total_wait_seconds} veh-s", COLOR_WAIT),
                (f"green {greens.get(index, 0)}s", COLOR_SERVED),
            )
            for row, (text, color) in enumerate(lines):
                surface = self.font_small.render(text, True, color)
                self.surface.blit(
                    surface, surface.get_rect(midtop=(outline.centerx, floor + 36 + row * 18))
                )

    def _draw_stats(self, snapshot: IntersectionSnapshot) -> None:
        stats = SimulationStatistics.from_snapshot(snapshot)
        text_lines = [
            f"{stats.name} | cycles: {stats.cycles}",
            f"served: {stats.total_served}  avg wait: {stats.average_wait_per_vehicle:.2f}s",
        ]
        for idx, text in enumerate(text_lines):
            surface = self.font_label.render(text, True, COLOR_TEXT)
            self.surface.blit(surface, (20, 20 + idx * 28))

    def render(self, context: Dict[str, object]) -> None:
        snapshot = context["snapshot"]
        if context["event"] == CYCLE_END:
            self._phases = tuple(context.get("phases", ()))  # type: ignore[arg-type]

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise KeyboardInterrupt

        self.surface.fill(COLOR_BACKGROUND)
        self._draw_lanes(snapshot)  # type: ignore[arg-type]
        self._draw_stats(snapshot)  # type: ignore[arg-type]
        pygame.display.flip()
        if context["event"] != FINISHED:
            self.clock.tick(self.fps)

    def close(self) -> None:
        if pygame is not None:
            pygame.quit()
