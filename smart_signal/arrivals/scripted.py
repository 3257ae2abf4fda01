"""Deterministic arrivals replayed from a table."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .base import ArrivalSource

logger = logging.getLogger(__name__)


class ScriptedArrivals(ArrivalSource):
    """Replay one row of ``table`` per cycle, then fall back to no arrivals."""

    def __init__(self, table: Sequence[Sequence[int]]) -> None:
        self._rows = [list(row) for row in table]
        self._position = 0

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._rows)

    def next_arrivals(self, lane_count: int) -> List[int]:
        if self.exhausted:
            if self._position == len(self._rows) and self._rows:
                logger.debug("Arrival script exhausted after %d cycles", len(self._rows))
            self._position += 1
            return [0] * lane_count

        row = self._rows[self._position]
        if len(row) != lane_count:
            raise ValueError(
                f"arrival row {self._position} has {len(row)} lanes, expected {lane_count}"
            )
        self._position += 1
        return list(row)
