"""Random arrivals drawn from a uniform distribution."""

from __future__ import annotations

from typing import List

import numpy as np

from .base import ArrivalSource


class UniformArrivals(ArrivalSource):
    """Draw each lane's arrivals uniformly from ``0..max_per_lane``.

    The generator is owned by the instance so two sources built with the same
    seed produce the same arrival sequence.
    """

    def __init__(
        self,
        max_per_lane: int = 3,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_per_lane < 0:
            raise ValueError("max_per_lane must be non-negative")
        self.max_per_lane = max_per_lane
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def next_arrivals(self, lane_count: int) -> List[int]:
        draws = self.rng.integers(0, self.max_per_lane, size=lane_count, endpoint=True)
        return [int(value) for value in draws]
