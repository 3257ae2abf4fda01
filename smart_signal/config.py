"""Configuration dataclasses for the signal simulation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .timing import (
    BASE_GREEN,
    LANES,
    MAX_GREEN,
    SECONDS_PER_VEHICLE,
    VEHICLE_PASS_PER_SEC,
    GreenTimePolicy,
)


@dataclass(slots=True)
class SignalConfig:
    """Runtime configuration for :class:`smart_signal.system.SignalSimulation`.

    Parameters
    ----------
    name:
        Label of the simulated intersection. Only used for reporting and
        truncated to 63 characters.
    lanes:
        Number of approaches. The order of the lanes is the green rotation.
    base_green, max_green, seconds_per_vehicle:
        Green sizing parameters passed on to :class:`GreenTimePolicy`.
    vehicles_per_second:
        Service rate of a green lane.
    max_arrivals_per_lane:
        Upper bound (inclusive) of the uniform arrival draw between cycles.
    stats_path:
        Text file the final statistics block is appended to.
    seed:
        Seed for the arrival generator. ``None`` draws fresh entropy.
    """

    name: str = "Main_1"
    lanes: int = LANES
    base_green: int = BASE_GREEN
    max_green: int = MAX_GREEN
    seconds_per_vehicle: int = SECONDS_PER_VEHICLE
    vehicles_per_second: int = VEHICLE_PASS_PER_SEC
    max_arrivals_per_lane: int = 3
    stats_path: str | Path = "traffic_stats.txt"
    seed: int | None = None

    def validate(self) -> None:
        """Raise :class:`ValueError` when the timing parameters are unusable."""

        if self.lanes < 1:
            raise ValueError("an intersection needs at least one lane")
        if self.base_green < 1:
            raise ValueError("base_green must be at least one second")
        if self.max_green < self.base_green:
            raise ValueError("max_green must not be shorter than base_green")
        if self.seconds_per_vehicle < 0:
            raise ValueError("seconds_per_vehicle must be non-negative")
        if self.vehicles_per_second < 1:
            raise ValueError("vehicles_per_second must be at least one")
        if self.max_arrivals_per_lane < 0:
            raise ValueError("max_arrivals_per_lane must be non-negative")

    def ensure_paths(self) -> None:
        """Expand ``stats_path`` to an absolute :class:`~pathlib.Path`."""

        self.stats_path = Path(self.stats_path).expanduser().resolve()

    def policy(self) -> GreenTimePolicy:
        return GreenTimePolicy(
            base_green=self.base_green,
            max_green=self.max_green,
            seconds_per_vehicle=self.seconds_per_vehicle,
        )
