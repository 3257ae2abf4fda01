"""Green phase sizing for the signal controller."""

from __future__ import annotations

from dataclasses import dataclass

LANES = 4
BASE_GREEN = 5
MAX_GREEN = 40
SECONDS_PER_VEHICLE = 2
VEHICLE_PASS_PER_SEC = 1


@dataclass(frozen=True, slots=True)
class GreenTimePolicy:
    """Map the number of queued vehicles to a green phase duration.

    The duration grows linearly with demand, ``base_green`` seconds plus
    ``seconds_per_vehicle`` for every waiting vehicle, and is capped at
    ``max_green`` so that a single approach cannot starve the others.
    """

    base_green: int = BASE_GREEN
    max_green: int = MAX_GREEN
    seconds_per_vehicle: int = SECONDS_PER_VEHICLE

    def green_time(self, vehicles_waiting: int) -> int:
        """Return the capped green duration in seconds."""

        seconds = self.base_green + self.seconds_per_vehicle * vehicles_waiting
        return min(seconds, self.max_green)

    def phase_length(self, vehicles_waiting: int) -> int:
        """Return the number of ticks a lane is actually given.

        A lane never gets less than ``base_green``, even with an empty queue.
        """

        return max(self.green_time(vehicles_waiting), self.base_green)


DEFAULT_POLICY = GreenTimePolicy()


def green_time(vehicles_waiting: int) -> int:
    return DEFAULT_POLICY.green_time(vehicles_waiting)
