"""Interactive prompts for the values the simulation needs to start."""

from __future__ import annotations

from typing import Callable, List

InputFunc = Callable[[str], str]


class InvalidInputError(ValueError):
    """Raised when the operator supplies input the simulation cannot use."""


def parse_count(text: str) -> int:
    """Parse a whole number typed by the operator.

    Negative values are returned unchanged; clamping is up to the caller.
    """

    try:
        return int(text.strip())
    except ValueError:
        raise InvalidInputError(f"not a whole number: {text!r}") from None


def _read(prompt: str, input_func: InputFunc) -> str:
    try:
        return input_func(prompt)
    except EOFError:
        raise InvalidInputError("input ended before a value was entered") from None


def prompt_initial_queues(
    lane_count: int,
    input_func: InputFunc | None = None,
    output: Callable[[str], None] | None = None,
) -> List[int]:
    """Ask for the starting queue of every lane. Negative answers become zero."""

    input_func = input_func or input
    output = output or print
    output(f"Enter initial vehicle count for each of the {lane_count} lanes:")
    counts = []
    for index in range(lane_count):
        value = parse_count(_read(f" Lane {index + 1}: ", input_func))
        counts.append(max(0, value))
    return counts


def prompt_cycle_count(input_func: InputFunc | None = None) -> int:
    input_func = input_func or input
    value = parse_count(
        _read(
            "Enter the number of cycles to simulate (1 cycle = one green for each lane): ",
            input_func,
        )
    )
    if value <= 0:
        raise InvalidInputError(f"number of cycles must be positive, got {value}")
    return value
