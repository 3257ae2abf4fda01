"""Reporters for simulation progress and final statistics."""

from .base import CYCLE_END, CYCLE_START, FINISHED, Reporter
from .console import ConsoleReporter, format_state
from .stats import SimulationStatistics
from .stats_file import StatsFileReporter, append_statistics, format_statistics_block

__all__ = [
    "CYCLE_END",
    "CYCLE_START",
    "FINISHED",
    "ConsoleReporter",
    "Reporter",
    "SimulationStatistics",
    "StatsFileReporter",
    "append_statistics",
    "format_state",
    "format_statistics_block",
]
