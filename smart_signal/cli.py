"""Command line entry point for the smart signal simulation."""

from __future__ import annotations

import argparse
import logging
from typing import List

from .arrivals.base import ArrivalSource
from .arrivals.scripted import ScriptedArrivals
from .arrivals.uniform import UniformArrivals
from .config import SignalConfig
from .prompts import InvalidInputError, prompt_cycle_count, prompt_initial_queues
from .reporting.base import Reporter
from .reporting.console import ConsoleReporter
from .reporting.stats_file import StatsFileReporter
from .scenarios import find_scenario, load_predefined_scenarios
from .system import SignalSimulation
from .timing import BASE_GREEN, LANES, MAX_GREEN

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--name", default="Main_1", help="Intersection label used in reports")
    parser.add_argument("--lanes", type=int, default=LANES)
    parser.add_argument("--cycles", type=int, help="Cycles to simulate (prompted when omitted)")
    parser.add_argument(
        "--initial",
        type=int,
        nargs="+",
        metavar="N",
        help="Initial queue per lane (prompted when omitted)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible arrivals")
    parser.add_argument("--stats-file", default="traffic_stats.txt")
    parser.add_argument("--base-green", type=int, default=BASE_GREEN)
    parser.add_argument("--max-green", type=int, default=MAX_GREEN)
    parser.add_argument("--max-arrivals", type=int, default=3, help="Max arrivals per lane per cycle")
    parser.add_argument("--scenario", help="Run one of the predefined scenarios")
    parser.add_argument("--list-scenarios", action="store_true")
    parser.add_argument("--no-arrivals", action="store_true", help="Disable arrivals between cycles")
    parser.add_argument("--display", action="store_true", help="Show a pygame window")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true", help="Only print warnings and errors")
    verbosity.add_argument("--verbose", action="store_true", help="Log every green phase")
    return parser


def _build_reporters(args: argparse.Namespace, config: SignalConfig) -> List[Reporter]:
    reporters: List[Reporter] = []
    if not args.quiet:
        reporters.append(ConsoleReporter())
    reporters.append(StatsFileReporter(config.stats_path))
    if args.display:
        from .reporting.display import PygameReporter

        reporters.append(PygameReporter())
    return reporters


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level)

    if args.list_scenarios:
        for scenario in load_predefined_scenarios():
            print(f"{scenario.name}: {scenario.description}")
        return 0

    config = SignalConfig(
        name=args.name,
        lanes=args.lanes,
        base_green=args.base_green,
        max_green=args.max_green,
        max_arrivals_per_lane=args.max_arrivals,
        stats_path=args.stats_file,
        seed=args.seed,
    )

    initial = args.initial
    cycles = args.cycles
    arrivals: ArrivalSource | None = None
    if args.scenario:
        try:
            scenario = find_scenario(args.scenario)
        except KeyError:
            logger.error("Unknown scenario %r", args.scenario)
            return 1
        config.lanes = scenario.lanes
        if initial is None:
            initial = list(scenario.initial_queues)
        if cycles is None:
            cycles = scenario.cycles
        arrivals = scenario.arrival_source()
    if args.no_arrivals:
        arrivals = ScriptedArrivals([])

    try:
        config.validate()
        config.ensure_paths()
        if initial is None:
            print(f"Smart Traffic Signal Simulation ({config.lanes} lanes)")
            initial = prompt_initial_queues(config.lanes)
        if cycles is None:
            cycles = prompt_cycle_count()
        elif cycles <= 0:
            raise InvalidInputError(f"number of cycles must be positive, got {cycles}")
        if arrivals is None:
            arrivals = UniformArrivals(config.max_arrivals_per_lane, seed=config.seed)
        simulation = SignalSimulation(
            config, arrivals=arrivals, reporters=_build_reporters(args, config)
        )
        simulation.set_initial_queues(initial)
    except RuntimeError as exc:
        logger.error("Missing dependency: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    simulation.run(cycles)
    return 0
