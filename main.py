"""Command line entry point for the city traffic simulation."""

from __future__ import annotations

import argparse
import logging

from city_traffic import CitySimulation, SimulationConfig
from city_traffic.rules.offroad import DEFAULT_MAX_DIRECTION_ATTEMPTS
from city_traffic.scenarios import load_predefined_scenarios


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--scenario", default="downtown", help="Predefined scenario name")
    parser.add_argument("--ticks", type=int, default=200)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument(
        "--light",
        choices=["red", "yellow", "green"],
        default=None,
        help="Override the scenario's signal state",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_DIRECTION_ATTEMPTS,
        help="Random heading draws before a vehicle turns around",
    )
    parser.add_argument("--log-every", type=int, default=25, help="Ticks between progress logs")
    parser.add_argument("--list-scenarios", action="store_true", help="Print scenarios and exit")
    parser.add_argument("--verbose", action="store_true", help="Log individual vehicle events")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.list_scenarios:
        for scenario in load_predefined_scenarios():
            print(f"{scenario.name}: {scenario.description}")
        return

    config = SimulationConfig(
        scenario=args.scenario,
        ticks=args.ticks,
        seed=args.seed,
        light=args.light,
        max_direction_attempts=args.max_attempts,
        log_every=args.log_every,
    )
    try:
        simulation = CitySimulation(config)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))
    simulation.run()


if __name__ == "__main__":
    main()
