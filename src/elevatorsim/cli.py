"""Run the elevator simulation from an optional property file."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .building import Building
from .config import SimulationConfiguration, load_configuration
from .report import format_report
from .simulation import Simulation


def build_simulation(config: SimulationConfiguration) -> Simulation:
    building = Building(
        num_floors=config.num_floors,
        num_elevators=config.num_elevators,
        elevator_capacity=config.elevator_capacity,
        structures=config.structures,
        boarding=config.boarding,
    )
    return Simulation(
        building=building,
        duration=config.duration,
        arrival_probability=config.arrival_probability,
        random_seed=config.seed,
        arrival_mode=config.arrivals,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to a key=value property file (floors, elevators, elevatorCapacity, duration, structures)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = load_configuration(args.config)
    for line in config.describe():
        print(line)
    print()

    simulation = build_simulation(config)
    report = simulation.run()
    for line in format_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
