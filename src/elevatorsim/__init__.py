"""Simulation primitives for the tick-based elevator simulator."""

from .building import Building
from .config import SimulationConfiguration, load_configuration, read_property_file
from .elevator import Elevator
from .floor import Floor
from .passenger import Passenger
from .report import RideTimeReport, build_report
from .simulation import Simulation
from .structures import ArrivalMode, BoardingPolicy, StructureVariant

__all__ = [
    "ArrivalMode",
    "BoardingPolicy",
    "Building",
    "Elevator",
    "Floor",
    "Passenger",
    "RideTimeReport",
    "Simulation",
    "SimulationConfiguration",
    "StructureVariant",
    "build_report",
    "load_configuration",
    "read_property_file",
]
