from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional

from dispatch import DispatchOrder, get_dispatch_order

from .elevator import Elevator
from .floor import Floor
from .structures import BoardingPolicy, StructureVariant


@dataclass
class Building:
    """Container for floors and elevators with a per-building dispatch order."""

    num_floors: int
    num_elevators: int = 1
    elevator_capacity: int = 10
    structures: StructureVariant = StructureVariant.ARRAY
    boarding: BoardingPolicy = BoardingPolicy.DESTINATION
    dispatch_name: str = "floor_order"
    floors: MutableSequence[Floor] = field(init=False)
    elevators: MutableSequence[Elevator] = field(init=False)
    dispatcher: DispatchOrder = field(init=False)

    def __post_init__(self) -> None:
        if self.num_floors < 1:
            raise ValueError(f"Building needs at least one floor, got {self.num_floors}")
        if self.num_elevators < 0:
            raise ValueError(f"Elevator count cannot be negative, got {self.num_elevators}")
        self.structures = StructureVariant.parse(self.structures)
        self.boarding = BoardingPolicy(self.boarding)

        self.floors = self.structures.new_sequence()
        for number in range(self.num_floors):
            self.floors.append(Floor(number, waiting=self.structures.new_sequence()))

        self.elevators = self.structures.new_sequence()
        for elevator_id in range(self.num_elevators):
            self.elevators.append(
                Elevator(
                    elevator_id=elevator_id,
                    capacity=self.elevator_capacity,
                    boarding=self.boarding,
                    passengers=self.structures.new_sequence(),
                    history=self.structures.new_sequence(),
                )
            )
        self.dispatcher = get_dispatch_order(self.dispatch_name, self.elevators)

    def get_floor(self, floor_number: int) -> Optional[Floor]:
        if 0 <= floor_number < self.num_floors:
            return self.floors[floor_number]
        return None

    def exchange_passengers(self, current_time: int) -> None:
        """Unload then load every elevator at its floor, in creation order."""
        for elevator in self.elevators:
            elevator.unload(elevator.current_floor, current_time)
            floor = self.get_floor(elevator.current_floor)
            if floor is None:
                continue
            floor.board_passengers(elevator, current_time)

    def advance(self) -> List[Elevator]:
        return self.dispatcher.advance(lambda elevator: elevator.step())

    def snapshot(self) -> dict:
        return {
            "floors": [len(floor) for floor in self.floors],
            "elevators": [
                {
                    "id": elevator.elevator_id,
                    "floor": elevator.current_floor,
                    "direction": elevator.direction,
                    "passenger_count": len(elevator.passengers),
                    "served": len(elevator.history),
                }
                for elevator in self.elevators
            ],
        }
