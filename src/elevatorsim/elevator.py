from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, MutableSequence

from dispatch import closest_destination, step_toward

from .passenger import Passenger
from .structures import BoardingPolicy, remove_items

logger = logging.getLogger(__name__)


@dataclass
class Elevator:
    """A greedy elevator that heads for the nearest destination aboard.

    ``passengers`` is the only capacity-bounded container; ``history``
    records every passenger that ever boarded, for reporting.
    """

    elevator_id: int
    capacity: int
    current_floor: int = 0
    boarding: BoardingPolicy = BoardingPolicy.DESTINATION
    passengers: MutableSequence[Passenger] = field(default_factory=list)
    history: MutableSequence[Passenger] = field(default_factory=list)

    def is_full(self) -> bool:
        return len(self.passengers) >= self.capacity

    def load(self, passenger: Passenger, time_step: int) -> bool:
        if self.is_full():
            return False
        self.passengers.append(passenger)
        self.history.append(passenger)
        passenger.record_boarding(time_step)
        if self.boarding.completes_on_boarding:
            passenger.record_completion(time_step)
        return True

    def unload(self, floor_number: int, time_step: int) -> List[Passenger]:
        leaving = [p for p in self.passengers if p.destination == floor_number]
        if not leaving:
            return leaving
        remove_items(self.passengers, leaving)
        for passenger in leaving:
            passenger.record_completion(time_step)
        logger.debug(
            "t=%d elevator %d unloaded %d passenger(s) at floor %d",
            time_step,
            self.elevator_id,
            len(leaving),
            floor_number,
        )
        return leaving

    def choose_target_floor(self) -> int:
        closest = closest_destination(
            self.current_floor, (p.destination for p in self.passengers)
        )
        if closest is None:
            return self.current_floor
        return step_toward(self.current_floor, closest)

    def step(self) -> None:
        self.current_floor = self.choose_target_floor()

    @property
    def direction(self) -> int:
        target = self.choose_target_floor()
        return (target > self.current_floor) - (target < self.current_floor)

    def __iter__(self) -> Iterator[Passenger]:
        return iter(self.passengers)
