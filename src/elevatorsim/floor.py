from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, MutableSequence

from .passenger import Passenger
from .structures import remove_items

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .elevator import Elevator

logger = logging.getLogger(__name__)


@dataclass
class Floor:
    """Represents a floor with a single FIFO waiting queue."""

    number: int
    waiting: MutableSequence[Passenger] = field(default_factory=list)

    def add_passenger(self, passenger: Passenger) -> None:
        self.waiting.append(passenger)

    def has_waiting(self) -> bool:
        return bool(self.waiting)

    def eligible_passengers(self, elevator: "Elevator") -> List[Passenger]:
        return [
            passenger
            for passenger in self.waiting
            if elevator.boarding.eligible(passenger, elevator.current_floor)
        ]

    def board_passengers(self, elevator: "Elevator", time_step: int) -> List[Passenger]:
        """Hand eligible passengers to ``elevator`` in arrival order.

        Passengers the elevator refuses because it is full stay in the
        queue and are offered again on a later visit.
        """
        boarded: List[Passenger] = []
        for passenger in self.eligible_passengers(elevator):
            if elevator.load(passenger, time_step):
                boarded.append(passenger)
        if boarded:
            remove_items(self.waiting, boarded)
            logger.debug(
                "t=%d floor %d boarded %d passenger(s) onto elevator %d",
                time_step,
                self.number,
                len(boarded),
                elevator.elevator_id,
            )
        return boarded

    def __len__(self) -> int:
        return len(self.waiting)
