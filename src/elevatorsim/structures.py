from __future__ import annotations

from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, MutableSequence, TypeVar, Union

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .passenger import Passenger

T = TypeVar("T")


class StructureVariant(str, Enum):
    """Backing container for floors, elevators and passenger queues."""

    ARRAY = "array"
    LINKED = "linked"

    @classmethod
    def parse(cls, value: Union[str, "StructureVariant"]) -> "StructureVariant":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "list":
            return cls.LINKED
        return cls(name)

    def new_sequence(self) -> MutableSequence:
        if self is StructureVariant.LINKED:
            return deque()
        return []


class BoardingPolicy(str, Enum):
    """Which waiting passengers an elevator may take on at its floor."""

    # Boards passengers whose destination is the elevator's floor; boarding
    # completes the trip.
    DESTINATION = "destination"
    # Boards passengers waiting at their origin; unloading completes the trip.
    ORIGIN = "origin"

    def eligible(self, passenger: "Passenger", floor_number: int) -> bool:
        if self is BoardingPolicy.ORIGIN:
            return passenger.origin == floor_number
        return passenger.destination == floor_number

    @property
    def completes_on_boarding(self) -> bool:
        return self is BoardingPolicy.DESTINATION


class ArrivalMode(str, Enum):
    """How the arrival tick of a generated passenger is chosen."""

    UNIFORM = "uniform"  # anywhere in [0, duration)
    CURRENT = "current"  # the tick the passenger was generated on


def remove_items(sequence: Union[List[T], Deque[T]], items: List[T]) -> None:
    """Remove each of ``items`` from ``sequence`` by identity, in place."""
    doomed = {id(item) for item in items}
    kept = [item for item in sequence if id(item) not in doomed]
    sequence.clear()
    sequence.extend(kept)
