from __future__ import annotations

import heapq
import itertools
from typing import Callable, Iterable, List, Tuple

from .interface import Steppable


class FloorOrderDispatcher:
    """Moves elevators lowest floor first; ties keep insertion order."""

    def __init__(self, elevators: Iterable[Steppable] = ()) -> None:
        self._heap: List[Tuple[int, int, Steppable]] = []
        self._sequence = itertools.count()
        for elevator in elevators:
            self.add(elevator)

    def add(self, elevator: Steppable) -> None:
        heapq.heappush(self._heap, (elevator.current_floor, next(self._sequence), elevator))

    def order(self) -> List[Steppable]:
        return [entry[2] for entry in sorted(self._heap, key=lambda entry: entry[:2])]

    def advance(self, move: Callable[[Steppable], None]) -> List[Steppable]:
        moved: List[Steppable] = []
        while self._heap:
            _, _, elevator = heapq.heappop(self._heap)
            move(elevator)
            moved.append(elevator)
        # Re-key after the cycle so each elevator moves exactly once.
        for elevator in moved:
            self.add(elevator)
        return moved

    def __len__(self) -> int:
        return len(self._heap)
