from __future__ import annotations

from typing import Callable, List, Protocol


class Steppable(Protocol):
    """Anything the dispatch order can rank and advance."""

    @property
    def current_floor(self) -> int:
        ...

    def step(self) -> None:
        ...


class DispatchOrder(Protocol):
    """Strategy interface for sequencing elevator moves within a tick."""

    def add(self, elevator: Steppable) -> None:
        ...

    def order(self) -> List[Steppable]:
        """Return the elevators in the order the next cycle will move them."""
        ...

    def advance(self, move: Callable[[Steppable], None]) -> List[Steppable]:
        """
        Apply ``move`` once to every elevator, in dispatch order.

        Returns the elevators in the order they were moved.
        """
        ...

    def __len__(self) -> int:
        ...
