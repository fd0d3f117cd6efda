from __future__ import annotations

from typing import Dict, Iterable, Type

from .floor_order import FloorOrderDispatcher
from .interface import DispatchOrder, Steppable
from .utils import closest_destination, step_toward

__all__ = [
    "DispatchOrder",
    "FloorOrderDispatcher",
    "Steppable",
    "closest_destination",
    "get_dispatch_order",
    "step_toward",
]


DISPATCH_REGISTRY: Dict[str, Type[DispatchOrder]] = {
    "floor_order": FloorOrderDispatcher,
}


def get_dispatch_order(name: str, elevators: Iterable[Steppable] = ()) -> DispatchOrder:
    cls = DISPATCH_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown dispatch order '{name}'. Available: {', '.join(DISPATCH_REGISTRY)}")
    return cls(elevators)
