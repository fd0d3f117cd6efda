from __future__ import annotations

from typing import Iterable, Optional


def closest_destination(current_floor: int, destinations: Iterable[int]) -> Optional[int]:
    """Return the destination nearest to ``current_floor``.

    Ties keep the first destination seen, so callers control tie-breaking
    through the order they pass destinations in. Returns None when there
    are no destinations.
    """

    closest: Optional[int] = None
    best_distance = 0
    for destination in destinations:
        distance = abs(destination - current_floor)
        if closest is None or distance < best_distance:
            closest = destination
            best_distance = distance
    return closest


def step_toward(current_floor: int, target: int) -> int:
    """Move one floor from ``current_floor`` toward ``target``."""

    direction = (target > current_floor) - (target < current_floor)
    return current_floor + direction
