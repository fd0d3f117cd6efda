from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Passenger:
    """Represents a rider waiting on a floor or travelling in an elevator."""

    passenger_id: int
    origin: int
    destination: int
    arrival_time: int
    board_time: Optional[int] = None
    completion_time: Optional[int] = None

    def record_boarding(self, time_step: int) -> None:
        self.board_time = time_step

    def record_completion(self, time_step: int) -> bool:
        """Stamp the completion tick once; later stamps are ignored."""
        if self.completion_time is not None:
            return False
        self.completion_time = time_step
        return True

    @property
    def completed(self) -> bool:
        return self.completion_time is not None

    @property
    def wait_time(self) -> Optional[int]:
        if self.board_time is None:
            return None
        return self.board_time - self.arrival_time

    @property
    def ride_time(self) -> Optional[int]:
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time
