from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional

from .building import Building
from .passenger import Passenger
from .report import RideTimeReport, build_report
from .structures import ArrivalMode

logger = logging.getLogger(__name__)

DEFAULT_ARRIVAL_PROBABILITY = 0.2


class Simulation:
    """Tick-stepped elevator simulation.

    Each tick unloads and loads every elevator at its floor, moves every
    elevator one step in dispatch order, then spawns new passengers.
    """

    def __init__(
        self,
        building: Building,
        duration: int,
        arrival_probability: float = DEFAULT_ARRIVAL_PROBABILITY,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        arrival_mode: ArrivalMode = ArrivalMode.UNIFORM,
    ) -> None:
        self.building = building
        self.duration = max(0, duration)
        self.arrival_probability = arrival_probability
        self.arrival_mode = ArrivalMode(arrival_mode)
        self.random = rng if rng is not None else random.Random(random_seed)
        self.current_time: int = 0
        self.finished = False
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self._next_passenger_id = 0

    @property
    def final_time(self) -> int:
        """Last tick the loop processed, 0 if none ran."""
        return max(0, self.current_time - 1)

    def run(self) -> RideTimeReport:
        while self.current_time < self.duration:
            self.step()
        self.finalize()
        return self.report()

    def step(self) -> None:
        self.building.exchange_passengers(self.current_time)
        self.building.advance()
        self.generate_arrivals()
        if self.event_hooks.get("tick"):
            self._emit("tick", {"time": self.current_time, "building": self.building.snapshot()})
        self.current_time += 1

    def generate_arrivals(self, rng: Optional[random.Random] = None) -> int:
        """Spawn at most one passenger per floor; returns how many spawned."""
        if rng is None:
            rng = self.random
        arrivals = 0
        for floor in self.building.floors:
            if rng.random() >= self.arrival_probability:
                continue
            destination = rng.randrange(self.building.num_floors)
            passenger = Passenger(
                passenger_id=self._next_passenger_id,
                origin=floor.number,
                destination=destination,
                arrival_time=self._arrival_time(rng),
            )
            self._next_passenger_id += 1
            floor.add_passenger(passenger)
            arrivals += 1
        if arrivals:
            logger.debug("t=%d spawned %d passenger(s)", self.current_time, arrivals)
            self._emit("arrival", {"time": self.current_time, "count": arrivals})
        return arrivals

    def finalize(self) -> int:
        """Stamp the final tick on every unfinished passenger an elevator holds."""
        stamped = 0
        final_time = self.final_time
        for elevator in self.building.elevators:
            for passenger in list(elevator.history) + list(elevator):
                if passenger.record_completion(final_time):
                    stamped += 1
        self.finished = True
        logger.debug("finalized %d unfinished passenger(s) at t=%d", stamped, final_time)
        self._emit("finished", {"time": final_time, "report": self.report()})
        return stamped

    def report(self) -> RideTimeReport:
        return build_report(self.building.elevators, self.duration)

    def waiting_count(self) -> int:
        return sum(len(floor) for floor in self.building.floors)

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _arrival_time(self, rng: random.Random) -> int:
        if self.arrival_mode is ArrivalMode.CURRENT or self.duration == 0:
            return self.current_time
        return rng.randrange(self.duration)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
