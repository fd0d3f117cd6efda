from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from .elevator import Elevator

# Reported when no passenger has a ride time: longest falls back to this
# value and shortest falls back to the simulation duration.
EMPTY_LONGEST = 0


@dataclass(frozen=True)
class RideTimeReport:
    count: int
    average: float
    longest: int
    shortest: int
    p95: float


def collect_ride_times(elevators: Iterable[Elevator]) -> List[int]:
    """Ride times of every passenger that ever boarded one of ``elevators``."""
    ride_times: List[int] = []
    for elevator in elevators:
        for passenger in elevator.history:
            if passenger.ride_time is not None:
                ride_times.append(passenger.ride_time)
    return ride_times


def _average(values: List[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _percentile(values: List[int], percentile: float) -> float:
    if not values:
        return 0.0
    sorted_vals = sorted(values)
    k = (len(sorted_vals) - 1) * percentile
    f = math.floor(k)
    c = math.ceil(k)
    if f == c:
        return float(sorted_vals[int(k)])
    d0 = sorted_vals[int(f)] * (c - k)
    d1 = sorted_vals[int(c)] * (k - f)
    return float(d0 + d1)


def summarize(ride_times: List[int], duration: int) -> RideTimeReport:
    return RideTimeReport(
        count=len(ride_times),
        average=_average(ride_times),
        longest=max(ride_times) if ride_times else EMPTY_LONGEST,
        shortest=min(ride_times) if ride_times else duration,
        p95=_percentile(ride_times, 0.95),
    )


def build_report(elevators: Iterable[Elevator], duration: int) -> RideTimeReport:
    return summarize(collect_ride_times(elevators), duration)


def format_report(report: RideTimeReport) -> List[str]:
    return [
        f"Average time: {report.average}",
        f"Longest time: {report.longest}",
        f"Shortest time: {report.shortest}",
    ]
