import pytest

from elevatorsim import Passenger


@pytest.fixture
def make_passenger():
    counter = iter(range(10_000))

    def _make(origin=0, destination=0, arrival_time=0):
        return Passenger(
            passenger_id=next(counter),
            origin=origin,
            destination=destination,
            arrival_time=arrival_time,
        )

    return _make
