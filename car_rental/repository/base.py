from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..entities import Car


class CarRepository(ABC):
    """
    Lookup contract the rental workflow depends on.

    Implementations may be backed by a file, a database or a remote service;
    the workflow only ever awaits ``find``.
    """

    @abstractmethod
    async def find(self, car_id: str) -> Optional[Car]:
        """Return the car with the given identifier, or None if there is none."""
        pass


class InMemoryCarRepository(CarRepository):
    """Car repository backed by a dictionary keyed on car id."""

    def __init__(self, cars: Iterable[Car] = ()):
        self.cars: Dict[str, Car] = {car.id: car for car in cars}

    def add(self, car: Car):
        self.cars[car.id] = car

    async def find(self, car_id: str) -> Optional[Car]:
        return self.cars.get(car_id)
