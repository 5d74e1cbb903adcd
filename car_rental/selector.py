import random
import logging
from abc import ABC, abstractmethod
from typing import Optional

from .entities import Car, CarCategory
from .errors import InvalidArgumentError, NotFoundError
from .repository.base import CarRepository

logger = logging.getLogger(__name__)


class IndexSource(ABC):
    """Produces an index in ``[0, length)``. Swap implementations to control selection in tests."""

    @abstractmethod
    def pick(self, length: int) -> int:
        pass


class RandomIndexSource(IndexSource):
    """Uniform random index, optionally seeded for reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)

    def pick(self, length: int) -> int:
        return self.random.randrange(length)


class FixedIndexSource(IndexSource):
    """Always returns the same index."""

    def __init__(self, index: int = 0):
        self.index = index

    def pick(self, length: int) -> int:
        return self.index


class CarSelector:
    def __init__(self, repository: CarRepository, index_source: Optional[IndexSource] = None):
        self.repository = repository
        self.index_source = index_source if index_source is not None else RandomIndexSource()

    def choose_random_car(self, category: CarCategory) -> str:
        """Pick one car id from the category pool."""
        if not category.car_ids:
            raise InvalidArgumentError(f"Category {category.id} has no cars to choose from")
        size = len(category.car_ids)
        index = self.index_source.pick(size)
        if not 0 <= index < size:
            raise InvalidArgumentError(f"Index source returned {index!r}, expected 0 <= index < {size}")
        return category.car_ids[index]

    async def select_available_car(self, category: CarCategory) -> Car:
        """
        Choose a car from the category and resolve it through the repository.

        Raises:
            InvalidArgumentError: The category has no car ids.
            NotFoundError: The repository has no record for the chosen id.
        """
        car_id = self.choose_random_car(category)
        car = await self.repository.find(car_id)
        if car is None:
            raise NotFoundError(car_id)
        logger.debug(f"Selected car {car_id} from category {category.id}", extra={"car_id": car_id})
        return car
