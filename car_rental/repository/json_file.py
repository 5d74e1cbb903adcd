import json
import asyncio
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .base import CarRepository
from ..entities import Car

logger = logging.getLogger(__name__)


def read_json_list(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a JSON file holding a list of objects, parsing floats as Decimal."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f, parse_float=Decimal)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list in {path}, got {type(data).__name__}")
    return data


class JsonFileCarRepository(CarRepository):
    """
    Car repository reading a JSON list of car objects from disk.

    The file is re-read on every lookup so edits are picked up without a
    restart. Reads run in a worker thread to keep the event loop free.
    """

    def __init__(self, file: Union[str, Path]):
        self.file = Path(file)

    async def find(self, car_id: str) -> Optional[Car]:
        records = await asyncio.to_thread(read_json_list, self.file)
        for record in records:
            if record.get("id") == car_id:
                return Car.model_validate(record)
        logger.debug(f"Car {car_id} not present in {self.file}")
        return None

    async def all(self) -> List[Car]:
        records = await asyncio.to_thread(read_json_list, self.file)
        return [Car.model_validate(record) for record in records]
