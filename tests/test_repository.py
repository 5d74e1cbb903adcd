import json
import tempfile
import unittest
from pathlib import Path

from car_rental.entities import Car
from car_rental.repository import InMemoryCarRepository, JsonFileCarRepository

MOCKS = Path(__file__).parent / "mocks"


class TestJsonFileCarRepository(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.repository = JsonFileCarRepository(MOCKS / "cars.json")

    async def test_find_existing_car(self):
        car = await self.repository.find("2b4fbd2d-8b8c-4c44-9c52-9a1b5c8f3a01")
        self.assertEqual(car.name, "Gol")
        self.assertTrue(car.gas_available)

    async def test_find_missing_car_returns_none(self):
        self.assertIsNone(await self.repository.find("does-not-exist"))

    async def test_all(self):
        cars = await self.repository.all()
        self.assertEqual(len(cars), 3)

    async def test_non_list_file_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cars.json"
            path.write_text(json.dumps({"id": "c1"}), encoding="utf-8")
            with self.assertRaises(ValueError):
                await JsonFileCarRepository(path).find("c1")


class TestInMemoryCarRepository(unittest.IsolatedAsyncioTestCase):
    async def test_add_and_find(self):
        repository = InMemoryCarRepository()
        repository.add(Car(id="c1"))
        self.assertEqual((await repository.find("c1")).id, "c1")
        self.assertIsNone(await repository.find("c2"))


if __name__ == "__main__":
    unittest.main()
