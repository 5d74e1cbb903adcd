from .base import CarRepository, InMemoryCarRepository
from .json_file import JsonFileCarRepository, read_json_list
