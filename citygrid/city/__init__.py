"""Public city generation package interface."""

from .cells import Cell
from .config import CityConfig
from .decorations import create_park, place_benches, place_flowers, place_statues, plant_street_trees
from .document import CityDocument, assemble_document
from .grid import Grid
from .pipeline import City, generate_city
from .placement import can_place, place_building, place_prop
from .recipe import Recipe, list_recipes, load_recipe
from .roads import SEGMENT_SIZE, build_road_network, place_segment, road_pattern
from .tiles import ASPHALT, BUILDING, DOWN, GRASS, LEFT, RIGHT, ROAD, SNOW, TILE, UP  # noqa: F401

__all__ = [
    "Cell",
    "CityConfig",
    "City",
    "CityDocument",
    "Grid",
    "Recipe",
    "assemble_document",
    "generate_city",
    "load_recipe",
    "list_recipes",
    "can_place",
    "place_building",
    "place_prop",
    "place_segment",
    "road_pattern",
    "build_road_network",
    "SEGMENT_SIZE",
    "plant_street_trees",
    "place_benches",
    "create_park",
    "place_statues",
    "place_flowers",
    "GRASS",
    "ROAD",
    "ASPHALT",
    "TILE",
    "SNOW",
    "BUILDING",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
]
