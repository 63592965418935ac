# Tile constants centralized for modular imports
GRASS = "grass"
ROAD = "road"  # sidewalk ring around the drivable lanes
ASPHALT = "asphalt"
TILE = "tile"  # paved park ground
SNOW = "snow"
BUILDING = "building"

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

FACINGS = frozenset({UP, DOWN, LEFT, RIGHT})

__all__ = [
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
    "FACINGS",
]
