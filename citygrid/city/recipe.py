"""Declarative city recipes.

A recipe is the literal content of one district: street and avenue lines,
the building catalog, decoration positions and scene constants. Recipes live
as JSON files under ``recipes/`` and are loaded into immutable records so the
composer never touches raw dicts. Catalog order is preserved exactly; the
composer's silent overlap rejection makes the placed building set depend on it.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, NamedTuple, Tuple

from .decorations import SIDE_OFFSETS
from .roads import SEGMENT_SIZE
from .tiles import DOWN, FACINGS

RECIPE_DIR = Path(__file__).resolve().parent / "recipes"


class Point(NamedTuple):
    x: int
    y: int


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


class Line(NamedTuple):
    name: str
    pos: int


class BuildingSpec(NamedTuple):
    id: str
    x: int
    y: int
    w: int
    h: int
    facing: str = DOWN


class TreeLine(NamedTuple):
    line: int
    side: str


class VisualSettings(NamedTuple):
    blueness: float = 0
    contrast: float = 1.0
    saturation: float = 1.0
    brightness: float = 1.0


class SceneSettings(NamedTuple):
    character_count: int = 0
    car_count: int = 0
    zoom: float = 1
    visual_settings: VisualSettings = VisualSettings()


@dataclass(frozen=True)
class Recipe:
    name: str
    width: int
    height: int
    segment_size: int
    streets: Tuple[Line, ...]
    avenues: Tuple[Line, ...]
    buildings: Tuple[BuildingSpec, ...]
    street_trees: Tuple[TreeLine, ...]
    benches: Tuple[Point, ...]
    park: Rect
    statues: Tuple[Point, ...]
    flowers: Tuple[Point, ...]
    tree_variants: Tuple[str, ...]
    bench_variants: Tuple[str, ...]
    fountain_id: str = "fountain"
    statue_id: str = "statue"
    flower_id: str = "flower-bush"
    scene: SceneSettings = SceneSettings()
    description: str = ""

    @property
    def street_ys(self) -> List[int]:
        return [s.pos for s in self.streets]

    @property
    def avenue_xs(self) -> List[int]:
        return [a.pos for a in self.avenues]

    def intersections(self) -> Iterator[Point]:
        for avenue in self.avenues:
            for street in self.streets:
                yield Point(avenue.pos, street.pos)


def _points(raw: List[Dict[str, Any]]) -> Tuple[Point, ...]:
    return tuple(Point(int(p["x"]), int(p["y"])) for p in raw)


def _building(raw: Dict[str, Any]) -> BuildingSpec:
    facing = raw.get("facing", DOWN)
    if facing not in FACINGS:
        raise ValueError(f"building {raw.get('id')!r} has unknown facing {facing!r}")
    return BuildingSpec(str(raw["id"]), int(raw["x"]), int(raw["y"]), int(raw["w"]), int(raw["h"]), facing)


def _tree_line(raw: Dict[str, Any]) -> TreeLine:
    side = raw["side"]
    if side not in SIDE_OFFSETS:
        raise ValueError(f"unknown street tree side {side!r}")
    return TreeLine(int(raw["line"]), side)


def _scene(raw: Dict[str, Any]) -> SceneSettings:
    vs = raw.get("visual_settings", {})
    return SceneSettings(
        character_count=int(raw.get("character_count", 0)),
        car_count=int(raw.get("car_count", 0)),
        zoom=raw.get("zoom", 1),
        visual_settings=VisualSettings(**vs),
    )


def recipe_from_dict(data: Dict[str, Any]) -> Recipe:
    """Build a Recipe from parsed JSON. Missing required keys raise KeyError."""
    park = data["park"]
    return Recipe(
        name=data["name"],
        width=int(data["grid"]["width"]),
        height=int(data["grid"]["height"]),
        segment_size=int(data.get("segment_size", SEGMENT_SIZE)),
        streets=tuple(Line(s["name"], int(s["y"])) for s in data.get("streets", [])),
        avenues=tuple(Line(a["name"], int(a["x"])) for a in data.get("avenues", [])),
        buildings=tuple(_building(b) for b in data.get("buildings", [])),
        street_trees=tuple(_tree_line(t) for t in data.get("street_trees", [])),
        benches=_points(data.get("benches", [])),
        park=Rect(int(park["x"]), int(park["y"]), int(park["w"]), int(park["h"])),
        statues=_points(data.get("statues", [])),
        flowers=_points(data.get("flowers", [])),
        tree_variants=tuple(data["tree_variants"]),
        bench_variants=tuple(data["bench_variants"]),
        fountain_id=data.get("fountain_id", "fountain"),
        statue_id=data.get("statue_id", "statue"),
        flower_id=data.get("flower_id", "flower-bush"),
        scene=_scene(data.get("scene", {})),
        description=data.get("description", ""),
    )


def list_recipes() -> List[str]:
    return sorted(p.stem for p in RECIPE_DIR.glob("*.json"))


_RECIPE_CACHE: Dict[str, Recipe] = {}


def load_recipe(name: str) -> Recipe:
    """Load (and cache) the recipe file ``recipes/<name>.json``."""
    if name in _RECIPE_CACHE:
        return _RECIPE_CACHE[name]
    path = RECIPE_DIR / f"{name}.json"
    if "/" in name or "\\" in name or not path.is_file():
        raise FileNotFoundError(f"no such recipe: {name}")
    with path.open("r", encoding="utf-8") as fh:
        recipe = recipe_from_dict(json.load(fh))
    _RECIPE_CACHE[name] = recipe
    return recipe


__all__ = [
    "Point",
    "Rect",
    "Line",
    "BuildingSpec",
    "TreeLine",
    "VisualSettings",
    "SceneSettings",
    "Recipe",
    "recipe_from_dict",
    "list_recipes",
    "load_recipe",
]
