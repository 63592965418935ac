"""Decoration passes: street trees, benches, the park, statues and flowers.

Variant choices draw from an injected ``random.Random`` so cosmetic output can
be seeded without affecting structure. Each pass returns how many items it
placed so the composer can record metrics.
"""
from __future__ import annotations

import random
from dataclasses import replace
from typing import Dict, Iterable, Sequence, Tuple

from .grid import Grid
from .placement import can_place, place_building, place_prop
from .tiles import DOWN, GRASS, ROAD, TILE

SIDE_OFFSETS = {"north": 0, "south": 3, "west": 0, "east": 3}
HORIZONTAL_SIDES = frozenset({"north", "south"})

FOUNTAIN_SIZE = (2, 2)
STATUE_SIZE = (1, 2)


def _free_on(grid: Grid, x: int, y: int, tile_type: str) -> bool:
    cell = grid.get(x, y)
    return cell is not None and cell.type == tile_type and not cell.occupied


def plant_street_trees(grid: Grid, line: int, side: str, variants: Sequence[str], rng: random.Random) -> int:
    """Plant trees every second cell along one sidewalk of a street or avenue.

    ``line`` is the street's y (north/south sides) or the avenue's x
    (west/east sides). Only bare sidewalk cells receive a tree.
    """
    if side not in SIDE_OFFSETS:
        raise ValueError(f"unknown street side {side!r}")
    offset = SIDE_OFFSETS[side]
    planted = 0
    if side in HORIZONTAL_SIDES:
        ty = line + offset
        positions = ((x, ty) for x in range(0, grid.width, 2))
    else:
        tx = line + offset
        positions = ((tx, y) for y in range(0, grid.height, 2))
    for x, y in positions:
        if _free_on(grid, x, y, ROAD):
            place_prop(grid, x, y, rng.choice(variants))
            planted += 1
    return planted


def place_benches(grid: Grid, positions: Iterable[Tuple[int, int]], variants: Sequence[str],
                  rng: random.Random) -> int:
    placed = 0
    for x, y in positions:
        if _free_on(grid, x, y, ROAD):
            place_prop(grid, x, y, rng.choice(variants))
            placed += 1
    return placed


def create_park(grid: Grid, x: int, y: int, w: int, h: int, *, tree_variants: Sequence[str],
                bench_variants: Sequence[str], rng: random.Random,
                fountain_id: str = "fountain") -> Dict[str, int]:
    """Lay out a park over the w x h rectangle at (x, y).

    Steps, in order:
      * grass inside the rectangle becomes paved park tile (other tiles untouched)
      * a 2x2 fountain goes in the middle if that footprint is all bare park tile
      * a bench lands on each inset corner without an occupancy check
      * ``(w*h)//8`` random interior picks each get a tree if the cell is still
        bare park tile; misses are not retried
    """
    stats = {"park_tiles": 0, "fountains": 0, "park_benches": 0, "park_trees": 0}

    for dy in range(h):
        for dx in range(w):
            px, py = x + dx, y + dy
            cell = grid.get(px, py)
            if cell is not None and cell.type == GRASS:
                grid.set(px, py, replace(cell, type=TILE))
                stats["park_tiles"] += 1

    fw, fh = FOUNTAIN_SIZE
    cx = x + w // 2 - 1
    cy = y + h // 2 - 1
    if can_place(grid, cx, cy, fw, fh, ground=TILE):
        place_building(grid, cx, cy, fw, fh, fountain_id, DOWN)
        stats["fountains"] += 1

    corners = [
        (x + 1, y + 1),
        (x + w - 2, y + 1),
        (x + 1, y + h - 2),
        (x + w - 2, y + h - 2),
    ]
    for bx, by in corners:
        if grid.in_bounds(bx, by):
            place_prop(grid, bx, by, rng.choice(bench_variants))
            stats["park_benches"] += 1

    for _ in range((w * h) // 8):
        tx = x + 1 + int(rng.random() * (w - 2))
        ty = y + 1 + int(rng.random() * (h - 2))
        if _free_on(grid, tx, ty, TILE):
            place_prop(grid, tx, ty, rng.choice(tree_variants))
            stats["park_trees"] += 1
    return stats


def place_statues(grid: Grid, positions: Iterable[Tuple[int, int]], statue_id: str = "statue") -> int:
    sw, sh = STATUE_SIZE
    placed = 0
    for x, y in positions:
        if can_place(grid, x, y, sw, sh):
            place_building(grid, x, y, sw, sh, statue_id, DOWN)
            placed += 1
    return placed


def place_flowers(grid: Grid, positions: Iterable[Tuple[int, int]], flower_id: str = "flower-bush") -> int:
    placed = 0
    for x, y in positions:
        if _free_on(grid, x, y, GRASS):
            place_prop(grid, x, y, flower_id)
            placed += 1
    return placed


__all__ = [
    "SIDE_OFFSETS",
    "plant_street_trees",
    "place_benches",
    "create_park",
    "place_statues",
    "place_flowers",
]
