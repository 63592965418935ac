"""Footprint validation and placement of buildings and props.

Validation and placement are deliberately separate: callers check
``can_place`` immediately before ``place_building``. Placement itself always
overwrites.
"""
from __future__ import annotations

from dataclasses import replace

from .cells import Cell
from .grid import Grid
from .tiles import BUILDING, DOWN, GRASS


def can_place(grid: Grid, x: int, y: int, w: int, h: int, ground: str = GRASS) -> bool:
    """True when every cell of the w x h footprint is in bounds and open ground.

    Open ground is grass unless the caller names another bare tile type (the
    park composer validates its fountain against freshly paved park tile).
    """
    for dy in range(h):
        for dx in range(w):
            cell = grid.get(x + dx, y + dy)
            if cell is None or cell.type != ground:
                return False
    return True


def place_building(grid: Grid, x: int, y: int, w: int, h: int, building_id: str, facing: str = DOWN) -> None:
    """Write a multi-cell building anchored at (x, y).

    Only the anchor cell carries ``is_origin``; every covered cell points back
    to the anchor and shares ``building_id``. Cells past the grid edge are dropped.
    """
    for dy in range(h):
        for dx in range(w):
            px, py = x + dx, y + dy
            grid.set(px, py, Cell(
                type=BUILDING,
                x=px,
                y=py,
                is_origin=(dx == 0 and dy == 0),
                origin_x=x,
                origin_y=y,
                building_id=building_id,
                orientation=facing,
            ))


def place_prop(grid: Grid, x: int, y: int, prop_id: str) -> bool:
    """Overlay a single-cell prop, keeping the tile's base type.

    The current base type is copied into ``underlying_type`` on every call.
    Returns False (and does nothing) when (x, y) is off the grid.
    """
    cell = grid.get(x, y)
    if cell is None:
        return False
    grid.set(x, y, replace(
        cell,
        building_id=prop_id,
        is_origin=True,
        underlying_type=cell.type,
        orientation=DOWN,
    ))
    return True


__all__ = ["can_place", "place_building", "place_prop"]
