"""Road network builder.

Streets and avenues are laid as runs of 4x4 segments. Both orientations use the
same ``straight`` pattern (a sidewalk ring around a 2x2 drivable core); the
``intersection`` pattern is stamped last at every avenue/street crossing to
repair the seams left by the two straight passes.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .cells import Cell
from .grid import Grid
from .tiles import ASPHALT, ROAD

SEGMENT_SIZE = 4

_S = ROAD
_A = ASPHALT

ROAD_PATTERNS: Dict[str, List[List[str]]] = {
    "straight": [
        [_S, _S, _S, _S],
        [_S, _A, _A, _S],
        [_S, _A, _A, _S],
        [_S, _S, _S, _S],
    ],
    "intersection": [
        [_S, _A, _A, _S],
        [_A, _A, _A, _A],
        [_A, _A, _A, _A],
        [_S, _A, _A, _S],
    ],
}


def road_pattern(kind: str) -> List[List[str]]:
    """Return the 4x4 pattern for ``kind``; unknown kinds fall back to straight."""
    return ROAD_PATTERNS.get(kind, ROAD_PATTERNS["straight"])


def place_segment(grid: Grid, origin_x: int, origin_y: int, pattern: Sequence[Sequence[str]]) -> int:
    """Stamp ``pattern`` with its top-left at (origin_x, origin_y).

    Cells outside the grid are skipped. Every written cell is its own origin.
    Returns the number of cells written.
    """
    written = 0
    for dy, row in enumerate(pattern):
        for dx, tile_type in enumerate(row):
            px, py = origin_x + dx, origin_y + dy
            if grid.in_bounds(px, py):
                grid.set(px, py, Cell.blank(px, py, tile_type))
                written += 1
    return written


def build_road_network(grid: Grid, street_ys: Sequence[int], avenue_xs: Sequence[int],
                       crossings: Iterable[Tuple[int, int]], segment_size: int = SEGMENT_SIZE) -> Dict[str, int]:
    """Lay horizontal streets, then vertical avenues, then fix intersections.

    ``crossings`` are the (x, y) origins of the avenue/street blocks. The
    intersection pass must run last; it overwrites the crossing blocks the
    straight passes produced.
    """
    straight = road_pattern("straight")
    segments = 0
    for x in range(0, grid.width, segment_size):
        for sy in street_ys:
            place_segment(grid, x, sy, straight)
            segments += 1
    for y in range(0, grid.height, segment_size):
        for ax in avenue_xs:
            place_segment(grid, ax, y, straight)
            segments += 1
    crossing = road_pattern("intersection")
    intersections = 0
    for cx, cy in crossings:
        place_segment(grid, cx, cy, crossing)
        intersections += 1
    return {"road_segments": segments, "intersections": intersections}


__all__ = ["SEGMENT_SIZE", "ROAD_PATTERNS", "road_pattern", "place_segment", "build_road_network"]
