"""Document assembler: freezes the finished grid plus scene constants."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .cells import Cell
from .grid import Grid
from .recipe import SceneSettings, VisualSettings


@dataclass(frozen=True)
class CityDocument:
    grid: Tuple[Tuple[Cell, ...], ...]
    character_count: int
    car_count: int
    zoom: float
    visual_settings: VisualSettings
    timestamp: int

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "characterCount": self.character_count,
            "carCount": self.car_count,
            "zoom": self.zoom,
            "visualSettings": self.visual_settings._asdict(),
            "timestamp": self.timestamp,
        }


def assemble_document(grid: Grid, scene: SceneSettings, timestamp: Optional[int] = None) -> CityDocument:
    """Snapshot ``grid`` and wrap it with the scene record.

    ``timestamp`` is milliseconds since the epoch; defaults to now.
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return CityDocument(
        grid=grid.snapshot(),
        character_count=scene.character_count,
        car_count=scene.car_count,
        zoom=scene.zoom,
        visual_settings=scene.visual_settings,
        timestamp=timestamp,
    )


__all__ = ["CityDocument", "assemble_document"]
