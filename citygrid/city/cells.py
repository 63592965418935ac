from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .tiles import DOWN, GRASS


@dataclass(frozen=True)
class Cell:
    """Immutable record for one grid cell.

    Placement routines never mutate a cell; they swap in a new record built
    with ``dataclasses.replace`` so earlier snapshots stay intact.
    """

    type: str
    x: int
    y: int
    is_origin: bool = True
    origin_x: Optional[int] = None
    origin_y: Optional[int] = None
    building_id: Optional[str] = None
    orientation: str = DOWN
    underlying_type: Optional[str] = None

    @classmethod
    def blank(cls, x: int, y: int, tile_type: str = GRASS) -> "Cell":
        return cls(type=tile_type, x=x, y=y, is_origin=True, origin_x=x, origin_y=y)

    @property
    def origin(self) -> Tuple[int, int]:
        if self.origin_x is None or self.origin_y is None:
            return (self.x, self.y)
        return (self.origin_x, self.origin_y)

    @property
    def occupied(self) -> bool:
        return self.building_id is not None

    def to_dict(self) -> Dict[str, Any]:
        ox, oy = self.origin
        data: Dict[str, Any] = {
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "isOrigin": self.is_origin,
            "originX": ox,
            "originY": oy,
        }
        if self.building_id is not None:
            data["buildingId"] = self.building_id
            data["buildingOrientation"] = self.orientation
        if self.underlying_type is not None:
            data["underlyingTileType"] = self.underlying_type
        return data
