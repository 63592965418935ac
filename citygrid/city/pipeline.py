"""City composer.

``City`` runs the generation stages in their fixed order against one shared
grid. Each stage reads the occupancy left by the ones before it (trees only
land on sidewalk no bench or building claimed, flowers only on grass still
open), so the order below is part of the recipe.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from citygrid.logging_utils import get_logger

from .config import CityConfig
from .decorations import create_park, place_benches, place_flowers, place_statues, plant_street_trees
from .document import CityDocument, assemble_document
from .grid import Grid
from .metrics import init_metrics
from .placement import can_place, place_building
from .recipe import Recipe, load_recipe
from .roads import build_road_network

log = get_logger("citygrid.city")


@dataclass
class City:
    config: CityConfig = field(default_factory=CityConfig)
    recipe: Optional[Recipe] = None
    rng: Optional[random.Random] = None

    def __post_init__(self):
        if self.recipe is None:
            self.recipe = load_recipe(self.config.recipe)
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self.enable_metrics = self.config.enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self.grid = Grid.create(self.recipe.width, self.recipe.height)
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def _record(self, values: Dict[str, int]) -> None:
        if self.enable_metrics:
            for key, value in values.items():
                self.metrics[key] += value

    def _run_pipeline(self):
        """Execute the ordered generation stages, timing each when metrics are on."""
        phase_times: Dict[str, int] = {}

        def _phase(label, fn, *a, **k):
            if not self.enable_metrics:
                return fn(*a, **k)
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        start = time.perf_counter()
        recipe = self.recipe
        grid = self.grid
        rng = self.rng

        self._record(_phase('roads', build_road_network, grid, recipe.street_ys, recipe.avenue_xs,
                            recipe.intersections(), recipe.segment_size))
        _phase('buildings', self._place_buildings)
        planted = sum(
            _phase(f'street_trees_{t.line}_{t.side}', plant_street_trees, grid, t.line, t.side,
                   recipe.tree_variants, rng)
            for t in recipe.street_trees
        )
        self._record({'street_trees': planted})
        self._record({'benches': _phase('benches', place_benches, grid, recipe.benches,
                                        recipe.bench_variants, rng)})
        park = recipe.park
        self._record(_phase('park', create_park, grid, park.x, park.y, park.w, park.h,
                            tree_variants=recipe.tree_variants, bench_variants=recipe.bench_variants,
                            rng=rng, fountain_id=recipe.fountain_id))
        self._record({'statues': _phase('statues', place_statues, grid, recipe.statues, recipe.statue_id)})
        self._record({'flowers': _phase('flowers', place_flowers, grid, recipe.flowers, recipe.flower_id)})

        if self.enable_metrics:
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
        log.info(
            event="city_generated",
            recipe=recipe.name,
            seed=self.config.seed,
            buildings=self.metrics.get('buildings_placed'),
            skipped=self.metrics.get('buildings_skipped'),
            runtime_ms=self.metrics.get('runtime_ms'),
        )

    def _place_buildings(self):
        # Overlapping catalog entries are dropped silently; first come wins.
        for spec in self.recipe.buildings:
            if can_place(self.grid, spec.x, spec.y, spec.w, spec.h):
                place_building(self.grid, spec.x, spec.y, spec.w, spec.h, spec.id, spec.facing)
                self._record({'buildings_placed': 1})
            else:
                self._record({'buildings_skipped': 1})
                log.debug(event="building_skipped", building=spec.id, x=spec.x, y=spec.y, w=spec.w, h=spec.h)

    def document(self, timestamp: Optional[int] = None) -> CityDocument:
        return assemble_document(self.grid, self.recipe.scene, timestamp)


def generate_city(config: Optional[CityConfig] = None, rng: Optional[random.Random] = None,
                  timestamp: Optional[int] = None) -> CityDocument:
    """Run the full pipeline once and return the finished document."""
    city = City(config or CityConfig(), rng=rng)
    return city.document(timestamp)


__all__ = ["City", "generate_city"]
