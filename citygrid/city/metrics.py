from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'road_segments': 0,
        'intersections': 0,
        'buildings_placed': 0,
        'buildings_skipped': 0,
        'street_trees': 0,
        'benches': 0,
        'park_tiles': 0,
        'fountains': 0,
        'park_benches': 0,
        'park_trees': 0,
        'statues': 0,
        'flowers': 0,
        'runtime_ms': 0,
        'phase_ms': {},
    }
