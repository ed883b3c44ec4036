from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'tiles': 0,
        'passages_opened': 0,
        'backtracks': 0,
        'rooms_requested': 0,
        'rooms_carved': 0,
        'room_duplicates': 0,
        'tree_nodes': 0,
        'max_distance': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
