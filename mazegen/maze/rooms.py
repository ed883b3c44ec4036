"""Room carving: fully opened tiles that add cycles to the carved maze."""
from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional

from .grid import Grid


def interior_indices(grid: Grid) -> List[int]:
    return [
        y * grid.width + x
        for y in range(1, grid.height - 1)
        for x in range(1, grid.width - 1)
    ]


def select_room_indices(grid: Grid, start: int, count: int, rng: Optional[random.Random] = None) -> List[int]:
    """Choose ``count`` room tiles: the start first, then uniform interior draws.

    Draws are with replacement, so the same tile can be picked more than once.
    """
    if count <= 0:
        return []
    if rng is None:
        rng = random
    pool = interior_indices(grid)
    return [start] + [rng.choice(pool) for _ in range(count - 1)]


def carve_rooms(grid: Grid, indices: Iterable[int], metrics: Optional[Dict] = None) -> List[int]:
    """Open every non-boundary-facing wall of each selected tile and flag it as a room.

    Idempotent and order independent: re-carving an open tile changes nothing.
    Returns the distinct room indices in first-seen order.
    """
    carved: List[int] = []
    seen = set()
    duplicates = 0
    for index in indices:
        if index in seen:
            duplicates += 1
            continue
        seen.add(index)
        for n, _ in grid.neighbors(index):
            grid.open(index, n)
        grid.mark_room(index)
        carved.append(index)
    if metrics is not None:
        metrics["rooms_carved"] = len(carved)
        metrics["room_duplicates"] = duplicates
    return carved


__all__ = ["interior_indices", "select_room_indices", "carve_rooms"]
