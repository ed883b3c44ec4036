"""Randomized depth-first maze carving and exit selection."""
from __future__ import annotations

import random
from typing import Dict, List, Optional

from mazegen.logging_utils import get_logger

from .config import UNIFORM, DirectionalBias
from .grid import Grid

log = get_logger("mazegen.maze")

_PROGRESS_EVERY = 512


def carve_maze(
    grid: Grid,
    start: int,
    rng: Optional[random.Random] = None,
    bias: DirectionalBias = UNIFORM,
    metrics: Optional[Dict] = None,
) -> List[int]:
    """Turn an all-walled grid into a spanning tree of passages rooted at ``start``.

    Iterative backtracker: the stack holds the current path. At each step an
    unvisited neighbor of the top tile is chosen with probability proportional
    to the bias weight of its direction; when none remain the stack is popped.
    Returns the visitation order, which contains every tile exactly once.
    """
    if rng is None:
        rng = random
    total = len(grid)
    visited = [False] * total
    visited[start] = True
    order = [start]
    stack = [start]
    opened = backtracks = 0
    while stack:
        current = stack[-1]
        candidates = [(n, d) for n, d in grid.neighbors(current) if not visited[n]]
        if not candidates:
            stack.pop()
            backtracks += 1
            continue
        weights = [bias.weight(d) for _, d in candidates]
        nxt, _ = rng.choices(candidates, weights=weights)[0]
        grid.open(current, nxt)
        opened += 1
        visited[nxt] = True
        order.append(nxt)
        stack.append(nxt)
        if len(order) % _PROGRESS_EVERY == 0 and log.enabled_for("debug"):
            log.debug(event="carve_progress", pct=round(100.0 * len(order) / total, 2))
    if metrics is not None:
        metrics["passages_opened"] = metrics.get("passages_opened", 0) + opened
        metrics["backtracks"] = backtracks
    return order


def choose_exit(grid: Grid, rng: Optional[random.Random] = None) -> int:
    """Pick the exit uniformly along the north edge (row 0).

    The boundary wall stays closed; the exit is a distinguished tile, not a hole.
    """
    if rng is None:
        rng = random
    return grid.index_of(rng.randrange(grid.width), 0)


__all__ = ["carve_maze", "choose_exit"]
