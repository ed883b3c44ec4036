"""Independent structural checks over a generated maze.

Used by the test-suite and ``scripts/diagnose_seeds.py``; none of this is on
the generation path.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from .tiles import Direction


def bfs_distances(grid, source: int) -> Dict[int, int]:
    """Plain breadth-first step counts from ``source`` over open passages."""
    dist = {source: 0}
    q = deque([source])
    while q:
        cur = q.popleft()
        for n in grid.open_neighbors(cur):
            if n not in dist:
                dist[n] = dist[cur] + 1
                q.append(n)
    return dist


def boundary_leaks(grid) -> List[int]:
    """Indices of boundary tiles missing an outward-facing wall."""
    leaks = []
    w, h = grid.width, grid.height
    for i, tile in enumerate(grid.tiles):
        x, y = i % w, i // w
        outward = []
        if y == 0:
            outward.append(Direction.NORTH)
        if y == h - 1:
            outward.append(Direction.SOUTH)
        if x == 0:
            outward.append(Direction.WEST)
        if x == w - 1:
            outward.append(Direction.EAST)
        if any(not tile.has_wall(d) for d in outward):
            leaks.append(i)
    return leaks


def asymmetric_walls(grid) -> List[tuple]:
    out = []
    for i in range(len(grid)):
        for n, _ in grid.neighbors(i):
            if n > i and grid.is_open(i, n) != grid.is_open(n, i):
                out.append((i, n))
    return out


def analyze(maze, tree=None) -> Dict[str, object]:
    """Summarize structural issues of a finished maze.

    Returns counts/lists under: unreachable, distance_mismatches,
    boundary_leaks, asymmetric_walls, plus open_edges for reference.
    """
    grid = maze.grid
    tree = tree if tree is not None else maze.tree
    reference = bfs_distances(grid, maze.exit)
    unreachable = [i for i in range(len(grid)) if i not in reference]
    mismatches: List[int] = []
    for i, d in reference.items():
        entry: Optional[object] = tree.lookup(i) if i in tree else None
        if entry is None or entry.distance != d:
            mismatches.append(i)
    return {
        "open_edges": grid.open_edge_count(),
        "unreachable": unreachable,
        "distance_mismatches": mismatches,
        "boundary_leaks": boundary_leaks(grid),
        "asymmetric_walls": asymmetric_walls(grid),
    }


__all__ = ["bfs_distances", "boundary_leaks", "asymmetric_walls", "analyze"]
