"""ASCII view of a maze for terminals and debugging.

Each tile becomes a 2x2 block of characters on a (2W+1)x(2H+1) canvas:
``+`` at corners, ``-``/``|`` for walls, blanks for open passages. Tile
centers show ``S`` (start), ``E`` (exit), ``o`` (room), ``*`` (highlighted
path) or a blank.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .tiles import Direction


def render_ascii(grid, start: Optional[int] = None, exit: Optional[int] = None, path: Iterable[int] = ()) -> str:
    w, h = grid.width, grid.height
    marked = set(path)
    rows: List[List[str]] = [[" "] * (2 * w + 1) for _ in range(2 * h + 1)]
    for ry in range(0, 2 * h + 1, 2):
        for rx in range(0, 2 * w + 1, 2):
            rows[ry][rx] = "+"
    for i, tile in enumerate(grid.tiles):
        x, y = i % w, i // w
        cx, cy = 2 * x + 1, 2 * y + 1
        if tile.has_wall(Direction.NORTH):
            rows[cy - 1][cx] = "-"
        if tile.has_wall(Direction.SOUTH):
            rows[cy + 1][cx] = "-"
        if tile.has_wall(Direction.WEST):
            rows[cy][cx - 1] = "|"
        if tile.has_wall(Direction.EAST):
            rows[cy][cx + 1] = "|"
        if i == start:
            rows[cy][cx] = "S"
        elif i == exit:
            rows[cy][cx] = "E"
        elif i in marked:
            rows[cy][cx] = "*"
        elif tile.room:
            rows[cy][cx] = "o"
    return "\n".join("".join(r) for r in rows)


__all__ = ["render_ascii"]
