"""Flat row-major tile grid with index-based adjacency.

``index = y * width + x`` with row 0 on the north edge. Two indices are
adjacent when they differ by one inside the same row or by exactly one row
width. Walls are stored once per tile side, so opening a passage clears one
bit on each of the two tiles; every mutation goes through :meth:`Grid.open`.
"""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .config import validate_dimensions
from .errors import NotAdjacent
from .tiles import DIRECTIONS, Direction, Tile


class Grid:
    __slots__ = ("width", "height", "tiles")

    def __init__(self, width: int, height: int):
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        self.tiles: List[Tile] = [Tile() for _ in range(width * height)]

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tile(index)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    @property
    def start_index(self) -> int:
        return (self.height // 2) * self.width + self.width // 2

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"tile index {index} outside grid of {len(self.tiles)} tiles")

    def tile(self, index: int) -> Tile:
        self._check(index)
        return self.tiles[index]

    def coords(self, index: int) -> Tuple[int, int]:
        self._check(index)
        return index % self.width, index // self.width

    def index_of(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"coordinate {(x, y)} outside {self.width}x{self.height} grid")
        return y * self.width + x

    def is_boundary(self, index: int) -> bool:
        x, y = self.coords(index)
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def neighbors(self, index: int) -> List[Tuple[int, Direction]]:
        """Return ``(neighbor_index, direction_of_travel)`` for every in-grid neighbor."""
        x, y = self.coords(index)
        out = []
        for d in DIRECTIONS:
            dx, dy = d.delta
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                out.append((ny * self.width + nx, d))
        return out

    def direction_between(self, a: int, b: int) -> Direction:
        self._check(a)
        self._check(b)
        diff = b - a
        if diff == self.width:
            return Direction.SOUTH
        if diff == -self.width:
            return Direction.NORTH
        # Horizontal steps must stay within one row.
        if diff == 1 and a // self.width == b // self.width:
            return Direction.EAST
        if diff == -1 and a // self.width == b // self.width:
            return Direction.WEST
        raise NotAdjacent(a, b)

    def open(self, a: int, b: int) -> None:
        d = self.direction_between(a, b)
        self.tiles[a].clear(d)
        self.tiles[b].clear(d.opposite)

    def is_open(self, a: int, b: int) -> bool:
        d = self.direction_between(a, b)
        return not self.tiles[a].has_wall(d)

    def open_neighbors(self, index: int) -> List[int]:
        tile = self.tile(index)
        return [n for n, d in self.neighbors(index) if not tile.has_wall(d)]

    def open_edge_count(self) -> int:
        # Count each passage once via its east and south sides.
        count = 0
        for i, tile in enumerate(self.tiles):
            x, y = i % self.width, i // self.width
            if x < self.width - 1 and not tile.has_wall(Direction.EAST):
                count += 1
            if y < self.height - 1 and not tile.has_wall(Direction.SOUTH):
                count += 1
        return count

    def mark_room(self, index: int) -> None:
        self.tile(index).room = True

    def wall_masks(self) -> List[int]:
        return [t.walls for t in self.tiles]

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height)
        clone.tiles = [t.copy() for t in self.tiles]
        return clone


__all__ = ["Grid"]
