"""Wall bit constants, travel directions and the grid cell container."""
from __future__ import annotations

from enum import IntFlag
from typing import Dict, Tuple


class Direction(IntFlag):
    """Cardinal directions. Each value doubles as the tile's wall bit for that side."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTA[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# Row 0 is the north edge, so moving north decreases y.
_DELTA = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
ALL_WALLS = 0b1111
NO_WALLS = 0


class Tile:
    """Lightweight container for one maze cell: a wall mask and a room flag."""

    __slots__ = ("walls", "room")

    def __init__(self, walls: int = ALL_WALLS, room: bool = False):
        self.walls = walls
        self.room = room

    def has_wall(self, side: Direction) -> bool:
        return bool(self.walls & int(side))

    def clear(self, side: Direction) -> None:
        self.walls = self.walls & ~int(side) & ALL_WALLS

    def copy(self) -> "Tile":
        return Tile(self.walls, self.room)

    def to_dict(self) -> Dict[str, object]:
        return {"walls": self.walls, "room": self.room}

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.walls == other.walls and self.room == other.room

    def __repr__(self):
        return f"Tile(walls={self.walls:04b}, room={self.room})"


__all__ = ["Direction", "DIRECTIONS", "ALL_WALLS", "NO_WALLS", "Tile"]
