"""Failure types raised by the maze engine."""
from __future__ import annotations


class MazeError(Exception):
    """Base class for maze generation and query failures."""

    code = "maze_error"


class InvalidDimensions(MazeError, ValueError):
    code = "invalid_dimensions"

    def __init__(self, width, height, minimum: int, maximum: int):
        super().__init__(f"maze dimensions {width}x{height} outside [{minimum}, {maximum}]")
        self.width = width
        self.height = height


class NotAdjacent(MazeError):
    code = "not_adjacent"

    def __init__(self, a: int, b: int):
        super().__init__(f"tiles {a} and {b} are not adjacent")
        self.a = a
        self.b = b


class NotInTree(MazeError, LookupError):
    code = "not_in_tree"

    def __init__(self, index: int):
        super().__init__(f"tile {index} is not in the shortest-path tree")
        self.index = index


__all__ = ["MazeError", "InvalidDimensions", "NotAdjacent", "NotInTree"]
