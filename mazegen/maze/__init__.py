"""Public maze package interface."""

from .config import (
    BIAS_PRESETS,
    MAX_MAZE_SIZE,
    MIN_MAZE_SIZE,
    UNIFORM,
    DirectionalBias,
    MazeParams,
)
from .errors import InvalidDimensions, MazeError, NotAdjacent, NotInTree
from .grid import Grid
from .paths import SortedTree, Tree, TreeEntry, build_path_tree
from .pipeline import Maze, generate
from .tiles import DIRECTIONS, Direction, Tile  # noqa: F401

__all__ = [
    "BIAS_PRESETS",
    "MAX_MAZE_SIZE",
    "MIN_MAZE_SIZE",
    "UNIFORM",
    "DirectionalBias",
    "MazeParams",
    "MazeError",
    "InvalidDimensions",
    "NotAdjacent",
    "NotInTree",
    "Grid",
    "Tree",
    "TreeEntry",
    "SortedTree",
    "build_path_tree",
    "Maze",
    "generate",
    "Direction",
    "DIRECTIONS",
    "Tile",
]
