import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .errors import InvalidDimensions
from .tiles import Direction

MIN_MAZE_SIZE = 3
MAX_MAZE_SIZE = 100


def validate_dimensions(width, height) -> None:
    """Raise InvalidDimensions unless both sides are integers in [3, 100]."""
    for side in (width, height):
        if isinstance(side, bool) or not isinstance(side, int) or not MIN_MAZE_SIZE <= side <= MAX_MAZE_SIZE:
            raise InvalidDimensions(width, height, MIN_MAZE_SIZE, MAX_MAZE_SIZE)


@dataclass(frozen=True)
class DirectionalBias:
    """Relative selection weight per direction of travel during carving.

    A candidate neighbor is chosen with probability proportional to the weight
    of the direction leading to it. Presets mirror the menu options of the
    game: "horizontal" doubles east/west, "very_horizontal" multiplies them by
    five, and the vertical variants do the same for north/south.
    """

    north: float = 1.0
    east: float = 1.0
    south: float = 1.0
    west: float = 1.0
    name: str = field(default="custom", compare=False)

    def __post_init__(self):
        for w in (self.north, self.east, self.south, self.west):
            if isinstance(w, bool) or not isinstance(w, (int, float)) or not (math.isfinite(w) and w > 0):
                raise ValueError(f"bias weights must be positive finite numbers, got {w!r}")

    def weight(self, direction: Direction) -> float:
        return {
            Direction.NORTH: self.north,
            Direction.EAST: self.east,
            Direction.SOUTH: self.south,
            Direction.WEST: self.west,
        }[direction]

    @classmethod
    def from_name(cls, name: str) -> "DirectionalBias":
        key = (name or "none").strip().lower().replace("-", "_")
        if key not in BIAS_PRESETS:
            raise ValueError(f"unknown directional bias {name!r}; expected one of {sorted(BIAS_PRESETS)}")
        return BIAS_PRESETS[key]

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
        }


BIAS_PRESETS: Dict[str, DirectionalBias] = {
    "none": DirectionalBias(name="none"),
    "horizontal": DirectionalBias(east=2.0, west=2.0, name="horizontal"),
    "very_horizontal": DirectionalBias(east=5.0, west=5.0, name="very_horizontal"),
    "vertical": DirectionalBias(north=2.0, south=2.0, name="vertical"),
    "very_vertical": DirectionalBias(north=5.0, south=5.0, name="very_vertical"),
}
UNIFORM = BIAS_PRESETS["none"]


@dataclass(frozen=True)
class MazeParams:
    width: int = 7
    height: int = 5
    rooms: int = 2
    bias: DirectionalBias = UNIFORM

    def __post_init__(self):
        validate_dimensions(self.width, self.height)
        if isinstance(self.rooms, bool) or not isinstance(self.rooms, int) or self.rooms < 0:
            raise ValueError(f"room count must be a non-negative integer, got {self.rooms!r}")
        if isinstance(self.bias, str):
            object.__setattr__(self, "bias", DirectionalBias.from_name(self.bias))
        elif not isinstance(self.bias, DirectionalBias):
            raise ValueError(f"bias must be a preset name or DirectionalBias, got {self.bias!r}")

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    @property
    def start_index(self) -> int:
        return (self.height // 2) * self.width + self.width // 2


__all__ = [
    "MIN_MAZE_SIZE",
    "MAX_MAZE_SIZE",
    "validate_dimensions",
    "DirectionalBias",
    "BIAS_PRESETS",
    "UNIFORM",
    "MazeParams",
]
