"""Pipeline orchestration for maze generation.

Provides the public Maze class and the ``generate`` regeneration entry point.
Phases run in a fixed order, each one finishing its structure before the next
starts: grid init -> carve -> exit -> rooms -> path tree -> sorted tree. Once
``__post_init__`` returns nothing on the Maze is mutated again.
"""
from __future__ import annotations

import os
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from mazegen.logging_utils import get_logger

from .carver import carve_maze, choose_exit
from .config import MazeParams
from .grid import Grid
from .metrics import init_metrics
from .paths import SortedTree, build_path_tree
from .rooms import carve_rooms, select_room_indices
from .tiles import Tile

log = get_logger("mazegen.maze")


@dataclass
class Maze:
    params: MazeParams = field(default_factory=MazeParams)
    seed: Optional[int] = None
    enable_metrics: bool = True
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        # 0 is a valid deterministic seed; None => random. With an injected rng
        # the seed stays None since no seed reproduces that stream.
        if self.seed is None and self.rng is None:
            self.seed = random.randint(1, 1_000_000)
        env_val = os.environ.get("MAZE_ENABLE_GENERATION_METRICS")
        if env_val is not None:
            self.enable_metrics = env_val.lower() not in {"0", "false", "no", ""}
        # Flask app config wins when generating inside a request/app context
        from flask import current_app, has_app_context

        if has_app_context() and "MAZE_ENABLE_GENERATION_METRICS" in current_app.config:
            self.enable_metrics = bool(current_app.config["MAZE_ENABLE_GENERATION_METRICS"])
        if self.rng is None:
            self.rng = random.Random(self.seed)
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.params.width

    @property
    def height(self) -> int:
        return self.params.height

    @property
    def start(self) -> int:
        return self.grid.start_index

    def _run_pipeline(self):
        """Execute ordered generation phases with per-phase timing in ``metrics['phase_ms']``."""
        if self.enable_metrics:
            started = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
                return r

        else:

            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        p = self.params
        metrics = self.metrics if self.enable_metrics else None
        self.grid = _phase("init_grid", Grid, p.width, p.height)
        self.visit_order: List[int] = _phase(
            "carve", carve_maze, self.grid, self.grid.start_index, self.rng, p.bias, metrics
        )
        self.exit: int = _phase("choose_exit", choose_exit, self.grid, self.rng)
        self.room_draws: List[int] = select_room_indices(self.grid, self.grid.start_index, p.rooms, self.rng)
        self.rooms: List[int] = _phase("rooms", carve_rooms, self.grid, self.room_draws, metrics)
        tree = _phase("path_tree", build_path_tree, self.grid, self.exit)
        self.tree: SortedTree = _phase("sort_tree", SortedTree.from_tree, tree)

        if self.enable_metrics:
            self.metrics["tiles"] = len(self.grid)
            self.metrics["rooms_requested"] = p.rooms
            self.metrics["tree_nodes"] = len(self.tree)
            self.metrics["max_distance"] = self.tree.max_distance()
            self.metrics["phase_ms"] = phase_times
            self.metrics["runtime_ms"] = round((time.perf_counter() - started) * 1000, 3)
        log.info(
            event="maze_generated",
            seed=self.seed,
            width=p.width,
            height=p.height,
            rooms=len(self.rooms),
            bias=p.bias.name,
            exit=self.exit,
            runtime_ms=self.metrics.get("runtime_ms"),
        )

    def tile_at(self, index: int) -> Tile:
        return self.grid.tile(index)

    def shortest_step_toward_exit(self, index: int) -> Optional[int]:
        """Next tile on a shortest path to the exit, ``None`` when already there."""
        return self.tree.parent(index)

    def distance_to_exit(self, index: int) -> int:
        return self.tree.distance(index)

    def path_to_exit(self, index: int) -> List[int]:
        return self.tree.path_to_root(index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "bias": self.params.bias.to_dict(),
            "start": self.start,
            "exit": self.exit,
            "rooms": list(self.rooms),
            "tiles": self.grid.wall_masks(),
            "max_distance": self.tree.max_distance(),
        }


def generate(
    params: Optional[MazeParams] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    **overrides,
) -> Maze:
    """Build a finished maze.

    ``overrides`` (width, height, rooms, bias) are applied on top of
    ``params``; dimensions are validated before any grid is allocated, so an
    invalid request raises InvalidDimensions with nothing constructed.
    """
    if overrides:
        base = params or MazeParams()
        merged = {
            "width": base.width,
            "height": base.height,
            "rooms": base.rooms,
            "bias": base.bias,
        }
        merged.update({k: v for k, v in overrides.items() if v is not None})
        params = MazeParams(**merged)
    return Maze(params=params or MazeParams(), seed=seed, rng=rng)


__all__ = ["Maze", "generate"]
