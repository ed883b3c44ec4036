"""
project: mazegen
module: maze_api.py
License: MIT

Maze generation and exploration API routes.

The session remembers the parameters and seed of the caller's current maze;
finished mazes are kept in a small in-process cache so tile and path queries
never regenerate or re-search.
"""

import hashlib
import os
import random
import threading

from flask import Blueprint, current_app, jsonify, request, session

from mazegen.maze import DirectionalBias, InvalidDimensions, Maze, MazeParams
from mazegen.logging_utils import get_logger

log = get_logger("mazegen.api")

bp_maze = Blueprint("maze_api", __name__)

SEED_MAX = 9223372036854775807

# (params, seed) -> Maze. Guarded by a lock because the dev server may serve
# requests from several threads.
_maze_cache = {}
_maze_cache_lock = threading.Lock()


def get_cached_maze(params: MazeParams, seed: int) -> Maze:
    if os.environ.get("MAZE_DISABLE_CACHE") == "1":
        return Maze(params=params, seed=seed)
    key = (params, seed)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = Maze(params=params, seed=seed)
    limit = current_app.config.get("MAZE_CACHE_MAX", 8)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        while len(_maze_cache) > limit:
            oldest = next(iter(_maze_cache))
            if oldest == key:
                break
            _maze_cache.pop(oldest, None)
    return maze


def clear_cache() -> None:
    with _maze_cache_lock:
        _maze_cache.clear()


def _coerce_seed(payload_seed):
    """Convert provided seed (int, integral float or str) into a bounded non-negative int.

    Raises ValueError for seeds that would otherwise map to an unrelated
    random maze (fractional floats, lists, objects).
    """
    if payload_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, bool):
        raise ValueError("seed")
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    if isinstance(payload_seed, float):
        if not payload_seed.is_integer():
            raise ValueError("seed must be an integer or string")
        return int(payload_seed) % SEED_MAX
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX
    raise ValueError("seed must be an integer or string")


def _int_field(data, name, default):
    raw = data.get(name)
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ValueError(name)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw.strip())
    raise ValueError(name)


def _params_from_payload(data) -> MazeParams:
    cfg = current_app.config
    width = _int_field(data, "width", cfg["MAZE_DEFAULT_WIDTH"])
    height = _int_field(data, "height", cfg["MAZE_DEFAULT_HEIGHT"])
    rooms = _int_field(data, "rooms", cfg["MAZE_DEFAULT_ROOMS"])
    bias = data.get("bias") or cfg["MAZE_DEFAULT_BIAS"]
    if isinstance(bias, dict):
        # DirectionalBias rejects null, bool, string and non-finite weights
        bias = DirectionalBias(**{side: bias.get(side, 1.0) for side in ("north", "east", "south", "west")})
    elif not isinstance(bias, str):
        raise ValueError("bias must be a preset name or an object of direction weights")
    return MazeParams(width=width, height=height, rooms=rooms, bias=bias)


def _session_params():
    stored = session.get("maze_params")
    if not stored:
        return None
    bias = stored["bias"]
    if isinstance(bias, dict):
        bias = DirectionalBias(**{k: bias[k] for k in ("north", "east", "south", "west")}, name=bias.get("name", "custom"))
    return MazeParams(width=stored["width"], height=stored["height"], rooms=stored["rooms"], bias=bias)


def _current_maze():
    params = _session_params()
    if params is None or "maze_seed" not in session:
        return None
    return get_cached_maze(params, session["maze_seed"])


def _no_maze():
    return jsonify({"error": "no_maze", "message": "POST /api/maze first"}), 404


@bp_maze.route("/api/maze", methods=["POST"])
def create_maze():
    """Generate (or regenerate) the caller's maze.

    Body JSON (all optional):
      { "width": int, "height": int, "rooms": int,
        "bias": "none"|"horizontal"|... or {"north": w, ...},
        "seed": int|str|null }

    Response: the maze summary (seed, size, start, exit, rooms, wall masks).
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    try:
        params = _params_from_payload(data)
        seed = _coerce_seed(data.get("seed"))
    except InvalidDimensions:
        raise
    except (TypeError, ValueError) as e:
        log.warn(event="maze_rejected", reason=str(e))
        return jsonify({"error": "invalid_parameter", "message": str(e)}), 400
    maze = get_cached_maze(params, seed)
    bias = params.bias
    session["maze_params"] = {
        "width": params.width,
        "height": params.height,
        "rooms": params.rooms,
        "bias": bias.name if bias.name != "custom" else bias.to_dict(),
    }
    session["maze_seed"] = seed
    log.info(event="maze_requested", seed=seed, width=params.width, height=params.height, rooms=params.rooms)
    return jsonify(maze.to_dict())


@bp_maze.route("/api/maze")
def current_maze():
    maze = _current_maze()
    if maze is None:
        return _no_maze()
    return jsonify(maze.to_dict())


@bp_maze.route("/api/maze/tile/<int:index>")
def tile(index):
    maze = _current_maze()
    if maze is None:
        return _no_maze()
    if not 0 <= index < len(maze.grid):
        return jsonify({"error": "out_of_range", "index": index}), 404
    t = maze.tile_at(index)
    x, y = maze.grid.coords(index)
    return jsonify({"index": index, "x": x, "y": y, "walls": t.walls, "room": t.room})


@bp_maze.route("/api/maze/step/<int:index>")
def step(index):
    maze = _current_maze()
    if maze is None:
        return _no_maze()
    nxt = maze.shortest_step_toward_exit(index)
    return jsonify({"index": index, "next": nxt, "distance": maze.distance_to_exit(index)})


@bp_maze.route("/api/maze/path/<int:index>")
def path(index):
    maze = _current_maze()
    if maze is None:
        return _no_maze()
    steps = maze.path_to_exit(index)
    return jsonify({"index": index, "path": steps, "distance": len(steps) - 1})


@bp_maze.route("/api/maze/metrics")
def metrics():
    maze = _current_maze()
    if maze is None:
        return _no_maze()
    return jsonify({"seed": maze.seed, "metrics": maze.metrics})
