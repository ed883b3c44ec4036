"""Structured event logging for the maze engine and API.

Each event is one stdout line of ``key=value`` pairs (or a compact JSON object
when ``MAZEGEN_LOG_JSON`` is set) carrying a level, a unix timestamp and the
emitting logger's name:

    level=info ts=1700000000 event=maze_generated seed=42 width=7 logger=mazegen.maze

Fields whose value is None are dropped, so callers can pass optional values
such as ``runtime_ms`` unconditionally. ``MAZEGEN_LOG_LEVEL`` (debug, info,
warn) sets the threshold; the numeric levels match the stdlib ones so
``server._configure_logging`` can reuse the same threshold.
"""

from __future__ import annotations

import json
import os
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZEGEN_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("MAZEGEN_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _kv(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    # Spaces would split a value into separate tokens
    return str(value).replace(" ", "_")


def _format(level: str, name: str, fields: dict) -> str:
    rec = {k: v for k, v in fields.items() if v is not None}
    rec.setdefault("logger", name)
    ts = int(time.time())
    if JSON_MODE:
        return json.dumps({"level": level, "ts": ts, **rec}, separators=(",", ":"), default=str)
    head = f"level={level} ts={ts}"
    return " ".join([head] + [f"{k}={_kv(v)}" for k, v in rec.items()])


class _Logger:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= CURRENT_LEVEL

    def _log(self, level: str, fields: dict):
        if self.enabled_for(level):
            print(_format(level, self.name, fields))

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)


_LOGGERS = {}


def get_logger(name: str = "mazegen") -> _Logger:
    if name not in _LOGGERS:
        _LOGGERS[name] = _Logger(name)
    return _LOGGERS[name]


log = get_logger()
