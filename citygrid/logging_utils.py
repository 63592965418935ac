"""Minimal structured logging helper.

Emits one line per event as ``key=value`` pairs (or a JSON object when
``CITYGRID_LOG_JSON`` is set) with a timestamp and level, so generation runs
are easy to grep and parse.

Usage:
    from citygrid.logging_utils import get_logger
    log = get_logger("citygrid.city")
    log.info(event="city_generated", recipe="greenwich_village", buildings=61)

Fields whose value is None are dropped. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _threshold() -> int:
    return LEVELS.get(os.getenv("CITYGRID_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("CITYGRID_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def format_record(level: str, logger: str, **fields) -> str:
    ts = int(time.time())
    fields = {k: v for k, v in fields.items() if v is not None}
    if _json_mode():
        rec = {"level": level, "ts": ts, "logger": logger}
        rec.update(fields)
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={ts}", f"logger={logger}"]
    for k, v in fields.items():
        if isinstance(v, (bool, int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class StructuredLogger:
    def __init__(self, name: str):
        self.name = name

    def _emit(self, level: str, **fields):
        if LEVELS[level] < _threshold():
            return
        stream = sys.stderr if level == "error" else sys.stdout
        print(format_record(level, self.name, **fields), file=stream)

    def debug(self, **fields):
        self._emit("debug", **fields)

    def info(self, **fields):
        self._emit("info", **fields)

    def warn(self, **fields):
        self._emit("warn", **fields)

    def error(self, **fields):
        self._emit("error", **fields)


_LOGGERS = {}


def get_logger(name: str = "citygrid") -> StructuredLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = StructuredLogger(name)
    return _LOGGERS[name]


log = get_logger("citygrid")
