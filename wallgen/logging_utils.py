"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and
level. Every line goes to stderr so stdout stays reserved for generated
records.

Usage:
    from wallgen.logging_utils import log
    log.info(event="generate", records=30)

Environment (read on every call, so a .env loaded after import still applies):
    WALLGEN_LOG_LEVEL   debug | info | warn | error (default: info)
    WALLGEN_LOG_JSON    1/true/yes/on for JSON lines

Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def current_level() -> int:
    return LEVELS.get(os.getenv("WALLGEN_LOG_LEVEL", "info").strip().lower(), LEVELS["info"])


def json_mode() -> bool:
    return os.getenv("WALLGEN_LOG_JSON", "0").strip().lower() in ("1", "true", "yes", "on")


def _format(level: str, **fields):
    if json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "wallgen"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < current_level():
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("wallgen")
