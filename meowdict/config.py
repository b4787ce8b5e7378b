from __future__ import annotations

import logging
import os

# Moedict endpoint, templated on the keyword.
# Example:
#   MEOWDICT_API_URL=http://localhost:8080/a/{keyword}.json
DEFAULT_API_URL = "https://www.moedict.tw/a/{keyword}.json"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 4
DEFAULT_PROMPT = "meowdict > "

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip().upper()
    level = logging.getLevelName(raw) if raw else default
    return level if isinstance(level, int) else default


API_URL = os.getenv("MEOWDICT_API_URL", "").strip() or DEFAULT_API_URL
TIMEOUT = _float_env("MEOWDICT_TIMEOUT", DEFAULT_TIMEOUT)
MAX_WORKERS = _int_env("MEOWDICT_MAX_WORKERS", DEFAULT_MAX_WORKERS)
LOG_LEVEL = _log_level_env("MEOWDICT_LOG_LEVEL", logging.WARNING)
PROMPT = os.getenv("MEOWDICT_PROMPT") or DEFAULT_PROMPT
