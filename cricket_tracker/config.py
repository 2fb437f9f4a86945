# cricket_tracker/config.py
from __future__ import annotations

import logging
import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


# -------------------------
# Storage
# -------------------------
DATA_FILE: str = _get_env("CRICKET_TRACKER_DATA_FILE", "data/cricket_tracker_entries_v1.json")

# -------------------------
# Report cache + logging
# -------------------------
REPORT_CACHE_TTL_SECONDS: int = _get_env_int("REPORT_CACHE_TTL_SECONDS", 300)
LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()

# "1" logs every pipeline stage at DEBUG
DEBUG_PIPELINE: bool = _get_env("CRICKET_TRACKER_DEBUG", "0") == "1"


def log_level() -> int:
    if DEBUG_PIPELINE:
        return logging.DEBUG
    level = logging.getLevelName(LOG_LEVEL)
    # validate_config() reports bad names at startup
    return level if isinstance(level, int) else logging.INFO


def validate_config() -> None:
    if not DATA_FILE:
        raise RuntimeError("CRICKET_TRACKER_DATA_FILE must not be empty")

    if REPORT_CACHE_TTL_SECONDS <= 0:
        raise RuntimeError("REPORT_CACHE_TTL_SECONDS must be positive")

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise RuntimeError(f"LOG_LEVEL must be a logging level name, got {LOG_LEVEL!r}")
