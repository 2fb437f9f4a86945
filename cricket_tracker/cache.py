# cricket_tracker/cache.py
from __future__ import annotations

import hashlib
import json
import time
from typing import Any, Dict, Optional, Sequence, Tuple

# Simple in-memory TTL cache (sufficient for single-instance deploys)
# key -> (expires_at_epoch, value)
_cache: Dict[str, Tuple[float, Any]] = {}


def make_key(*parts: str) -> str:
    """
    make_key("report", "ab12") -> "report:ab12"
    Blank parts are dropped.
    """
    return ":".join([str(p).strip() for p in parts if str(p).strip()])


def fingerprint(records: Sequence[Any]) -> str:
    """Content hash of a record collection; any edit gives a new key."""
    blob = json.dumps(list(records), sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


def get(key: str) -> Optional[Any]:
    item = _cache.get(key)
    if not item:
        return None

    expires_at, value = item
    if time.time() > expires_at:
        _cache.pop(key, None)
        return None

    return value


def purge_expired() -> int:
    """Drops every expired entry; returns how many went."""
    now = time.time()
    stale = [k for k, (exp, _) in _cache.items() if now > exp]
    for k in stale:
        _cache.pop(k, None)
    return len(stale)


def set(key: str, value: Any, ttl_seconds: int = 60) -> None:
    if ttl_seconds <= 0:
        # Do not cache if TTL is invalid
        return
    # keys of superseded collections are never read again
    purge_expired()
    _cache[key] = (time.time() + ttl_seconds, value)


def clear() -> None:
    _cache.clear()


def debug_snapshot() -> Dict[str, float]:
    """
    Returns current cache keys with remaining TTL (seconds).
    """
    now = time.time()
    out: Dict[str, float] = {}
    for k, (exp, _) in _cache.items():
        out[k] = max(0.0, exp - now)
    return out
