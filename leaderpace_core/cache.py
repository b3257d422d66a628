"""
In-memory TTL cache for leader data, keyed by race page URL.

A single lock guards the map. It is held only for lookup, insert and sweep,
never across a network call. None results are cached too, so a race that has
not started yet is not re-rendered on every request.
"""

import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from .leader_data import LeaderData

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 30.0


class LeaderCache:
    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self._clock = clock
        self._store: Dict[str, Tuple[Optional[LeaderData], float]] = {}
        self._lock = threading.Lock()

    def _expired(self, written_at: float, now: float) -> bool:
        return now - written_at > self.ttl

    def get(self, url: str) -> Tuple[Optional[LeaderData], bool]:
        """Return (data, hit). Expired entries are dropped and count as a miss."""
        with self._lock:
            entry = self._store.get(url)
            if entry is None:
                return None, False
            data, written_at = entry
            if self._expired(written_at, self._clock()):
                del self._store[url]
                logger.debug(f"Cache entry expired for {url}")
                return None, False
            return data, True

    def put(self, url: str, data: Optional[LeaderData]) -> None:
        with self._lock:
            now = self._clock()
            self._store[url] = (data, now)
            stale = [key for key, (_, ts) in self._store.items() if self._expired(ts, now)]
            for key in stale:
                del self._store[key]
            if stale:
                logger.debug(f"Swept {len(stale)} expired cache entries")

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def summary(self) -> dict:
        """Ages and hit/miss only; /health includes it when LEADERPACE_DEBUG is on."""
        with self._lock:
            now = self._clock()
            return {
                url: {"age_s": round(now - ts, 1), "has_data": data is not None}
                for url, (data, ts) in self._store.items()
            }
