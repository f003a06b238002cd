"""In-memory forecast cache shared by every request in the process."""

import threading
from typing import Optional

from surfcast.app_types import CacheEntry
from surfcast.forecast_cache.base import ForecastCache

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="forecast_cache/in_memory_forecast_cache")


class InMemoryForecastCache(ForecastCache):
    """Thread-safe dict of spot id -> CacheEntry.

    Freshness is decided by the caller; stale entries stay in place until the
    next write for the same spot replaces them.
    """

    def __init__(self) -> None:
        logger.debug("Initializing InMemoryForecastCache")
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, spot_id: str) -> Optional[CacheEntry]:
        """Return the entry held for a spot, or None if there is none."""
        with self._lock:
            return self._entries.get(spot_id)

    def put(self, spot_id: str, entry: CacheEntry) -> None:
        """Store an entry, replacing any previous one for the spot."""
        with self._lock:
            self._entries[spot_id] = entry

    def clear(self) -> None:
        """Clear all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
