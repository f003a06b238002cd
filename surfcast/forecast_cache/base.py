"""Shared protocol for forecast cache backends."""

from typing import Optional, Protocol

from surfcast.app_types import CacheEntry


class ForecastCache(Protocol):
    """Protocol for forecast cache backends keyed by spot id."""

    def get(self, spot_id: str) -> Optional[CacheEntry]:
        """Return the stored entry for a spot, stale or not, or None."""

    def put(self, spot_id: str, entry: CacheEntry) -> None:
        """Store an entry, replacing whatever was held for the spot."""

    def clear(self) -> None:
        """Drop every stored entry."""

    def __len__(self) -> int:
        """Return the number of stored entries."""
