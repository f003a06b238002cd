"""Shared dataclasses and lightweight types used across modules."""

from dataclasses import dataclass
from typing import Callable

# Returns the current time as integer epoch seconds.
Clock = Callable[[], int]


@dataclass(frozen=True)
class ForecastRecord:
    """Snapshot of surf conditions for one spot, stamped when it was generated."""
    spot_id: str
    location: str
    wave_height: str
    wind_speed: str
    wind_direction: str
    tide: str
    generated_at: int


@dataclass(frozen=True)
class CacheEntry:
    """ForecastRecord payload with the epoch second it stops being served."""
    record: ForecastRecord
    expires_at: int

    def is_fresh(self, now: int) -> bool:
        """Return True while the entry may still be served from cache."""
        return self.expires_at > now
