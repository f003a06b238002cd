"""Interfaces and helpers for forecast computation sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from surfcast.app_types import ForecastRecord


class ForecastSource(Protocol):
    """Interface for anything that can compute a fresh forecast for a spot."""

    def compute(self, spot_id: str) -> ForecastRecord:
        """Return a newly generated forecast for the spot.

        Unknown spot ids must yield a record with placeholder values rather
        than raising. Any exception raised here is treated by the service as a
        failed computation and is never cached.
        """
        ...


@dataclass
class CallableForecastSource(ForecastSource):
    """Wrap a callable so it can be swapped in for a different backend."""

    compute_fn: Callable[[str], ForecastRecord]

    def compute(self, spot_id: str) -> ForecastRecord:
        """Delegate to the configured callable."""
        return self.compute_fn(spot_id)
