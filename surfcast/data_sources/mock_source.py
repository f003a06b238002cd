"""Forecast source that serves canned conditions from the static spot table."""

from __future__ import annotations

from surfcast.app_types import Clock, ForecastRecord
from surfcast.clock import epoch_seconds
from surfcast.data_sources.base import ForecastSource
from surfcast.spots import is_known_spot, lookup_conditions, lookup_location
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/mock")


class MockForecastSource(ForecastSource):
    """Build forecasts locally; no upstream provider is contacted."""

    def __init__(self, clock: Clock = epoch_seconds) -> None:
        self._clock = clock

    def compute(self, spot_id: str) -> ForecastRecord:
        """Return the mock forecast for a spot, stamped with the current time."""
        if not is_known_spot(spot_id):
            logger.debug(f"No mock conditions for spot ID {spot_id}; using placeholders")
        conditions = lookup_conditions(spot_id)
        return ForecastRecord(
            spot_id=spot_id,
            location=lookup_location(spot_id),
            wave_height=conditions.wave_height,
            wind_speed=conditions.wind_speed,
            wind_direction=conditions.wind_direction,
            tide=conditions.tide,
            generated_at=self._clock(),
        )
