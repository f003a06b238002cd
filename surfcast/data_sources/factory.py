"""Factory helpers for choosing a forecast source at startup."""

from __future__ import annotations

from surfcast import config
from surfcast.app_types import Clock
from surfcast.clock import epoch_seconds
from surfcast.data_sources.base import ForecastSource
from surfcast.data_sources.mock_source import MockForecastSource
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


DEFAULT_SOURCE_NAME = "mock"


def build_forecast_source(settings: config.Settings | None = None, clock: Clock = epoch_seconds) -> ForecastSource:
    """Instantiate the configured forecast source."""
    settings = settings or config.settings
    source = (settings.forecast_source or DEFAULT_SOURCE_NAME).lower()

    if source == "mock":
        logger.info("Using mock forecast source")
        return MockForecastSource(clock=clock)

    raise ValueError(f"Unknown forecast source '{source}'")
