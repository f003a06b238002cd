"""Forecast sources that compute fresh records on a cache miss."""

from .base import CallableForecastSource, ForecastSource
from .factory import build_forecast_source
from .mock_source import MockForecastSource

__all__ = [
    "build_forecast_source",
    "CallableForecastSource",
    "ForecastSource",
    "MockForecastSource",
]
