"""Forecast cache backends."""

from .base import ForecastCache
from .memory import InMemoryForecastCache

__all__ = [
    "ForecastCache",
    "InMemoryForecastCache",
]
