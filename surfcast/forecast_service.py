"""Cache-then-compute lookup of surf forecasts by spot id."""

import threading
from concurrent.futures import Future
from typing import Optional

from surfcast import config
from surfcast.app_types import CacheEntry, Clock, ForecastRecord
from surfcast.clock import epoch_seconds
from surfcast.data_sources import ForecastSource, build_forecast_source
from surfcast.errors import ForecastComputationError
from surfcast.forecast_cache import ForecastCache, InMemoryForecastCache
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="forecast_service")


class ForecastService:
    """Serve forecasts from a shared cache, recomputing on miss, expiry or bypass.

    Every entry is written with the same TTL. A failed computation is never
    cached and leaves any previous entry untouched.

    With ``coalesce_misses`` enabled, concurrent misses for the same spot
    share a single in-flight computation; otherwise each one computes and the
    last write wins. A bypass never joins an in-flight computation.
    """

    def __init__(
        self,
        cache: ForecastCache,
        source: ForecastSource,
        *,
        ttl_seconds: int = config.FORECAST_TTL_SECONDS,
        clock: Clock = epoch_seconds,
        coalesce_misses: bool = False,
        compute_retries: int = 0,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if compute_retries not in (0, 1):
            raise ValueError("compute_retries must be 0 or 1")
        self.cache = cache
        self.source = source
        self.ttl = ttl_seconds
        self._clock = clock
        self._coalesce_misses = coalesce_misses
        self._compute_retries = compute_retries
        self._inflight: dict[str, Future] = {}
        self._inflight_lock = threading.Lock()

    def get_forecast(self, spot_id: str, bypass_cache: bool = False) -> ForecastRecord:
        """Return the forecast for a spot, serving the cached copy while it is fresh.

        ``bypass_cache`` forces a recomputation even when a fresh entry exists.
        """
        now = self._clock()
        if bypass_cache:
            logger.debug(f"Bypassing cache for spot ID: {spot_id}")
        else:
            entry = self.cache.get(spot_id)
            if entry is not None and entry.is_fresh(now):
                logger.info(f"Cache hit for spot ID: {spot_id}")
                return entry.record

        logger.info(f"Fetching fresh data for spot ID: {spot_id}")
        if self._coalesce_misses and not bypass_cache:
            return self._refresh_coalesced(spot_id, now)
        return self._refresh(spot_id, now)

    def _refresh(self, spot_id: str, now: int) -> ForecastRecord:
        """Compute a record and store it with an expiry relative to ``now``."""
        record = self._compute(spot_id)
        self.cache.put(spot_id, CacheEntry(record=record, expires_at=now + self.ttl))
        return record

    def _refresh_coalesced(self, spot_id: str, now: int) -> ForecastRecord:
        """Join an in-flight refresh for the spot, or start one."""
        with self._inflight_lock:
            pending: Optional[Future] = self._inflight.get(spot_id)
            if pending is None:
                future: Future = Future()
                self._inflight[spot_id] = future

        if pending is not None:
            logger.debug(f"Waiting on in-flight computation for spot ID: {spot_id}")
            return pending.result()

        try:
            record = self._refresh(spot_id, now)
        except Exception as exc:
            future.set_exception(exc)
            raise
        except BaseException as exc:
            # Waiters get an ordinary error; the owner thread still unwinds.
            error = ForecastComputationError(spot_id)
            error.__cause__ = exc
            future.set_exception(error)
            raise
        else:
            future.set_result(record)
            return record
        finally:
            with self._inflight_lock:
                self._inflight.pop(spot_id, None)

    def _compute(self, spot_id: str) -> ForecastRecord:
        """Run the forecast source, retrying at most ``compute_retries`` times."""
        attempts = 1 + self._compute_retries
        for attempt in range(1, attempts + 1):
            try:
                return self.source.compute(spot_id)
            except Exception as exc:
                logger.warning(
                    f"Forecast computation failed for spot ID {spot_id} (attempt {attempt}/{attempts})",
                    extra={"error": str(exc)},
                )
                last_error = exc
        logger.error(f"Giving up on forecast for spot ID: {spot_id}")
        raise ForecastComputationError(spot_id) from last_error


def build_forecast_service(
    settings: config.Settings | None = None,
    clock: Clock = epoch_seconds,
) -> ForecastService:
    """Construct the process-wide service with an empty in-memory cache."""
    settings = settings or config.settings
    logger.info(
        "Initializing forecast service",
        extra={"ttl_seconds": settings.forecast_ttl_seconds, "coalesce_misses": settings.coalesce_misses},
    )
    return ForecastService(
        InMemoryForecastCache(),
        build_forecast_source(settings, clock=clock),
        ttl_seconds=settings.forecast_ttl_seconds,
        clock=clock,
        coalesce_misses=settings.coalesce_misses,
        compute_retries=settings.compute_retries,
    )
