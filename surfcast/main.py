"""FastAPI application setup for the surfcast gateway."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import router as api_router
from .config import settings
from .errors import register_error_handlers
from .forecast_service import ForecastService, build_forecast_service
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="surfcast/main")


def create_app(service: ForecastService | None = None) -> FastAPI:
    """Build the app around a forecast service, creating the default one if omitted."""
    setup_logging(level=settings.log_level, job_name="surfcast")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Forecast cache ready", extra={"ttl_seconds": app.state.forecast_service.ttl})
        yield
        app.state.forecast_service.cache.clear()

    app = FastAPI(title="Surfcast", lifespan=lifespan)
    app.state.forecast_service = service or build_forecast_service(settings)

    register_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
