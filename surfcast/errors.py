"""Custom exceptions and centralized FastAPI error handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="errors")


class SurfcastError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class MissingSpotIdError(SurfcastError):
    def __init__(self):
        super().__init__("Missing spotId parameter", status_code=400)


class ForecastComputationError(SurfcastError):
    """The forecast source failed; nothing was cached for the spot."""

    def __init__(self, spot_id: str):
        super().__init__(f"Failed to compute forecast for spot ID: {spot_id}", status_code=502)
        self.spot_id = spot_id


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(SurfcastError)
    async def handle_surfcast_error(_request: Request, exc: SurfcastError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse({"error": "Internal server error"}, status_code=500)
