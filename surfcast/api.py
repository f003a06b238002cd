"""HTTP API for the surf forecast gateway."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .app_types import ForecastRecord
from .errors import MissingSpotIdError
from .forecast_service import ForecastService
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="surfcast/api")

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

router = APIRouter()


class ForecastResponse(BaseModel):
    """Serialized forecast in the camelCase shape clients expect."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    spot_id: str
    location: str
    wave_height: str
    wind_speed: str
    wind_direction: str
    tide: str
    timestamp: int

    @classmethod
    def from_record(cls, record: ForecastRecord) -> "ForecastResponse":
        """Convert a ForecastRecord into the wire shape."""
        return cls(
            spot_id=record.spot_id,
            location=record.location,
            wave_height=record.wave_height,
            wind_speed=record.wind_speed,
            wind_direction=record.wind_direction,
            tide=record.tide,
            timestamp=record.generated_at,
        )


class HealthResponse(BaseModel):
    status: str


def parse_bypass_flag(raw: Optional[str]) -> bool:
    """Interpret the bypassCache query value; anything unparseable means False."""
    if raw is None or raw == "":
        return False
    if raw in _TRUE_VALUES:
        return True
    if raw not in _FALSE_VALUES:
        logger.debug(f"Ignoring unparseable bypassCache value: {raw!r}")
    return False


def get_forecast_service(request: Request) -> ForecastService:
    """Return the service instance owned by the running application."""
    return request.app.state.forecast_service


@router.get("/health", response_model=HealthResponse)
def health():
    """Lightweight liveness check."""
    return HealthResponse(status="ok")


@router.get("/forecast", response_model=ForecastResponse)
def get_forecast(
    spot_id: Optional[str] = Query(default=None, alias="spotId"),
    bypass_cache: Optional[str] = Query(default=None, alias="bypassCache"),
    service: ForecastService = Depends(get_forecast_service),
):
    """Return the forecast for a spot, from cache unless bypassCache is true."""
    if not spot_id:
        raise MissingSpotIdError()

    record = service.get_forecast(spot_id, bypass_cache=parse_bypass_flag(bypass_cache))
    return ForecastResponse.from_record(record)
