"""Application configuration pulled from environment variables via pydantic."""
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

FORECAST_TTL_SECONDS = 30 * 60


class Settings(BaseSettings):
    """Environment-driven configuration for the surfcast gateway."""
    model_config = SettingsConfigDict(env_prefix="SURFCAST_", extra="ignore")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, validation_alias=AliasChoices("PORT", "SURFCAST_PORT"))
    forecast_source: str = "mock"  # options: mock
    forecast_ttl_seconds: int = Field(default=FORECAST_TTL_SECONDS, gt=0)
    coalesce_misses: bool = False
    compute_retries: int = Field(default=0, ge=0, le=1)
    log_level: str = "INFO"

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Normalize level names so "debug" and "DEBUG" behave the same."""
        return v.strip().upper()


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
