"""
Process-wide logging for surfcast.

Modules log through a tagged adapter:

    logger = get_tagged_logger(__name__, tag="forecast_service")
    logger.info(f"Cache hit for spot ID: {spot_id}")

The server entrypoint and the app factory call `setup_logging()`; the first
call wins. Until then the bootstrap format below is used.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Optional

BOOTSTRAP_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(job_name)s | %(tag)s | %(name)s | %(message)s"

logging.basicConfig(level=logging.INFO, format=BOOTSTRAP_FORMAT, datefmt=DATE_FORMAT)

_CONFIGURED: bool = False


class LogContextFilter(logging.Filter):
    """Fill in the `tag` and `job_name` fields the formatter expects.

    Records from untagged loggers (uvicorn, fastapi) are tagged with the last
    segment of their logger name, e.g. "uvicorn.access" -> "access".
    """

    def __init__(self, job_name: Optional[str] = None) -> None:
        super().__init__()
        self.job_name = job_name or "-"

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "tag"):
            record.tag = record.name.rsplit(".", 1)[-1] if record.name else "-"
        if not hasattr(record, "job_name"):
            record.job_name = self.job_name
        return True


class InfoAndBelowFilter(logging.Filter):
    """Keep WARNING and above off stdout; stderr handles those."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno < logging.WARNING


def _stream_handler(stream: str, level: str, filters: list[str]) -> dict[str, Any]:
    return {
        "class": "logging.StreamHandler",
        "formatter": "surfcast",
        "filters": filters,
        "level": level,
        "stream": f"ext://sys.{stream}",
    }


def build_logging_config(*, level: str | int = "INFO", job_name: Optional[str] = None) -> dict[str, Any]:
    """Return a dictConfig mapping: INFO and below to stdout, WARNING and up to stderr."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "context": {"()": LogContextFilter, "job_name": job_name},
            "info_and_below": {"()": InfoAndBelowFilter},
        },
        "formatters": {
            "surfcast": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "stdout": _stream_handler("stdout", "DEBUG", ["context", "info_and_below"]),
            "stderr": _stream_handler("stderr", "WARNING", ["context"]),
        },
        "root": {"level": level, "handlers": ["stdout", "stderr"]},
    }


def setup_logging(*, level: str | int = "INFO", job_name: Optional[str] = None, force: bool = False) -> None:
    """Apply `build_logging_config` once per process, or again when `force` is set."""
    global _CONFIGURED

    if _CONFIGURED and not force:
        return
    logging.config.dictConfig(build_logging_config(level=level, job_name=job_name))
    _CONFIGURED = True


def get_tagged_logger(name: str, *, tag: Optional[str] = None) -> logging.LoggerAdapter:
    """Return an adapter over `logging.getLogger(name)` that stamps `tag` on every record."""
    return logging.LoggerAdapter(logging.getLogger(name), {"tag": tag or name.rsplit(".", 1)[-1]})
