import uvicorn

from surfcast.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, job_name="surfcast")
    logger.info(f"Starting server on port {settings.port}")

    uvicorn.run(
        "surfcast.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
