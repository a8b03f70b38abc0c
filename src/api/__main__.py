"""
Contact API server: FastAPI app under uvicorn.
Run: python -m api (from repo root, with .env or env vars set).
"""

import logging

import uvicorn

from api.config import configure_logging, load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Contact API on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
