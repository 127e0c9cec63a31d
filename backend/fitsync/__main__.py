"""Run the FitSync Personalization API with uvicorn."""

import logging

import uvicorn

from fitsync.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the API server on the configured host and port."""
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME} on {settings.HOST}:{settings.PORT}")
    uvicorn.run("fitsync.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
