"""
Run the API with uvicorn. From project root:

  python -m app.server

Set USE_HTTPS=true with SSL_KEYFILE and SSL_CERTFILE to serve over TLS.
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    scheme = "https" if settings.USE_HTTPS else "http"
    logger.info(
        "Starting Bank Portal API on %s://%s:%s (health: %s/health)",
        scheme,
        settings.HOST,
        settings.PORT,
        settings.API_PREFIX,
    )
    if not settings.USE_HTTPS:
        logger.warning("HTTPS disabled; use for local development only")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        ssl_keyfile=settings.SSL_KEYFILE if settings.USE_HTTPS else None,
        ssl_certfile=settings.SSL_CERTFILE if settings.USE_HTTPS else None,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
