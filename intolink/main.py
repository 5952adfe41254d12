"""Process entry point

Startup sequence:
    - Step 1: Initialize JSON logging
    - Step 2: Load configuration from the environment and `.env` (fatal if REDIS_STRING is missing or a value is invalid)
    - Step 3: Connect to Redis and ping it (fatal if unreachable)
    - Step 4: Wire services into the FastAPI app and serve it with uvicorn

Usage:
    intolink            # console script
    python -m intolink
"""

import sys
import logging

import uvicorn
from fastapi import FastAPI

from intolink.dao.redis import ShortURLRedisDAO
from intolink.dao.exceptions import DataStoreError
from intolink.exceptions import ConfigurationError
from intolink.services import ResolveService, ShortenService
from intolink.utils import AppSettings, ShortcodeGenerator, initialize_logging, load_config
from intolink.web import create_app


logger = logging.getLogger(__name__)


def build_app(settings: AppSettings) -> FastAPI:
    """Connect to Redis and assemble the application

    Raises:
        BadConfigurationError: If the Redis connection string is invalid.
        DataStoreError: If Redis can't be reached.
    """
    dao = ShortURLRedisDAO(redis_url=settings.redis_url, prefix=settings.prefix)
    logger.info('Connected to Redis.', extra={'prefix': settings.prefix})

    shorten_service = ShortenService(
        dao=dao,
        generator=ShortcodeGenerator(length=settings.shortcode_length),
        dedup=settings.dedup_enabled,
        max_attempts=settings.shortcode_max_attempts,
    )
    resolve_service = ResolveService(dao=dao)
    return create_app(shorten_service, resolve_service, settings)


def main() -> None:
    initialize_logging()

    try:
        settings = load_config()
        initialize_logging(settings.log_level)
        app = build_app(settings)
    except (ConfigurationError, DataStoreError) as e:
        logger.critical('Startup failed. Exiting.', extra={'reason': str(e), 'errorCode': e.error_code})
        sys.exit(1)

    logger.info('Starting HTTP server.', extra={'host': settings.host, 'port': settings.port})
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == '__main__':
    main()
