"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

import intolink
from intolink.constants import BAD_REQUEST
from intolink.dao.exceptions import DAOError
from intolink.services import ResolveService, ShortenService
from intolink.utils.config import AppSettings
from intolink.web.middleware import LoggingMiddleware
from intolink.web.responses import response_400, response_500
from intolink.web.routes import router


logger = logging.getLogger(__name__)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error['type'] == 'json_invalid' for error in errors):
        message = 'invalid JSON body'
    else:
        fields = ', '.join(f"'{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}'" for error in errors)
        message = f'missing or invalid {fields} in JSON body'

    logger.info('Rejected malformed request body. Responding with 400.', extra={'path': request.url.path, 'reason': message})
    return response_400(message=message, error_code=BAD_REQUEST)


async def _handle_dao_error(request: Request, exc: DAOError):
    logger.error(
        'Data store operation failed. Responding with 500.',
        exc_info=exc,
        extra={'path': request.url.path, 'errorCode': exc.error_code},
    )
    return response_500(message=str(exc), error_code=exc.error_code)


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.exception('Unhandled exception. Responding with 500.', extra={'path': request.url.path})
    return response_500()


def create_app(
    shorten_service: ShortenService,
    resolve_service: ResolveService,
    settings: AppSettings,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        shorten_service: Shortening service
        resolve_service: Resolution service
        settings: Application settings

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title='intolink',
        description='URL shortening service',
        version=intolink.__version__,
        docs_url='/api/docs',
        redoc_url=None,
        openapi_url='/api/openapi.json',
    )

    # Store instances in app state for access in routes
    app.state.shorten_service = shorten_service
    app.state.resolve_service = resolve_service
    app.state.settings = settings

    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(DAOError, _handle_dao_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.include_router(router)

    return app
