"""HTTP routes

    POST /api/shorten       shorten the URL in the JSON body
    GET  /ping              liveness probe, never touches the store
    GET  /http...           shorten the URL given inline in the path (query string included)
    GET  /{shortcode}       301 redirect to the original URL, or 404

Endpoints are plain `def` functions, so FastAPI runs each request in its
worker thread pool; the Redis call is the only blocking point.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from intolink.constants import REDIRECT_SUCCESS
from intolink.dao.exceptions import ShortURLNotFoundError
from intolink.utils.helpers import get_short_url
from intolink.web.schemas import ShortenRequest, ShortenResponse, MessageResponse
from intolink.web.responses import response_200_text, response_301, response_404


logger = logging.getLogger(__name__)

router = APIRouter()


def _base_url(request: Request) -> str:
    settings = request.app.state.settings
    return settings.base_url or str(request.base_url)


def _inline_target(request: Request) -> str:
    """Rebuild the URL given inline in the path, exactly as the client sent it.

    The raw path is used so percent-escapes such as %2F are kept, and the query
    string belongs to the inline URL, not to this request.
    """
    raw_path = request.scope.get('raw_path')
    if raw_path:
        target = raw_path.split(b'?', 1)[0].decode('utf-8', errors='replace')
        target = target.removeprefix(request.scope.get('root_path', '')).removeprefix('/')
    else:
        target = request.path_params['path']

    query = request.url.query
    return f'{target}?{query}' if query else target


@router.post(
    '/api/shorten',
    response_model=ShortenResponse,
    responses={
        400: {'model': MessageResponse, 'description': 'Missing or empty url'},
        500: {'model': MessageResponse, 'description': 'Data store error'},
    },
    summary='Create short URL',
)
def shorten_url(request: Request, body: ShortenRequest) -> ShortenResponse:
    short_url = request.app.state.shorten_service.shorten(body.url)
    short_url_string = get_short_url(short_url.shortcode, _base_url(request))

    return ShortenResponse(
        message=f'Successfully shortened {short_url.target} to {short_url_string}',
        target_url=short_url.target,
        short_url=short_url_string,
        shortcode=short_url.shortcode,
    )


@router.get(
    '/{path:path}',
    responses={
        301: {'description': 'Redirect to the original URL'},
        404: {'model': MessageResponse, 'description': 'Unknown shortcode'},
    },
    summary='Ping, inline shorten, or resolve',
)
def dispatch(request: Request, path: str):
    if path == 'ping':
        return JSONResponse(status_code=200, content={'message': 'pong'})

    if path.startswith('http'):
        target = _inline_target(request)
        short_url = request.app.state.shorten_service.shorten(target)
        return response_200_text(get_short_url(short_url.shortcode, _base_url(request)))

    try:
        short_url = request.app.state.resolve_service.resolve(path)
    except ShortURLNotFoundError:
        return response_404()

    logger.info('Redirecting client to target URL.', extra={'shortcode': path, 'hits': short_url.hits, 'event': REDIRECT_SUCCESS})
    return response_301(location=short_url.target)
