from urllib.parse import quote

from fastapi.responses import JSONResponse, PlainTextResponse, Response

from intolink.constants import BAD_REQUEST, UNKNOWN_INTERNAL_SERVER_ERROR


NOT_FOUND_MESSAGE = 'Cannot Find the URL'


def response_500(message: str | None = None, error_code: str = UNKNOWN_INTERNAL_SERVER_ERROR) -> JSONResponse:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})', 'errorCode': error_code}
    return JSONResponse(status_code=500, content=body)


def response_400(message: str | None = None, error_code: str = BAD_REQUEST) -> JSONResponse:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})', 'errorCode': error_code}
    return JSONResponse(status_code=400, content=body)


def response_404() -> JSONResponse:
    return JSONResponse(status_code=404, content={'message': NOT_FOUND_MESSAGE})


def location_header(url: str) -> str:
    """Return url as a header value: printable ASCII verbatim, everything else percent-encoded as UTF-8."""
    return ''.join(char if ' ' <= char <= '~' else quote(char, safe='') for char in url)


def response_301(*, location: str) -> Response:
    # Location is the stored URL, with only non-printable and non-ASCII characters escaped
    return Response(status_code=301, headers={'location': location_header(location)})


def response_200_text(text: str) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=200)
