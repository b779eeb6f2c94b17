import logging

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse
from parabens.dao.exceptions import ShortLinkNotFoundError, ShortLinkStoreLoadError
from parabens.greeting import encode_path_segment
from parabens.handlers.responses import response_302, response_404, response_405, response_500
from parabens.utils.helpers import guarantee_500_response
from parabens.handlers.redirect_url.constants import (
    STORE_UNAVAILABLE,
    MISSING_CODE,
    SHORTLINK_NOT_FOUND,
    INVALID_LEGACY_PATH,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


def redirect_location(path: str) -> str | None:
    """Return the redirect target for a stored shortlink path

    Paths starting with '/' are stored as full request paths (occasion prefix
    and query string included). Older entries hold only the bare message and
    get encoded into a single path segment.

    Example:
        >>> redirect_location('/formatura/Ana?theme=warm')
        '/formatura/Ana?theme=warm'
        >>> redirect_location('João Silva')
        '/Jo%C3%A3o_Silva'
        >>> redirect_location('   ') is None
        True
    """
    if path.startswith('/'):
        return path
    encoded = encode_path_segment(path)
    return f'/{encoded}' if encoded else None


@guarantee_500_response
def handler(event: HandlerEvent, context: AppContext) -> HandlerResponse:
    """Handle shortlink redirects (GET /s/<code>)

    This handler follows this procedure to redirect clients:
    - Step 1: Make sure the shortlink store is loaded
    - Step 2: Extract the code from the request path
    - Step 3: Resolve the code into the stored greeting path
    - Step 4: Redirect the client to the greeting page

    HTTP responses:
        302: Successful redirect
            headers:
                Location: site-relative greeting path
        404: Unknown or missing code
        405: Method not allowed
        500: Internal server error (store unavailable)

    Args:
        event (HandlerEvent):
            Request event containing the `code` path parameter.
        context (AppContext):
            Application context holding the shortlink store.

    Returns:
        HandlerResponse:
            Status code, headers and body.

    Example:
        >>> event = {'httpMethod': 'GET', 'pathParameters': {'code': 'abc1234'}}
        >>> response = handler(event, context)
        >>> response['headers']['Location']
        '/aniversario/Joana'
    """
    if event.get('httpMethod', 'GET') != 'GET':
        return response_405('GET')

    # 1- Make sure the store is usable
    dao = context.short_link_dao
    try:
        dao.ensure_loaded()
    except ShortLinkStoreLoadError:
        logger.exception('Shortlink store unavailable. Responding with 500.', extra={'event': STORE_UNAVAILABLE})
        return response_500(error_code=STORE_UNAVAILABLE)

    # 2- Extract the code from the request path
    code = (event.get('pathParameters') or {}).get('code') or ''
    if not code:
        logger.info('Missing shortlink code in path. Responding with 404.', extra={'event': MISSING_CODE})
        return response_404(error_code=MISSING_CODE)

    # 3- Resolve the code
    try:
        short_link = dao.resolve(code)
    except ShortLinkNotFoundError:
        logger.info(
            'Shortlink not found. Responding with 404.',
            extra={'code': code, 'event': SHORTLINK_NOT_FOUND},
        )
        return response_404(error_code=SHORTLINK_NOT_FOUND)

    location = redirect_location(short_link.path)
    if location is None:
        logger.warning(
            'Stored shortlink path is empty. Responding with 404.',
            extra={'code': code, 'event': INVALID_LEGACY_PATH},
        )
        return response_404(error_code=INVALID_LEGACY_PATH)

    # 4- Redirect the client
    logger.info(
        'Redirecting client to greeting page. Responding with 302.',
        extra={'code': code, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=location)
