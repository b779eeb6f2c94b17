import logging
import functools

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse
from parabens.greeting import parse_occasion_from_path, decode_path, looks_like_path, is_blocked_message
from parabens.greeting import render_index_html, load_index_template, error_page
from parabens.handlers.responses import response_html, response_text, response_bytes, response_404, response_405
from parabens.utils.config import public_dir, public_base_url
from parabens.utils.helpers import event_query, guarantee_500_response
from parabens.utils.constants import MAX_PATH_LENGTH, CacheControl
from parabens.handlers.page.constants import (
    PATH_TOO_LONG,
    PROBE_PATH,
    BLOCKED_MESSAGE,
    STATIC_ASSET_MISSING,
    PATH_TOO_LONG_MESSAGE,
    BLOCKED_MESSAGE_TEXT,
    NOT_FOUND_MESSAGE,
    STATIC_ROUTES,
)


logger = logging.getLogger(__name__)


@functools.cache
def index_template() -> str:
    return load_index_template()


def serve_static(name: str, content_type: str, cache_control: str | None) -> HandlerResponse:
    try:
        data = (public_dir() / name).read_bytes()
    except FileNotFoundError:
        logger.error('Packaged static asset is missing.', extra={'asset': name, 'event': STATIC_ASSET_MISSING})
        return response_404()

    if content_type.startswith(('text/', 'application/javascript', 'image/svg+xml')):
        return response_text(200, data.decode('utf-8'), content_type, cache_control)
    return response_bytes(data, content_type, cache_control)


def serve_index(event: HandlerEvent, path: str) -> HandlerResponse:
    """Render the greeting page for `path`

    Probe-looking messages ('wp-login.php', '.env') get a 404 and blocked
    messages a 403 error page; everything else is a greeting.
    """
    _, raw_message = parse_occasion_from_path(path)
    message = decode_path(raw_message)
    if looks_like_path(message):
        logger.info('Probe-like path requested. Responding with 404.', extra={'path': path, 'event': PROBE_PATH})
        return response_html(404, error_page(NOT_FOUND_MESSAGE))
    if is_blocked_message(message):
        logger.info('Blocked greeting message requested. Responding with 403.', extra={'event': BLOCKED_MESSAGE})
        return response_html(403, error_page(BLOCKED_MESSAGE_TEXT))

    theme = event_query(event, 'theme')
    html = render_index_html(index_template(), path, theme, public_base_url())
    return response_html(200, html, CacheControl.SHORT)


@guarantee_500_response
def handler(event: HandlerEvent, context: AppContext) -> HandlerResponse:
    """Serve the site pages (GET/HEAD on every path not claimed by another handler)

    This handler follows this procedure to serve pages:
    - Step 1: Refuse overly long paths
    - Step 2: Serve the fixed static routes from the packaged `public/` directory
    - Step 3: Render the greeting page for any other path

    HTTP responses:
        200: Page or static asset
        403: Blocked greeting message (HTML error page)
        404: Probe-like path (HTML error page)
        405: Method not allowed
        414: Path longer than 512 characters (HTML error page)

    Args:
        event (HandlerEvent):
            Request event with the decoded request `path` and the optional
            `theme` query string parameter.
        context (AppContext):
            Application context (unused).

    Returns:
        HandlerResponse:
            HTML, CSS, JavaScript or SVG response.

    Example:
        >>> event = {'httpMethod': 'GET', 'path': '/formatura/Ana', 'queryStringParameters': {'theme': 'warm'}}
        >>> response = handler(event, context)
        >>> response['headers']['Cache-Control']
        'public, max-age=300'
    """
    path = event.get('path') or '/'

    # 1- Refuse overly long paths
    if len(path) > MAX_PATH_LENGTH:
        logger.info('Request path too long. Responding with 414.', extra={'length': len(path), 'event': PATH_TOO_LONG})
        return response_html(414, error_page(PATH_TOO_LONG_MESSAGE))

    if event.get('httpMethod', 'GET') not in ('GET', 'HEAD'):
        return response_405('GET, HEAD')

    # 2- Fixed static routes
    if path in STATIC_ROUTES:
        return serve_static(*STATIC_ROUTES[path])

    # 3- Greeting page
    return serve_index(event, '' if path == '/' else path)
