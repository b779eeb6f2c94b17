import logging
from pathlib import Path

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse
from parabens.greeting import looks_like_path, is_blocked_message
from parabens.render import og_image_text_prefix, og_cache_key
from parabens.render.exceptions import RenderError
from parabens.handlers.responses import response_bytes, response_404, response_405
from parabens.utils.config import public_dir
from parabens.utils.helpers import event_query, file_exists, guarantee_500_response
from parabens.utils.constants import CacheControl
from parabens.handlers.og_image.constants import (
    OG_IMAGE_CACHE_HIT,
    OG_IMAGE_RENDERED,
    OG_IMAGE_RENDER_FAILED,
    OG_IMAGE_DEFAULT,
)


logger = logging.getLogger(__name__)

PNG_CONTENT_TYPE = 'image/png'


def default_image_path() -> Path:
    return public_dir() / 'og-image.png'


def response_png(path: Path) -> HandlerResponse:
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return response_404()
    return response_bytes(data, PNG_CONTENT_TYPE, CacheControl.LONG)


def response_default_png() -> HandlerResponse:
    return response_png(default_image_path())


@guarantee_500_response
def handler(event: HandlerEvent, context: AppContext) -> HandlerResponse:
    """Serve the social-preview image (GET/HEAD /og-image.png?text=...)

    This handler follows this procedure to serve images:
    - Step 1: Normalize the requested text (whitespace collapsed, truncated)
    - Step 2: Serve the static default image for empty or unwanted texts
    - Step 3: Serve the cached image if it was rendered before
    - Step 4: Otherwise render it through the render queue and serve it

    Rendering failures are never surfaced to clients: the default image is
    served instead.

    HTTP responses:
        200: PNG image (Cache-Control: public, max-age=86400)
        404: Default image missing from the package
        405: Method not allowed

    Args:
        event (HandlerEvent):
            Request event with the optional `text` query string parameter.
        context (AppContext):
            Application context holding the render queue.

    Returns:
        HandlerResponse:
            Base64 encoded PNG response.

    Example:
        >>> event = {'httpMethod': 'GET', 'queryStringParameters': {'text': 'Feliz Aniversário, Joana'}}
        >>> handler(event, context)['headers']['Content-Type']
        'image/png'
    """
    if event.get('httpMethod', 'GET') not in ('GET', 'HEAD'):
        return response_405('GET, HEAD')

    # 1- Normalize the requested text
    text = og_image_text_prefix(event_query(event, 'text'))

    # 2- Fall back to the static image for unwanted texts
    if not text or looks_like_path(text) or is_blocked_message(text):
        logger.debug('Serving default OG image.', extra={'event': OG_IMAGE_DEFAULT})
        return response_default_png()

    # 3- Serve from cache
    og_queue = context.og_image_queue
    key = og_cache_key(text)
    cache_path = og_queue.cache_path(key)
    if file_exists(cache_path):
        logger.debug('OG image cache hit.', extra={'key': key, 'event': OG_IMAGE_CACHE_HIT})
        return response_png(cache_path)

    # 4- Render through the queue
    try:
        og_queue.render(key, text)
    except RenderError as e:
        logger.error(
            'OG image render failed. Serving default image.',
            extra={'key': key, 'text': text, 'error': str(e), 'event': OG_IMAGE_RENDER_FAILED},
        )
        return response_default_png()

    logger.info('Serving rendered OG image.', extra={'key': key, 'event': OG_IMAGE_RENDERED})
    return response_png(cache_path)
