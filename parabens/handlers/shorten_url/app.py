import json
import logging
from typing import Any

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse
from parabens.dao.exceptions import ShortLinkStoreLoadError, ShortCodeExhaustedError, ShortLinkPersistError
from parabens.greeting import parse_occasion_from_path, decode_path, encode_url_path, is_blocked_message
from parabens.handlers.responses import response_json, response_error, response_400, response_405, response_500
from parabens.utils.helpers import short_url, absolute_url, guarantee_500_response
from parabens.utils.constants import MAX_SHORTLINK_BODY_BYTES
from parabens.handlers.shorten_url.constants import (
    STORE_UNAVAILABLE,
    PAYLOAD_TOO_LARGE,
    INVALID_JSON_BODY,
    MISSING_PATH,
    EMPTY_MESSAGE,
    BLOCKED_MESSAGE,
    CODE_SPACE_EXHAUSTED,
    PERSIST_FAILED,
    SHORTLINK_CREATED,
    SHORTLINK_REUSED,
)


logger = logging.getLogger(__name__)


def shortlink_payload(code: str, path: str) -> dict[str, Any]:
    """Build the JSON body describing a shortlink

    Example:
        >>> shortlink_payload('abc1234', '/aniversario/Joana')
        {'code': 'abc1234',
         'short_url': 'https://parabens.vc/s/abc1234',
         'path': 'aniversario/Joana',
         'destination': 'https://parabens.vc/aniversario/Joana'}
    """
    clean_path = path.strip().removeprefix('/')
    return {
        'code': code,
        'short_url': short_url(code),
        'path': clean_path,
        'destination': absolute_url(encode_url_path(clean_path)),
    }


def normalize_request_path(path: str) -> str:
    path = path.strip()
    return path if path.startswith('/') else f'/{path}'


@guarantee_500_response
def handler(event: HandlerEvent, context: AppContext) -> HandlerResponse:
    """Handle shortlink creation requests (POST /s)

    This handler follows this procedure to shorten greeting URLs:
    - Step 1: Make sure the shortlink store is loaded
    - Step 2: Extract the greeting path from the JSON request body
    - Step 3: Validate the greeting message embedded in the path
    - Step 4: Get or create the shortlink (idempotent per path)
    - Step 5: Respond with the shortlink details

    HTTP responses:
        201: Shortlink created
        200: Shortlink already existed for this path
            code: shortlink code
            short_url: absolute short URL
            path: stored path (without leading slash)
            destination: absolute destination URL
        400: Bad client request (invalid JSON, missing path or empty message)
        403: Blocked message
        405: Method not allowed
        413: Request body too large
        500: Internal server error (store unavailable or write failure)
        503: No unused code available (temporary)

    Args:
        event (HandlerEvent):
            Request event, body `{"path": "/aniversario/Joana?theme=warm"}`.
        context (AppContext):
            Application context holding the shortlink store.

    Returns:
        HandlerResponse:
            Status code, headers and JSON body.

    Example:
        >>> event = {'httpMethod': 'POST', 'body': '{"path": "/Joana"}'}
        >>> response = handler(event, context)
        >>> response['statusCode']
        201
    """
    if event.get('httpMethod', 'POST') != 'POST':
        return response_405('POST')

    # 1- Make sure the store is usable
    dao = context.short_link_dao
    try:
        dao.ensure_loaded()
    except ShortLinkStoreLoadError:
        logger.exception('Shortlink store unavailable. Responding with 500.', extra={'event': STORE_UNAVAILABLE})
        return response_500(error_code=STORE_UNAVAILABLE)

    # 2- Extract the greeting path from the request body
    body = event.get('body') or ''
    if len(body.encode('utf-8')) > MAX_SHORTLINK_BODY_BYTES:
        return response_error(413, 'Payload Too Large', PAYLOAD_TOO_LARGE)
    try:
        request_body = json.loads(body or '{}')
    except json.JSONDecodeError:
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    raw_path = request_body.get('path') if isinstance(request_body, dict) else None
    if not isinstance(raw_path, str) or not raw_path.strip():
        return response_400(message="missing 'path' in JSON body", error_code=MISSING_PATH)

    # The full path (occasion prefix and query string included) is stored
    full_path = normalize_request_path(raw_path)

    # 3- Validate the message part of the path
    path_only = full_path.split('?', 1)[0]
    _, raw_message = parse_occasion_from_path(path_only)
    message = decode_path(raw_message)
    if not message:
        return response_400(message='empty greeting message', error_code=EMPTY_MESSAGE)
    if is_blocked_message(message):
        logger.info('Blocked message in shortlink request. Responding with 403.', extra={'event': BLOCKED_MESSAGE})
        return response_error(403, 'Forbidden', BLOCKED_MESSAGE)

    # 4- Get or create the shortlink
    try:
        short_link, created = dao.get_or_create(full_path)
    except ShortCodeExhaustedError:
        logger.error('No unused shortlink code available. Responding with 503.', extra={'event': CODE_SPACE_EXHAUSTED})
        return response_error(503, 'Service Unavailable', CODE_SPACE_EXHAUSTED)
    except ShortLinkPersistError:
        logger.exception('Failed to persist shortlink. Responding with 500.', extra={'event': PERSIST_FAILED})
        return response_500(error_code=PERSIST_FAILED)

    # 5- Respond with the shortlink
    logger.info(
        'Shortlink %s. Responding with %s.',
        'created' if created else 'reused',
        201 if created else 200,
        extra={'code': short_link.code, 'event': SHORTLINK_CREATED if created else SHORTLINK_REUSED},
    )
    return response_json(201 if created else 200, shortlink_payload(short_link.code, short_link.path))
