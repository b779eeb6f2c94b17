import json
import logging
from typing import Any

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse, TrackEvent
from parabens.handlers.responses import response_204, response_400, response_405, response_error
from parabens.utils.helpers import client_ip, event_header, guarantee_500_response
from parabens.utils.constants import MAX_TRACK_BODY_BYTES
from parabens.handlers.track_event.constants import TRACK_EVENT, PAYLOAD_TOO_LARGE, INVALID_JSON_BODY, TRACK_FIELDS


logger = logging.getLogger(__name__)


def track_record(payload: TrackEvent, event: HandlerEvent) -> dict[str, Any]:
    """Build the log record of a client analytics event

    Only the known fields are kept (nested values such as `screen` as sent);
    missing ones become ''. Request metadata (client IP, user agent, referer,
    accepted languages) is added.
    """
    record = {field: payload.get(field, '') for field in TRACK_FIELDS}
    request_context = event.get('requestContext') or {}
    record.update(
        {
            'ip': client_ip(event.get('headers') or {}, request_context.get('sourceIp')),
            'user_agent': event_header(event, 'User-Agent'),
            'referer': event_header(event, 'Referer'),
            'accept_language': event_header(event, 'Accept-Language'),
        }
    )
    return record


@guarantee_500_response
def handler(event: HandlerEvent, context: AppContext) -> HandlerResponse:
    """Handle client analytics events (POST /api/track)

    Events are not stored; they are written to the application log as a
    structured `track_event` record.

    HTTP responses:
        204: Event logged
        400: Body isn't a JSON object
        405: Method not allowed
        413: Request body too large

    Example:
        >>> event = {'httpMethod': 'POST', 'body': '{"event": "share", "path": "/Joana"}'}
        >>> handler(event, context)['statusCode']
        204
    """
    if event.get('httpMethod', 'POST') != 'POST':
        return response_405('POST')

    body = event.get('body') or ''
    if len(body.encode('utf-8')) > MAX_TRACK_BODY_BYTES:
        return response_error(413, 'Payload Too Large', PAYLOAD_TOO_LARGE)

    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
    if not isinstance(payload, dict):
        return response_400(message='expected a JSON object', error_code=INVALID_JSON_BODY)

    logger.info(TRACK_EVENT, extra=track_record(payload, event))
    return response_204()
