"""HTTP response builders shared by the handlers

Handlers answer with API-Gateway-proxy shaped dicts:

    {
        'statusCode': 200,
        'headers': {'Content-Type': '...'},
        'body': '...',
        'isBase64Encoded': False,
    }

Binary bodies (PNG images) are base64-encoded with `isBase64Encoded` set.
"""

import json
import base64
from typing import Any

from parabens.types import HandlerResponse


JSON_CONTENT_TYPE = 'application/json; charset=utf-8'
HTML_CONTENT_TYPE = 'text/html; charset=utf-8'


def response_json(status: int, payload: dict[str, Any]) -> HandlerResponse:
    return {
        'statusCode': status,
        'headers': {'Content-Type': JSON_CONTENT_TYPE},
        'body': json.dumps(payload, ensure_ascii=False),
    }


def response_error(status: int, message: str, error_code: str | None = None) -> HandlerResponse:
    body = {'message': message}
    if error_code:
        body['errorCode'] = error_code
    return response_json(status, body)


def response_400(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    base = 'Bad Request'
    return response_error(400, base if not message else f'{base} ({message})', error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    return response_error(404, message or 'Not Found', error_code)


def response_405(allowed: str) -> HandlerResponse:
    response = response_error(405, 'Method Not Allowed')
    response['headers']['Allow'] = allowed
    return response


def response_500(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    base = 'Internal Server Error'
    return response_error(500, base if not message else f'{base} ({message})', error_code)


def response_text(status: int, body: str, content_type: str, cache_control: str | None = None) -> HandlerResponse:
    headers = {'Content-Type': content_type}
    if cache_control:
        headers['Cache-Control'] = cache_control
    return {
        'statusCode': status,
        'headers': headers,
        'body': body,
    }


def response_html(status: int, html: str, cache_control: str | None = None) -> HandlerResponse:
    return response_text(status, html, HTML_CONTENT_TYPE, cache_control)


def response_bytes(data: bytes, content_type: str, cache_control: str | None = None) -> HandlerResponse:
    headers = {'Content-Type': content_type}
    if cache_control:
        headers['Cache-Control'] = cache_control
    return {
        'statusCode': 200,
        'headers': headers,
        'body': base64.b64encode(data).decode('ascii'),
        'isBase64Encoded': True,
    }


def response_204() -> HandlerResponse:
    return {
        'statusCode': 204,
        'headers': {},
        'body': '',
    }


def response_302(*, location: str) -> HandlerResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': '',
    }
