"""Helper utilities for HTTP handlers.

Functions:
    short_url(code: str) -> str
        Get string representation of the short URL for a given code
    absolute_url(path: str) -> str
        Join a site-relative path onto the public base URL
    client_ip(headers, remote_addr) -> str
        Resolve the originating client IP address of a request
    event_header(event, name) -> str
        Case-insensitive header lookup in a handler event
    event_query(event, name) -> str
        Query string parameter lookup in a handler event
    escape_html(value: str) -> str
        Escape text for safe inclusion in HTML documents
    escape_xml(value: str) -> str
        Escape text for the OG image SVG template
    file_exists(path) -> bool
        True if path exists and is a regular file
    guarantee_500_response(func) -> Callable
        Decorator: turn unexpected handler exceptions into HTTP 500

Example:
    >>> from parabens.utils.helpers import short_url
    >>> os.environ['PUBLIC_BASE_URL'] = 'http://localhost:8080/'
    >>> short_url('abc1234')
    'http://localhost:8080/s/abc1234'
"""

import json
import logging
import functools
from pathlib import Path
from typing import Any
from collections.abc import Callable, Mapping

from parabens.utils.config import public_base_url
from parabens.utils.constants import UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)

_HTML_ESCAPES = str.maketrans(
    {
        '&': '&amp;',
        '<': '&lt;',
        '>': '&gt;',
        '"': '&quot;',
        "'": '&#39;',
    }
)


def short_url(code: str) -> str:
    """Get string representation of a shortlink

    Args:
        code (str): shortlink code

    Returns:
        str: short url string representation, e.g. "https://parabens.vc/s/abc1234"
    """
    return f'{public_base_url().rstrip("/")}/s/{code}'


def absolute_url(path: str) -> str:
    """Join a site-relative path (with or without leading slash) onto the base URL"""
    return f'{public_base_url().rstrip("/")}/{path.lstrip("/")}'


def client_ip(headers: Mapping[str, str], remote_addr: str | None) -> str:
    """Resolve the originating client IP address

    Resolution order:
        1. first entry of `X-Forwarded-For`
        2. `X-Real-IP`
        3. the peer address of the connection (port stripped)

    Args:
        headers (Mapping[str, str]):
            Request headers. Lookups are case-insensitive.
        remote_addr (str | None):
            Peer address as reported by the server, e.g. "10.0.0.1" or "10.0.0.1:5123".

    Returns:
        str: client IP address ('' if nothing is known)

    Example:
        >>> client_ip({'X-Forwarded-For': '203.0.113.7, 10.0.0.1'}, '10.0.0.1')
        '203.0.113.7'
    """
    lowered = {k.lower(): v for k, v in headers.items()}

    forwarded = lowered.get('x-forwarded-for', '')
    if forwarded:
        return forwarded.split(',')[0].strip()

    real_ip = lowered.get('x-real-ip', '')
    if real_ip:
        return real_ip

    remote_addr = remote_addr or ''
    # Strip the port of "host:port" but leave bare IPv6 addresses alone
    if remote_addr.startswith('['):
        return remote_addr[1:].split(']', 1)[0]
    if remote_addr.count(':') == 1:
        return remote_addr.split(':', 1)[0]
    return remote_addr


def event_header(event: dict[str, Any], name: str) -> str:
    headers = event.get('headers') or {}
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value or ''
    return ''


def event_query(event: dict[str, Any], name: str) -> str:
    params = event.get('queryStringParameters') or {}
    return params.get(name) or ''


def escape_html(value: str) -> str:
    """Escape `& < > " '` for safe inclusion in HTML (and SVG/XML) documents

    Example:
        >>> escape_html('<b>"Tom" & Jerry</b>')
        '&lt;b&gt;&quot;Tom&quot; &amp; Jerry&lt;/b&gt;'
    """
    return value.translate(_HTML_ESCAPES)


def escape_xml(value: str) -> str:
    return escape_html(value)


def file_exists(path: str | Path) -> bool:
    """Return True if `path` exists and is a regular file (directories don't count)"""
    return Path(path).is_file()


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator ensuring a handler always answers, even on unexpected errors.

    Any exception escaping the wrapped handler is logged (with traceback) and
    converted into a JSON HTTP 500 response.

    Example:
        >>> @guarantee_500_response
        ... def handler(event, context):
        ...     raise RuntimeError('boom')
        >>> handler({}, None)['statusCode']
        500
    """

    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: Any, *args, **kwargs) -> dict[str, Any]:
        try:
            return func(event, context, *args, **kwargs)
        except Exception as error:
            logger.exception(
                'Unhandled exception in handler. Responding with 500.',
                extra={
                    'handler': func.__module__,
                    'event': UNKNOWN_INTERNAL_SERVER_ERROR,
                    'error': error.__class__.__name__,
                },
            )
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json; charset=utf-8'},
                'body': json.dumps({'message': 'Internal Server Error', 'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR}),
            }

    return wrapper
