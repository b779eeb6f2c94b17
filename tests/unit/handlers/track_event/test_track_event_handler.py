"""Unit tests for the track_event handler.

Test coverage includes:
    - Valid events are logged as a `track_event` record and answered with 204.
    - Request metadata (client IP, user agent, referer, language) is logged.
    - Oversized bodies -> 413; invalid JSON or non-object bodies -> 400.
"""

import logging

import pytest

from parabens.handlers.track_event import app


def test_track_event_is_logged(post_event, context, caplog):
    event = post_event(
        {
            'event': 'page_view',
            'path': '/Joana',
            'query': '?theme=warm',
            'timezone': 'America/Sao_Paulo',
            'screen': {'width': 390, 'height': 844},
            'unknown_field': 'dropped',
        },
        headers={
            'X-Forwarded-For': '203.0.113.7, 10.0.0.1',
            'User-Agent': 'pytest',
            'Referer': 'https://example.com/',
            'Accept-Language': 'pt-BR',
        },
    )

    with caplog.at_level(logging.INFO, logger=app.__name__):
        response = app.handler(event, context)

    assert response['statusCode'] == 204
    assert response['body'] == ''

    [record] = [r for r in caplog.records if r.getMessage() == 'track_event']
    assert record.event == 'page_view'
    assert record.path == '/Joana'
    assert record.query == '?theme=warm'
    assert record.timezone == 'America/Sao_Paulo'
    assert record.screen == {'width': 390, 'height': 844}
    assert record.viewport == ''
    assert record.ip == '203.0.113.7'
    assert record.user_agent == 'pytest'
    assert record.referer == 'https://example.com/'
    assert record.accept_language == 'pt-BR'
    assert not hasattr(record, 'unknown_field')


def test_peer_address_is_used_without_proxy_headers(post_event, context, caplog):
    with caplog.at_level(logging.INFO, logger=app.__name__):
        app.handler(post_event({'event': 'share'}), context)

    [record] = [r for r in caplog.records if r.getMessage() == 'track_event']
    assert record.ip == '10.0.0.1'


def test_oversized_body(post_event, context):
    response = app.handler(post_event({'event': 'x' * (16 * 1024)}), context)
    assert response['statusCode'] == 413


@pytest.mark.parametrize('body', ['{not json', '', '[1, 2]', '"text"'])
def test_bad_request(post_event, context, body):
    response = app.handler(post_event(body), context)
    assert response['statusCode'] == 400


def test_method_not_allowed(get_event, context):
    response = app.handler(get_event('/api/track'), context)
    assert response['statusCode'] == 405
