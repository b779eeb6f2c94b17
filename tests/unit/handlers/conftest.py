import json
from unittest.mock import MagicMock

import pytest

from parabens.context import AppContext
from parabens.dao.base import ShortLinkBaseDAO
from parabens.dao.json import ShortLinkJsonDAO
from parabens.render import OgImageQueue


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv('PUBLIC_BASE_URL', 'https://parabens.vc')


@pytest.fixture
def dao() -> MagicMock:
    """Mock DAO implementing ShortLinkBaseDAO."""
    return MagicMock(spec=ShortLinkBaseDAO)


@pytest.fixture
def og_queue(tmp_path) -> MagicMock:
    """Mock render queue resolving cache paths under tmp_path."""
    og_queue = MagicMock(spec=OgImageQueue)
    og_queue.cache_dir = tmp_path
    og_queue.cache_path.side_effect = lambda key: tmp_path / 'og' / f'{key}.png'
    return og_queue


@pytest.fixture
def context(dao, og_queue) -> AppContext:
    return AppContext(short_link_dao=dao, og_image_queue=og_queue)


@pytest.fixture
def json_dao(tmp_path) -> ShortLinkJsonDAO:
    return ShortLinkJsonDAO(db_path=tmp_path / 'shortlinks.json')


@pytest.fixture
def json_context(json_dao, og_queue) -> AppContext:
    """Context backed by a real JSON store in tmp_path."""
    return AppContext(short_link_dao=json_dao, og_image_queue=og_queue)


@pytest.fixture
def post_event():
    def _event(body, headers=None) -> dict:
        return {
            'httpMethod': 'POST',
            'headers': {'Content-Type': 'application/json', **(headers or {})},
            'body': body if isinstance(body, str) else json.dumps(body),
            'requestContext': {'sourceIp': '10.0.0.1'},
        }

    return _event


@pytest.fixture
def get_event():
    def _event(path='/', query=None, path_parameters=None, method='GET') -> dict:
        return {
            'httpMethod': method,
            'path': path,
            'headers': {},
            'queryStringParameters': query,
            'pathParameters': path_parameters,
            'body': '',
            'requestContext': {'sourceIp': '10.0.0.1'},
        }

    return _event
