"""Unit tests for the JSON log formatter and logging initialization.

Test coverage includes:
    - Records are formatted as one JSON object with the standard fields.
    - `extra` fields are attached; non-JSON values are stringified.
    - Exceptions and stack traces are rendered into their own fields.
    - The dictConfig schema logs to stdout and quiets chatty third-party loggers.
    - initialize_logging() honors LOG_LEVEL and installs the JSON formatter.
"""

import sys
import json
import logging
from pathlib import Path

import pytest

from parabens.utils.logging import JsonFormatter, extra_fields, logging_config, initialize_logging


def make_record(msg='hello', level=logging.INFO, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord('parabens.test', level, __file__, 1, msg, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_format_standard_fields():
    log = json.loads(JsonFormatter().format(make_record('Olá, mundo')))

    assert log['level'] == 'INFO'
    assert log['logger'] == 'parabens.test'
    assert log['message'] == 'Olá, mundo'
    assert log['timestamp'].endswith('Z')
    assert 'exception' not in log


def test_format_includes_extra_fields():
    log = json.loads(JsonFormatter().format(make_record(code='abc1234', status=201, path=Path('/tmp/x'))))

    assert log['code'] == 'abc1234'
    assert log['status'] == 201
    assert log['path'] == '/tmp/x'
    assert 'args' not in log and 'msg' not in log


def test_format_keeps_non_ascii_characters():
    assert 'Parabéns' in JsonFormatter().format(make_record('Parabéns'))


def test_format_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record('failed', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['level'] == 'ERROR'
    assert 'RuntimeError: boom' in log['exception']


def test_format_includes_stack_info():
    record = make_record('traced')
    record.stack_info = 'Stack (most recent call last):\n  File "x.py", line 1'

    log = json.loads(JsonFormatter().format(record))

    assert log['stack'].startswith('Stack (most recent call last)')
    assert 'stack_info' not in log


def test_extra_fields_skips_record_attributes():
    assert extra_fields(make_record(code='abc1234', event='SHORTLINK_CREATED')) == {
        'code': 'abc1234',
        'event': 'SHORTLINK_CREATED',
    }


def test_logging_config():
    config = logging_config('WARNING')

    assert config['root'] == {'level': 'WARNING', 'handlers': ['stdout']}
    assert config['handlers']['stdout']['stream'] == 'ext://sys.stdout'
    assert config['loggers']['werkzeug'] == {'level': 'WARNING'}
    assert config['loggers']['flask_limiter'] == {'level': 'WARNING'}


@pytest.fixture
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers, root.level = handlers, level


@pytest.mark.usefixtures('_restore_root_logger')
def test_initialize_logging(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    initialize_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
    assert logging.getLogger('werkzeug').level == logging.WARNING
