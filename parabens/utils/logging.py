"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start, before any
other logging is done.

Every record is one JSON object per line on stdout. Context travels in
`extra` and ends up as top-level fields:

    >>> logger.info('request', extra={'method': 'GET', 'status': 200})
    {"timestamp": "2026-10-18T12:00:00.000Z", "level": "INFO", "logger": "parabens.server",
     "message": "request", "method": "GET", "status": 200}
"""

import json
import logging
import logging.config
from typing import Any
from datetime import datetime, UTC

from parabens.utils.config import log_level


# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.INFO, '', 0, '', None, None))) | {'message', 'asctime'}

# Third-party loggers kept quieter than the application
QUIET_LOGGERS = {
    'werkzeug': 'WARNING',  # the development server logs every request on its own
    'flask_limiter': 'WARNING',
}


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects, `extra` fields included"""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC)
        return timestamp.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **extra_fields(record),
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        # Values json can't encode (paths, exceptions, ...) are logged as str()
        return json.dumps(log, ensure_ascii=False, default=str)


def logging_config(level: str) -> dict[str, Any]:
    """Build the dictConfig schema: JSON lines on stdout at `level`"""
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'json': {'()': JsonFormatter}},
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': 'ext://sys.stdout',
            }
        },
        'loggers': {name: {'level': quiet_level} for name, quiet_level in QUIET_LOGGERS.items()},
        'root': {'level': level, 'handlers': ['stdout']},
    }


def initialize_logging() -> None:
    """Configure the root logger from `LOG_LEVEL` (INFO by default)"""
    logging.config.dictConfig(logging_config(log_level()))
