"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the process entry point before any
other logging is done (see `linkshortener.server.main()`).

Two output formats are supported, selected with LOG_FORMAT:

json (default):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.api.routes",
    "message": "Shortened URL. Responding with 200.",
    "shortcode": "Gh71WP"
}

text:
2026-10-19T12:00:00.000Z INFO linkshortener.api.routes: Shortened URL. Responding with 200. shortcode=Gh71WP
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.constants import ENV


# LogRecord attributes that are not user-supplied `extra` fields
STANDARD_ATTRS = frozenset(
    {
        'args',
        'asctime',
        'color_message',
        'created',
        'exc_info',
        'exc_text',
        'filename',
        'funcName',
        'levelname',
        'levelno',
        'lineno',
        'module',
        'msecs',
        'message',
        'msg',
        'name',
        'pathname',
        'process',
        'processName',
        'relativeCreated',
        'stack_info',
        'thread',
        'threadName',
        'taskName',
    }
)


def _timestamp(record: logging.LogRecord) -> str:
    # fmt: off
    return datetime.fromtimestamp(record.created, tz=UTC) \
                   .isoformat(timespec='milliseconds') \
                   .replace('+00:00', 'Z')
    # fmt: on


def _extras(record: logging.LogRecord) -> dict:
    return {key: value for key, value in record.__dict__.items() if key not in STANDARD_ATTRS}


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _timestamp(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update(_extras(record))

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


class TextFormatter(logging.Formatter):
    """Single-line human readable formatter, extras appended as key=value"""

    def format(self, record: logging.LogRecord) -> str:
        line = f'{_timestamp(record)} {record.levelname} {record.name}: {record.getMessage()}'
        extras = ' '.join(f'{key}={value}' for key, value in _extras(record).items())
        if extras:
            line = f'{line} {extras}'
        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'
        return line


FORMATTERS = {
    'json': JsonFormatter,
    'text': TextFormatter,
}


def initialize_logging() -> None:
    """Route all loggers (uvicorn's included) to a single stdout handler."""
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    log_format = os.getenv(ENV.App.LOG_FORMAT, 'json').lower()
    formatter = FORMATTERS.get(log_format, JsonFormatter)

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    '()': formatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'default',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {
                # uvicorn installs its own handlers unless told otherwise
                'uvicorn': {'handlers': [], 'propagate': True},
                'uvicorn.error': {'handlers': [], 'propagate': True},
                # request lines are logged by RequestLoggingMiddleware
                'uvicorn.access': {'handlers': [], 'propagate': False},
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
