"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once in the entry point (see
`linkshortener.cli.app.main`) before any other logging is done. Library code
only ever calls `logging.getLogger(__name__)`.

Logging format (one JSON object per line):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.services.shortener_service",
    "message": "Short link created.",
    "event": "LINK_CREATED",
    "identifier": "4fZk1Qa"
}

Example:
    >>> import logging
    >>> from linkshortener.constants import Event
    >>> from linkshortener.utils import initialize_logging
    >>> initialize_logging('DEBUG')
    >>> logging.getLogger('linkshortener.tasks.janitor').info(
    ...     'Janitor sweep finished.', extra={'event': Event.JANITOR_SWEEP, 'removed': 3}
    ... )
    {"timestamp": "...", "level": "INFO", "logger": "linkshortener.tasks.janitor", "message": "Janitor sweep finished.", "event": "JANITOR_SWEEP", "removed": 3}

Failures logged with `logger.exception(...)` (see `JanitorTask.tick`) carry
the formatted traceback under an "exception" key.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
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

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Extras may carry datetimes and enums
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
