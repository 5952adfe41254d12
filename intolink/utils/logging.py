"""JSON log output

The entry point calls `initialize_logging()` before anything else logs. Every
record is rendered as one JSON object per line on stdout:

    {"timestamp": "2026-10-19T08:15:02.113Z", "level": "INFO", "logger": "intolink.services.shorten",
     "message": "Created short URL.", "shortcode": "Xb3kP0qLmZ", "event": "SHORT_URL_CREATED"}

uvicorn's loggers lose their own handlers and propagate to the root logger, so
server and application lines share the format.
"""

import json
import logging
import logging.config
from datetime import datetime, UTC

from intolink.constants import Defaults


# Attributes every LogRecord carries; anything else on a record came from `extra`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime', 'color_message'}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        document = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        document.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            document['exception'] = self.formatException(record.exc_info)
        return json.dumps(document, default=str)


def initialize_logging(log_level: str = Defaults.LOG_LEVEL) -> None:
    """Route all logging through a single JSON stdout handler at `log_level`."""
    passthrough = {'handlers': [], 'propagate': True}
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {'class': 'logging.StreamHandler', 'formatter': 'json', 'stream': 'ext://sys.stdout'},
            },
            'loggers': {name: dict(passthrough) for name in ('uvicorn', 'uvicorn.error', 'uvicorn.access')},
            'root': {'level': log_level.upper(), 'handlers': ['stdout']},
        }
    )
