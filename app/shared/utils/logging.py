# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Makes every log line say which request and which reviewer it belongs to, so one review
# submission can be followed from the HTTP call down to the database.

# 🧪 Purpose (Technical Summary):
# Root logger setup with a JSON or text formatter. Request and user ids live in contextvars
# set by log_context() and bind_user() and are stamped onto every record.

# 🔗 Dependencies:
# - logging: Python standard logging
# - contextvars: Request context tracking
# - app.shared.config.settings: log level, format and file

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), request logging middleware (context binding),
# every module through logging.getLogger(__name__)

import json
import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional
from uuid import uuid4

from app.shared.config.settings import get_settings

request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'oyster-review-api'

_logging_configured = False


class ContextualFormatter(logging.Formatter):
    """Text formatter; stamps request id, user id, host and service on each record."""

    hostname = socket.gethostname()

    def stamp(self, record: logging.LogRecord) -> None:
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()

    def format(self, record):
        self.stamp(record)
        return super().format(record)


# Attributes the request logging middleware passes through `extra`
REQUEST_FIELDS = ('method', 'path', 'status_code', 'duration_ms')


class JSONFormatter(ContextualFormatter):
    """One JSON object per line. Request timing fields are copied when present."""

    def format(self, record):
        self.stamp(record)
        entry = {
            'timestamp': record.timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'service': record.service,
            'hostname': record.hostname,
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }
        for key in ('request_id', 'user_id'):
            if getattr(record, key):
                entry[key] = getattr(record, key)
        entry.update({key: getattr(record, key) for key in REQUEST_FIELDS if hasattr(record, key)})

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc_value),
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Install handlers on the root logger from settings.

    Only the first call does anything; the app lifespan and tests may
    both call it.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    user_id: Optional[str] = None,
) -> Iterator[dict]:
    """
    Bind a request id (generated when omitted) and optional user id for
    the duration of the block.
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {
            'request_id': request_id,
            'user_id': user_id,
        }
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to the current log context."""
    user_id_var.set(user_id)


def get_request_id() -> str:
    return request_id_var.get('')
