from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import re
import sys
from typing import Any

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Test runs write next to the test suite instead of logs/
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Ticket holders' contact details and backend credentials never reach the log
SENSITIVE_KEYWORDS = {
    'password',
    'phone',
    'token',
}
MAX_CONTENT_LENGTH = 500

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


# httpx: 'HTTP Request: POST http://api/api/bookings/sno/T-1/scan "HTTP/1.1 409 Conflict"'
_HTTPX_REQUEST_LINE = re.compile(r'^HTTP Request: .* "HTTP/[\d.]+ (?P<status>\d{3})')


def _parse_http_status_level(message: str) -> str | None:
    """Log level for an httpx request line, by response status; None for other messages."""
    match = _HTTPX_REQUEST_LINE.match(message)
    if match is None:
        return None

    status_code = int(match.group('status'))
    if status_code >= 500:
        return 'ERROR'
    if status_code >= 400:
        return 'WARNING'
    if status_code >= 200:
        return 'SUCCESS'
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Route stdlib logging (httpx, httpcore, asyncio) into loguru."""

    def __init__(self) -> None:
        super().__init__()
        self._logger = loguru_logger.bind(**_default_extra())

    def emit(self, record: logging.LogRecord) -> None:
        # httpcore emits one DEBUG line per connection/stream step
        if record.name.startswith('httpcore') and record.levelno <= logging.DEBUG:
            return

        message = record.getMessage()
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        level: str | int | None = _parse_http_status_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Skip logging's own frames so the record points at the caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    hour = datetime.now().astimezone().strftime('%Y-%m-%d_%H')
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{LOG_DIR}/{prefix}{hour}.log'


def _configure_sinks() -> None:
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, format=io_log_format, level=level)

    # Operators' terminals only get stderr; the rotating file is a debugging aid
    if settings.DEBUG:
        loguru_logger.add(
            _log_file_path(),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


_configure_sinks()
custom_logger = loguru_logger.bind(**_default_extra())
