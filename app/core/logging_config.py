"""
Logging configuration for the public holidays service.

Two output formats are supported: JSON lines for log aggregation and a
human-readable format for local development and the CLI.

Usage:
    from app.core.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)

    logger.info("Fetching holidays", extra={'country': 'NL'})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# LogRecord attributes that are never treated as extra fields
RESERVED_FIELDS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
    'taskName', 'message', 'color_message'
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value for key, value in record.__dict__.items()
        if key not in RESERVED_FIELDS
    }


class JsonFormatter(logging.Formatter):
    """
    Format log records as a single JSON object per line.

    Output format:
    {
        "timestamp": "2024-04-27T10:30:00.000+00:00",
        "level": "WARNING",
        "logger": "app.services.public_holidays_service",
        "message": "Upstream call failed",
        "url": "https://date.nager.at/api/v3/NextPublicHolidays/NL"
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(timespec='milliseconds'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in _extra_fields(record).items():
            if key in log_obj:
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class HumanFormatter(logging.Formatter):
    """
    Human-readable formatter.

    Output format:
    2024-04-27 10:30:00 INFO  [services.public_holidays_service] Fetching holidays (country=NL)
    """

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        level = record.levelname.ljust(5)
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelname, '')
            level = f"{color}{level}{self.RESET}"

        logger_name = record.name
        if logger_name.startswith('app.'):
            logger_name = logger_name[4:]

        extras = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        extra_str = f" ({', '.join(extras)})" if extras else ""

        output = f"{timestamp} {level} [{logger_name}] {record.getMessage()}{extra_str}"

        if record.exc_info:
            output += f"\n{self.formatException(record.exc_info)}"

        return output


def setup_logging(
    json_format: Optional[bool] = None,
    level: Optional[str] = None,
    logger_name: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        json_format: Use JSON format (True) or human-readable (False).
                     Defaults to the LOG_JSON setting.
        level: Log level name. Defaults to the LOG_LEVEL setting.
        logger_name: Specific logger to configure. If None, configures root logger.
    """
    from app.core.config import settings

    if json_format is None:
        json_format = settings.LOG_JSON

    if level is None:
        level = settings.LOG_LEVEL
    level = level.upper()

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level, logging.INFO))

    # Avoid duplicate handlers when called more than once
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(getattr(logging, level, logging.INFO))
    handler.setFormatter(JsonFormatter() if json_format else HumanFormatter())

    logger.addHandler(handler)

    if logger_name:
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically with __name__."""
    return logging.getLogger(name)
