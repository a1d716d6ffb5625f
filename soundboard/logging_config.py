"""
Structured logging configuration for the soundboard engine.

Provides JSON-formatted logs with a trace_id field. Reducer logs use the
action kind as trace_id so every line of one transition can be correlated.

Environment Variables:
    SOUNDBOARD_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    SOUNDBOARD_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from soundboard.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="SET_SOCKET")
    logger.debug("SET_SOCKET")
"""

import logging
import os
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - SOUNDBOARD_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - SOUNDBOARD_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("SOUNDBOARD_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("SOUNDBOARD_LOG_FORMAT", "json").lower()
    level = LEVELS.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "text":
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the action kind)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
