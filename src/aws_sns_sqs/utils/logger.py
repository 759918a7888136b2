"""
Module: logger.py
Description: Structured logging configuration for the SNS/SQS clients.

Configures structlog for JSON output so client activity can be shipped
to CloudWatch Logs alongside the application that embeds the library.

Key Components:
- JSON output with timestamp and level processors
- configure_logging(), opt-in, to apply the pipeline and a minimum level
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger
from datetime import datetime, timezone

from ..config.settings import Settings


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog for JSON output filtered at the given level.

    Nothing calls this on import; the embedding application opts in.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            SNS_SQS_LOG_LEVEL from the environment if omitted
    """
    if level is None:
        level = Settings().log_level

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent to SQS", queue_url=url, message_id="abc")
        {"queue_url": "...", "message_id": "abc", "event": "Message sent to SQS", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
