"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LOGGER_NAME = "depsentinel"


def setup_logging() -> None:
    """Configure structlog and the agent's stdlib logger.

    The agent lives inside someone else's process, so only the
    ``depsentinel`` logger tree is given a handler; the host's root logger
    is left alone.

    Reads from environment variables:
        DEPSENTINEL_LOG_LEVEL  — agent log level (default: INFO)
        DEPSENTINEL_LOG_FORMAT — console | json (default: console)
    """
    log_level = os.environ.get("DEPSENTINEL_LOG_LEVEL", "INFO").upper()
    log_format = os.environ.get("DEPSENTINEL_LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    # --- structlog configure ---
    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # --- stdlib logging configure ---
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "agent": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["agent"],
                    "level": log_level,
                    "propagate": False,
                },
            },
        }
    )
