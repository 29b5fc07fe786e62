"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

# Chatty third-party loggers held at WARNING regardless of the service level
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "google_genai")


def setup_logging(level: str = "INFO", service: str = "debate-gym") -> None:
    """Configure structlog for the service and align stdlib logging with it.

    Console output on a terminal, one JSON object per line everywhere else.
    Every event carries the ``service`` name.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer = (
        structlog.dev.ConsoleRenderer()
        if sys.stderr.isatty()
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service)

    logging.basicConfig(stream=sys.stderr, level=log_level, format="%(name)s %(levelname)s %(message)s")
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
