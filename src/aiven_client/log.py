"""Logging setup for applications using the client.

The library only emits events through ``structlog.get_logger``; it never
configures logging on import. Applications that have no structlog setup of
their own can call :func:`configure_logging` once at startup.
"""

import logging
from typing import TextIO

import structlog


def configure_logging(
    log_level_name: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for logfmt output.

    Args:
        log_level_name: Minimum level to emit; unknown names mean INFO.
        stream: Where rendered lines are written (default: stdout). Pass
            ``sys.stderr`` to keep stdout free for program output.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
