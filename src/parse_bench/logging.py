"""
Structured logging setup for parse-bench.

Configures structlog to write to stderr so stdout carries only the
benchmark report. Modules obtain loggers with ``structlog.get_logger()`` and
log event names with keyword context.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name (``DEBUG``, ``INFO``, ...).
        json_output: Render JSON lines instead of human-readable console text.
    """
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
