"""
Structured logging configuration for macpack-launcher.

Logs are written to stderr so they never interleave with bundle output
printed on stdout.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(log_level: str = "WARNING", log_format: str = "text") -> None:
    """
    Configure structlog on top of the standard logging module.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "json" for one JSON object per line, "text" for console output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.WARNING),
        force=True,
    )

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(launch_id: str = None, bundle_path: str = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional launch context.

    Args:
        launch_id: Launch identifier for tracing
        bundle_path: Normalized bundle path being run
    """
    context: dict[str, Any] = {}
    if launch_id:
        context["launch_id"] = launch_id
    if bundle_path:
        context["bundle_path"] = bundle_path

    return structlog.get_logger(**context)
