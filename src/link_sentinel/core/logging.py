"""Structured logging built on structlog.

Configured once on import so library callers get quiet, consistent output.
Everything goes to stderr; stdout is reserved for CLI results.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "console"


def _level_value(level: str) -> int:
    value = getattr(logging, str(level or "").strip().upper(), None)
    return value if isinstance(value, int) else logging.WARNING


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per call so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = DEFAULT_LOG_LEVEL, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """(Re)configure structlog processors, level and renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if str(fmt or "").strip().lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging(
        os.getenv("LINK_SENTINEL_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        os.getenv("LINK_SENTINEL_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def get_logger(name: str) -> Any:
    """Return a lazy structured logger tagged with the module name.

    Stays lazy (no bind) so later configure_logging calls still apply.

        logger = get_logger(__name__)
        logger.debug("url_evaluated", level="safe", score=0)
    """
    return structlog.get_logger(name, logger_name=name)
