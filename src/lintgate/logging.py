"""Structured diagnostics for lintgate.

Diagnostics are separate from the console contract (banners, skip lines,
failure dumps) and always go to stderr, so piping ``lintgate run`` output
never mixes the two. structlog renders them either as readable key/value
lines or, with ``LINTGATE_LOG_FORMAT=json``, as one JSON object per line
for CI log collectors.

The level comes from, in order: ``-q``/``-v`` on the command line, the
``verbosity`` config field, then ``LINTGATE_LOG_LEVEL``.

Usage:
    from lintgate.logging import configure_logging, get_logger, resolve_level

    configure_logging(level=resolve_level(quiet=False, verbose=1))
    log = get_logger(__name__)
    log.debug("executable_probed", executable="flake8", path="/usr/bin/flake8")
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "resolve_level",
]

LOG_FORMAT_ENV_VAR = "LINTGATE_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "LINTGATE_LOG_LEVEL"

#: Names accepted by the ``verbosity`` config field
VERBOSITY_LEVELS: dict[str, int] = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "warning").lower()
    return VERBOSITY_LEVELS.get(name, logging.WARNING)


def resolve_level(
    *, quiet: bool = False, verbose: int = 0, configured: str | None = None
) -> int:
    """Pick the effective log level from CLI flags and configuration.

    Args:
        quiet: ``-q`` was given; only errors are logged.
        verbose: Number of ``-v`` flags (1 = INFO, 2+ = DEBUG).
        configured: The ``verbosity`` config value, if any.

    Returns:
        A stdlib logging level.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO if verbose == 1 else logging.DEBUG
    if configured is not None:
        return VERBOSITY_LEVELS.get(configured, logging.WARNING)
    return _level_from_env()


def _pre_chain() -> list[Processor]:
    # Shared by structlog loggers and foreign stdlib records
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, force_json: bool = False, level: int | None = None) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        force_json: Render JSON even when LINTGATE_LOG_FORMAT is unset.
        level: Log level. If None, LINTGATE_LOG_LEVEL or WARNING.
    """
    as_json = force_json or os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"
    effective_level = _level_from_env() if level is None else level

    renderer: Processor
    if as_json:
        renderer = structlog.processors.JSONRenderer()
        exc_processor: Processor = structlog.processors.dict_tracebacks
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        exc_processor = structlog.processors.format_exc_info

    structlog.configure(
        processors=[
            *_pre_chain(),
            exc_processor,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(effective_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_pre_chain(),
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(effective_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Attach key/value pairs to every following log record.

    The orchestrator binds ``step`` while a step runs.
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
