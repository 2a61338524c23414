"""Logging setup for the shapectl CLI.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers. The CLI calls :func:`configure_logging` once per invocation; a
structlog ``ProcessorFormatter`` on a single stderr handler then renders
stdlib records and structlog events alike, as console lines or JSON objects.

Levels for the ``shapectl`` logger tree:

==========  =================================================
``-v``      DEBUG, which includes the per-check INFO outcomes
default     WARNING
``-q``      ERROR
==========  =================================================

Other libraries log through the root logger at WARNING.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from typing import Any

import structlog

_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
)


def shape_log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``shapectl`` loggers; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _formatter(log_json: bool) -> dict[str, Any]:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": list(_PRE_CHAIN),
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    }


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Send all logging to stderr through one structlog-formatted handler.

    Calling it again replaces the handler instead of stacking a second one.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"structlog": _formatter(log_json)},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stderr,
                    "formatter": "structlog",
                },
            },
            "root": {"level": logging.WARNING, "handlers": ["stderr"]},
            "loggers": {
                "shapectl": {"level": shape_log_level(verbose=verbose, quiet=quiet)},
            },
        }
    )
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
