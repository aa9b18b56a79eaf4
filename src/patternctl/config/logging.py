"""Logging setup for the pattern demos.

The pattern modules only call ``logging.getLogger(__name__)``; what they
log ("Opening Report.", "Billing support.") is the visible side effect of
each demo.  This module routes those records through structlog so they
come out either as console lines or as JSON objects on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "patternctl"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Point every patternctl record at a single stderr handler.

    Args:
        verbose: Let the demos' INFO side effects through. Otherwise only
            warnings and errors from ``patternctl`` are shown.
        log_json: One JSON object per record instead of console lines.

    Calling this again replaces the handler, it never adds a second one.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.INFO if verbose else logging.WARNING)
