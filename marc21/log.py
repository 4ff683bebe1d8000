"""structlog configuration for marc21.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers. Applications that want marc21's diagnostics call
``configure_logging``, which formats the ``marc21`` logger's records with
structlog without touching the root logger.

Two output modes:
- Human (default): console output to stderr
- JSON: structured JSON lines to stderr
"""

import logging
import sys
from typing import List, Optional

import structlog

from .settings import Marc21Settings

_HANDLER_NAME = "marc21.structlog"


def configure_logging(
    *,
    verbose: Optional[bool] = None,
    log_json: Optional[bool] = None,
) -> None:
    """Route the marc21 logger through a structlog formatter on stderr.

    Only the ``marc21`` logger is touched: it gets its own handler and stops
    propagating, so handlers installed by the application on the root logger
    are left alone. Calling this again replaces the previous handler. Global
    structlog configuration is not changed.

    Arguments left as None are taken from ``Marc21Settings`` (the
    ``MARC21_VERBOSE`` and ``MARC21_LOG_JSON`` environment variables).

    Args:
        verbose: Enable DEBUG-level output from marc21. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if verbose is None or log_json is None:
        settings = Marc21Settings()
        if verbose is None:
            verbose = settings.verbose
        if log_json is None:
            log_json = settings.log_json

    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    marc21_logger = logging.getLogger("marc21")
    for existing in marc21_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            marc21_logger.removeHandler(existing)
    marc21_logger.addHandler(handler)
    marc21_logger.propagate = False
    marc21_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


__all__ = ["configure_logging"]
