"""structlog setup for the romanparse CLI.

Everything goes to stderr so stdout carries only the formatted result:
``romanparse --json parse XIV | jq`` keeps working with ``-v``'s logs on.
structlog events (``romanparse.demo``, ``romanparse.telemetry``) and the
stdlib loggers of the service modules share one handler and renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "romanparse"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route romanparse logs to stderr.

    Args:
        verbose: Show DEBUG records from romanparse (form validation,
            rejected adjacencies, telemetry spans). Otherwise WARNING+.
        log_json: Emit one JSON object per record instead of console lines.

    Safe to call repeatedly: the root handler is replaced, not stacked.
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
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
