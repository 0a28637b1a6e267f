"""structlog configuration for the ULN package.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (``ULN_LOG_JSON=1``): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from uln.core.config import ULNSettings


def configure_logging(
    settings: ULNSettings | None = None,
    *,
    level: str | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        settings: Source of defaults. Loaded from the environment when omitted.
        level: Overrides ``settings.log_level`` for the ``uln`` logger.
        log_json: Overrides ``settings.log_json``.
    """
    if settings is None:
        settings = ULNSettings()
    uln_level = (level or settings.log_level).upper()
    as_json = settings.log_json if log_json is None else log_json

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if as_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # The host application's root logger is left alone.
    uln_logger = logging.getLogger("uln")
    uln_logger.handlers.clear()
    uln_logger.addHandler(handler)
    uln_logger.setLevel(uln_level)
    uln_logger.propagate = False
