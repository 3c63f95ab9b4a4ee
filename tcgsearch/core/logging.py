"""structlog setup shared by the web app and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from tcgsearch.config import AppConfig, get_config


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure structured logging from the application config.

    JSON output when `config.json_logs` is set, console output otherwise.
    The stdlib root logger is bridged in at `config.log_level`.
    """
    config = config or get_config()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(config.json_logs),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = config.log_level.upper()
    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=level,
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)
