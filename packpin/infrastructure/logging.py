"""Structured logging setup.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Client modules only obtain loggers with `structlog.get_logger(...)`;
configuring processors is left to the embedding application (or the CLI).

Security:
    - NEVER log the API key
"""

from __future__ import annotations

import logging
import sys

import structlog

from packpin.core.config import Settings


def configure_logging(*, level: str = "INFO", use_json: bool = False) -> None:
    """Configure structlog processors and output.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        use_json: JSON output when True, human-readable when False.

    Raises:
        ValueError: If level is not a standard level name.
    """
    level_no = logging.getLevelNamesMapping().get(level.upper())
    if level_no is None:
        raise ValueError(f"Unknown log level: {level}")

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_logging_from_settings(settings: Settings) -> None:
    """Configure logging from client settings."""
    configure_logging(level=settings.log_level, use_json=settings.use_json_logs)
