"""Logging configuration for datecalc."""

import logging

import structlog

LOGGER_NAME = "datecalc"


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, named after the datecalc package by default."""
    return structlog.get_logger(name or LOGGER_NAME)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str | int = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure datecalc logging.

    Searches and schedule generation emit their events at debug level, so
    pass level="DEBUG" to see them.

    Args:
        level: Log level name ("DEBUG", "INFO", "WARNING", "ERROR") or
            numeric logging level
        json_output: True for JSON lines, False for console rendering

    Raises:
        ValueError: If level is not a known logging level name
    """
    log_level = _resolve_level(level)
    logging.basicConfig(format="%(message)s", level=log_level)

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=True),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
