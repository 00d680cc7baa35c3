"""structlog setup shared by the CLI and the HTTP adapter."""

import logging
import sys
from typing import Any

import structlog


def _resolve_level(level: int | str) -> int:
    """Accept ``logging.DEBUG`` as well as ``"debug"`` (as read from settings)."""
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Looked up per logger so a redirected sys.stderr is honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(*, json_output: bool = False, level: int | str = logging.INFO) -> None:
    """Configure structlog for the process.

    Args:
        json_output: Emit one JSON object per event (deployments). Otherwise
            render coloured key=value lines for a terminal.
        level: Minimum level, as a ``logging`` constant or a level name.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_request_context(**values: Any) -> None:
    """Attach values to every event logged until :func:`clear_request_context`."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
