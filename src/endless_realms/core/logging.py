"""Diagnostic logging for Endless Realms, built on structlog.

Engine modules log structured events (turns, spawns, kills, synthesis)
through ``get_logger(__name__)``. This stream is for developers and hosts;
the player-facing narration lives in the GameLog.

A host configures output once at startup, usually straight from Settings:

    >>> from endless_realms.core.config import get_settings
    >>> configure_from_settings(get_settings())

Without any configuration structlog falls back to its default console
output, which is what the engine sees under test.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from endless_realms.core.config import Settings


APP_NAME = "endless_realms"
_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _renderer(json_format: bool) -> list[Processor]:
    if json_format:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Minimum level name; unknown names fall back to INFO.
        json_format: Render one JSON object per line instead of console text.
        log_file: Optional path that additionally receives stdlib records.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(json_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format=_STDLIB_FORMAT, level=numeric_level, stream=sys.stdout, force=True)

    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(_STDLIB_FORMAT))
        logging.getLogger().addHandler(handler)


def configure_from_settings(settings: Settings) -> None:
    """Apply the logging fields of Settings.

    ``debug`` forces DEBUG regardless of ``log_level``.
    """
    configure_logging(
        level=settings.effective_log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )
    structlog.get_logger(__name__).debug(
        "Logging configured",
        level=settings.effective_log_level,
        json=settings.log_json,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind key-value pairs to every subsequent event.

    GameSession binds its session id here so engine events can be traced
    back to the session that produced them.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
