"""Structured logging for study_srs.

Engine functions log scheduling decisions at DEBUG and the orchestrator
logs state changes at INFO. Output is a colored console stream by default
and one JSON object per line when ``STUDY_SRS_LOG_JSON_OUTPUT`` is set.
"""

import logging
import sys
from typing import Any

import structlog

from study_srs.config import LoggingSettings

__all__ = [
    "configure_logging",
    "get_logger",
]

# Driver loggers that report every connection pool event
_QUIET_LOGGERS = ("motor", "pymongo")


def configure_logging(
    level: int | str = logging.INFO,
    json_output: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Route study_srs events through structlog and the stdlib root logger.

    Args:
        level: Root level, as a number or a name such as "DEBUG"
        json_output: Render JSON lines instead of the console format
        add_timestamp: Prefix each event with an ISO timestamp
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    renderer: list[Any]
    if json_output:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]

    structlog.configure(
        processors=processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger bound to ``name``, normally the calling module's ``__name__``."""
    return structlog.get_logger(name)


_configured = False


def _configure_from_env() -> None:
    global _configured
    if _configured:
        return
    settings = LoggingSettings()
    configure_logging(level=settings.level, json_output=settings.json_output)
    _configured = True


_configure_from_env()
