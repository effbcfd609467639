"""Logging for the search service and CLI.

Source attempts, fallbacks and cancellations are emitted as one-line structlog
events on stderr; stdout is left to the CLI's result listing.
"""

import logging
import sys

import structlog

# Transport libraries log every connection at DEBUG/INFO
QUIET_LOGGERS = ("urllib3", "httpx", "httpcore")


def _resolve_level(debug_mode: bool, level: str) -> int:
    if debug_mode:
        return logging.DEBUG
    resolved = logging.getLevelName((level or "").upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(debug_mode: bool = False, level: str = "INFO") -> int:
    """Configure structlog and standard logging; returns the numeric level in effect.

    Args:
        debug_mode: Force DEBUG regardless of ``level``
        level: Level name from settings (``ESSENCE_LOG_LEVEL``); unknown names mean INFO
    """
    log_level = _resolve_level(debug_mode, level)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, level=log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    return log_level
