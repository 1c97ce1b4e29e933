"""Logging setup for memshim."""

import logging
import sys
from typing import Any, TextIO

from .config import get_env

ROOT_LOGGER_NAME = "memshim"
LOG_LEVEL_ENV = "MEMSHIM_LOG_LEVEL"

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(backend)s:%(identifier)s] %(message)s"
)

# Filled in on records that were not logged through a history store
CONTEXT_FIELDS = ("backend", "identifier")


class ContextDefaultsFilter(logging.Filter):
    """Give every record the context fields DEFAULT_FORMAT refers to."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True


def setup_logging(
    level: str | None = None,
    format_string: str | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the memshim logger.

    Args:
        level: Level name; MEMSHIM_LOG_LEVEL (default INFO) when omitted.
            Unknown names fall back to INFO.
        format_string: Optional custom format string
        logger_name: Logger to configure
        stream: Output stream, stdout by default

    Returns:
        Configured logger

    Example:
        setup_logging(level="DEBUG")
        # 2024-05-01 12:00:00,000 - memshim.adapters.outbound.mem0.chat_history - DEBUG
        #   - [mem0:user-123] Fetching mem0 memories for user-123
    """
    if level is None:
        level = get_env(LOG_LEVEL_ENV, "INFO")

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # One handler per logger, however often this is called
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        handler.addFilter(ContextDefaultsFilter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, always under the ``memshim`` hierarchy.

    ``__name__`` of memshim modules is used unchanged; other names are
    nested so that setup_logging() covers them.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """
    Tags records with the backend and the user or session id.

    Fields passed through ``extra`` at the call site take precedence.

    Example:
        logger = LoggerAdapter(get_logger(__name__), {"backend": "mem0", "identifier": "user-123"})
        logger.warning("Dropping message")  # record.backend == "mem0"
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs
