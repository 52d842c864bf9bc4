"""
Unified log format with importance (0-10) for node_utils log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import IO, Any, Optional

from ..core.config import get_config
from ..core.constants import ROOT_LOGGER_NAME

# Importance per standard level when the record does not carry one
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = (
    "%(asctime)s | %(levelname)-8s | %(importance)s | %(name)s | %(message)s"
)

_HANDLER_MARKER = "_node_utils_unified"
_FACTORY_MARKER = "_node_utils_importance"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


def install_unified_record_factory() -> None:
    """
    Install a LogRecord factory that sets 'importance' on every record.

    Importance is taken from extra={'importance': N} or derived from the level.
    Installing twice keeps the first factory.
    """
    old_factory = logging.getLogRecordFactory()
    if getattr(old_factory, _FACTORY_MARKER, False):
        return

    def _factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        _set_importance_if_missing(record)
        return record

    setattr(_factory, _FACTORY_MARKER, True)
    logging.setLogRecordFactory(_factory)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter that outputs: timestamp | level | importance | logger | message.

    Falls back to level-derived importance when the record factory
    was not installed.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def setup_logging(
    level: Optional[str] = None, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Attach a unified-format handler to the package logger.

    Installs the importance record factory, so ``record.importance`` is
    also visible to handlers and filters that do not use UnifiedFormatter.
    Calling it again replaces the previous unified handler instead of
    stacking a second one.

    Args:
        level: Level name; defaults to ``log_level`` of the active config
        stream: Target stream; defaults to stderr

    Returns:
        The configured ``node_utils`` logger
    """
    level_name = (level or get_config().log_level).upper()
    install_unified_record_factory()
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_unified_formatter())
    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)
    root.setLevel(level_name)
    return root
