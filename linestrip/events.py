"""Diagnostic observers passed into the stripper and file helpers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

Observer = Callable[[str, Mapping[str, Any]], None]

_LEVELS = {
    "substring_removed": logging.DEBUG,
    "file_read": logging.INFO,
    "file_written": logging.INFO,
    "file_read_failed": logging.ERROR,
    "file_write_failed": logging.ERROR,
}


def null_observer(event: str, fields: Mapping[str, Any]) -> None:
    return None


def logging_observer(target: Optional[logging.Logger] = None) -> Observer:
    """Build an observer that forwards events to a stdlib logger."""
    log = target or logging.getLogger("linestrip")

    def _observe(event: str, fields: Mapping[str, Any]) -> None:
        level = _LEVELS.get(event, logging.INFO)
        if not log.isEnabledFor(level):
            return
        details = " ".join(f"{k}={v!r}" for k, v in fields.items())
        log.log(level, "%s %s", event, details)

    return _observe


def notify(observer: Optional[Observer], event: str, **fields: Any) -> None:
    """
    Deliver one event. A failing observer never changes the caller's outcome;
    the failure itself is logged.
    """
    if observer is None:
        return
    try:
        observer(event, fields)
    except Exception:
        logger.warning("observer failed on event %s", event, exc_info=True)


default_observer = logging_observer()
