"""Centralised logging helpers for pagecraft exports."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = "pagecraft") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_export_event(
    event: str,
    *,
    message: Optional[str] = None,
    level: int = logging.INFO,
    logger: Optional[logging.Logger] = None,
    **data: Any,
) -> None:
    """Emit a structured log entry describing an export lifecycle event."""

    payload: Dict[str, Any] = {key: value for key, value in data.items() if value is not None}
    target_logger = logger or get_logger("pagecraft.export")
    target_logger.log(
        level,
        message or event.replace("_", " ").capitalize(),
        extra={"pagecraft_event": event, "pagecraft_data": payload},
    )
