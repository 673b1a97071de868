"""Lightweight observability helpers for logging."""

from __future__ import annotations

from .logging import get_logger, log_export_event

__all__ = [
    "get_logger",
    "log_export_event",
]
