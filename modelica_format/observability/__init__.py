"""Lightweight observability helpers for logging instrumentation."""

from __future__ import annotations

from .logging import get_logger, log_stage_event

__all__ = [
    "get_logger",
    "log_stage_event",
]
