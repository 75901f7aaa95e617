"""Centralised logging helpers for modelica-format."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = "modelica_format") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_stage_event(
    *,
    stage: str,
    changed: bool,
    line_count: int,
    logger: Optional[logging.Logger] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured debug entry describing one pipeline stage."""

    payload: Dict[str, Any] = {
        "stage": stage,
        "changed": changed,
        "lines": line_count,
    }
    if extras:
        payload.update(extras)
    target_logger = logger or get_logger("modelica_format.pipeline")
    target_logger.debug(
        "Formatting stage %s finished",
        stage,
        extra={"modelica_format_event": "stage_complete", "modelica_format_data": payload},
    )
