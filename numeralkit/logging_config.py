#!/usr/bin/env python3
"""Helpers for configuring numeralkit logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

from numeralkit.settings import get_setting

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.WARNING
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, logging.WARNING)


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """
    Initialise root logging for the command line tool.

    The level comes from the argument, then ``NUMERALKIT_LOG_LEVEL``, then
    ``logging.level`` in app.yaml.
    """
    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    if level is None:
        level = os.environ.get("NUMERALKIT_LOG_LEVEL") or get_setting("logging.level")
    resolved_level = _resolve_level(level)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("numeralkit").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging"]
