"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "RHYMER_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def resolve_level(level: str | int | None) -> int:
    """Translate a level name or number into a :mod:`logging` level."""

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = getattr(logging, normalized, logging.INFO)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Initialise root logging handlers once per process.

    The level comes from ``level`` when given, otherwise from the
    ``RHYMER_LOG_LEVEL`` environment variable, and defaults to ``INFO``.
    Building the index over the full CMU dictionary takes a moment, so the
    engine reports its progress at ``INFO``.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(LOG_LEVEL_ENV)
    resolved_level = resolve_level(level if level is not None else env_level)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("rhymer").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "resolve_level"]
