"""structlog setup shared by the CLI and embedding applications."""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to drop events below ``level``."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
    )
