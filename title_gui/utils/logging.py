"""Logging helpers for the GUI.

Uses the ``fake_title.gui`` logger and leaves handler setup to
``fake_title.utils.logger.setup_logging``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("fake_title.gui")


def log(message: str, level: int = logging.INFO) -> None:
    logger.log(level, message)


def log_state_change(previous: object, current: object) -> None:
    """Record a lifecycle transition by state class name (payloads are left out)."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("State %s -> %s", type(previous).__name__, type(current).__name__)
