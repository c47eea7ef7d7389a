"""Centralized logger configuration.

Usage:
    from fake_title.utils.logger import get_logger
    logger = get_logger(__name__)

Modules grab their logger at import time, which installs a default handler
before ``.env`` has been loaded. ``setup_logging`` can therefore run more
than once: the handler is installed once, the level is applied every time.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LEVEL = os.getenv("FAKE_TITLE_LOG_LEVEL", "INFO")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
