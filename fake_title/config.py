"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values are read when Settings() is built,
so tests can patch the environment before calling get_settings().
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_API_URL = "http://localhost:8080"


@dataclass
class Settings:
    # Title service (serves /api and /slow-api)
    api_base_url: str = field(
        default_factory=lambda: os.getenv("FAKE_TITLE_API_URL", DEFAULT_API_URL)
    )

    # Transport-level timeout in seconds; the slow endpoint needs headroom
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("FAKE_TITLE_HTTP_TIMEOUT", "10"))
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("FAKE_TITLE_LOG_LEVEL", "INFO")
    )


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
