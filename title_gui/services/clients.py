"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from fake_title.config import Settings, get_settings
from fake_title.http_client import HttpClient, HttpxClient


def get_http_client(settings: Optional[Settings] = None) -> HttpClient:
    """Return the HTTP client used to talk to the title service."""

    settings = settings or get_settings()
    return HttpxClient(timeout=settings.http_timeout)
