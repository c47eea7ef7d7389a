"""
Fake Title - client for the fake job title generator.

Fetches a generated job title from the title service and formats it for display.
"""

__version__ = "1.0.0"

from .formatter import format_title
from .http_client import HttpClient, HttpResponse, HttpxClient
from .models import RequestVariant, TitleRecord

__all__ = [
    "format_title",
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "RequestVariant",
    "TitleRecord",
]
