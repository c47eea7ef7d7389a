"""Errors raised while fetching a title.

All of them are recoverable: the dispatcher turns them into an Errored
state and the next trigger starts over.
"""

from __future__ import annotations

from typing import Optional


class TitleFetchError(Exception):
    """Base class for every failure of a title request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NetworkFailure(TitleFetchError):
    """The service could not be reached (connect error, timeout, reset)."""


class ProtocolFailure(TitleFetchError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"Title service returned HTTP {status_code}")
        self.status_code = status_code


class DecodeFailure(TitleFetchError):
    """The body is not JSON or does not have the title record's shape."""
