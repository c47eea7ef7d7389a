"""HTTP transport for the title service.

The dispatcher only depends on the small ``HttpClient`` protocol so tests can
swap in an in-memory double. ``HttpxClient`` is the production implementation
on top of ``httpx.AsyncClient``.

Transport problems are raised as ``NetworkFailure``; status codes and bodies
are returned untouched and interpreted by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from fake_title.errors import NetworkFailure
from fake_title.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpResponse:
    """Fully read HTTP response."""

    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClient(Protocol):
    async def get(self, url: str) -> HttpResponse:
        """GET ``url`` and return the whole response.

        Raises:
            NetworkFailure: when no response could be obtained.
        """
        ...

    async def aclose(self) -> None:
        ...


class HttpxClient:
    """``HttpClient`` backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, url: str) -> HttpResponse:
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as exc:
            logger.warning("Title request to %s timed out: %s", url, exc)
            raise NetworkFailure(f"Title service timed out: {exc}") from exc
        except httpx.RequestError as exc:
            logger.warning("Title request to %s failed: %s", url, exc)
            raise NetworkFailure(f"Could not reach title service: {exc}") from exc
        except httpx.InvalidURL as exc:
            logger.warning("Title service URL %s is invalid: %s", url, exc)
            raise NetworkFailure(f"Invalid title service URL {url!r}: {exc}") from exc
        return HttpResponse(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        await self._client.aclose()
