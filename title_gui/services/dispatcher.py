"""Request dispatcher: turns button presses into title requests.

``trigger`` moves the store to Loading right away, then runs the request as
an asyncio task on the current loop and writes Loaded or Errored when it
completes. Every request failure is normalized into ``Errored`` here; nothing
past this boundary sees a ``TitleFetchError``.

Overlapping triggers are not serialized. Each request writes its own outcome
when it finishes, so the one that completes last decides the final state,
even if it was started first.
"""

from __future__ import annotations

import asyncio
import json
import time
from typing import Set

from pydantic import ValidationError

from fake_title.errors import DecodeFailure, ProtocolFailure, TitleFetchError
from fake_title.http_client import HttpClient, HttpResponse
from fake_title.models.schemas import RequestVariant, TitleRecord
from fake_title.result import Failure, Result, Success
from fake_title.utils.logger import get_logger
from title_gui.state import AppStore

logger = get_logger(__name__)

ENDPOINT_PATHS = {
    RequestVariant.NORMAL: "/api",
    RequestVariant.SLOW: "/slow-api",
}


def build_url(base_url: str, variant: RequestVariant) -> str:
    """Return the endpoint URL for ``variant`` under ``base_url``."""

    return base_url.rstrip("/") + ENDPOINT_PATHS[variant]


def decode_title(response: HttpResponse) -> TitleRecord:
    """Check the status and parse the body into a ``TitleRecord``.

    Raises:
        ProtocolFailure: non-2xx status.
        DecodeFailure: body is not a JSON object with the three string fields.
    """

    if not response.ok:
        raise ProtocolFailure(response.status_code)

    try:
        payload = json.loads(response.body)
    except RecursionError as exc:
        raise DecodeFailure("Title service returned JSON nested too deeply") from exc
    except ValueError as exc:
        raise DecodeFailure(f"Title service returned invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise DecodeFailure(
            f"Title service returned {type(payload).__name__}, expected an object"
        )

    try:
        return TitleRecord.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise DecodeFailure(f"Title service returned a malformed title ({fields})") from exc


class RequestDispatcher:
    """Issues title requests and is the single writer of an ``AppStore``."""

    def __init__(self, store: AppStore, http_client: HttpClient, base_url: str):
        self._writer = store.writer()
        self._http = http_client
        self._base_url = base_url
        self._tasks: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def trigger(self, variant: RequestVariant) -> "asyncio.Task[Result[TitleRecord, TitleFetchError]]":
        """Start a request for ``variant``.

        Must be called from code running on the event loop (a coroutine or a
        Tk callback pumped by ``pump_tk``). The store is in Loading when this
        returns; the returned task resolves to the request's ``Result``.
        """

        logger.debug("Trigger %s request", variant.value)
        self._writer.loading()
        task = asyncio.get_running_loop().create_task(self._run(variant))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def fetch(self, variant: RequestVariant) -> Result[TitleRecord, TitleFetchError]:
        """Request and decode a title without touching the store."""

        url = build_url(self._base_url, variant)
        started = time.perf_counter()
        try:
            response = await self._http.get(url)
            record = decode_title(response)
        except TitleFetchError as exc:
            logger.warning("Title request to %s failed: %s", url, exc)
            return Failure(error=exc)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Fetched title from %s in %.0fms", url, elapsed_ms)
        return Success(value=record)

    async def wait_idle(self) -> None:
        """Wait until every request started so far has completed."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def shutdown(self) -> None:
        """Drop outstanding requests when the application goes away.

        Only used on teardown; a running widget never cancels a request.
        """

        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, variant: RequestVariant) -> Result[TitleRecord, TitleFetchError]:
        result = await self.fetch(variant)
        if isinstance(result, Success):
            self._writer.loaded(result.value)
        else:
            self._writer.errored(str(result.error))
        return result
