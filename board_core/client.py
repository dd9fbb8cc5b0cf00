"""Read-only HTTP client for the status backend."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from board_core.models import Snapshot

logger = logging.getLogger(__name__)

STATUS_PATH = "/status"
GETTER_SCHEMA_PATH = "/schema/getters"
EXECUTOR_SCHEMA_PATH = "/schema/executors"
GETTERS_PATH = "/getters"
EXECUTORS_PATH = "/executors"

ENDPOINTS = (
    STATUS_PATH,
    GETTER_SCHEMA_PATH,
    EXECUTOR_SCHEMA_PATH,
    GETTERS_PATH,
    EXECUTORS_PATH,
)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


class FetchError(Exception):
    """A single endpoint read that did not produce a JSON payload."""

    def __init__(
        self,
        path: str,
        *,
        status_code: int | None = None,
        transport_error: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.path = path
        self.status_code = status_code
        self.transport_error = transport_error
        super().__init__(message or self._describe())

    def _describe(self) -> str:
        if self.status_code is not None:
            return f"{self.path} -> {self.status_code}"
        if self.transport_error is not None:
            detail = str(self.transport_error) or type(self.transport_error).__name__
            return f"{self.path} -> {detail}"
        return f"{self.path} -> request failed"


class TransportError(FetchError):
    pass


class HttpStatusError(FetchError):
    pass


class DecodeError(FetchError):
    pass


def make_client(base_url: str, timeout: float = 5.0, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={**NO_STORE_HEADERS, "User-Agent": "status-board/0.1"},
        transport=transport,
    )


async def fetch_json(client: httpx.AsyncClient, path: str) -> Any:
    if path not in ENDPOINTS:
        raise ValueError(f"unknown endpoint: {path}")

    try:
        response = await client.get(path, headers=NO_STORE_HEADERS)
    except httpx.DecodingError as exc:
        raise DecodeError(path, transport_error=exc, message=f"{path} -> undecodable body: {exc}") from exc
    except httpx.RequestError as exc:
        logger.debug("request failure on %s: %s", path, exc)
        raise TransportError(path, transport_error=exc) from exc

    if not response.is_success:
        raise HttpStatusError(path, status_code=response.status_code)

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(path, transport_error=exc, message=f"{path} -> invalid JSON: {exc}") from exc


async def fetch_snapshot(client: httpx.AsyncClient) -> Snapshot:
    """Read all five endpoints concurrently; the first failure fails the whole set."""
    tasks = [asyncio.ensure_future(fetch_json(client, path)) for path in ENDPOINTS]
    try:
        status, getter_schema, executor_schema, getters, executors = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
    return Snapshot(
        status=status,
        getter_schema=getter_schema,
        executor_schema=executor_schema,
        getters=getters,
        executors=executors,
    )
