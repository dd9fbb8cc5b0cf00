"""Fetch-build-render cycle and the view state it owns."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable

import httpx

from board_core.client import FetchError, fetch_snapshot
from board_core.collectors.executors import collect as collect_executors
from board_core.collectors.getters import collect as collect_getters
from board_core.collectors.status import collect as collect_status
from board_core.formatting import clock_label
from board_core.models import PanelData, Snapshot, ViewState
from board_core.reporter import describe, report_failure
from board_core.scheduler import RefreshScheduler, validate_interval

logger = logging.getLogger(__name__)

RenderCallback = Callable[[ViewState], None]


def initial_view(base_url: str = "", refresh_ms: int = 0, query: str = "") -> ViewState:
    return ViewState(
        connected=False,
        getters=PanelData(key="getters", title="Getters", status="empty", meta={"count": 0, "shown": 0}),
        executors=PanelData(key="executors", title="Executors", status="empty", meta={"count": 0, "shown": 0}),
        base_url=base_url,
        refresh_ms=refresh_ms,
        query=query,
    )


def build_view(
    snapshot: Snapshot,
    *,
    query: str = "",
    base_url: str = "",
    refresh_ms: int = 0,
    cycle: int = 0,
    updated_at: str | None = None,
) -> ViewState:
    return ViewState(
        connected=collect_status(snapshot.status),
        getters=collect_getters(snapshot.getters, snapshot.getter_schema, query),
        executors=collect_executors(snapshot.executors, snapshot.executor_schema, query),
        base_url=base_url,
        refresh_ms=refresh_ms,
        query=query,
        cycle=cycle,
        updated_at=updated_at,
    )


class Dashboard:
    """Runs cycles against one backend and publishes each finished view.

    Cycles may overlap. By default the last one to finish wins; with
    ``discard_stale`` a cycle that finishes after a newer one has already been
    applied is dropped.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str = "",
        on_render: RenderCallback | None = None,
        refresh_ms: int = 0,
        query: str = "",
        discard_stale: bool = False,
    ) -> None:
        self._client = client
        self._on_render = on_render
        self._refresh_ms = validate_interval(refresh_ms)
        self.base_url = base_url or str(client.base_url).rstrip("/")
        self.query = query
        self.discard_stale = discard_stale
        self.scheduler = RefreshScheduler(self.dispatch)
        self.last_error: str | None = None
        self._dispatched = 0
        self._applied = 0
        self._inflight: set[asyncio.Task] = set()
        self.view = initial_view(self.base_url, self._refresh_ms, query)

    @property
    def refresh_ms(self) -> int:
        return self._refresh_ms

    async def run_cycle(self) -> ViewState | None:
        self._dispatched += 1
        cycle = self._dispatched
        query = self.query
        logger.debug("cycle %d started (query=%r)", cycle, query)

        try:
            snapshot = await fetch_snapshot(self._client)
        except FetchError as exc:
            return self._apply(cycle, lambda: report_failure(self.view, exc, cycle, clock_label()), describe(exc))

        def make_view() -> ViewState:
            return build_view(
                snapshot,
                query=query,
                base_url=self.base_url,
                refresh_ms=self._refresh_ms,
                cycle=cycle,
                updated_at=clock_label(),
            )

        return self._apply(cycle, make_view, None)

    def _apply(self, cycle: int, make_view: Callable[[], ViewState], error: str | None) -> ViewState | None:
        if self.discard_stale and cycle < self._applied:
            logger.debug("cycle %d dropped, cycle %d already applied", cycle, self._applied)
            return None
        self._applied = max(self._applied, cycle)
        self.last_error = error
        self.view = make_view()
        logger.debug("cycle %d applied (connected=%s)", cycle, self.view.connected)
        self._publish()
        return self.view

    def _publish(self) -> None:
        if self._on_render is not None:
            self._on_render(self.view)

    def dispatch(self) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.run_cycle())
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    def reload(self) -> asyncio.Task:
        return self.dispatch()

    def set_query(self, text: str) -> asyncio.Task:
        self.query = text
        return self.dispatch()

    def set_refresh(self, ms: int) -> None:
        self.scheduler.set_interval(ms)
        self._refresh_ms = self.scheduler.interval_ms
        self.view = replace(self.view, refresh_ms=self._refresh_ms)
        self._publish()

    def start(self) -> asyncio.Task:
        task = self.dispatch()
        self.scheduler.set_interval(self._refresh_ms)
        return task

    async def close(self) -> None:
        self.scheduler.stop()
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)
