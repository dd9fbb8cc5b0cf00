"""Single recurring refresh timer on the asyncio loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

REFRESH_CHOICES_MS = (0, 1000, 2000, 5000, 10000, 30000)


def validate_interval(ms: int) -> int:
    value = int(ms)
    if value not in REFRESH_CHOICES_MS:
        allowed = ", ".join(str(choice) for choice in REFRESH_CHOICES_MS)
        raise ValueError(f"refresh interval must be one of: {allowed} (got {ms})")
    return value


def next_choice(current: int, step: int) -> int:
    try:
        index = REFRESH_CHOICES_MS.index(current)
    except ValueError:
        index = 0
    index = max(0, min(len(REFRESH_CHOICES_MS) - 1, index + step))
    return REFRESH_CHOICES_MS[index]


class RefreshScheduler:
    """Owns the only refresh timer; ``trigger`` is called on every tick.

    Reconfiguring cancels the running timer before a new one is installed, so
    at most one timer is ever active.
    """

    def __init__(self, trigger: Callable[[], object], sleep: Callable[[float], Awaitable[None]] = asyncio.sleep) -> None:
        self._trigger = trigger
        self._sleep = sleep
        self._interval_ms = 0
        self._timer: asyncio.Task | None = None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def active(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def set_interval(self, ms: int) -> None:
        value = validate_interval(ms)
        self.stop()
        self._interval_ms = value
        if value > 0:
            self._timer = asyncio.get_running_loop().create_task(self._tick(value / 1000.0))
        logger.info("refresh interval set to %d ms", value)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._interval_ms = 0

    async def _tick(self, seconds: float) -> None:
        while True:
            await self._sleep(seconds)
            self._trigger()
