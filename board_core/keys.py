"""Blocking key reader that hands keys to the asyncio loop."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable

from readchar import key, readkey

logger = logging.getLogger(__name__)

ENTER = "ENTER"
ESC = "ESC"
BACKSPACE = "BACKSPACE"
QUIT = "QUIT"

KEY_MAP: dict[str, str] = {
    key.ENTER: ENTER,
    key.CR: ENTER,
    key.LF: ENTER,
    key.ESC: ESC,
    key.BACKSPACE: BACKSPACE,
    "\x08": BACKSPACE,
    "\x7f": BACKSPACE,
    "\x03": QUIT,
}


def normalize(raw: str) -> str:
    return KEY_MAP.get(raw, raw)


class KeyReader:
    def __init__(self, on_key: Callable[[str], None], loop: asyncio.AbstractEventLoop) -> None:
        self._on_key = on_key
        self._loop = loop
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True, name="KeyReader")

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        """Stop delivering keys.

        ``readkey`` cannot be interrupted, so the thread stays parked until the
        next key press or process exit; it is a daemon and never blocks shutdown.
        """
        self._stop_event.set()

    def _deliver(self, mapped: str) -> None:
        if self._stop_event.is_set() or self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._on_key, mapped)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                raw = readkey()
            except KeyboardInterrupt:
                self._deliver(QUIT)
                return
            except OSError as exc:
                # no usable terminal (stdin redirected)
                logger.warning("key reader stopped: %s", exc)
                return
            self._deliver(normalize(raw))
