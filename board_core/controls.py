"""Keyboard controls: reload, refresh interval and the search box."""

from __future__ import annotations

import logging
from typing import Callable

from board_core.keys import BACKSPACE, ENTER, ESC, QUIT
from board_core.scheduler import next_choice

logger = logging.getLogger(__name__)

HELP = "r reload  +/- refresh  0 refresh off  / search  q quit"


class Controls:
    def __init__(self, dashboard, on_quit: Callable[[], None], on_change: Callable[[], None] | None = None) -> None:
        self.dashboard = dashboard
        self.search_mode = False
        self._on_quit = on_quit
        self._on_change = on_change

    def prompt(self) -> str:
        if self.search_mode:
            return f"search: {self.dashboard.query}_   (Enter/Esc to leave)"
        return HELP

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def handle(self, pressed: str) -> None:
        if pressed == QUIT:
            self._on_quit()
            return
        if self.search_mode:
            self._handle_search(pressed)
            return

        if pressed == "q":
            self._on_quit()
        elif pressed == "r":
            self.dashboard.reload()
        elif pressed in ("+", "="):
            self.dashboard.set_refresh(next_choice(self.dashboard.refresh_ms, 1))
        elif pressed == "-":
            self.dashboard.set_refresh(next_choice(self.dashboard.refresh_ms, -1))
        elif pressed == "0":
            self.dashboard.set_refresh(0)
        elif pressed == "/":
            self.search_mode = True
            self._changed()

    def _handle_search(self, pressed: str) -> None:
        if pressed in (ENTER, ESC):
            self.search_mode = False
            self._changed()
        elif pressed == BACKSPACE:
            if self.dashboard.query:
                self.dashboard.set_query(self.dashboard.query[:-1])
            self._changed()
        elif len(pressed) == 1 and pressed.isprintable():
            self.dashboard.set_query(self.dashboard.query + pressed)
            self._changed()
        else:
            logger.debug("ignored key in search mode: %r", pressed)
