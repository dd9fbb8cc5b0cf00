"""Full-screen composition of header and both record panels."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.table import Table

from board_core.layout import select_layout_mode
from board_core.models import ViewState
from board_core.panels.executors import render as render_executors
from board_core.panels.getters import render as render_getters
from board_core.panels.header import render as render_header


def render(view: ViewState, width: int = 120) -> RenderableType:
    """Build a fresh renderable from one view state; nothing is carried over between calls."""
    header = render_header(view)
    getters = render_getters(view.getters)
    executors = render_executors(view.executors)

    if select_layout_mode(width) == "narrow":
        return Group(header, getters, executors)

    body = Table.grid(expand=True, padding=(0, 1))
    body.add_column(ratio=1)
    body.add_column(ratio=1)
    body.add_row(getters, executors)
    return Group(header, body)
