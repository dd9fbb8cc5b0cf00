"""Panel rendering helpers."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from board_core.formatting import LOAD_ERROR, NO_DATA
from board_core.models import PanelData

STATUS_BORDER = {
    "ok": "cyan",
    "empty": "cyan",
    "error": "red",
}

BADGE_STYLE = {
    "muted": "dim",
    "good": "green",
    "bad": "red",
    "warn": "yellow",
}


def border_for(status: str) -> str:
    return STATUS_BORDER.get(status, "cyan")


def badge(label: str, state: str = "muted") -> Text:
    return Text(f"[{label}]", style=BADGE_STYLE.get(state, "dim"))


def badge_row(*badges: Text | None) -> Text:
    return Text(" ").join(b for b in badges if b is not None)


def item_table() -> Table:
    table = Table(box=None, show_header=False, expand=True, pad_edge=False)
    table.add_column("key", overflow="fold", ratio=2)
    table.add_column("meta", overflow="fold", ratio=3)
    table.add_column("value", justify="right", no_wrap=True)
    return table


def titled(data: PanelData) -> Text:
    return Text.assemble((data.title, "bold"), f" ({data.meta.get('count', 0)})")


def empty_panel(data: PanelData, message: str = NO_DATA) -> Panel:
    return Panel(Text(message, style="dim"), title=titled(data), border_style=border_for(data.status))


def error_panel(data: PanelData) -> Panel:
    message = "; ".join(data.errors) if data.errors else "unknown error"
    return Panel(Text(f"{LOAD_ERROR}: {message}", style="red"), title=titled(data), border_style=border_for("error"))


def panel_from_table(data: PanelData, table: Table) -> Panel:
    return Panel(table, title=titled(data), border_style=border_for(data.status))


def render_panel(data: PanelData, row_renderer) -> Panel:
    if data.status == "error":
        return error_panel(data)
    if not data.items:
        return empty_panel(data)
    table = item_table()
    for item in data.items:
        table.add_row(*row_renderer(item))
    return panel_from_table(data, table)
