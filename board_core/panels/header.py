"""Header renderer: connectivity indicator and counters."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from board_core.formatting import fmt_interval
from board_core.models import ViewState

INDICATOR = {
    True: ("● online", "bold green"),
    False: ("● offline", "bold red"),
}


def indicator(connected: bool) -> Text:
    label, style = INDICATOR[bool(connected)]
    return Text(label, style=style)


def render(view: ViewState) -> Panel:
    text = Text.assemble(
        indicator(view.connected),
        "   API: ",
        (view.base_url or "-", "bold"),
        "   Getters: ",
        (str(view.getters.meta.get("count", 0)), "bold"),
        "   Executors: ",
        (str(view.executors.meta.get("count", 0)), "bold"),
        "   Refresh: ",
        (fmt_interval(view.refresh_ms), "bold"),
        "   Filter: ",
        (view.query or "-", "bold"),
        "   Updated: ",
        (view.updated_at or "n/a", "bold"),
    )
    border = "cyan" if view.connected else "red"
    return Panel(text, title="[bold]Status Board[/bold]", border_style=border)
