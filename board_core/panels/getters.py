"""Getters panel renderer."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from board_core.models import PanelData
from board_core.panels import badge, badge_row, render_panel


def _row(item: dict) -> tuple[Text, Text, Text]:
    valid = str(item.get("valid", "invalid"))
    meta = badge_row(
        badge(str(item.get("type", "type:?"))),
        badge(valid, "good" if valid == "valid" else "bad"),
        badge(f"stamp:{item.get('stamp', '—')}"),
    )
    return (
        Text(str(item.get("name", "-")), style="bold"),
        meta,
        Text(str(item.get("value", "—")), style="cyan"),
    )


def render(data: PanelData) -> Panel:
    return render_panel(data, _row)
