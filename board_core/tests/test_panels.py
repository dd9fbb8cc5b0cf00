from __future__ import annotations

import io
import unittest
from pathlib import Path
import sys

from rich.console import Console

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from board_core.collectors.executors import collect as collect_executors  # noqa: E402
from board_core.collectors.getters import collect as collect_getters  # noqa: E402
from board_core.dashboard import initial_view  # noqa: E402
from board_core.models import PanelData, ViewState  # noqa: E402
from board_core.panels.getters import render as render_getters  # noqa: E402
from board_core.panels.header import render as render_header  # noqa: E402
from board_core.panels.screen import render as render_screen  # noqa: E402
from board_core.reporter import report_failure  # noqa: E402


def _text(renderable, width: int = 200) -> str:
    console = Console(file=io.StringIO(), width=width, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def _view(query: str = "") -> ViewState:
    return ViewState(
        connected=True,
        getters=collect_getters(
            {"temp": {"valid": True, "stampMs": 12, "data": {"type": "float", "value": 21.5}}},
            {"temp": "float"},
            query,
        ),
        executors=collect_executors(
            [{"id": 2, "name": "pump", "valid": False, "mode": "manual", "stampMs": 0, "data": None}],
            {},
            query,
        ),
        base_url="http://127.0.0.1:8080",
        refresh_ms=2000,
        query=query,
        cycle=1,
        updated_at="12:00:00",
    )


class PanelRenderTests(unittest.TestCase):
    def test_getter_row_contents(self):
        text = _text(render_getters(_view().getters))
        self.assertIn("temp", text)
        self.assertIn("[type:float]", text)
        self.assertIn("[valid]", text)
        self.assertIn("[stamp:12ms]", text)
        self.assertIn("float:21.5", text)

    def test_executor_row_contents(self):
        text = _text(render_screen(_view()))
        self.assertIn("[MANUAL]", text)
        self.assertIn("[invalid]", text)
        self.assertIn("[stamp:—]", text)

    def test_render_is_idempotent(self):
        view = _view()
        first = _text(render_screen(view))
        second = _text(render_screen(view))
        self.assertEqual(first, second)
        self.assertEqual(first.count("float:21.5"), 1)

    def test_markup_in_names_is_shown_literally(self):
        data = collect_getters({"[bold red]x[/]": {"valid": True}}, {}, "")
        text = _text(render_getters(data))
        self.assertIn("[bold red]x[/]", text)

    def test_no_data_placeholder_differs_from_error(self):
        empty = _text(render_screen(_view(query="zzz")))
        self.assertIn("No data", empty)
        self.assertNotIn("Load error", empty)

        failed = report_failure(_view(), RuntimeError("/getters -> 500"), cycle=2)
        text = _text(render_screen(failed))
        self.assertEqual(text.count("Load error: /getters -> 500"), 2)
        self.assertIn("offline", text)

    def test_header_indicator_states(self):
        self.assertIn("online", _text(render_header(_view())))
        self.assertIn("offline", _text(render_header(initial_view())))

    def test_header_counts_and_refresh(self):
        text = _text(render_header(_view()))
        self.assertIn("Getters: 1", text)
        self.assertIn("Executors: 1", text)
        self.assertIn("Refresh: 2s", text)

    def test_narrow_layout_stacks_panels(self):
        text = _text(render_screen(_view(), width=80), width=80)
        self.assertLess(text.index("Getters (1)"), text.index("Executors (1)"))

    def test_error_panel_without_message(self):
        data = PanelData(key="getters", title="Getters", status="error")
        self.assertIn("unknown error", _text(render_getters(data)))


if __name__ == "__main__":
    unittest.main()
