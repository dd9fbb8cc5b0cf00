"""Status board application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.text import Text

from board_core.client import make_client
from board_core.controls import Controls
from board_core.dashboard import Dashboard
from board_core.keys import KeyReader
from board_core.logging_config import setup_logging
from board_core.models import ViewState
from board_core.panels.screen import render as render_screen
from board_core.profiles import resolve_config
from board_core.scheduler import REFRESH_CHOICES_MS

logger = logging.getLogger(__name__)


def _compose(view: ViewState, controls: Controls | None, width: int) -> RenderableType:
    screen = render_screen(view, width)
    if controls is None:
        return screen
    return Group(screen, Text(controls.prompt(), style="dim"))


def _dashboard(client, config: dict, on_render=None) -> Dashboard:
    return Dashboard(
        client,
        base_url=config["base_url"],
        on_render=on_render,
        refresh_ms=config["refresh_ms"],
        query=config["query"],
        discard_stale=config["discard_stale"],
    )


async def _run_once(config: dict, console: Console, as_json: bool) -> int:
    async with make_client(config["base_url"], config["timeout_seconds"]) as client:
        dashboard = _dashboard(client, config)
        view = await dashboard.run_cycle()

    if as_json:
        print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    else:
        console.print(render_screen(view, console.size.width))
    return 1 if dashboard.last_error else 0


async def _run_live(config: dict, console: Console) -> int:
    loop = asyncio.get_running_loop()
    quit_event = asyncio.Event()

    async with make_client(config["base_url"], config["timeout_seconds"]) as client:
        with Live(console=console, screen=True, auto_refresh=False) as live:
            controls: Controls | None = None

            def repaint(_view: ViewState | None = None) -> None:
                live.update(_compose(dashboard.view, controls, console.size.width), refresh=True)

            dashboard = _dashboard(client, config, on_render=repaint)
            controls = Controls(dashboard, on_quit=quit_event.set, on_change=repaint)

            reader: KeyReader | None = None
            if sys.stdin.isatty():
                reader = KeyReader(controls.handle, loop)
                reader.start()
            else:
                logger.info("stdin is not a terminal; keyboard controls disabled")

            repaint()
            dashboard.start()
            try:
                await quit_event.wait()
            finally:
                if reader is not None:
                    reader.stop()
                await dashboard.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Live status board for getters and executors")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-l", "--live", action="store_true", help="Run live dashboard loop")
    mode.add_argument("--json", action="store_true", help="Emit one cycle as JSON")
    mode.add_argument("--once", action="store_true", help="Render one cycle and exit (default)")
    parser.add_argument("--url", help="Backend base URL (default: $STATUS_BOARD_URL or http://127.0.0.1:8080)")
    parser.add_argument(
        "--refresh",
        type=int,
        choices=REFRESH_CHOICES_MS,
        help="Refresh interval in milliseconds, 0 disables",
    )
    parser.add_argument("--filter", dest="query", help="Initial search filter")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--config", help="Optional JSON config file")
    parser.add_argument("--discard-stale", action="store_true", default=None, help="Drop cycles that finish after a newer one")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--log-file", help="Write logs to this file")
    args = parser.parse_args(argv)

    overrides = {
        "base_url": args.url,
        "refresh_ms": args.refresh,
        "query": args.query,
        "timeout_seconds": args.timeout,
        "discard_stale": args.discard_stale,
    }
    try:
        config = resolve_config(args.config, overrides)
        setup_logging(args.log_level, args.log_file, to_stderr=not args.live)
    except ValueError as exc:
        parser.error(str(exc))

    console = Console()
    try:
        if args.live:
            return asyncio.run(_run_live(config, console))
        return asyncio.run(_run_once(config, console, as_json=args.json))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
