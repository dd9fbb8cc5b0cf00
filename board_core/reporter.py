"""Degraded view produced when a cycle fails."""

from __future__ import annotations

import logging
from dataclasses import replace

from board_core.models import PanelData, ViewState

logger = logging.getLogger(__name__)


def describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _error_panel(previous: PanelData, message: str) -> PanelData:
    return PanelData(
        key=previous.key,
        title=previous.title,
        status="error",
        items=[],
        meta={"count": previous.meta.get("count", 0), "shown": 0},
        errors=[message],
    )


def report_failure(previous: ViewState, exc: BaseException, cycle: int, updated_at: str | None = None) -> ViewState:
    """Mark the backend offline and replace both panels with the failure message.

    Counts keep the values from ``previous``; everything else from the earlier
    view is dropped.
    """
    message = describe(exc)
    logger.warning("cycle %d failed: %s", cycle, message)
    return replace(
        previous,
        connected=False,
        getters=_error_panel(previous.getters, message),
        executors=_error_panel(previous.executors, message),
        cycle=cycle,
        updated_at=updated_at or previous.updated_at,
    )
