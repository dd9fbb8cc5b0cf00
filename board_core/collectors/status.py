"""Backend connectivity collector."""

from __future__ import annotations

from typing import Any

from board_core.models import StatusRecord


def collect(payload: Any) -> bool:
    return StatusRecord.from_payload(payload).ok
