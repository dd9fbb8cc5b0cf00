"""Shared text formatting helpers for badges and values."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from board_core.models import TypedValue

UNKNOWN = "—"
TYPE_UNKNOWN = "?"
NOMINAL_MODE = "AUTO"
NO_DATA = "No data"
LOAD_ERROR = "Load error"


def matches_search(query: str | None, key: Any) -> bool:
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return needle in str(key).lower()


def fmt_ms(ms: int | float | None) -> str:
    # zero and missing stamps are both shown as unknown
    if not ms:
        return UNKNOWN
    return f"{ms}ms"


def _scalar_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def value_text(data: TypedValue | None) -> str:
    if data is None:
        return UNKNOWN
    return f"{data.type}:{_scalar_text(data.value)}"


def type_badge(declared_type: str | None) -> str:
    return f"type:{declared_type or TYPE_UNKNOWN}"


def valid_badge(valid: bool) -> str:
    return "valid" if valid else "invalid"


def mode_badge(mode: str | None) -> tuple[str, str] | None:
    """Return (label, state) for an executor mode, or None when no badge applies."""
    if not mode:
        return None
    label = str(mode).upper()
    return label, "good" if label == NOMINAL_MODE else "warn"


def fmt_interval(ms: int) -> str:
    if ms <= 0:
        return "off"
    if ms % 1000 == 0:
        return f"{ms // 1000}s"
    return f"{ms}ms"


def clock_label(moment: datetime | None = None) -> str:
    return (moment or datetime.now()).strftime("%H:%M:%S")
