"""Collector helpers shared by the getter and executor view builders."""

from __future__ import annotations

from typing import Any


def as_mapping(payload: Any) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def as_list(payload: Any) -> list[Any]:
    return payload if isinstance(payload, list) else []


def schema_map(payload: Any) -> dict[str, str]:
    return {str(key): str(value) for key, value in as_mapping(payload).items() if value}


def panel_status(shown: int) -> str:
    return "ok" if shown else "empty"
