"""Default settings and user config merging for the status board."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from board_core.scheduler import validate_interval

DEFAULT_BASE_URL = "http://127.0.0.1:8080"

DEFAULTS: dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "refresh_ms": 2000,
    "timeout_seconds": 5.0,
    "query": "",
    "discard_stale": False,
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("config must be a JSON object")
    return payload


def resolve_config(config_path: str | None = None, overrides: dict[str, Any] | None = None) -> dict:
    resolved = dict(DEFAULTS)
    resolved["base_url"] = os.environ.get("STATUS_BOARD_URL") or DEFAULT_BASE_URL

    user_config = load_user_config(config_path)
    for source in (user_config, overrides or {}):
        for key, value in source.items():
            if key in DEFAULTS and value is not None:
                resolved[key] = value

    resolved["base_url"] = str(resolved["base_url"]).rstrip("/")
    if not resolved["base_url"].startswith(("http://", "https://")):
        raise ValueError(f"base_url must be an http(s) URL: {resolved['base_url']}")

    try:
        resolved["refresh_ms"] = validate_interval(int(resolved["refresh_ms"]))
        resolved["timeout_seconds"] = max(0.1, float(resolved["timeout_seconds"]))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid config value: {exc}") from exc

    resolved["query"] = str(resolved["query"] or "")
    resolved["discard_stale"] = bool(resolved["discard_stale"])
    return resolved
