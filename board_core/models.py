"""Shared model contracts for the fetch-build-render cycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TypedValue:
    type: str
    value: Any

    @classmethod
    def from_payload(cls, payload: Any) -> TypedValue | None:
        if not isinstance(payload, dict) or not payload:
            return None
        return cls(type=str(payload.get("type", "?")), value=payload.get("value"))


def _stamp(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _record_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value))
    except (TypeError, ValueError):
        return None


def _id_label(value: Any) -> str:
    if value is None:
        return ""
    record_id = _record_id(value)
    return str(record_id) if record_id is not None else str(value)


@dataclass(frozen=True)
class GetterRecord:
    name: str
    declared_type: str | None = None
    valid: bool = False
    stamp_ms: int | float | None = None
    data: TypedValue | None = None

    @classmethod
    def from_payload(cls, name: str, payload: Any, declared_type: str | None = None) -> GetterRecord:
        entry = payload if isinstance(payload, dict) else {}
        return cls(
            name=str(name),
            declared_type=declared_type,
            valid=bool(entry.get("valid")),
            stamp_ms=_stamp(entry.get("stampMs")),
            data=TypedValue.from_payload(entry.get("data")),
        )


@dataclass(frozen=True)
class ExecutorRecord:
    id: int | None
    id_label: str = ""
    name: str = ""
    declared_type: str | None = None
    valid: bool = False
    mode: str | None = None
    stamp_ms: int | float | None = None
    data: TypedValue | None = None

    @property
    def search_key(self) -> str:
        if self.name:
            return self.name
        return self.id_label

    @property
    def sort_id(self) -> int:
        return self.id if self.id is not None else 0

    @classmethod
    def from_payload(cls, payload: Any, schema: dict[str, str] | None = None) -> ExecutorRecord:
        entry = payload if isinstance(payload, dict) else {}
        name = str(entry.get("name") or "")
        raw_id = entry.get("id")
        mode = entry.get("mode")
        return cls(
            id=_record_id(raw_id),
            id_label=_id_label(raw_id),
            name=name,
            declared_type=(schema or {}).get(name) if name else None,
            valid=bool(entry.get("valid")),
            mode=str(mode) if mode else None,
            stamp_ms=_stamp(entry.get("stampMs")),
            data=TypedValue.from_payload(entry.get("data")),
        )


@dataclass(frozen=True)
class StatusRecord:
    status: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def from_payload(cls, payload: Any) -> StatusRecord:
        if not isinstance(payload, dict):
            return cls()
        status = payload.get("status")
        return cls(status=status if isinstance(status, str) else None)


@dataclass(frozen=True)
class Snapshot:
    """Raw payloads of the five endpoints read during one cycle."""

    status: Any
    getter_schema: Any
    executor_schema: Any
    getters: Any
    executors: Any


@dataclass
class PanelData:
    key: str
    title: str
    status: str = "ok"
    items: list[dict[str, Any]] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "status": self.status,
            "items": self.items,
            "meta": self.meta,
            "errors": self.errors,
        }


@dataclass(frozen=True)
class ViewState:
    connected: bool
    getters: PanelData
    executors: PanelData
    base_url: str = ""
    refresh_ms: int = 0
    query: str = ""
    cycle: int = 0
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "connected": self.connected,
            "base_url": self.base_url,
            "refresh_ms": self.refresh_ms,
            "query": self.query,
            "cycle": self.cycle,
            "updated_at": self.updated_at,
            "getters": self.getters.to_dict(),
            "executors": self.executors.to_dict(),
        }
