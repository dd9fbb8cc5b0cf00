"""Executor panel view builder."""

from __future__ import annotations

from typing import Any

from board_core.collectors import as_list, panel_status, schema_map
from board_core.formatting import fmt_ms, matches_search, mode_badge, type_badge, valid_badge, value_text
from board_core.models import ExecutorRecord, PanelData


def build_row(record: ExecutorRecord) -> dict[str, Any]:
    badge = mode_badge(record.mode)
    return {
        "id": record.id_label,
        "name": record.name,
        "type": type_badge(record.declared_type),
        "valid": valid_badge(record.valid),
        "mode": badge[0] if badge else None,
        "mode_state": badge[1] if badge else None,
        "stamp": fmt_ms(record.stamp_ms),
        "value": value_text(record.data),
    }


def collect(executors: Any, schema: Any, query: str = "") -> PanelData:
    entries = as_list(executors)
    types = schema_map(schema)
    records = [ExecutorRecord.from_payload(entry, types) for entry in entries]

    shown = [record for record in records if matches_search(query, record.search_key)]
    # names repeat across executors, so ordering is by id only (stable on ties)
    shown.sort(key=lambda record: record.sort_id)

    items = [build_row(record) for record in shown]
    return PanelData(
        key="executors",
        title="Executors",
        status=panel_status(len(items)),
        items=items,
        meta={
            "count": len(entries),
            "shown": len(items),
        },
    )
