"""Getter panel view builder."""

from __future__ import annotations

from typing import Any

from board_core.collectors import as_mapping, panel_status, schema_map
from board_core.formatting import fmt_ms, matches_search, type_badge, valid_badge, value_text
from board_core.models import GetterRecord, PanelData


def build_row(record: GetterRecord) -> dict[str, Any]:
    return {
        "name": record.name,
        "type": type_badge(record.declared_type),
        "valid": valid_badge(record.valid),
        "stamp": fmt_ms(record.stamp_ms),
        "value": value_text(record.data),
    }


def collect(getters: Any, schema: Any, query: str = "") -> PanelData:
    entries = as_mapping(getters)
    types = schema_map(schema)
    keys = sorted(str(key) for key in entries)

    items = [
        build_row(GetterRecord.from_payload(key, entries[key], types.get(key)))
        for key in keys
        if matches_search(query, key)
    ]

    return PanelData(
        key="getters",
        title="Getters",
        status=panel_status(len(items)),
        items=items,
        meta={
            "count": len(keys),
            "shown": len(items),
        },
    )
