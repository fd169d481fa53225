"""Flatten catalog records into report rows."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional


def _available(record: Mapping[str, Any], key: str) -> int:
    """Return ``record[key]["available"]`` or 0 when the summary is absent."""
    summary = record.get(key) or {}
    return int(summary.get("available", 0) or 0)


def character_rows(
    records: Iterable[Mapping[str, Any]], top: Optional[int] = None
) -> List[Dict[str, Any]]:
    """Rows of ``name`` and ``comics`` count, most comic appearances first."""
    rows = [
        {"name": record.get("name", ""), "comics": _available(record, "comics")}
        for record in records
    ]
    rows.sort(key=lambda row: (-row["comics"], row["name"]))
    return rows[:top] if top is not None else rows


def comic_rows(
    records: Iterable[Mapping[str, Any]], top: Optional[int] = None
) -> List[Dict[str, Any]]:
    """Rows of ``title`` and ``characters`` count, largest casts first."""
    rows = [
        {
            "title": record.get("title", ""),
            "characters": _available(record, "characters"),
        }
        for record in records
    ]
    rows.sort(key=lambda row: (-row["characters"], row["title"]))
    return rows[:top] if top is not None else rows
