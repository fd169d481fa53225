"""Validation helpers used by the public API."""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def require_non_empty(mapping: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Raise ``ValueError`` if any of *keys* are missing or empty in *mapping*."""
    missing = [k for k in keys if not mapping.get(k)]
    if missing:
        raise ValueError(f"Missing required parameters: {', '.join(missing)}")


def validate_page_size(page_size: int, ceiling: int) -> None:
    """Ensure ``1 <= page_size <= ceiling``."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValueError(f"page_size must be an integer, got {page_size!r}")
    if not 1 <= page_size <= ceiling:
        raise ValueError(f"page_size must be between 1 and {ceiling}, got {page_size}")


def is_count(value: Any) -> bool:
    """Return True for non-negative integers (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
