"""Render fetched records as tables, JSON or CSV."""

from ._render import FORMATTERS, to_csv, to_json, to_table
from ._rows import character_rows, comic_rows

__all__ = [
    "FORMATTERS",
    "character_rows",
    "comic_rows",
    "to_csv",
    "to_json",
    "to_table",
]
