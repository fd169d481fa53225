"""Render report rows from ``_rows`` as text.

Rows are flat dicts sharing one key order (``name, comics`` or
``title, characters``); the first row's keys become the header.
"""

import csv
import io
import json
from typing import Any, Callable, Dict, List, Mapping, Sequence

from tabulate import tabulate

Rows = Sequence[Mapping[str, Any]]


def _header(rows: Rows) -> List[str]:
    return list(rows[0].keys()) if rows else []


def to_table(rows: Rows) -> str:
    """GitHub-flavoured table via ``tabulate``; right-aligns the count column."""
    return tabulate(rows, headers="keys", tablefmt="github")


def to_json(rows: Rows) -> str:
    return json.dumps([dict(row) for row in rows], indent=2, ensure_ascii=False)


def to_csv(rows: Rows) -> str:
    """CSV with a header line; empty input gives an empty string."""
    header = _header(rows)
    if not header:
        return ""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(header)
    writer.writerows([row[key] for key in header] for row in rows)
    return output.getvalue()


FORMATTERS: Dict[str, Callable[[Rows], str]] = {
    "table": to_table,
    "json": to_json,
    "csv": to_csv,
}
