"""Test fixture utilities for loading recorded API pages.

- `pages/` - response envelopes captured from the Marvel gateway, trimmed

Usage:
    from tests.unit.fixtures import load_page_fixture

    def test_names():
        payload = load_page_fixture("characters_page")
        page = Page.from_json(payload)
        assert page.results[0]["name"] == "3-D Man"
"""

import json
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import parse_qs, urlparse

FIXTURES_DIR = Path(__file__).parent

API_PREFIX = "https://gateway.test"
CHARACTERS_URL = f"{API_PREFIX}/v1/public/characters"
COMICS_URL = f"{API_PREFIX}/v1/public/comics"


def load_page_fixture(name: str) -> dict:
    """Load a response envelope fixture by name.

    Args:
        name: Fixture name, with or without file extension.

    Returns:
        The parsed JSON fixture as a dictionary.

    Raises:
        FileNotFoundError: If the fixture doesn't exist.
    """
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = FIXTURES_DIR / "pages" / name
    if not path.exists():
        raise FileNotFoundError(f"Page fixture not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def make_records(n: int, start: int = 0) -> List[Dict[str, Any]]:
    """Synthetic character records numbered ``start .. start + n - 1``."""
    return [
        {
            "id": i,
            "name": f"Character {i:04d}",
            "comics": {"available": i % 7},
        }
        for i in range(start, start + n)
    ]


def envelope(total: int, results: List[Dict[str, Any]], count: Any = None) -> dict:
    """Wrap ``results`` in the gateway's response envelope."""
    return {
        "code": 200,
        "status": "Ok",
        "data": {
            "offset": 0,
            "limit": 100,
            "total": total,
            "count": len(results) if count is None else count,
            "results": results,
        },
    }


def query_of(call) -> Dict[str, str]:
    """Return the single-valued query parameters of a recorded ``responses`` call."""
    return {k: v[0] for k, v in parse_qs(urlparse(call.request.url).query).items()}
