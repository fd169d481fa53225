"""Tests for report rows and their renderings."""

import json

from marvelfetch._core._models import Page
from marvelfetch.formatters import (
    FORMATTERS,
    character_rows,
    comic_rows,
    to_csv,
    to_json,
    to_table,
)

from tests.unit.fixtures import load_page_fixture


def test_character_rows_sorted_by_comics():
    records = Page.from_json(load_page_fixture("characters_page")).results

    rows = character_rows(records)

    assert rows == [
        {"name": "A.I.M.", "comics": 53},
        {"name": "3-D Man", "comics": 12},
        {"name": "A-Bomb (HAS)", "comics": 4},
    ]


def test_character_rows_ties_broken_by_name_and_top():
    records = [
        {"name": "Storm", "comics": {"available": 3}},
        {"name": "Cyclops", "comics": {"available": 3}},
        {"name": "Jubilee"},
    ]

    assert character_rows(records) == [
        {"name": "Cyclops", "comics": 3},
        {"name": "Storm", "comics": 3},
        {"name": "Jubilee", "comics": 0},
    ]
    assert character_rows(records, top=1) == [{"name": "Cyclops", "comics": 3}]


def test_comic_rows():
    records = [
        {"title": "X-Men (1963) #1", "characters": {"available": 9}},
        {"title": "Hulk (2008) #55", "characters": {"available": 2}},
    ]

    assert comic_rows(records, top=5) == [
        {"title": "X-Men (1963) #1", "characters": 9},
        {"title": "Hulk (2008) #55", "characters": 2},
    ]


def test_to_table():
    table = to_table([{"name": "A.I.M.", "comics": 53}])

    lines = table.splitlines()
    assert "name" in lines[0] and "comics" in lines[0]
    assert lines[1].startswith("|")
    assert "A.I.M." in lines[2] and "53" in lines[2]


def test_to_json_round_trips_unicode():
    rows = [{"name": "Légion", "comics": 1}]

    text = to_json(rows)

    assert "Légion" in text
    assert json.loads(text) == rows


def test_to_csv():
    text = to_csv([{"name": "A.I.M.", "comics": 53}, {"name": "Beast", "comics": 9}])

    assert text.splitlines() == ["name,comics", "A.I.M.,53", "Beast,9"]


def test_to_csv_empty():
    assert to_csv([]) == ""


def test_formatters_registry():
    assert set(FORMATTERS) == {"table", "json", "csv"}


def test_to_csv_follows_comic_row_order():
    rows = comic_rows([{"title": "Hulk, Vol. 2", "characters": {"available": 2}}])

    assert to_csv(rows).splitlines() == ["title,characters", '"Hulk, Vol. 2",2']


def test_to_json_empty():
    assert json.loads(to_json([])) == []
