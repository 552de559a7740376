"""Tests for loading quote and calendar documents."""

import json

import pytest
import responses

from catholic_quotes.config import get_data_dir
from catholic_quotes.models import Rank
from catholic_quotes.sources import (
    FALLBACK_QUOTE,
    SourceLoader,
    parse_calendar,
    parse_quotes,
)

QUOTES_URL = "https://example.org/quotes_database.json"
CALENDAR_URL = "https://example.org/liturgical_calendar.json"

CALENDAR_DOC = {
    "fixedDates": {
        "12-25": {
            "celebration": "Christmas",
            "rank": "solemnity",
            "color": "white",
            "season": "christmas",
            "quotes": [{"text": "And the Word became flesh.", "author": "John 1:14"}],
        }
    },
    "moveableDates": {
        "easterSunday": {
            "easterOffset": 0,
            "celebration": "Easter Sunday",
            "rank": "Solemnity",
            "color": "white",
            "season": "easter",
            "quotes": [],
        }
    },
}


@pytest.fixture
def loader():
    return SourceLoader(timeout=5)


def test_load_bundled_quotes(loader):
    quotes = loader.load_quotes(get_data_dir() / "quotes_database.json")
    assert len(quotes) >= 10
    assert all(q.id >= 0 for q in quotes)
    assert len({q.id for q in quotes}) == len(quotes)


def test_load_bundled_calendar(loader):
    calendar = loader.load_calendar(get_data_dir() / "liturgical_calendar.json")
    assert calendar.fixed_dates["12-25"].rank == Rank.SOLEMNITY
    assert calendar.fixed_dates["11-02"].rank == Rank.COMMEMORATION
    assert "easterSunday" in calendar.moveable_dates
    assert calendar.moveable_dates["pentecost"].easter_offset == 49


def test_parse_quotes_ignores_playback():
    doc = {
        "quotes": [{"id": 0, "text": "Nothing is far from God.", "author": "St. Monica"}],
        "playback": {"shuffledOrder": [5, 6], "currentIndex": 9},
    }
    quotes = parse_quotes(doc)
    assert [q.id for q in quotes] == [0]


@pytest.mark.parametrize(
    "doc",
    [
        {"quotes": []},
        {"quotes": [{"id": -1, "text": "t", "author": "a"}]},
        {"quotes": [{"id": 1, "text": "t", "author": "a"}, {"id": 1, "text": "u", "author": "b"}]},
        {"quotes": [{"id": 1, "text": "t"}]},
        {"items": []},
    ],
)
def test_malformed_quotes_fall_back(tmp_path, loader, doc):
    path = tmp_path / "quotes.json"
    path.write_text(json.dumps(doc))
    assert loader.load_quotes(path) == [FALLBACK_QUOTE]


def test_missing_quotes_file_falls_back(tmp_path, loader, caplog):
    assert loader.load_quotes(tmp_path / "nope.json") == [FALLBACK_QUOTE]
    assert "using fallback quote" in caplog.text


def test_invalid_json_falls_back(tmp_path, loader):
    path = tmp_path / "calendar.json"
    path.write_text("{not json")
    assert loader.load_calendar(path).is_empty
    assert loader.load_quotes(path) == [FALLBACK_QUOTE]


def test_calendar_not_an_object_falls_back(tmp_path, loader):
    path = tmp_path / "calendar.json"
    path.write_text("[1, 2, 3]")
    assert loader.load_calendar(path).is_empty


def test_parse_calendar_metadata():
    calendar = parse_calendar(CALENDAR_DOC)
    christmas = calendar.fixed_dates["12-25"]
    assert christmas.name == "Christmas"
    assert christmas.color == "white"
    assert christmas.season == "christmas"
    assert christmas.quotes[0].author == "John 1:14"

    easter = calendar.moveable_dates["easterSunday"]
    assert easter.rank == Rank.SOLEMNITY
    assert easter.quotes == ()
    assert easter.easter_offset == 0


@responses.activate
def test_load_quotes_over_http(loader):
    responses.add(
        responses.GET,
        QUOTES_URL,
        json={"quotes": [{"id": 7, "text": "Pray, hope, and don't worry.", "author": "St. Pio"}]},
        status=200,
    )
    quotes = loader.load_quotes(QUOTES_URL)
    assert [q.id for q in quotes] == [7]


@responses.activate
def test_load_calendar_over_http(loader):
    responses.add(responses.GET, CALENDAR_URL, json=CALENDAR_DOC, status=200)
    calendar = loader.load_calendar(CALENDAR_URL)
    assert set(calendar.fixed_dates) == {"12-25"}


@responses.activate
def test_http_failure_falls_back(loader):
    responses.add(responses.GET, QUOTES_URL, status=404)
    responses.add(responses.GET, CALENDAR_URL, status=500)
    assert loader.load_quotes(QUOTES_URL) == [FALLBACK_QUOTE]
    assert loader.load_calendar(CALENDAR_URL).is_empty
