"""Loading the quote pool and liturgical calendar documents.

Sources are local JSON files or http(s) URLs. A source that cannot be
loaded never breaks the app: the quote pool falls back to a single built-in
quote and the calendar to an empty one.
"""

import json
import logging
from pathlib import Path
from typing import Any

import requests

from .models import Celebration, LiturgicalCalendarData, LiturgicalQuote, Quote, Rank

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = Quote(
    id=0,
    text=(
        "You have made us for yourself, O Lord, and our hearts are restless "
        "until they rest in you."
    ),
    author="St. Augustine",
)

# Errors that mean "this document is unusable"
_LOAD_ERRORS = (
    OSError,
    AttributeError,
    requests.RequestException,
    json.JSONDecodeError,
    KeyError,
    TypeError,
    ValueError,
)


class SourceLoader:
    """Reads JSON documents from disk or over HTTP."""

    def __init__(self, timeout: int = 10):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "CatholicQuotes/1.0",
                "Accept": "application/json",
            }
        )
        adapter = requests.adapters.HTTPAdapter(max_retries=1)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def fetch(self, source: str | Path) -> Any:
        """Fetch and decode a JSON document."""
        source_str = str(source)
        if source_str.startswith(("http://", "https://")):
            response = self.session.get(source_str, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        with open(source_str, encoding="utf-8") as f:
            return json.load(f)

    def load_quotes(self, source: str | Path) -> list[Quote]:
        """Load the general quote pool, or the fallback quote on failure."""
        try:
            quotes = parse_quotes(self.fetch(source))
        except _LOAD_ERRORS as e:
            logger.error(f"Failed to load quotes from {source} - using fallback quote: {e}")
            return [FALLBACK_QUOTE]

        logger.info(f"Loaded {len(quotes)} quotes from {source}")
        return quotes

    def load_calendar(self, source: str | Path) -> LiturgicalCalendarData:
        """Load the liturgical calendar, or an empty calendar on failure."""
        try:
            calendar = parse_calendar(self.fetch(source))
        except _LOAD_ERRORS as e:
            logger.error(f"Failed to load calendar from {source} - using empty calendar: {e}")
            return LiturgicalCalendarData.empty()

        logger.info(
            f"Loaded calendar from {source}: {len(calendar.fixed_dates)} fixed, "
            f"{len(calendar.moveable_dates)} moveable"
        )
        return calendar


def parse_quotes(data: dict[str, Any]) -> list[Quote]:
    """Build the quote pool from a ``{"quotes": [...]}`` document.

    The ``playback`` section some documents carry is ignored; rotation state
    lives in the state store.
    """
    quotes = [
        Quote(id=int(item["id"]), text=str(item["text"]), author=str(item["author"]))
        for item in data["quotes"]
    ]
    if not quotes:
        raise ValueError("Quote document contains no quotes")

    seen: set[int] = set()
    for quote in quotes:
        if quote.id < 0:
            raise ValueError(f"Negative quote id {quote.id}")
        if quote.id in seen:
            raise ValueError(f"Duplicate quote id {quote.id}")
        seen.add(quote.id)
    return quotes


def parse_celebration(data: dict[str, Any]) -> Celebration:
    """Build a Celebration from a calendar entry."""
    offset = data.get("easterOffset")
    return Celebration(
        name=str(data["celebration"]),
        rank=Rank.parse(data.get("rank")),
        quotes=tuple(
            LiturgicalQuote(text=str(q["text"]), author=str(q["author"]))
            for q in data.get("quotes", [])
        ),
        color=data.get("color"),
        season=data.get("season"),
        easter_offset=int(offset) if offset is not None else None,
    )


def parse_calendar(data: dict[str, Any]) -> LiturgicalCalendarData:
    """Build calendar data from a ``fixedDates``/``moveableDates`` document."""
    return LiturgicalCalendarData(
        fixed_dates={
            key: parse_celebration(entry)
            for key, entry in data.get("fixedDates", {}).items()
        },
        moveable_dates={
            key: parse_celebration(entry)
            for key, entry in data.get("moveableDates", {}).items()
        },
    )
