"""Pytest fixtures for Catholic Quotes tests."""

from datetime import datetime, timedelta

import pytest

from catholic_quotes.models import (
    Celebration,
    LiturgicalCalendarData,
    LiturgicalQuote,
    Quote,
    Rank,
)
from catholic_quotes.store import MemoryStore


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def next_day(self, days: int = 1) -> None:
        self.now += timedelta(days=days)


@pytest.fixture
def make_clock():
    def _make(year: int, month: int, day: int, hour: int = 9) -> FakeClock:
        return FakeClock(datetime(year, month, day, hour))

    return _make


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def three_quotes() -> list[Quote]:
    """Small general pool."""
    return [
        Quote(id=1, text="Pray, hope, and don't worry.", author="St. Pio of Pietrelcina"),
        Quote(id=2, text="Do small things with great love.", author="St. Teresa of Calcutta"),
        Quote(id=3, text="Jesus, I trust in you.", author="St. Faustina Kowalska"),
    ]


@pytest.fixture
def christmas() -> Celebration:
    return Celebration(
        name="Nativity of the Lord",
        rank=Rank.SOLEMNITY,
        quotes=(
            LiturgicalQuote(
                text="And the Word became flesh and made his dwelling among us.",
                author="John 1:14",
            ),
            LiturgicalQuote(
                text="For today in the city of David a savior has been born for you.",
                author="Luke 2:11",
            ),
        ),
        color="white",
        season="christmas",
    )


@pytest.fixture
def easter_sunday() -> Celebration:
    return Celebration(
        name="Easter Sunday",
        rank=Rank.SOLEMNITY,
        quotes=(
            LiturgicalQuote(
                text="He is not here, for he has been raised just as he said.",
                author="Matthew 28:6",
            ),
        ),
        easter_offset=0,
    )


@pytest.fixture
def memorial() -> Celebration:
    return Celebration(
        name="St. Vincent Ferrer",
        rank=Rank.MEMORIAL,
        quotes=(
            LiturgicalQuote(text="Do whatever you do for the love of God.", author="St. Vincent Ferrer"),
        ),
    )


@pytest.fixture
def calendar(christmas, easter_sunday, memorial) -> LiturgicalCalendarData:
    """Christmas, a memorial on 5 April and Easter Sunday (5 April in 2026)."""
    return LiturgicalCalendarData(
        fixed_dates={"12-25": christmas, "04-05": memorial},
        moveable_dates={"easterSunday": easter_sunday},
    )
