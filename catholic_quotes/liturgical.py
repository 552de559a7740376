"""Liturgical calendar lookups.

Turns the static calendar data into dated celebration instances for a
given year and picks the quote a celebration shows in a given year.
"""

import logging
from datetime import date, timedelta

from .easter import MOVEABLE_FEAST_OFFSETS, compute_easter
from .models import Celebration, LiturgicalCalendarData, LiturgicalQuote

logger = logging.getLogger(__name__)

FALLBACK_LITURGICAL_QUOTE = LiturgicalQuote(
    text="Rejoice in the Lord always; again I will say, rejoice.",
    author="Philippians 4:4",
)


def format_date_key(day: date) -> str:
    """Format a date as the "MM-DD" key used by fixed celebrations."""
    return day.strftime("%m-%d")


def parse_date_key(key: str, year: int) -> date | None:
    """Parse an "MM-DD" key into a date in the given year.

    Returns None for malformed keys and for days that do not exist in that
    year (e.g. "02-29" outside leap years).
    """
    parts = key.split("-")
    if len(parts) != 2:
        return None
    try:
        return date(year, int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def moveable_dates_for(calendar: LiturgicalCalendarData, year: int) -> dict[str, date]:
    """Resolve every moveable entry of the calendar to a date in the year.

    Standard feast keys use the fixed offsets from Easter; other keys need an
    explicit ``easter_offset`` and are skipped without one.
    """
    if not calendar.moveable_dates:
        return {}

    try:
        easter = compute_easter(year)
    except ValueError as e:
        logger.warning(f"Skipping moveable celebrations for {year}: {e}")
        return {}

    dates: dict[str, date] = {}
    for key, celebration in calendar.moveable_dates.items():
        offset = MOVEABLE_FEAST_OFFSETS.get(key, celebration.easter_offset)
        if offset is None:
            logger.debug(f"Skipping moveable entry {key!r}: no offset from Easter")
            continue
        try:
            dates[key] = easter + timedelta(days=offset)
        except OverflowError:
            logger.warning(f"Skipping moveable entry {key!r}: date out of range in {year}")
    return dates


def celebrations_for_year(
    calendar: LiturgicalCalendarData, year: int
) -> list[tuple[Celebration, date]]:
    """All fixed and moveable celebrations of the year with their dates."""
    instances: list[tuple[Celebration, date]] = []

    for key, celebration in calendar.fixed_dates.items():
        day = parse_date_key(key, year)
        if day is None:
            logger.debug(f"No {key!r} in {year}, skipping {celebration.name}")
            continue
        instances.append((celebration, day))

    for key, day in moveable_dates_for(calendar, year).items():
        instances.append((calendar.moveable_dates[key], day))

    return instances


def celebrations_on(
    calendar: LiturgicalCalendarData, day: date
) -> list[tuple[Celebration, date]]:
    """Every celebration falling on the given calendar day."""
    key = format_date_key(day)
    matches: list[tuple[Celebration, date]] = []

    fixed = calendar.fixed_dates.get(key)
    if fixed is not None:
        matches.append((fixed, day))

    for feast_key, feast_date in moveable_dates_for(calendar, day.year).items():
        if format_date_key(feast_date) == key:
            matches.append((calendar.moveable_dates[feast_key], day))

    return matches


def select_quote_for_year(celebration: Celebration, year: int) -> LiturgicalQuote:
    """Pick the celebration's quote for a year.

    One quote is used every year; with two, even years show the first and
    odd years the second.
    """
    quotes = celebration.quotes
    if not quotes:
        logger.warning(
            f"No quotes for {celebration.name}, using fallback "
            f"({FALLBACK_LITURGICAL_QUOTE.author})"
        )
        return FALLBACK_LITURGICAL_QUOTE
    if len(quotes) == 1:
        return quotes[0]
    index = 0 if year % 2 == 0 else 1
    return quotes[min(index, len(quotes) - 1)]
