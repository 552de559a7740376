"""Easter and moveable feast dates.

Easter is computed with the anonymous Gregorian algorithm
(Meeus/Jones/Butcher), valid for every Gregorian year from 1583 on.
"""

from datetime import date, timedelta

FIRST_GREGORIAN_YEAR = 1583

# Feast key -> days relative to Easter Sunday
MOVEABLE_FEAST_OFFSETS: dict[str, int] = {
    "ashWednesday": -46,
    "palmSunday": -7,
    "holyThursday": -3,
    "goodFriday": -2,
    "easterVigil": -1,
    "easterSunday": 0,
    "divineMercySunday": 7,
    "ascension": 39,
    "pentecost": 49,
    "corpusChristi": 60,
}


def compute_easter(year: int) -> date:
    """Return the date of Easter Sunday for the given year."""
    if year < FIRST_GREGORIAN_YEAR:
        raise ValueError(f"Year {year} predates the Gregorian calendar")

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def compute_moveable_dates(year: int) -> dict[str, date]:
    """Return every standard moveable feast for the year, keyed by feast key."""
    easter = compute_easter(year)
    return {
        key: easter + timedelta(days=offset)
        for key, offset in MOVEABLE_FEAST_OFFSETS.items()
    }


def moveable_date(feast_key: str, year: int) -> date | None:
    """Date of a single moveable feast, or None for an unknown key."""
    offset = MOVEABLE_FEAST_OFFSETS.get(feast_key)
    if offset is None:
        return None
    return compute_easter(year) + timedelta(days=offset)


def moveable_date_key(feast_key: str, year: int) -> str | None:
    """Moveable feast date formatted as an "MM-DD" key."""
    feast_date = moveable_date(feast_key, year)
    if feast_date is None:
        return None
    return feast_date.strftime("%m-%d")
