"""Data models for Catholic Quotes."""

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import Any

# Reserved id for quotes taken from a liturgical celebration
LITURGICAL_QUOTE_ID = -1


class Rank(IntEnum):
    """Liturgical rank, higher value = more important."""

    UNRANKED = 0
    COMMEMORATION = 1
    OPTIONAL_MEMORIAL = 2
    MEMORIAL = 3
    FEAST = 4
    SOLEMNITY = 5

    @classmethod
    def parse(cls, value: str | None) -> "Rank":
        """Parse a rank name such as "Optional Memorial" or "solemnity"."""
        if not value:
            return cls.UNRANKED
        normalized = value.strip().upper().replace(" ", "_").replace("-", "_")
        return cls.__members__.get(normalized, cls.UNRANKED)

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Quote:
    """A quote ready for display."""

    id: int
    text: str
    author: str

    @property
    def is_liturgical(self) -> bool:
        return self.id == LITURGICAL_QUOTE_ID


@dataclass(frozen=True)
class LiturgicalQuote:
    """A quote attached to a celebration (no pool id)."""

    text: str
    author: str

    def as_quote(self) -> Quote:
        return Quote(id=LITURGICAL_QUOTE_ID, text=self.text, author=self.author)


@dataclass(frozen=True)
class Celebration:
    """A fixed-date or moveable liturgical celebration."""

    name: str
    rank: Rank
    quotes: tuple[LiturgicalQuote, ...] = ()
    color: str | None = None  # pass-through metadata
    season: str | None = None  # pass-through metadata
    easter_offset: int | None = None  # moveable entries only


@dataclass(frozen=True)
class LiturgicalCalendarData:
    """Fixed ("MM-DD") and moveable (feast key) celebrations."""

    fixed_dates: dict[str, Celebration] = field(default_factory=dict)
    moveable_dates: dict[str, Celebration] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "LiturgicalCalendarData":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.fixed_dates and not self.moveable_dates


@dataclass
class RotationState:
    """Persisted position in the shuffled general quote pool."""

    order: list[int]
    position: int = 0
    cycle_number: int = 1
    last_advanced_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "order": list(self.order),
            "position": self.position,
            "cycle_number": self.cycle_number,
            "last_advanced_date": self.last_advanced_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RotationState":
        return cls(
            order=[int(quote_id) for quote_id in data["order"]],
            position=int(data["position"]),
            cycle_number=int(data.get("cycle_number", 1)),
            last_advanced_date=str(data.get("last_advanced_date", "")),
        )

    @property
    def current_id(self) -> int | None:
        """Quote id at the current position, or None when out of bounds."""
        if 0 <= self.position < len(self.order):
            return self.order[self.position]
        return None


@dataclass(frozen=True)
class DailySelection:
    """Today's quote together with the celebration it came from."""

    quote: Quote | None
    celebration_name: str | None = None

    @property
    def is_liturgical(self) -> bool:
        return self.celebration_name is not None


@dataclass(frozen=True)
class NextLiturgicalDay:
    """The nearest upcoming celebration."""

    name: str
    date: date
    display_date: str  # e.g. "Dec 25"
