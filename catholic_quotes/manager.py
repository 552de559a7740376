"""Daily quote orchestration.

Liturgical celebrations take priority over the general rotation: on a
celebration day the quote comes from the highest-ranked celebration, on
every other day from the shuffle manager.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from datetime import date, datetime, time

from .config import Config
from .liturgical import (
    celebrations_for_year,
    celebrations_on,
    format_date_key,
    select_quote_for_year,
)
from .models import (
    Celebration,
    DailySelection,
    LiturgicalCalendarData,
    NextLiturgicalDay,
    Quote,
)
from .ranks import pick_highest_rank
from .shuffle import ShuffleManager
from .sources import SourceLoader
from .store import FileStore, KeyValueStore

logger = logging.getLogger(__name__)

NOON = time(12)
# From this month on, next year's celebrations are always considered
LOOKAHEAD_MONTH = 11


def format_display_date(day: date) -> str:
    """Short display date, e.g. "Dec 25"."""
    return f"{day.strftime('%b')} {day.day}"


class DataManager:
    """Answers "which quote today" and "which celebration is next"."""

    def __init__(
        self,
        calendar: LiturgicalCalendarData,
        shuffle_manager: ShuffleManager,
        clock: Callable[[], datetime] | None = None,
    ):
        self.calendar = calendar
        self.shuffle_manager = shuffle_manager
        self.clock = clock or datetime.now
        self._todays_celebration: str | None = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        store: KeyValueStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> DataManager:
        """Load sources and wire up the shuffle manager."""
        loader = SourceLoader(timeout=config.request_timeout)
        quotes = loader.load_quotes(config.quotes_source)
        calendar = loader.load_calendar(config.calendar_source)
        if store is None:
            store = FileStore(config.state_dir)
        shuffle_manager = ShuffleManager(quotes, store, clock=clock)
        return cls(calendar, shuffle_manager, clock=clock)

    def _today(self) -> date:
        return self.clock().date()

    def celebrations_on(self, day: date) -> list[tuple[Celebration, date]]:
        """Every celebration falling on the given day."""
        return celebrations_on(self.calendar, day)

    def _resolve_celebration(self, day: date) -> Celebration | None:
        matches = self.celebrations_on(day)
        if not matches:
            return None

        winner = pick_highest_rank(matches)
        logger.info(f"Today: {winner.name} ({winner.rank.label})")
        if len(matches) > 1:
            logger.info(f"Resolved conflict between {len(matches)} celebrations")
        return winner

    def get_todays_selection(self) -> DailySelection:
        """Today's quote and the celebration it belongs to, if any."""
        today = self._today()
        celebration = self._resolve_celebration(today)

        if celebration is not None:
            self._todays_celebration = celebration.name
            quote = select_quote_for_year(celebration, today.year).as_quote()
            return DailySelection(quote=quote, celebration_name=celebration.name)

        self._todays_celebration = None
        return DailySelection(quote=self.shuffle_manager.get_todays_common_quote())

    def get_todays_quote(self) -> Quote | None:
        """Today's quote; also records today's celebration name."""
        return self.get_todays_selection().quote

    def get_todays_liturgical_day_name(self) -> str | None:
        """Name of today's celebration.

        Only valid after get_todays_quote() (or get_todays_selection()) has
        been called for the current day; no recomputation happens here.
        Prefer get_todays_selection(), which returns both at once.
        """
        return self._todays_celebration

    def get_next_liturgical_day(self) -> NextLiturgicalDay | None:
        """The nearest celebration strictly after today."""
        if self.calendar.is_empty:
            return None

        now = self.clock()
        anchor = datetime.combine(now.date(), NOON)

        upcoming = [
            (celebration, day)
            for celebration, day in celebrations_for_year(self.calendar, now.year)
            if datetime.combine(day, NOON) > anchor
        ]
        if (not upcoming or now.month >= LOOKAHEAD_MONTH) and now.year < date.max.year:
            upcoming.extend(celebrations_for_year(self.calendar, now.year + 1))

        by_date: dict[date, list[tuple[Celebration, date]]] = defaultdict(list)
        for celebration, day in upcoming:
            by_date[day].append((celebration, day))

        if not by_date:
            return None

        next_date = min(by_date)
        group = by_date[next_date]
        winner = pick_highest_rank(group)
        if len(group) > 1:
            logger.debug(
                f"Conflict on {format_date_key(next_date)}: chose {winner.name} "
                f"over {len(group) - 1} others"
            )

        result = NextLiturgicalDay(
            name=winner.name,
            date=next_date,
            display_date=format_display_date(next_date),
        )
        logger.info(f"Next liturgical day: {result.name} on {result.display_date}")
        return result
