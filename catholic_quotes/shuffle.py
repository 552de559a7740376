"""Persistent shuffle rotation over the general quote pool.

Every quote is shown once per cycle in a random order. The rotation moves
forward at most once per local calendar day, and the state survives
restarts through the injected key-value store.
"""

import json
import logging
import random
from collections.abc import Callable, Sequence
from datetime import date, datetime

from .models import Quote, RotationState
from .store import KeyValueStore

logger = logging.getLogger(__name__)

STATE_KEY = "shuffleState"
LAST_ADVANCED_KEY = "lastUpdatedDate"


class ShuffleManager:
    """Hands out one general quote per day without repeats within a cycle."""

    def __init__(
        self,
        quotes: Sequence[Quote],
        store: KeyValueStore,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.quotes = list(quotes)
        self.store = store
        self.rng = rng if rng is not None else random.SystemRandom()
        self.clock = clock or datetime.now
        self._by_id = {quote.id: quote for quote in self.quotes}

    def _today(self) -> date:
        return self.clock().date()

    def _shuffled_ids(self) -> list[int]:
        """Uniformly random permutation of every pool id."""
        ids = [quote.id for quote in self.quotes]
        self.rng.shuffle(ids)
        return ids

    def _initial_state(self, today: date) -> RotationState:
        return RotationState(
            order=self._shuffled_ids(),
            position=0,
            cycle_number=1,
            last_advanced_date=today.isoformat(),
        )

    def _decode(self, raw: bytes) -> RotationState | None:
        try:
            return RotationState.from_dict(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable shuffle state: {e}")
            return None

    def _matches_pool(self, state: RotationState) -> bool:
        return sorted(state.order) == sorted(self._by_id)

    def _save(self, state: RotationState) -> None:
        payload = json.dumps(state.to_dict()).encode("utf-8")
        self.store.set(STATE_KEY, payload)
        self.store.set(LAST_ADVANCED_KEY, state.last_advanced_date.encode("utf-8"))

    def _load_state(self, today: date) -> RotationState:
        """Load persisted state, creating a fresh shuffle when there is none."""
        raw = self.store.get(STATE_KEY)
        state = self._decode(raw) if raw is not None else None

        if state is not None and not self._matches_pool(state):
            logger.warning(
                f"Shuffle order ({len(state.order)} ids) does not match the "
                f"quote pool ({len(self.quotes)} quotes), reshuffling"
            )
            state = None

        if state is None:
            logger.info("Creating initial shuffle state")
            state = self._initial_state(today)
            self._save(state)
        return state

    def _advance(self, state: RotationState, today: date) -> RotationState:
        """Move one step forward, reshuffling when the cycle is complete."""
        state.position += 1
        if state.position >= len(state.order):
            logger.info(f"Completed cycle {state.cycle_number}, generating new shuffle")
            state.order = self._shuffled_ids()
            state.position = 0
            state.cycle_number += 1

        state.last_advanced_date = today.isoformat()
        self._save(state)
        logger.info(
            f"Advanced to position {state.position + 1}/{len(state.order)} "
            f"in cycle {state.cycle_number}"
        )
        return state

    def _lookup(self, state: RotationState) -> Quote | None:
        quote_id = state.current_id
        if quote_id is None:
            logger.warning(
                f"Shuffle position {state.position} out of bounds "
                f"for {len(state.order)} ids"
            )
            return None
        quote = self._by_id.get(quote_id)
        if quote is None:
            logger.warning(f"Quote id {quote_id} is not in the quote pool")
        return quote

    def get_todays_common_quote(self) -> Quote | None:
        """Get today's quote from the rotation.

        Advances the rotation exactly once on the first call of a new day;
        later calls on the same day return the same quote.
        """
        today = self._today()
        try:
            state = self._load_state(today)
            if state.last_advanced_date != today.isoformat():
                state = self._advance(state, today)

            quote = self._lookup(state)
            if quote is None:
                logger.warning("Resetting shuffle after inconsistent state")
                state = self.reset_shuffle()
                quote = self._lookup(state)
        except OSError as e:
            logger.error(f"Shuffle state store failed: {e}")
            return None

        if quote is None:
            logger.error("No quote available after shuffle reset")
            return None

        logger.debug(
            f"Shuffle cycle {state.cycle_number}, position "
            f"{state.position + 1}/{len(state.order)}, showing quote ID {quote.id}"
        )
        return quote

    def reset_shuffle(self) -> RotationState:
        """Discard the current rotation and start again from cycle 1."""
        state = self._initial_state(self._today())
        self._save(state)
        logger.info("Shuffle reset to beginning")
        return state

    def current_state(self) -> RotationState | None:
        """Read the persisted state without creating or advancing it."""
        raw = self.store.get(STATE_KEY)
        if raw is None:
            return None
        return self._decode(raw)

    def last_advanced_date(self) -> str | None:
        raw = self.store.get(LAST_ADVANCED_KEY)
        return raw.decode("utf-8") if raw is not None else None
