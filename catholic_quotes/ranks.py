"""Same-day celebration conflict resolution."""

from collections.abc import Sequence
from datetime import date

from .models import Celebration


def _sort_key(entry: tuple[Celebration, date]) -> tuple[int, str]:
    celebration, _ = entry
    return (-celebration.rank, celebration.name.casefold())


def pick_highest_rank(celebrations: Sequence[tuple[Celebration, date]]) -> Celebration:
    """Pick the celebration with the highest rank.

    Equal ranks are broken by the case-folded celebration name in lexical
    order; if the names are equal too, the first one encountered wins.
    """
    if not celebrations:
        raise ValueError("No celebrations to choose from")
    # min() keeps the first of equal keys
    celebration, _ = min(celebrations, key=_sort_key)
    return celebration
