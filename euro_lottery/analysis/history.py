"""Positional helpers over a most-recent-first draw history."""

from collections.abc import Sequence
from dataclasses import dataclass

from euro_lottery.pools import Pool

RECENT_WINDOW = 10
MID_WINDOW = 20


@dataclass(frozen=True)
class Occurrence:
    count: int
    last_seen: int | None  # index of the most recent draw containing the number


def count_appearances(number: int, draws: Sequence, pool: Pool) -> int:
    return sum(1 for draw in draws if number in pool.picks(draw))


def last_seen_index(number: int, draws: Sequence, pool: Pool) -> int | None:
    """Index of the most recent draw containing ``number``, None if never drawn."""
    for index, draw in enumerate(draws):
        if number in pool.picks(draw):
            return index
    return None


def occurrences(draws: Sequence, pool: Pool) -> dict[int, Occurrence]:
    """Single pass over the history: count and most recent index per number."""
    counts = {num: 0 for num in pool.all_numbers()}
    first_index: dict[int, int] = {}
    for index, draw in enumerate(draws):
        for num in pool.picks(draw):
            counts[num] += 1
            first_index.setdefault(num, index)
    return {
        num: Occurrence(count=count, last_seen=first_index.get(num))
        for num, count in counts.items()
    }
