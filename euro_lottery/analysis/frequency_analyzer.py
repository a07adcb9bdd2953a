"""Raw frequency tables, recent draw patterns and a frequency-based pick."""

from collections.abc import Sequence

import numpy as np
from loguru import logger

from euro_lottery.analysis.history import RECENT_WINDOW, occurrences
from euro_lottery.config import settings
from euro_lottery.pools import LOW_HIGH_SPLIT, Pool
from euro_lottery.schemas.statistics import (
    FrequencyAnalysis,
    FrequencyData,
    RecentPatterns,
)

# Due thresholds for the frequency-based pick: not seen in the last N draws
DUE_AFTER = {Pool.NUMBERS: 5, Pool.STARS: 3}


def frequency_table(draws: Sequence, pool: Pool = Pool.NUMBERS) -> list[FrequencyData]:
    """Count, percentage and recency for every number in the pool, most frequent first."""
    total = len(draws)
    table = [
        FrequencyData(
            number=num,
            count=occ.count,
            percentage=occ.count / total * 100 if total > 0 else 0,
            last_seen=total if occ.last_seen is None else occ.last_seen,
        )
        for num, occ in occurrences(draws, pool).items()
    ]
    return sorted(table, key=lambda f: f.count, reverse=True)


def recent_patterns(draws: Sequence) -> RecentPatterns:
    """Consecutive pairs, even:odd and low:high counts over the last 10 draws."""
    consecutive = even = odd = low = high = 0

    for draw in draws[:RECENT_WINDOW]:
        ordered = sorted(draw.numbers)
        consecutive += sum(1 for a, b in zip(ordered, ordered[1:]) if b - a == 1)
        for n in draw.numbers:
            if n % 2 == 0:
                even += 1
            else:
                odd += 1
            if n <= LOW_HIGH_SPLIT:
                low += 1
            else:
                high += 1

    return RecentPatterns(
        consecutive_numbers=consecutive,
        even_odd_ratio=f"{even}:{odd}",
        low_high_ratio=f"{low}:{high}",
    )


def analyze_frequency(draws: Sequence) -> FrequencyAnalysis:
    number_frequency = frequency_table(draws, Pool.NUMBERS)
    star_frequency = frequency_table(draws, Pool.STARS)

    return FrequencyAnalysis(
        number_frequency=number_frequency,
        star_frequency=star_frequency,
        most_common_numbers=[f.number for f in number_frequency[:10]],
        most_common_stars=[f.number for f in star_frequency[:4]],
        least_common_numbers=[f.number for f in number_frequency[-10:]],
        least_common_stars=[f.number for f in star_frequency[-4:]],
        recent_patterns=recent_patterns(draws),
    )


def _pick_hot_and_due(
    table: list[FrequencyData],
    hot_count: int,
    pick_count: int,
    due_after: int,
    filler_pool: list[int],
    rng: np.random.Generator,
) -> list[int]:
    hot = [f.number for f in table[:hot_count]]
    due = [f.number for f in table if f.last_seen > due_after][:pick_count]
    selected = list(dict.fromkeys(hot + due))[:pick_count]

    while len(selected) < pick_count:
        remaining = [n for n in filler_pool if n not in selected]
        if not remaining:
            break
        selected.append(int(rng.choice(remaining)))
        logger.debug("Frequency pick filled {} at random", selected[-1])

    return sorted(selected)


def frequency_based_prediction(
    draws: Sequence, rng: np.random.Generator | None = None
) -> tuple[list[int], list[int]]:
    """Mix the most frequent numbers with due ones; fill the rest at random.

    Numbers: top 3 by count plus numbers unseen for 5+ draws, filled from the
    20 most frequent. Stars: top 1 plus stars unseen for 3+ draws, filled from
    the 4 most frequent. Without ``rng`` the filler is seeded from
    ``settings.FILLER_SEED``, so repeated calls agree.
    """
    if rng is None:
        rng = np.random.default_rng(settings.FILLER_SEED)

    analysis = analyze_frequency(draws)
    number_table = analysis.number_frequency
    star_table = analysis.star_frequency

    numbers = _pick_hot_and_due(
        number_table,
        hot_count=3,
        pick_count=Pool.NUMBERS.pick_count,
        due_after=DUE_AFTER[Pool.NUMBERS],
        filler_pool=[f.number for f in number_table[:20]],
        rng=rng,
    )
    stars = _pick_hot_and_due(
        star_table,
        hot_count=1,
        pick_count=Pool.STARS.pick_count,
        due_after=DUE_AFTER[Pool.STARS],
        filler_pool=analysis.most_common_stars,
        rng=rng,
    )
    return numbers, stars
