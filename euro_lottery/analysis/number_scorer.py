"""Per-number probability scoring.

Each number gets four heuristic sub-scores that sum to a 0-100 composite:

- frequency (0-40): closeness of its appearance count to the expected rate
- hot/cold (0-30): momentum over the last 10 vs last 20 draws
- pattern (0-20): static positional preferences, main numbers only
- overdue (0-10): how long since it last appeared

None of this is a calibrated probability; ``win_chance`` is the composite
read as a percentage.
"""

from collections.abc import Sequence

from euro_lottery.analysis.history import (
    MID_WINDOW,
    RECENT_WINDOW,
    count_appearances,
    last_seen_index,
)
from euro_lottery.pools import Pool
from euro_lottery.schemas.scoring import NumberProbability

STAR_PATTERN_SCORE = 15


def frequency_score(number: int, draws: Sequence, pool: Pool = Pool.NUMBERS) -> int:
    """Score 0-40 by appearances relative to the expected count."""
    expected = len(draws) * pool.expected_rate
    appearances = count_appearances(number, draws, pool)
    ratio = appearances / expected if expected > 0 else 0.0

    if 0.8 <= ratio <= 1.2:
        return 40
    if 0.6 <= ratio < 0.8:
        return 30
    if 1.2 < ratio <= 1.5:
        return 35
    if ratio > 1.5:
        return 25
    return 20


def hot_cold_score(number: int, draws: Sequence, pool: Pool = Pool.NUMBERS) -> int:
    """Score 0-30 from recent momentum."""
    recent_count = count_appearances(number, draws[:RECENT_WINDOW], pool)
    mid_count = count_appearances(number, draws[:MID_WINDOW], pool)
    recent_rate = recent_count / RECENT_WINDOW
    mid_rate = mid_count / MID_WINDOW

    if recent_count >= 3 and recent_rate > mid_rate:
        return 30
    if recent_count >= 2:
        return 25
    if recent_count == 1:
        return 20
    if mid_count >= 2:
        # Was hot, now cooling off
        return 22
    return 15


def pattern_score(number: int, pool: Pool = Pool.NUMBERS) -> int:
    """Score 0-20 from static number shape. Stars get a flat score."""
    if pool is Pool.STARS:
        return STAR_PATTERN_SCORE

    score = 10
    if 15 <= number <= 35:
        score += 5
    if number % 2 != 0:
        score += 3
    if number % 5 == 0:
        score -= 3
    return max(0, min(20, score))


def overdue_score(number: int, draws: Sequence, pool: Pool = Pool.NUMBERS) -> int:
    """Score 0-10 by draws since the number last appeared."""
    interval = pool.overdue_interval
    last_seen = last_seen_index(number, draws, pool)

    if last_seen is None or last_seen > interval * 2:
        return 10
    if last_seen > interval:
        return 7
    if last_seen == 0:
        return 2
    return 5


def score_number(
    number: int, draws: Sequence, pool: Pool = Pool.NUMBERS
) -> NumberProbability:
    freq = frequency_score(number, draws, pool)
    hot_cold = hot_cold_score(number, draws, pool)
    pattern = pattern_score(number, pool)
    overdue = overdue_score(number, draws, pool)
    total = freq + hot_cold + pattern + overdue

    return NumberProbability(
        number=number,
        frequency_score=freq,
        hot_cold_score=hot_cold,
        pattern_score=pattern,
        overdue_score=overdue,
        total_score=total,
        win_chance=float(total),
    )


def score_pool(draws: Sequence, pool: Pool = Pool.NUMBERS) -> list[NumberProbability]:
    """Score every number in the pool, highest total first.

    Ties keep ascending number order (the sort is stable).
    """
    scores = [score_number(num, draws, pool) for num in pool.all_numbers()]
    return sorted(scores, key=lambda p: p.total_score, reverse=True)
