"""Score a full 5-number + 2-star combination."""

import math
from collections.abc import Sequence

from euro_lottery.analysis.number_scorer import score_number
from euro_lottery.pools import LOW_HIGH_SPLIT, Pool
from euro_lottery.schemas.scoring import CombinationScore, ScoreBreakdown

BALANCE_BONUS = 3
# Displayed win chance tops out at this percentage
WIN_CHANCE_CAP = 15


def _round1(value: float) -> float:
    """Round half up to one decimal."""
    return math.floor(value * 10 + 0.5) / 10


def balance_bonus(numbers: Sequence[int]) -> int:
    """+3 for a 2-3 even split, +3 for a 2-3 low split."""
    even_count = sum(1 for n in numbers if n % 2 == 0)
    low_count = sum(1 for n in numbers if n <= LOW_HIGH_SPLIT)

    bonus = 0
    if 2 <= even_count <= 3:
        bonus += BALANCE_BONUS
    if 2 <= low_count <= 3:
        bonus += BALANCE_BONUS
    return bonus


def score_combination(
    numbers: Sequence[int], stars: Sequence[int], draws: Sequence
) -> CombinationScore:
    """Average the per-number sub-scores over all selections and add the balance bonus."""
    numbers = sorted(numbers)
    stars = sorted(stars)

    probs = [score_number(n, draws, Pool.NUMBERS) for n in numbers]
    probs += [score_number(s, draws, Pool.STARS) for s in stars]

    count = len(probs)
    if count == 0:
        avg_frequency = avg_hot_cold = avg_pattern = avg_overdue = 0.0
    else:
        avg_frequency = sum(p.frequency_score for p in probs) / count
        avg_hot_cold = sum(p.hot_cold_score for p in probs) / count
        avg_pattern = sum(p.pattern_score for p in probs) / count
        avg_overdue = sum(p.overdue_score for p in probs) / count

    bonus = balance_bonus(numbers)
    raw_score = min(
        100.0, avg_frequency + avg_hot_cold + avg_pattern + avg_overdue + bonus
    )
    win_chance = raw_score / 100 * WIN_CHANCE_CAP

    return CombinationScore(
        numbers=numbers,
        stars=stars,
        probability_score=_round1(raw_score),
        win_chance=f"{win_chance:.2f}%",
        breakdown=ScoreBreakdown(
            frequency_score=_round1(avg_frequency),
            hot_cold_score=_round1(avg_hot_cold),
            pattern_score=_round1(avg_pattern + bonus),
            overdue_score=_round1(avg_overdue),
        ),
    )
