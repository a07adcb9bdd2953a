"""Generate diversified candidate combinations from per-number scores.

The strategy depends on the slot (0-based position in the request):

    0   best             top scores with light anti-clustering
    1   balanced         hot numbers mixed with overdue ones
    2   pattern          top scores kept to at most 3 even/odd/low/high
    3+  weighted random  seeded weighted sampling over top candidates

Every combination is scored, then the whole set is re-ranked by score.
"""

from collections.abc import Sequence

from loguru import logger

from euro_lottery.analysis.combination_scorer import score_combination
from euro_lottery.analysis.number_scorer import score_pool
from euro_lottery.analysis.randomness import RandomFactory, RandomSource, sine_source
from euro_lottery.config import settings
from euro_lottery.pools import LOW_HIGH_SPLIT, Pool
from euro_lottery.schemas.scoring import GeneratedCombination, NumberProbability

NUMBER_PICKS = Pool.NUMBERS.pick_count
STAR_PICKS = Pool.STARS.pick_count


# ── number / star selection strategies ───────────────────────────────

def _fill_from(candidates: Sequence[NumberProbability], selected: list[int], size: int) -> None:
    for c in candidates:
        if len(selected) >= size:
            break
        if c.number not in selected:
            selected.append(c.number)


def select_best_numbers(number_probs: Sequence[NumberProbability]) -> list[int]:
    """Top 15 by score; once 3 are picked, skip neighbours (±1) of picked numbers."""
    top = number_probs[:15]
    selected: list[int] = []

    for candidate in top:
        if len(selected) >= NUMBER_PICKS:
            break
        adjacent = any(abs(n - candidate.number) == 1 for n in selected)
        if len(selected) >= 3 and adjacent:
            continue
        selected.append(candidate.number)

    _fill_from(top, selected, NUMBER_PICKS)
    return sorted(selected)


def select_best_stars(star_probs: Sequence[NumberProbability]) -> list[int]:
    return sorted(s.number for s in star_probs[:STAR_PICKS])


def select_balanced_numbers(number_probs: Sequence[NumberProbability]) -> list[int]:
    """Up to 3 hottest, then most overdue, then the best remaining."""
    hottest = sorted(number_probs, key=lambda p: p.hot_cold_score, reverse=True)[:10]
    most_overdue = sorted(number_probs, key=lambda p: p.overdue_score, reverse=True)[:10]
    selected: list[int] = []

    _fill_from(hottest[:3], selected, 3)
    _fill_from(most_overdue, selected, NUMBER_PICKS)
    _fill_from(number_probs, selected, NUMBER_PICKS)
    return sorted(selected)


def select_balanced_stars(star_probs: Sequence[NumberProbability]) -> list[int]:
    """The hottest star plus the most overdue different one."""
    hottest = sorted(star_probs, key=lambda p: p.hot_cold_score, reverse=True)
    most_overdue = sorted(star_probs, key=lambda p: p.overdue_score, reverse=True)
    selected: list[int] = []

    _fill_from(hottest, selected, 1)
    _fill_from(most_overdue, selected, STAR_PICKS)
    _fill_from(star_probs, selected, STAR_PICKS)
    return sorted(selected)


def select_pattern_numbers(number_probs: Sequence[NumberProbability]) -> list[int]:
    """Top 20 by score, admitted only while each of even/odd/low/high stays at 3 or fewer."""
    top = number_probs[:20]
    selected: list[int] = []
    tally = {"even": 0, "odd": 0, "low": 0, "high": 0}

    for candidate in top:
        if len(selected) >= NUMBER_PICKS:
            break
        parity = "even" if candidate.number % 2 == 0 else "odd"
        half = "low" if candidate.number <= LOW_HIGH_SPLIT else "high"
        if tally[parity] >= 3 or tally[half] >= 3:
            continue
        selected.append(candidate.number)
        tally[parity] += 1
        tally[half] += 1

    _fill_from(top, selected, NUMBER_PICKS)
    return sorted(selected)


def select_weighted_random(
    candidates: Sequence[NumberProbability], size: int, random: RandomSource
) -> list[int]:
    """Weighted sampling without replacement, weight = total score.

    The total weight stays fixed across rounds, so a round can overshoot the
    remaining candidates; the best unpicked candidate is taken instead.
    """
    total_weight = sum(c.total_score for c in candidates)
    selected: list[int] = []

    for i in range(size):
        target = random(i) * total_weight
        cumulative = 0.0
        for c in candidates:
            if c.number in selected:
                continue
            cumulative += c.total_score
            if target <= cumulative:
                selected.append(c.number)
                break

        if len(selected) == i:
            fallback = next((c.number for c in candidates if c.number not in selected), None)
            if fallback is not None:
                logger.debug("Weighted round {} fell back to {}", i, fallback)
                selected.append(fallback)

    return sorted(selected)


# ── confidence / ranking ─────────────────────────────────────────────

def calculate_confidence(probability_score: float, slot: int) -> str:
    """Score-derived confidence, decaying 5% per slot but never below half."""
    confidence = probability_score / 100
    confidence *= max(0.5, 1 - slot * 0.05)
    return f"{confidence:.2f}"


def _rerank(combinations: list[GeneratedCombination]) -> list[GeneratedCombination]:
    ordered = sorted(combinations, key=lambda c: c.probability_score, reverse=True)
    return [c.model_copy(update={"rank": i + 1}) for i, c in enumerate(ordered)]


class CombinationGenerator:
    """Ranked, diversified combinations for a draw history."""

    def __init__(self, random_factory: RandomFactory = sine_source):
        self.random_factory = random_factory

    def select(
        self,
        slot: int,
        number_probs: Sequence[NumberProbability],
        star_probs: Sequence[NumberProbability],
    ) -> tuple[list[int], list[int]]:
        """Numbers and stars for one slot, using that slot's strategy."""
        if slot == 0:
            return select_best_numbers(number_probs), select_best_stars(star_probs)
        if slot == 1:
            return select_balanced_numbers(number_probs), select_balanced_stars(star_probs)
        if slot == 2:
            return select_pattern_numbers(number_probs), select_best_stars(star_probs)

        numbers = select_weighted_random(
            number_probs[:25], NUMBER_PICKS, self.random_factory(slot, Pool.NUMBERS)
        )
        stars = select_weighted_random(
            star_probs[:6], STAR_PICKS, self.random_factory(slot, Pool.STARS)
        )
        return numbers, stars

    def generate(self, draws: Sequence, count: int | None = None) -> list[GeneratedCombination]:
        """``count`` combinations (clamped to the configured bounds), ranked by score."""
        if count is None:
            count = settings.DEFAULT_COMBINATION_COUNT
        count = min(settings.MAX_COMBINATIONS, max(settings.MIN_COMBINATIONS, count))

        number_probs = score_pool(draws, Pool.NUMBERS)
        star_probs = score_pool(draws, Pool.STARS)

        combinations = []
        for slot in range(count):
            numbers, stars = self.select(slot, number_probs, star_probs)
            score = score_combination(numbers, stars, draws)
            combinations.append(GeneratedCombination(
                **score.model_dump(),
                rank=slot + 1,
                confidence=calculate_confidence(score.probability_score, slot),
            ))
            logger.debug(
                "Slot {}: {} + {} scored {}", slot, numbers, stars, score.probability_score
            )

        return _rerank(combinations)

    def rank(
        self, combinations: Sequence[tuple[Sequence[int], Sequence[int]]], draws: Sequence
    ) -> list[GeneratedCombination]:
        """Score and rank caller-supplied (numbers, stars) pairs without generating new ones."""
        ranked = []
        for index, (numbers, stars) in enumerate(combinations):
            score = score_combination(numbers, stars, draws)
            ranked.append(GeneratedCombination(
                **score.model_dump(),
                rank=index + 1,
                confidence=calculate_confidence(score.probability_score, index),
            ))
        return _rerank(ranked)


def generate_top_combinations(draws: Sequence, count: int = 5) -> list[GeneratedCombination]:
    return CombinationGenerator().generate(draws, count)


def rank_combinations(
    combinations: Sequence[tuple[Sequence[int], Sequence[int]]], draws: Sequence
) -> list[GeneratedCombination]:
    return CombinationGenerator().rank(combinations, draws)
