"""Statistics service — bundles the full analysis of a draw history."""

from collections.abc import Sequence

from loguru import logger

from euro_lottery.analysis.bet_matcher import find_closest_bet
from euro_lottery.analysis.combination_generator import CombinationGenerator
from euro_lottery.analysis.frequency_analyzer import analyze_frequency
from euro_lottery.analysis.hot_cold import analyze_hot_cold, hot_cold_recommendation
from euro_lottery.analysis.number_scorer import score_pool
from euro_lottery.pools import Pool
from euro_lottery.schemas.draw import Bet, Draw
from euro_lottery.schemas.scoring import NumberProbability
from euro_lottery.schemas.statistics import AnalysisSnapshot


def get_number_probabilities(
    draws: Sequence[Draw], pool: Pool | str = Pool.NUMBERS
) -> list[NumberProbability]:
    return score_pool(draws, Pool.parse(pool))


def build_analysis_snapshot(
    draws: Sequence[Draw],
    bets: Sequence[Bet] = (),
    count: int | None = None,
    generator: CombinationGenerator | None = None,
) -> AnalysisSnapshot:
    """Frequency, hot/cold, scores and generated combinations in one bundle.

    The closest bet is measured against the most recent draw.
    """
    if generator is None:
        generator = CombinationGenerator()

    hot_cold = analyze_hot_cold(draws)
    combinations = generator.generate(draws, count)
    closest = find_closest_bet(bets, draws[0]) if bets and draws else None

    logger.info(
        "Built analysis snapshot: {} draws, {} combinations, {} bets",
        len(draws), len(combinations), len(bets),
    )
    return AnalysisSnapshot(
        total_draws=len(draws),
        frequency=analyze_frequency(draws),
        hot_cold=hot_cold,
        recommendation=hot_cold_recommendation(draws, hot_cold),
        number_scores=score_pool(draws, Pool.NUMBERS),
        star_scores=score_pool(draws, Pool.STARS),
        combinations=combinations,
        closest_bet=closest,
    )
