"""Draw check service — grades a batch of bets against one draw."""

import datetime
from collections.abc import Sequence

from loguru import logger

from euro_lottery.analysis.bet_matcher import check_all_bets, closeness, has_high_potential
from euro_lottery.schemas.draw import Bet, Draw
from euro_lottery.schemas.matching import CheckResults, CheckSummary


def select_draw(
    draws: Sequence[Draw], draw_date: datetime.date | str | None = None
) -> Draw | None:
    """The draw on ``draw_date``, or the most recent one when no date is given."""
    if not draws:
        return None
    if draw_date is None:
        return draws[0]
    if isinstance(draw_date, str):
        draw_date = datetime.date.fromisoformat(draw_date)
    return next((d for d in draws if d.date == draw_date), None)


def check_results(
    bets: Sequence[Bet],
    draws: Sequence[Draw],
    draw_date: datetime.date | str | None = None,
) -> CheckResults:
    draw = select_draw(draws, draw_date)
    if draw is None:
        logger.info("No draw to check {} bets against (date={})", len(bets), draw_date)
        return CheckResults(
            draw=None,
            results=[],
            closest_bet=None,
            winners=[],
            high_potential=[],
            summary=CheckSummary(
                total_bets=len(bets), winning_bets=0, high_potential_count=0
            ),
        )

    results = check_all_bets(bets, draw)
    winners = [r for r in results if r.is_winner]
    high_potential = [r for r in results if has_high_potential(r)]
    closest = sorted(results, key=closeness, reverse=True)[0] if results else None

    logger.info(
        "Checked {} bets against {}: {} winners, {} high potential",
        len(results), draw.date, len(winners), len(high_potential),
    )
    return CheckResults(
        draw=draw,
        results=results,
        closest_bet=closest,
        winners=winners,
        high_potential=high_potential,
        summary=CheckSummary(
            total_bets=len(results),
            winning_bets=len(winners),
            high_potential_count=len(high_potential),
        ),
    )
