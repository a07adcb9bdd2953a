"""Compare bets with a draw and look up prize tiers."""

from collections.abc import Sequence

from euro_lottery.schemas.draw import Bet, Draw
from euro_lottery.schemas.matching import MatchResult

NO_PRIZE = "No prize"

PRIZE_TIERS = {
    "5+2": "🏆 JACKPOT!",
    "5+1": "€300,000+",
    "5+0": "€50,000+",
    "4+2": "€3,000+",
    "4+1": "€150+",
    "4+0": "€50+",
    "3+2": "€30+",
    "3+1": "€12+",
    "2+2": "€8+",
    "3+0": "€10+",
    "1+2": "€7+",
    "2+1": "€5+",
}


def prize_for(match_code: str) -> str:
    return PRIZE_TIERS.get(match_code, NO_PRIZE)


def check_bet(bet: Bet, draw: Draw) -> MatchResult:
    matched_numbers = [n for n in bet.numbers if n in draw.numbers]
    matched_stars = [s for s in bet.stars if s in draw.stars]
    match_code = f"{len(matched_numbers)}+{len(matched_stars)}"
    prize = prize_for(match_code)

    return MatchResult(
        bet_id=bet.id,
        numbers=list(bet.numbers),
        stars=list(bet.stars),
        matched_numbers=matched_numbers,
        matched_stars=matched_stars,
        number_match_count=len(matched_numbers),
        star_match_count=len(matched_stars),
        match_code=match_code,
        is_winner=prize != NO_PRIZE,
        prize=prize,
    )


def check_all_bets(bets: Sequence[Bet], draw: Draw) -> list[MatchResult]:
    return [check_bet(bet, draw) for bet in bets]


def closeness(result: MatchResult) -> int:
    """A matched number outweighs any number of matched stars."""
    return result.number_match_count * 10 + result.star_match_count


def find_closest_bet(bets: Sequence[Bet], draw: Draw) -> MatchResult | None:
    """The bet with the most matches, or None when there are no bets.

    Ties go to the earliest bet.
    """
    if not bets:
        return None
    results = check_all_bets(bets, draw)
    return sorted(results, key=closeness, reverse=True)[0]


def has_high_potential(result: MatchResult) -> bool:
    """4+ numbers, or 3 numbers with both stars."""
    return result.number_match_count >= 4 or (
        result.number_match_count >= 3 and result.star_match_count >= 2
    )


def match_summary(result: MatchResult) -> str:
    if result.is_winner:
        return f"🎉 {result.match_code} - {result.prize}"
    if result.number_match_count > 0 or result.star_match_count > 0:
        return f"{result.match_code} match"
    return "No matches"
