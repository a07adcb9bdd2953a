"""Pydantic schemas for bet checking."""

from pydantic import BaseModel

from euro_lottery.schemas.draw import Draw


class MatchResult(BaseModel):
    bet_id: str
    numbers: list[int]
    stars: list[int]
    matched_numbers: list[int]
    matched_stars: list[int]
    number_match_count: int
    star_match_count: int
    match_code: str  # "{numbers}+{stars}", e.g. "3+2"
    is_winner: bool
    prize: str


class CheckSummary(BaseModel):
    total_bets: int
    winning_bets: int
    high_potential_count: int


class CheckResults(BaseModel):
    draw: Draw | None
    results: list[MatchResult]
    closest_bet: MatchResult | None
    winners: list[MatchResult]
    high_potential: list[MatchResult]
    summary: CheckSummary
