"""Pydantic schemas for frequency and hot/cold statistics."""

from typing import Literal

from pydantic import BaseModel

from euro_lottery.schemas.matching import MatchResult
from euro_lottery.schemas.scoring import GeneratedCombination, NumberProbability


class FrequencyData(BaseModel):
    number: int
    count: int
    percentage: float
    last_seen: int  # draws ago; len(history) when never drawn


class RecentPatterns(BaseModel):
    consecutive_numbers: int
    even_odd_ratio: str
    low_high_ratio: str


class FrequencyAnalysis(BaseModel):
    number_frequency: list[FrequencyData]
    star_frequency: list[FrequencyData]
    most_common_numbers: list[int]
    most_common_stars: list[int]
    least_common_numbers: list[int]
    least_common_stars: list[int]
    recent_patterns: RecentPatterns


class HotColdNumber(BaseModel):
    number: int
    appearances: int  # in the last 10 draws
    streak_type: Literal["hot", "cold", "neutral"]
    streak: int  # draws since last appearance; len(history) when never drawn
    trend: Literal["rising", "falling", "stable"]


class HotColdAnalysis(BaseModel):
    hot_numbers: list[HotColdNumber]
    cold_numbers: list[HotColdNumber]
    hot_stars: list[HotColdNumber]
    cold_stars: list[HotColdNumber]
    overdue: list[int]
    overdue_stars: list[int]


class HotColdRecommendation(BaseModel):
    use_hot: list[int]
    use_overdue: list[int]
    avoid_cold: list[int]
    hot_stars_to_use: list[int]


class AnalysisSnapshot(BaseModel):
    """Everything the narrative layer needs about a draw history."""

    total_draws: int
    frequency: FrequencyAnalysis
    hot_cold: HotColdAnalysis
    recommendation: HotColdRecommendation
    number_scores: list[NumberProbability]
    star_scores: list[NumberProbability]
    combinations: list[GeneratedCombination]
    closest_bet: MatchResult | None = None
