"""Pydantic schemas for number and combination scores."""

from pydantic import BaseModel, Field


class NumberProbability(BaseModel):
    number: int
    frequency_score: int = Field(ge=0, le=40)
    hot_cold_score: int = Field(ge=0, le=30)
    pattern_score: int = Field(ge=0, le=20)
    overdue_score: int = Field(ge=0, le=10)
    total_score: int = Field(ge=0, le=100)
    win_chance: float  # same value as total_score, read as a percentage


class ScoreBreakdown(BaseModel):
    frequency_score: float
    hot_cold_score: float
    pattern_score: float  # includes the balance bonus
    overdue_score: float


class CombinationScore(BaseModel):
    numbers: list[int]
    stars: list[int]
    probability_score: float = Field(ge=0, le=100)
    win_chance: str  # e.g. "9.43%", never above 15%
    breakdown: ScoreBreakdown


class GeneratedCombination(CombinationScore):
    rank: int
    confidence: str  # "0.00" - "1.00"
