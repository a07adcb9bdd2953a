"""Pydantic schemas package."""

from euro_lottery.schemas.draw import Bet, Draw
from euro_lottery.schemas.matching import CheckResults, CheckSummary, MatchResult
from euro_lottery.schemas.scoring import (
    CombinationScore,
    GeneratedCombination,
    NumberProbability,
    ScoreBreakdown,
)
from euro_lottery.schemas.statistics import (
    AnalysisSnapshot,
    FrequencyAnalysis,
    FrequencyData,
    HotColdAnalysis,
    HotColdNumber,
    HotColdRecommendation,
    RecentPatterns,
)

__all__ = [
    "AnalysisSnapshot",
    "Bet",
    "CheckResults",
    "CheckSummary",
    "CombinationScore",
    "Draw",
    "FrequencyAnalysis",
    "FrequencyData",
    "GeneratedCombination",
    "HotColdAnalysis",
    "HotColdNumber",
    "HotColdRecommendation",
    "MatchResult",
    "NumberProbability",
    "RecentPatterns",
    "ScoreBreakdown",
]
