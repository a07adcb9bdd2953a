"""Hot/cold classification and overdue streaks."""

from collections.abc import Sequence

from euro_lottery.analysis.history import (
    MID_WINDOW,
    RECENT_WINDOW,
    count_appearances,
    last_seen_index,
)
from euro_lottery.pools import Pool
from euro_lottery.schemas.statistics import (
    HotColdAnalysis,
    HotColdNumber,
    HotColdRecommendation,
)

COLD_AFTER = 7
TREND_MARGIN = 0.1


class HotColdClassifier:
    """Classify every number of a pool as hot, cold or neutral."""

    def __init__(self, pool: Pool = Pool.NUMBERS):
        self.pool = pool

    def classify(self, draws: Sequence) -> list[HotColdNumber]:
        """Classification for every number, most recent appearances first."""
        spec = self.pool.spec
        results = []

        for num in self.pool.all_numbers():
            recent_count = count_appearances(num, draws[:RECENT_WINDOW], self.pool)
            mid_count = count_appearances(num, draws[:MID_WINDOW], self.pool)
            last_seen = last_seen_index(num, draws, self.pool)
            streak = len(draws) if last_seen is None else last_seen

            if recent_count >= spec.hot_threshold:
                streak_type = "hot"
            elif last_seen is not None and last_seen > COLD_AFTER:
                # never-drawn numbers stay neutral; cold() still catches them by streak
                streak_type = "cold"
            else:
                streak_type = "neutral"

            recent_rate = recent_count / RECENT_WINDOW
            mid_rate = mid_count / MID_WINDOW
            if recent_rate > mid_rate + TREND_MARGIN:
                trend = "rising"
            elif recent_rate < mid_rate - TREND_MARGIN:
                trend = "falling"
            else:
                trend = "stable"

            results.append(HotColdNumber(
                number=num,
                appearances=recent_count,
                streak_type=streak_type,
                streak=streak,
                trend=trend,
            ))

        return sorted(results, key=lambda r: r.appearances, reverse=True)

    def hot(self, draws: Sequence) -> list[HotColdNumber]:
        threshold = self.pool.spec.hot_threshold
        return [
            r for r in self.classify(draws)
            if r.streak_type == "hot" or r.appearances >= threshold
        ]

    def cold(self, draws: Sequence) -> list[HotColdNumber]:
        cold_streak = self.pool.spec.cold_streak
        return [
            r for r in self.classify(draws)
            if r.streak_type == "cold" or r.streak > cold_streak
        ]

    def overdue(self, draws: Sequence) -> list[int]:
        overdue_streak = self.pool.spec.overdue_streak
        return [r.number for r in self.classify(draws) if r.streak > overdue_streak]


def analyze_hot_cold(draws: Sequence) -> HotColdAnalysis:
    numbers = HotColdClassifier(Pool.NUMBERS)
    stars = HotColdClassifier(Pool.STARS)

    return HotColdAnalysis(
        hot_numbers=numbers.hot(draws),
        cold_numbers=numbers.cold(draws),
        hot_stars=stars.hot(draws),
        cold_stars=stars.cold(draws),
        overdue=numbers.overdue(draws),
        overdue_stars=stars.overdue(draws),
    )


def hot_cold_recommendation(
    draws: Sequence, analysis: HotColdAnalysis | None = None
) -> HotColdRecommendation:
    """Top 5 hot, top 3 overdue, top 5 cold to avoid and top 2 hot stars."""
    if analysis is None:
        analysis = analyze_hot_cold(draws)

    return HotColdRecommendation(
        use_hot=[n.number for n in analysis.hot_numbers[:5]],
        use_overdue=analysis.overdue[:3],
        avoid_cold=[n.number for n in analysis.cold_numbers[:5]],
        hot_stars_to_use=[n.number for n in analysis.hot_stars[:2]],
    )
