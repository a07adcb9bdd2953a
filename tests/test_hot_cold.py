from euro_lottery.analysis.hot_cold import (
    HotColdClassifier,
    analyze_hot_cold,
    hot_cold_recommendation,
)
from euro_lottery.pools import Pool


def test_classify_covers_pool(history):
    assert len(HotColdClassifier(Pool.NUMBERS).classify(history)) == 50
    assert len(HotColdClassifier(Pool.STARS).classify(history)) == 12


def test_classify_hot_rising_and_cold_falling(make_history):
    draws = make_history(20, {7: [0, 1, 2], 9: [12, 13, 14, 15]})
    by_number = {r.number: r for r in HotColdClassifier(Pool.NUMBERS).classify(draws)}

    hot = by_number[7]
    assert (hot.appearances, hot.streak_type, hot.streak, hot.trend) == (3, "hot", 0, "rising")

    cold = by_number[9]
    assert (cold.appearances, cold.streak_type, cold.streak, cold.trend) == (
        0, "cold", 12, "falling",
    )


def test_never_seen_streak_is_history_length(make_history):
    draws = make_history(9)
    result = {r.number: r for r in HotColdClassifier(Pool.NUMBERS).classify(draws)}[7]
    assert result.streak == 9
    # the label needs an actual last appearance
    assert result.streak_type == "neutral"
    assert 7 in [r.number for r in HotColdClassifier(Pool.NUMBERS).cold(draws)]


def test_empty_history_is_neutral():
    results = HotColdClassifier(Pool.STARS).classify([])
    assert {(r.appearances, r.streak, r.streak_type, r.trend) for r in results} == {
        (0, 0, "neutral", "stable"),
    }


def test_stars_need_four_recent_appearances(make_history):
    draws = make_history(10, star_hits={3: [0, 1, 2], 5: [0, 1, 2, 3]})
    hot = [r.number for r in HotColdClassifier(Pool.STARS).hot(draws)]
    # fillers 12 and 11 show up in most draws
    assert hot == [12, 11, 5]


def test_classify_sorted_by_appearances(make_history):
    draws = make_history(10, {7: [0, 1, 2, 3]})
    results = HotColdClassifier(Pool.NUMBERS).classify(draws)
    assert results[0].number in {46, 47, 48, 49, 50}  # filler appears every draw
    assert all(a.appearances >= b.appearances for a, b in zip(results, results[1:]))


def test_analyze_cyclic_history(history):
    analysis = analyze_hot_cold(history)
    assert analysis.hot_numbers == []
    assert [r.number for r in analysis.cold_numbers] == list(range(31, 51))
    assert [r.number for r in analysis.cold_stars] == [9, 10, 11, 12]
    assert analysis.overdue == []
    assert analysis.overdue_stars == []


def test_overdue_thresholds(make_history):
    draws = make_history(30, {7: [11], 8: [10]}, star_hits={3: [7], 4: [6]})
    assert 7 in HotColdClassifier(Pool.NUMBERS).overdue(draws)
    assert 8 not in HotColdClassifier(Pool.NUMBERS).overdue(draws)
    assert 3 in HotColdClassifier(Pool.STARS).overdue(draws)
    assert 4 not in HotColdClassifier(Pool.STARS).overdue(draws)


def test_recommendation(make_history):
    draws = make_history(20, {7: [0, 1, 2], 9: [12, 13, 14, 15]}, star_hits={5: [0, 1, 2, 3]})
    rec = hot_cold_recommendation(draws)
    # fillers 47-50 appear in all 10 recent draws, 46 in 7, number 7 in 3
    assert rec.use_hot == [47, 48, 49, 50, 46]
    assert rec.use_overdue == [1, 2, 3]
    assert rec.avoid_cold == [1, 2, 3, 4, 5]
    assert rec.hot_stars_to_use == [12, 11]
    assert 7 in [r.number for r in analyze_hot_cold(draws).hot_numbers]
