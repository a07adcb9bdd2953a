import pytest

from euro_lottery.analysis.combination_scorer import balance_bonus, score_combination


def test_empty_history_scores():
    score = score_combination([1, 2, 3, 4, 5], [1, 2], [])
    # pattern average 86/7 plus one balance bonus (two evens, five lows)
    assert score.probability_score == 60.3
    assert score.win_chance == "9.04%"
    assert score.breakdown.frequency_score == 20.0
    assert score.breakdown.hot_cold_score == 15.0
    assert score.breakdown.pattern_score == 15.3
    assert score.breakdown.overdue_score == 10.0


def test_input_order_does_not_matter(history):
    a = score_combination([5, 1, 3, 2, 4], [2, 1], history)
    b = score_combination([1, 2, 3, 4, 5], [1, 2], history)
    assert a == b
    assert a.numbers == [1, 2, 3, 4, 5]
    assert a.stars == [1, 2]


def test_values_matter(history):
    a = score_combination([1, 2, 3, 4, 5], [1, 2], history)
    b = score_combination([17, 19, 21, 23, 27], [1, 2], history)
    assert a.probability_score != b.probability_score


def test_no_selections_scores_zero():
    score = score_combination([], [], [])
    assert score.probability_score == 0.0
    assert score.win_chance == "0.00%"


def test_partial_combination_still_scores(history):
    score = score_combination([17, 18], [], history)
    assert 0 <= score.probability_score <= 100


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([1, 2, 26, 27, 40], 6),
        ([1, 3, 5, 7, 9], 0),
        ([26, 28, 31, 33, 35], 3),
        ([1, 3, 5, 27, 29], 3),
        ([2, 4, 6, 8, 27], 0),
    ],
)
def test_balance_bonus(numbers, expected):
    assert balance_bonus(numbers) == expected


def test_bounds_over_many_combinations(history):
    for start in range(1, 46):
        numbers = list(range(start, start + 5))
        for stars in ([1, 2], [5, 9], [11, 12]):
            score = score_combination(numbers, stars, history)
            assert 0 <= score.probability_score <= 100
            assert float(score.win_chance.rstrip("%")) <= 15.0
