"""Shared draw/bet fixtures."""

from datetime import date, timedelta

import pytest

from euro_lottery.schemas.draw import Bet, Draw

LATEST = date(2024, 6, 28)


def build_history(length, number_hits=None, star_hits=None):
    """Most-recent-first history where each target appears at the given indices.

    Slots not taken by targets are filled with the highest unused numbers/stars.
    """
    number_hits = number_hits or {}
    star_hits = star_hits or {}
    number_filler = [n for n in range(50, 0, -1) if n not in number_hits]
    star_filler = [s for s in range(12, 0, -1) if s not in star_hits]

    draws = []
    for i in range(length):
        numbers = [n for n, indices in number_hits.items() if i in indices]
        stars = [s for s, indices in star_hits.items() if i in indices]
        numbers += number_filler[:5 - len(numbers)]
        stars += star_filler[:2 - len(stars)]
        draws.append(Draw(date=LATEST - timedelta(days=3 * i), numbers=numbers, stars=stars))
    return draws


def cyclic_history(length):
    """Draw i holds numbers 5*(i%10)+1..+5 and stars 2*(i%6)+1, +2."""
    draws = []
    for i in range(length):
        numbers = [(i * 5 + k) % 50 + 1 for k in range(5)]
        stars = [(i * 2) % 12 + 1, (i * 2) % 12 + 2]
        draws.append(Draw(date=LATEST - timedelta(days=3 * i), numbers=numbers, stars=stars))
    return draws


@pytest.fixture
def make_history():
    return build_history


@pytest.fixture
def history():
    return cyclic_history(25)


@pytest.fixture
def draw():
    return Draw(date=LATEST, numbers=[1, 2, 3, 4, 5], stars=[1, 2])


@pytest.fixture
def make_bet():
    def _make(bet_id, numbers, stars):
        return Bet(id=bet_id, numbers=numbers, stars=stars)
    return _make
