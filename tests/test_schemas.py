import sys
from datetime import date

import pytest
from loguru import logger
from pydantic import ValidationError

from euro_lottery.config import Settings, settings
from euro_lottery.logging_config import setup_logging
from euro_lottery.pools import Pool
from euro_lottery.schemas.draw import Bet, Draw


def test_draw_parses_iso_date():
    draw = Draw(date="2024-06-28", numbers=[5, 1, 3, 2, 4], stars=[12, 1])
    assert draw.date == date(2024, 6, 28)
    assert draw.numbers == [5, 1, 3, 2, 4]


@pytest.mark.parametrize(
    "numbers, stars",
    [
        ([1, 2, 3, 4], [1, 2]),
        ([1, 2, 3, 4, 4], [1, 2]),
        ([1, 2, 3, 4, 51], [1, 2]),
        ([0, 2, 3, 4, 5], [1, 2]),
        ([1, 2, 3, 4, 5], [1]),
        ([1, 2, 3, 4, 5], [3, 3]),
        ([1, 2, 3, 4, 5], [1, 13]),
    ],
)
def test_invalid_selections_rejected(numbers, stars):
    with pytest.raises(ValidationError):
        Draw(date="2024-06-28", numbers=numbers, stars=stars)
    with pytest.raises(ValidationError):
        Bet(id="b", numbers=numbers, stars=stars)


def test_pool_descriptors():
    assert (Pool.NUMBERS.max_num, Pool.NUMBERS.pick_count, Pool.NUMBERS.overdue_interval) == (50, 5, 10)
    assert (Pool.STARS.max_num, Pool.STARS.pick_count, Pool.STARS.overdue_interval) == (12, 2, 6)
    assert Pool.NUMBERS.expected_rate == pytest.approx(0.1)
    assert Pool.STARS.expected_rate == pytest.approx(1 / 6)
    assert list(Pool.STARS.all_numbers()) == list(range(1, 13))


def test_pool_parse():
    assert Pool.parse("numbers") is Pool.NUMBERS
    assert Pool.parse(Pool.STARS) is Pool.STARS
    with pytest.raises(ValueError, match="Unknown pool"):
        Pool.parse("bonus")


def test_pool_picks(draw):
    assert Pool.NUMBERS.picks(draw) == [1, 2, 3, 4, 5]
    assert Pool.STARS.picks(draw) == [1, 2]


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MAX_COMBINATIONS", "3")
    monkeypatch.setenv("debug", "true")
    config = Settings()
    assert config.MAX_COMBINATIONS == 3
    assert config.DEBUG is True
    assert config.DEFAULT_COMBINATION_COUNT == 5


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    try:
        setup_logging(level="DEBUG", log_file=log_file)
        logger.info("hello")
        assert log_file.exists()
    finally:
        logger.remove()
        logger.add(sys.stderr)


@pytest.mark.parametrize(
    "name, value",
    [("MAX_COMBINATIONS", "20"), ("MIN_COMBINATIONS", "0"), ("DEFAULT_COMBINATION_COUNT", "11")],
)
def test_combination_bounds_cannot_leave_one_to_ten(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_setup_logging_defaults_to_settings(tmp_path, monkeypatch):
    log_file = tmp_path / "app.log"
    monkeypatch.setattr(settings, "LOG_FILE", log_file)
    try:
        setup_logging()
        logger.info("hello")
        assert log_file.exists()
    finally:
        logger.remove()
        logger.add(sys.stderr)
