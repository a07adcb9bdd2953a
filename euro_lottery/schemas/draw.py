"""Pydantic schemas for draws and bets."""

import datetime

from pydantic import BaseModel, field_validator

from euro_lottery.pools import Pool


def _validate_picks(values: list[int], pool: Pool) -> list[int]:
    if len(values) != pool.pick_count:
        raise ValueError(f"expected {pool.pick_count} {pool.value}, got {len(values)}")
    if len(set(values)) != len(values):
        raise ValueError(f"{pool.value} must be distinct: {values}")
    out_of_range = [v for v in values if not 1 <= v <= pool.max_num]
    if out_of_range:
        raise ValueError(f"{pool.value} out of range 1-{pool.max_num}: {out_of_range}")
    return values


class Draw(BaseModel):
    """One historical draw. Sequences of draws are ordered most-recent-first."""

    model_config = {"from_attributes": True, "frozen": True}

    date: datetime.date
    numbers: list[int]
    stars: list[int]

    @field_validator("numbers")
    @classmethod
    def _check_numbers(cls, v: list[int]) -> list[int]:
        return _validate_picks(v, Pool.NUMBERS)

    @field_validator("stars")
    @classmethod
    def _check_stars(cls, v: list[int]) -> list[int]:
        return _validate_picks(v, Pool.STARS)


class Bet(BaseModel):
    model_config = {"from_attributes": True, "frozen": True}

    id: str
    numbers: list[int]
    stars: list[int]

    @field_validator("numbers")
    @classmethod
    def _check_numbers(cls, v: list[int]) -> list[int]:
        return _validate_picks(v, Pool.NUMBERS)

    @field_validator("stars")
    @classmethod
    def _check_stars(cls, v: list[int]) -> list[int]:
        return _validate_picks(v, Pool.STARS)
