"""Number pools: main numbers (1-50, 5 drawn) and stars (1-12, 2 drawn)."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PoolSpec:
    max_num: int
    pick_count: int
    overdue_interval: int  # expected draws between appearances
    hot_threshold: int     # appearances in the last 10 draws to count as hot
    overdue_streak: int    # absence streak above which a number is overdue
    cold_streak: int       # absence streak above which a number is cold

    @property
    def expected_rate(self) -> float:
        return self.pick_count / self.max_num


class Pool(str, Enum):
    NUMBERS = "numbers"
    STARS = "stars"

    @classmethod
    def parse(cls, value: "str | Pool") -> "Pool":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown pool: {value}. Valid: {[p.value for p in cls]}"
            ) from None

    @property
    def spec(self) -> PoolSpec:
        return POOL_SPECS[self]

    @property
    def max_num(self) -> int:
        return self.spec.max_num

    @property
    def pick_count(self) -> int:
        return self.spec.pick_count

    @property
    def expected_rate(self) -> float:
        return self.spec.expected_rate

    @property
    def overdue_interval(self) -> int:
        return self.spec.overdue_interval

    def all_numbers(self) -> range:
        return range(1, self.spec.max_num + 1)

    def picks(self, draw) -> Sequence[int]:
        """Return the draw's selections belonging to this pool."""
        return draw.numbers if self is Pool.NUMBERS else draw.stars


POOL_SPECS = {
    Pool.NUMBERS: PoolSpec(
        max_num=50,
        pick_count=5,
        overdue_interval=10,
        hot_threshold=3,
        overdue_streak=10,
        cold_streak=5,
    ),
    Pool.STARS: PoolSpec(
        max_num=12,
        pick_count=2,
        overdue_interval=6,
        hot_threshold=4,
        overdue_streak=6,
        cold_streak=3,
    ),
}

# Numbers at or below this are "low", above are "high"
LOW_HIGH_SPLIT = 25
