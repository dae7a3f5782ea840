import random
from datetime import datetime, timedelta

import polars as pl
import pytest
from pytest import param
from pytest_benchmark.fixture import BenchmarkFixture

from time_period import Designator, Period
from time_period.series import add_to_series


PERIODS = (
    param(Period(hours=1, minutes=45), id="clock"),
    param(Period(years=1, months=2, days=3, hours=4, minutes=5, seconds=6), id="all-fields"),
    param(Period(days=1, fraction=50, designator=Designator.DAY), id="day-fraction"),
    param(Period(months=-1, days=-1), id="negative"),
)


def generate_timestamps(length_days: int) -> pl.Series:
    """ Generate random timestamps across a range of days

    Args:
        length_days: Length of number of days to spread the timestamps across

    Returns:
        Series of timestamps
    """
    dt_from = datetime(2025, 1, 1)
    timestamps = [dt_from + timedelta(seconds=random.randint(0, length_days * 86_400)) for _ in range(100_000)]
    return pl.Series("timestamp", timestamps)


class TestPeriodArithmeticBenchmarks:
    @pytest.mark.parametrize("period", PERIODS)
    def test_add(self, benchmark: BenchmarkFixture, period: Period) -> None:
        other = Period(hours=-2, minutes=-30)

        @benchmark
        def run():
            for _ in range(1_000):
                (period + other).normalise(precise=True)

    @pytest.mark.parametrize("period", PERIODS)
    def test_rational_scale(self, benchmark: BenchmarkFixture, period: Period) -> None:
        @benchmark
        def run():
            for divisor in range(1, 1_001):
                period.rational_scale(1, divisor)

    @pytest.mark.parametrize("period", PERIODS)
    def test_add_to(self, benchmark: BenchmarkFixture, period: Period) -> None:
        start = datetime(2024, 1, 31, 12)

        @benchmark
        def run():
            for _ in range(1_000):
                period.add_to(start)


class TestSeriesBenchmarks:
    timestamps: pl.Series

    @pytest.mark.parametrize("period", PERIODS)
    def test_add_to_series(self, benchmark: BenchmarkFixture, period: Period) -> None:
        @benchmark
        def run():
            result, _ = add_to_series(period, self.timestamps)
            assert len(result) == len(self.timestamps)

    @classmethod
    def setup_class(cls):
        cls.timestamps = generate_timestamps(3650)

    @classmethod
    def teardown_class(cls):
        cls.timestamps = None
