"""
Tests for the hybrid-driven market simulator.
"""
from datetime import date, timedelta

import pytest

from stocksim.data.series import PriceSeries
from stocksim.simulation.market import MarketSimulator
from stocksim.shared.errors import InvalidArgumentError


def make_series(ticker, prices):
    series = PriceSeries(ticker)
    for i, price in enumerate(prices):
        series.add_point(date(2024, 1, 1) + timedelta(days=i), price)
    return series


@pytest.fixture
def instruments():
    return [
        make_series("AAA", [10.0, 10.5, 10.2, 10.8, 11.0, 11.3]),
        make_series("BBB", [200.0, 198.0, 197.5, 199.0]),
    ]


class TestMarketSimulator:

    def test_next_day_appends_one_point(self, instruments):
        advanced = MarketSimulator(seed=1).next_day(instruments)
        assert [s.count for s in advanced] == [7, 5]
        for before, after in zip(instruments, advanced):
            assert after.ticker == before.ticker
            assert after[-1].timestamp == before.last.timestamp + timedelta(days=1)
            assert after.observations[:-1] == before.observations

    def test_inputs_untouched(self, instruments):
        counts = [s.count for s in instruments]
        MarketSimulator(seed=1).run(instruments, 3)
        assert [s.count for s in instruments] == counts

    def test_seed_reproducible(self, instruments):
        first = MarketSimulator(seed=42).run(instruments, 5)
        second = MarketSimulator(seed=42).run(instruments, 5)
        assert [s.observations for s in first] == [s.observations for s in second]

    def test_daily_move_bounded(self, instruments):
        """Sentiment spread 0.25 keeps each step within the hybrid band."""
        advanced = MarketSimulator(seed=3).next_day(instruments)
        for before, after in zip(instruments, advanced):
            last = before.last.price
            assert 0.5 * last * 0.975 <= after.last.price <= 1.5 * last * 1.025

    def test_draw_sentiment_within_spread(self):
        sim = MarketSimulator(seed=0, sentiment_spread=0.1)
        for _ in range(100):
            assert -0.1 <= sim.draw_sentiment() <= 0.1

    def test_short_series_copied_unchanged(self):
        short = make_series("CCC", [5.0])
        advanced = MarketSimulator(seed=0).next_day([short, PriceSeries("DDD")])
        assert advanced[0] == short
        assert advanced[0] is not short
        assert advanced[1].is_empty()

    def test_run_zero_days(self, instruments):
        result = MarketSimulator(seed=0).run(instruments, 0)
        assert result == instruments

    def test_invalid_arguments(self, instruments):
        with pytest.raises(InvalidArgumentError):
            MarketSimulator(sentiment_spread=1.5)
        with pytest.raises(InvalidArgumentError):
            MarketSimulator(seed=0).run(instruments, -1)
