"""
Tests for display-range lookup tables.
"""
import pytest

from stocksim.shared.ranges import (
    DisplayRange,
    parse_range,
    sma_period_for_range,
    alpha_beta_for_range,
)


class TestRangeTables:

    @pytest.mark.parametrize("code,period", [
        ("1W", 2), ("1M", 5), ("3M", 10), ("6M", 20), ("1Y", 50), ("5Y", 100), ("MAX", 200),
    ])
    def test_sma_periods(self, code, period):
        assert sma_period_for_range(code) == period

    @pytest.mark.parametrize("code,alpha", [
        ("1W", 0.9), ("1M", 0.8), ("3M", 0.7), ("6M", 0.6), ("1Y", 0.5), ("5Y", 0.4), ("MAX", 0.3),
    ])
    def test_alpha_beta(self, code, alpha):
        assert alpha_beta_for_range(code) == (alpha, 0.3)

    def test_unknown_range_defaults(self):
        assert sma_period_for_range("10Y") == 5
        assert alpha_beta_for_range("10Y") == (0.7, 0.3)
        assert sma_period_for_range(None) == 5

    def test_parse_range(self):
        assert parse_range("max") is DisplayRange.MAX
        assert parse_range(" 1y ") is DisplayRange.ONE_YEAR
        assert parse_range(DisplayRange.SIX_MONTHS) is DisplayRange.SIX_MONTHS
        assert parse_range("bogus") is None

    def test_every_range_has_entries(self):
        for display_range in DisplayRange:
            assert sma_period_for_range(display_range) >= 1
            alpha, beta = alpha_beta_for_range(display_range)
            assert 0 <= alpha <= 1 and 0 <= beta <= 1
