"""
Tests for Observation and PriceSeries.
"""
from datetime import date, datetime

import pandas as pd
import pytest

from stocksim.data.series import Observation, PriceSeries, SeriesKind
from stocksim.shared.errors import InvalidArgumentError


@pytest.fixture
def sample_series():
    """Five daily observations."""
    series = PriceSeries("ACME")
    for day, price in enumerate([10.0, 12.0, 9.0, 15.0, 11.0], start=1):
        series.add_point(date(2024, 1, day), price)
    return series


class TestObservation:
    """Test Observation value semantics."""

    def test_equality_by_timestamp_and_price(self):
        assert Observation(date(2024, 1, 1), 10.0) == Observation(date(2024, 1, 1), 10.0)
        assert Observation(date(2024, 1, 1), 10.0) != Observation(date(2024, 1, 1), 10.5)
        assert Observation(date(2024, 1, 1), 10.0) != Observation(date(2024, 1, 2), 10.0)

    def test_immutable(self):
        obs = Observation(date(2024, 1, 1), 10.0)
        with pytest.raises(AttributeError):
            obs.price = 11.0


class TestPriceSeries:
    """Test PriceSeries bookkeeping."""

    def test_empty_series(self):
        """Empty series is a valid no-data state with no min/max."""
        series = PriceSeries("ACME")
        assert series.count == 0
        assert series.is_empty()
        assert series.max_price is None
        assert series.min_price is None
        assert series.last is None

    def test_min_max_tracking(self, sample_series):
        assert sample_series.count == 5
        assert sample_series.max_price == 15.0
        assert sample_series.min_price == 9.0

    def test_min_max_seeded_from_first_point(self):
        """Negative derived values must not be hidden by sentinel seeds."""
        series = PriceSeries("ACME", kind=SeriesKind.REGRESSION)
        series.add_point(date(2024, 1, 1), -3.0)
        series.add_point(date(2024, 1, 2), -5.0)
        assert series.max_price == -3.0
        assert series.min_price == -5.0

    def test_raw_series_rejects_non_positive_price(self):
        series = PriceSeries("ACME")
        with pytest.raises(InvalidArgumentError, match="must be > 0"):
            series.add_point(date(2024, 1, 1), 0.0)
        with pytest.raises(InvalidArgumentError, match="must be > 0"):
            series.add_point(date(2024, 1, 1), -1.0)
        assert series.is_empty()

    def test_rejects_non_finite_price(self):
        series = PriceSeries("ACME", kind=SeriesKind.SMA)
        with pytest.raises(InvalidArgumentError, match="finite"):
            series.add_point(date(2024, 1, 1), float("nan"))

    def test_raw_series_rejects_out_of_order(self, sample_series):
        with pytest.raises(InvalidArgumentError, match="earlier than"):
            sample_series.add_point(date(2023, 12, 31), 10.0)
        assert sample_series.count == 5

    def test_mixed_date_and_datetime_ordering(self):
        series = PriceSeries("ACME")
        series.add_point(date(2024, 1, 1), 10.0)
        series.add_point(datetime(2024, 1, 1, 9, 30), 10.5)
        assert series.count == 2

    def test_copy_is_independent(self, sample_series):
        clone = sample_series.copy()
        clone.add_point(date(2024, 1, 6), 100.0)
        assert sample_series.count == 5
        assert sample_series.max_price == 15.0
        assert clone.count == 6
        assert clone.max_price == 100.0

    def test_observations_snapshot(self, sample_series):
        snapshot = sample_series.observations
        snapshot.clear()
        assert sample_series.count == 5

    def test_equality_by_observations(self, sample_series):
        assert sample_series == sample_series.copy()
        assert sample_series != PriceSeries("ACME")

    def test_pandas_conversion(self, sample_series):
        pd_series = sample_series.to_pandas()
        assert list(pd_series.values) == [10.0, 12.0, 9.0, 15.0, 11.0]
        assert pd_series.name == "ACME"

        restored = PriceSeries.from_pandas(pd_series)
        assert restored == sample_series
        assert restored.ticker == "ACME"

    def test_from_pandas_keeps_intraday_time(self):
        index = pd.DatetimeIndex(["2024-01-02 09:30", "2024-01-02 09:35"])
        series = PriceSeries.from_pandas(pd.Series([10.0, 10.2], index=index), ticker="ACME")
        assert series[0].timestamp == datetime(2024, 1, 2, 9, 30)
