"""
Tests for the CSV DataLoader.
"""
from datetime import date

import pytest

from stocksim.data.loader import DataLoader
from stocksim.data.series import SeriesKind


@pytest.fixture
def price_csv(tmp_path):
    """Unsorted CSV with one unusable row."""
    path = tmp_path / "acme.csv"
    path.write_text(
        "Date,Open,Close\n"
        "2024-01-03,11.0,12.0\n"
        "2024-01-01,9.0,10.0\n"
        "2024-01-02,10.0,\n"
        "2024-01-04,12.0,13.0\n"
    )
    return path


class TestDataLoader:
    """Test loading raw series from CSV."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DataLoader(tmp_path / "missing.csv")

    def test_load_sorts_and_drops_unusable_rows(self, price_csv):
        series = DataLoader(price_csv).load()
        assert series.ticker == "ACME"
        assert series.kind is SeriesKind.RAW
        assert series.timestamps() == [date(2024, 1, 1), date(2024, 1, 3), date(2024, 1, 4)]
        assert series.prices() == [10.0, 12.0, 13.0]

    def test_date_filter(self, price_csv):
        series = DataLoader(price_csv, ticker="X").load(start_date="2024-01-02", end_date="2024-01-03")
        assert series.ticker == "X"
        assert series.prices() == [12.0]

    def test_other_column(self, price_csv):
        series = DataLoader(price_csv).load(column="Open")
        assert series.prices() == [9.0, 10.0, 11.0, 12.0]

    def test_missing_column(self, price_csv):
        with pytest.raises(ValueError, match="Column 'Adj Close' not found"):
            DataLoader(price_csv).load(column="Adj Close")

    def test_empty_range_gives_empty_series(self, price_csv):
        series = DataLoader(price_csv).load(start_date="2030-01-01")
        assert series.is_empty()
