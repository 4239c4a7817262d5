"""
CSV loader producing raw price series.

Loads price files with a date index (the layout every downloader in the
ecosystem writes) with support for:
- Any price column (Close by default)
- Date range filtering
- Dropping unusable rows (NaN or non-positive prices)
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .series import PriceSeries

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads a single instrument from a CSV file.

    Supports column selection and date range filtering.
    """

    def __init__(self, data_path: Union[str, Path], ticker: Optional[str] = None):
        """
        Initialize the data loader.

        Args:
            data_path: Path to the CSV file containing the data
            ticker: Ticker label for the resulting series (default: file stem, upper-cased)
        """
        self.data_path = Path(data_path)
        if not self.data_path.exists():
            raise FileNotFoundError(f"Data file not found: {self.data_path}")
        self.ticker = ticker or self.data_path.stem.upper()

    def load_frame(
        self,
        start_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
        end_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
    ) -> pd.DataFrame:
        """
        Read the CSV into a sorted DataFrame with a DatetimeIndex.

        Args:
            start_date: Start date for filtering (inclusive). If None, no start filter.
            end_date: End date for filtering (inclusive). If None, no end filter.
        """
        df = pd.read_csv(
            self.data_path,
            index_col=0,
            parse_dates=True,
        )

        if not isinstance(df.index, pd.DatetimeIndex):
            df.index = pd.to_datetime(df.index)

        df = df.sort_index()

        if start_date is not None:
            df = df[df.index >= pd.to_datetime(start_date)]
        if end_date is not None:
            df = df[df.index <= pd.to_datetime(end_date)]

        return df

    def load(
        self,
        start_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
        end_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
        column: str = "Close",
    ) -> PriceSeries:
        """
        Load one price column as a raw PriceSeries.

        Args:
            start_date: Start date for filtering (inclusive)
            end_date: End date for filtering (inclusive)
            column: Price column to use (default: Close)

        Returns:
            Raw PriceSeries (possibly empty if no rows fall in the range)

        Raises:
            ValueError: If the column is not present in the file
        """
        df = self.load_frame(start_date, end_date)
        if column not in df.columns:
            raise ValueError(
                f"Column '{column}' not found in {self.data_path.name}; "
                f"available: {', '.join(map(str, df.columns))}"
            )

        prices = pd.to_numeric(df[column], errors="coerce")
        valid = prices.notna() & (prices > 0)
        dropped = int((~valid).sum())
        if dropped:
            logger.debug(f"Dropped {dropped} unusable rows from {self.data_path.name}")
        prices = prices[valid]

        series = PriceSeries.from_pandas(prices, ticker=self.ticker)
        logger.debug(f"Loaded {series.count} observations for {self.ticker} from {self.data_path}")
        return series
