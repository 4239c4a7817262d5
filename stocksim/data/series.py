"""
Price series types: observations, series kinds and the PriceSeries container.

A PriceSeries holds the chronological observations of one instrument. The same
container carries derived series (SMA, regression, smoothing, hybrid output);
the kind tag only tells the rendering layer how to label them.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

import pandas as pd

from ..shared.errors import InvalidArgumentError

Timestamp = Union[date, datetime]


class SeriesKind(Enum):
    """Origin of a series (raw feed data or a forecaster output)."""
    RAW = "raw"
    SMA = "sma"
    REGRESSION = "regression"
    SMOOTHING = "smoothing"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class Observation:
    """A single (timestamp, price) point. Intraday series use datetime timestamps."""
    timestamp: Timestamp
    price: float


def _as_ordering_key(ts: Timestamp) -> pd.Timestamp:
    # date and datetime do not compare with each other directly
    return pd.Timestamp(ts)


class PriceSeries:
    """
    Ordered observations for one instrument.

    Tracks count, max and min incrementally. Min/max are seeded from the first
    appended point, so an empty series reports None for both.

    Raw series only accept finite, positive prices in chronological order.
    Derived series accept any finite price (a fitted line may go below zero).
    """

    def __init__(
        self,
        ticker: str,
        observations: Optional[Iterable[Observation]] = None,
        kind: SeriesKind = SeriesKind.RAW,
    ):
        self.ticker = ticker
        self.kind = kind
        self._observations: List[Observation] = []
        self._max_price: Optional[float] = None
        self._min_price: Optional[float] = None
        if observations is not None:
            self.extend(observations)

    def append(self, observation: Observation) -> None:
        """Append one observation and update min/max."""
        price = observation.price
        if not isinstance(price, (int, float)) or isinstance(price, bool) or not math.isfinite(price):
            raise InvalidArgumentError(f"Price must be a finite number, got {price!r}")
        if self.kind is SeriesKind.RAW:
            if price <= 0:
                raise InvalidArgumentError(f"Price must be > 0 for a raw series, got {price}")
            last = self.last
            if last is not None and _as_ordering_key(observation.timestamp) < _as_ordering_key(last.timestamp):
                raise InvalidArgumentError(
                    f"Observation at {observation.timestamp} is earlier than last observation at {last.timestamp}"
                )

        self._observations.append(observation)
        if self._max_price is None or price > self._max_price:
            self._max_price = price
        if self._min_price is None or price < self._min_price:
            self._min_price = price

    def add_point(self, timestamp: Timestamp, price: float) -> Observation:
        """Create and append an observation; returns it."""
        observation = Observation(timestamp, float(price))
        self.append(observation)
        return observation

    def extend(self, observations: Iterable[Observation]) -> None:
        """Append several observations in order."""
        for observation in observations:
            self.append(observation)

    def copy(self, kind: Optional[SeriesKind] = None) -> "PriceSeries":
        """Independent copy (observations are immutable and shared)."""
        clone = PriceSeries(self.ticker, kind=kind or self.kind)
        clone._observations = list(self._observations)
        clone._max_price = self._max_price
        clone._min_price = self._min_price
        return clone

    @property
    def observations(self) -> List[Observation]:
        """Snapshot of the observations (modifying it does not affect the series)."""
        return list(self._observations)

    @property
    def count(self) -> int:
        return len(self._observations)

    @property
    def max_price(self) -> Optional[float]:
        return self._max_price

    @property
    def min_price(self) -> Optional[float]:
        return self._min_price

    @property
    def last(self) -> Optional[Observation]:
        """Latest observation, or None if the series is empty."""
        return self._observations[-1] if self._observations else None

    def is_empty(self) -> bool:
        return not self._observations

    def prices(self) -> List[float]:
        return [o.price for o in self._observations]

    def timestamps(self) -> List[Timestamp]:
        return [o.timestamp for o in self._observations]

    def to_pandas(self) -> pd.Series:
        """Price series indexed by timestamp, named after the ticker."""
        return pd.Series(
            self.prices(),
            index=pd.DatetimeIndex(pd.to_datetime(self.timestamps())),
            name=self.ticker,
            dtype=float,
        )

    @classmethod
    def from_pandas(
        cls,
        prices: pd.Series,
        ticker: Optional[str] = None,
        kind: SeriesKind = SeriesKind.RAW,
    ) -> "PriceSeries":
        """
        Build a series from a pandas Series with a datetime index.

        Timestamps at midnight become plain dates; intraday timestamps keep
        their time of day.
        """
        series = cls(ticker or (str(prices.name) if prices.name is not None else ""), kind=kind)
        for ts, price in prices.items():
            ts = pd.Timestamp(ts)
            if ts == ts.normalize():
                timestamp: Timestamp = ts.date()
            else:
                timestamp = ts.to_pydatetime()
            series.append(Observation(timestamp, float(price)))
        return series

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(list(self._observations))

    def __getitem__(self, index: int) -> Observation:
        return self._observations[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriceSeries):
            return NotImplemented
        return self._observations == other._observations

    def __repr__(self) -> str:
        return f"PriceSeries(ticker={self.ticker!r}, kind={self.kind.value}, count={self.count})"
