"""
Market simulator driven by the hybrid predictor.

Advances every instrument one calendar day at a time: each step appends one
hybrid prediction whose sentiment is drawn at random, which gives a plausible
continuation of the historical path for paper trading.
"""
import logging
from typing import List, Optional, Sequence

import numpy as np

from ..data.series import PriceSeries
from ..forecasting.hybrid import predict_future_hybrid_single_point
from ..shared.defaults import MARKET_SENTIMENT_SPREAD
from ..shared.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class MarketSimulator:
    """
    Generates simulated next-day prices for a set of instruments.

    Input series are never modified; every call returns extended copies.
    """

    def __init__(self, seed: Optional[int] = None, sentiment_spread: float = MARKET_SENTIMENT_SPREAD):
        """
        Initialize the simulator.

        Args:
            seed: RNG seed for reproducible paths (None = nondeterministic)
            sentiment_spread: Daily sentiment is drawn uniformly from
                [-sentiment_spread, sentiment_spread] (must lie in [0, 1])
        """
        if not (0.0 <= sentiment_spread <= 1.0):
            raise InvalidArgumentError(f"sentiment_spread must be in [0, 1], got {sentiment_spread!r}")
        self.sentiment_spread = sentiment_spread
        self._rng = np.random.default_rng(seed)

    def draw_sentiment(self) -> float:
        """Random daily sentiment in [-spread, spread]."""
        return float(self._rng.uniform(-self.sentiment_spread, self.sentiment_spread))

    def next_day(self, series_list: Sequence[PriceSeries]) -> List[PriceSeries]:
        """
        Extend each series by one simulated day.

        Series with fewer than two observations cannot be predicted and are
        returned as unchanged copies.
        """
        advanced = []
        for series in series_list:
            extended = series.copy()
            step = predict_future_hybrid_single_point(series, self.draw_sentiment())
            if step.is_empty():
                logger.debug(f"Not enough history to simulate {series.ticker} ({series.count} points)")
            else:
                extended.append(step.last)
            advanced.append(extended)
        return advanced

    def run(self, series_list: Sequence[PriceSeries], days: int) -> List[PriceSeries]:
        """Apply next_day repeatedly; returns the extended copies."""
        if not isinstance(days, int) or isinstance(days, bool) or days < 0:
            raise InvalidArgumentError(f"days must be an integer >= 0, got {days!r}")
        current = [s.copy() for s in series_list]
        for _ in range(days):
            current = self.next_day(current)
        logger.info(f"Simulated {days} days for {len(current)} instruments")
        return current
