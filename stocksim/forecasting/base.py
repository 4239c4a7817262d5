"""
Base forecaster interface.

All forecasters follow this pattern:
1. Configure parameters at construction (validated immediately)
2. Calculate a derived series from a price series
"""
from abc import ABC, abstractmethod

from ..data.series import PriceSeries


class Forecaster(ABC):
    """
    Base class for all forecasters.

    Forecasters derive a new series (smoothed, fitted or predicted) from a
    price series. They hold parameters only, never price state, so one
    instance can be reused across series and threads.
    """

    name: str = ""

    @abstractmethod
    def calculate(self, series: PriceSeries) -> PriceSeries:
        """
        Calculate the derived series.

        Args:
            series: Input price series (never modified)

        Returns:
            Derived PriceSeries tagged with the forecaster's kind
        """
        pass
