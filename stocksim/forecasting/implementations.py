"""
Forecaster implementations following the Forecaster interface.

These classes wrap the pure forecasting functions with their parameters, so
callers (the CLI, a rendering layer) can pick a method by name and range
without knowing each function's signature.
"""
from typing import Union

from ..data.series import PriceSeries
from ..shared.defaults import HORIZON_FRACTION, FORECAST_METHODS
from ..shared.errors import InvalidArgumentError
from ..shared.ranges import DisplayRange, sma_period_for_range, alpha_beta_for_range
from .base import Forecaster
from .hybrid import predict_future_hybrid, validate_horizon_fraction
from .sentiment import validate_sentiment
from .technical import (
    sma,
    regression_line,
    holt_linear_smoothing,
    validate_period,
    validate_smoothing_factor,
)

RangeLike = Union[str, DisplayRange, None]


class SMAForecaster(Forecaster):
    """Simple moving average."""

    name = "sma"

    def __init__(self, period: int):
        validate_period(period)
        self.period = period

    @classmethod
    def for_range(cls, display_range: RangeLike) -> "SMAForecaster":
        """SMA with the period configured for a display range."""
        return cls(sma_period_for_range(display_range))

    def calculate(self, series: PriceSeries) -> PriceSeries:
        return sma(series, self.period)


class RegressionForecaster(Forecaster):
    """Least-squares trend line over the whole series."""

    name = "regression"

    def calculate(self, series: PriceSeries) -> PriceSeries:
        return regression_line(series)


class HoltForecaster(Forecaster):
    """Holt linear exponential smoothing."""

    name = "smoothing"

    def __init__(self, alpha: float, beta: float):
        validate_smoothing_factor("alpha", alpha)
        validate_smoothing_factor("beta", beta)
        self.alpha = alpha
        self.beta = beta

    @classmethod
    def for_range(cls, display_range: RangeLike) -> "HoltForecaster":
        """Smoothing with the (alpha, beta) configured for a display range."""
        alpha, beta = alpha_beta_for_range(display_range)
        return cls(alpha, beta)

    def calculate(self, series: PriceSeries) -> PriceSeries:
        return holt_linear_smoothing(series, self.alpha, self.beta)


class HybridForecaster(Forecaster):
    """Iterated hybrid prediction with a fixed sentiment score."""

    name = "hybrid"

    def __init__(self, sentiment_score: float = 0.0, horizon_fraction: float = HORIZON_FRACTION):
        self.sentiment_score = validate_sentiment(sentiment_score)
        validate_horizon_fraction(horizon_fraction)
        self.horizon_fraction = horizon_fraction

    def calculate(self, series: PriceSeries) -> PriceSeries:
        return predict_future_hybrid(series, self.sentiment_score, self.horizon_fraction)


def build_forecaster(
    method: str,
    display_range: RangeLike = None,
    sentiment_score: float = 0.0,
    horizon_fraction: float = HORIZON_FRACTION,
) -> Forecaster:
    """
    Create the forecaster for a method name.

    Args:
        method: One of "sma", "regression", "smoothing", "hybrid"
        display_range: Range code used for SMA period / Holt factors
        sentiment_score: Sentiment for the hybrid method
        horizon_fraction: Prediction horizon for the hybrid method

    Raises:
        InvalidArgumentError: If the method name is unknown
    """
    method = (method or "").strip().lower()
    if method == "sma":
        return SMAForecaster.for_range(display_range)
    if method == "regression":
        return RegressionForecaster()
    if method == "smoothing":
        return HoltForecaster.for_range(display_range)
    if method == "hybrid":
        return HybridForecaster(sentiment_score, horizon_fraction)
    raise InvalidArgumentError(
        f"Unknown forecast method {method!r}; expected one of {', '.join(FORECAST_METHODS)}"
    )
