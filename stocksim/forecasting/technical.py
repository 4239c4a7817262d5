"""
Forecasting primitives over a PriceSeries.

Provides the simple moving average, the ordinary-least-squares trend line and
Holt linear (double) exponential smoothing. All functions are pure: they never
modify their input and return a new derived series tagged with its kind.
"""
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..data.series import Observation, PriceSeries, SeriesKind, Timestamp
from ..shared.errors import InvalidArgumentError


def _derived(
    source: PriceSeries,
    kind: SeriesKind,
    timestamps: Iterable[Timestamp],
    values: Iterable[float],
) -> PriceSeries:
    """Build a derived series for source's ticker from parallel timestamps/values."""
    result = PriceSeries(source.ticker, kind=kind)
    for ts, value in zip(timestamps, values):
        result.append(Observation(ts, float(value)))
    return result


def validate_period(period: int) -> None:
    """Raise InvalidArgumentError unless period is an int >= 1."""
    if not isinstance(period, (int, np.integer)) or isinstance(period, bool) or period < 1:
        raise InvalidArgumentError(f"period must be an integer >= 1, got {period!r}")


def validate_smoothing_factor(name: str, value: float) -> None:
    """Raise InvalidArgumentError unless value is a number in [0, 1]."""
    if (
        not isinstance(value, (int, float, np.floating))
        or isinstance(value, bool)
        or math.isnan(value)
        or not (0.0 <= value <= 1.0)
    ):
        raise InvalidArgumentError(f"{name} must be in [0, 1], got {value!r}")


def ols_fit(prices: Sequence[float]) -> Tuple[float, float]:
    """
    Fit price = slope * index + intercept over index 0..n-1.

    Requires at least two prices (with one price the x variance is zero).

    Returns:
        Tuple of (slope, intercept)
    """
    n = len(prices)
    if n < 2:
        raise InvalidArgumentError(f"OLS fit needs at least 2 points, got {n}")
    x = np.arange(n, dtype=float)
    y = np.asarray(prices, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x * x).sum()
    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def holt_states(prices: Sequence[float], alpha: float, beta: float) -> List[Tuple[float, float]]:
    """
    Run Holt's recursion and return the (level, trend) pair after each point past the seed.

    Seed: level = p0, trend = p1 - p0. For t >= 1:
        level' = alpha * p_t + (1 - alpha) * (level + trend)
        trend' = beta * (level' - level) + (1 - beta) * trend

    Returns an empty list when fewer than two prices are given.
    """
    if len(prices) < 2:
        return []
    level = prices[0]
    trend = prices[1] - prices[0]
    states = []
    for price in prices[1:]:
        new_level = alpha * price + (1 - alpha) * (level + trend)
        new_trend = beta * (new_level - level) + (1 - beta) * trend
        level, trend = new_level, new_trend
        states.append((level, trend))
    return states


def sma(series: PriceSeries, period: int) -> PriceSeries:
    """
    Simple moving average with a window that shrinks near the start.

    Output value i is the mean of prices [max(0, i - period + 1) .. i], stamped
    with observation i's timestamp, so the output has the same length as the
    input.

    Raises:
        InvalidArgumentError: If period is not an integer >= 1
    """
    validate_period(period)
    if series.count == 0:
        return PriceSeries(series.ticker, kind=SeriesKind.SMA)

    means = pd.Series(series.prices(), dtype=float).rolling(window=int(period), min_periods=1).mean()
    return _derived(series, SeriesKind.SMA, series.timestamps(), means.tolist())


def regression_line(series: PriceSeries) -> PriceSeries:
    """
    Ordinary-least-squares trend line over the whole series.

    Uses the index (0..n-1) as x and the price as y, and returns the fitted
    value at every observation's timestamp. A single observation yields a flat
    line through that point; an empty series yields an empty result.
    """
    n = series.count
    if n == 0:
        return PriceSeries(series.ticker, kind=SeriesKind.REGRESSION)
    if n == 1:
        only = series[0]
        return _derived(series, SeriesKind.REGRESSION, [only.timestamp], [only.price])

    slope, intercept = ols_fit(series.prices())
    fitted = [slope * i + intercept for i in range(n)]
    return _derived(series, SeriesKind.REGRESSION, series.timestamps(), fitted)


def holt_linear_smoothing(series: PriceSeries, alpha: float, beta: float) -> PriceSeries:
    """
    Holt linear (double) exponential smoothing.

    Emits level + trend for every observation after the seed, so the output has
    n - 1 points. Fewer than two observations leave no trend to seed and yield
    an empty result.

    Args:
        series: Input series
        alpha: Level smoothing factor in [0, 1]
        beta: Trend smoothing factor in [0, 1]

    Raises:
        InvalidArgumentError: If alpha or beta is outside [0, 1]
    """
    validate_smoothing_factor("alpha", alpha)
    validate_smoothing_factor("beta", beta)
    if series.count < 2:
        return PriceSeries(series.ticker, kind=SeriesKind.SMOOTHING)

    states = holt_states(series.prices(), alpha, beta)
    return _derived(
        series,
        SeriesKind.SMOOTHING,
        series.timestamps()[1:],
        [level + trend for level, trend in states],
    )
