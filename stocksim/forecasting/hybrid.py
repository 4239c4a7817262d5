"""
Hybrid price prediction.

Blends three estimators (short SMA, windowed regression, Holt smoothing) into
one next-day estimate, bounds it against the last observed price and applies a
small sentiment adjustment. predict_future_hybrid extends a series by feeding
each prediction back in as the newest observation.
"""
import math
from datetime import timedelta

from ..data.series import Observation, PriceSeries, SeriesKind
from ..shared.defaults import (
    HYBRID_SMA_WINDOW,
    HYBRID_REGRESSION_WINDOW,
    HYBRID_HOLT_ALPHA,
    HYBRID_HOLT_BETA,
    HYBRID_TREND_CLAMP_PCT,
    HYBRID_MIN_RATIO,
    HYBRID_MAX_RATIO,
    SENTIMENT_WEIGHT,
    HORIZON_FRACTION,
)
from ..shared.errors import InvalidArgumentError
from .sentiment import validate_sentiment
from .technical import holt_states, ols_fit


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hybrid_estimate(prices, sentiment_score: float) -> float:
    """
    Next-step hybrid estimate for a list of at least two prices.

    Steps:
    1. SMA of the last min(5, n) prices
    2. OLS over the last min(30, n) prices, evaluated one index past the window
    3. Holt (alpha=0.6, beta=0.3) over all prices, trend clamped to +/-5% of last price
    4. Average the three estimates
    5. Clamp the average to [0.5, 1.5] x last price
    6. Multiply by (1 + 0.1 x sentiment_score)
    """
    n = len(prices)
    last_price = prices[-1]

    sma_window = min(HYBRID_SMA_WINDOW, n)
    sma_estimate = sum(prices[n - sma_window:]) / sma_window

    regression_window = min(HYBRID_REGRESSION_WINDOW, n)
    slope, intercept = ols_fit(prices[n - regression_window:])
    regression_estimate = slope * regression_window + intercept

    level, trend = holt_states(prices, HYBRID_HOLT_ALPHA, HYBRID_HOLT_BETA)[-1]
    max_trend = last_price * HYBRID_TREND_CLAMP_PCT
    trend = _clamp(trend, -max_trend, max_trend)
    smoothing_estimate = level + trend

    average = (sma_estimate + regression_estimate + smoothing_estimate) / 3.0
    average = _clamp(average, last_price * HYBRID_MIN_RATIO, last_price * HYBRID_MAX_RATIO)

    return average * (1.0 + SENTIMENT_WEIGHT * sentiment_score)


def predict_future_hybrid_single_point(series: PriceSeries, sentiment_score: float) -> PriceSeries:
    """
    Predict the price one calendar day after the last observation.

    Args:
        series: Historical series
        sentiment_score: Aggregate headline sentiment in [-1, 1]

    Returns:
        Hybrid series with exactly one point, or no points if the series has
        fewer than two observations

    Raises:
        InvalidArgumentError: If sentiment_score is outside [-1, 1]
    """
    sentiment_score = validate_sentiment(sentiment_score)
    result = PriceSeries(series.ticker, kind=SeriesKind.HYBRID)
    if series.count < 2:
        return result

    prediction = hybrid_estimate(series.prices(), sentiment_score)
    next_timestamp = series.last.timestamp + timedelta(days=1)
    result.append(Observation(next_timestamp, prediction))
    return result


def validate_horizon_fraction(horizon_fraction: float) -> None:
    """Raise InvalidArgumentError unless horizon_fraction is a number in (0, 1]."""
    if (
        not isinstance(horizon_fraction, (int, float))
        or isinstance(horizon_fraction, bool)
        or not (0 < horizon_fraction <= 1)
    ):
        raise InvalidArgumentError(f"horizon_fraction must be in (0, 1], got {horizon_fraction!r}")


def _num_future_points(count: int, horizon_fraction: float) -> int:
    # round() absorbs float noise such as 15 * 0.2 == 3.0000000000000004
    return max(1, math.floor(round(count * horizon_fraction, 9)))


def predict_future_hybrid(
    series: PriceSeries,
    sentiment_score: float,
    horizon_fraction: float = HORIZON_FRACTION,
) -> PriceSeries:
    """
    Extend a series with iterated hybrid predictions.

    Predicts max(1, floor(n * horizon_fraction)) future points. Each step runs
    on a private working copy of the input extended by the previous
    predictions, so the caller's series is never modified and repeated calls
    return identical output.

    The result starts with the last historical observation (for plotting
    continuity, not a prediction) followed by the predictions in order. An
    empty input yields an empty result; a single observation yields only the
    anchor point.

    Raises:
        InvalidArgumentError: If sentiment_score is outside [-1, 1] or
            horizon_fraction is outside (0, 1]
    """
    sentiment_score = validate_sentiment(sentiment_score)
    validate_horizon_fraction(horizon_fraction)

    result = PriceSeries(series.ticker, kind=SeriesKind.HYBRID)
    if series.count == 0:
        return result

    result.append(series.last)
    working = series.copy()
    for _ in range(_num_future_points(series.count, horizon_fraction)):
        step = predict_future_hybrid_single_point(working, sentiment_score)
        if step.is_empty():
            break
        prediction = step.last
        result.append(prediction)
        working.append(prediction)

    return result
