"""
Forecasting module.

Provides all price forecasters:
- Simple moving average, regression line, Holt linear smoothing
- Hybrid single-step and multi-step prediction with sentiment adjustment
- Class-based forecasters selectable by method name and display range
- The sentiment collaborator interface

All forecasting functions are pure and return new derived series.
"""
from .technical import sma, regression_line, holt_linear_smoothing
from .hybrid import predict_future_hybrid_single_point, predict_future_hybrid, validate_horizon_fraction
from .base import Forecaster
from .implementations import (
    SMAForecaster,
    RegressionForecaster,
    HoltForecaster,
    HybridForecaster,
    build_forecaster,
)
from .sentiment import SentimentSource, StaticSentiment, score_headlines, validate_sentiment

__all__ = [
    'sma',
    'regression_line',
    'holt_linear_smoothing',
    'predict_future_hybrid_single_point',
    'predict_future_hybrid',
    'validate_horizon_fraction',
    'Forecaster',
    'SMAForecaster',
    'RegressionForecaster',
    'HoltForecaster',
    'HybridForecaster',
    'build_forecaster',
    'SentimentSource',
    'StaticSentiment',
    'score_headlines',
    'validate_sentiment',
]
