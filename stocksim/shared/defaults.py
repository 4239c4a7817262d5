"""
Centralized default values for forecasting and simulation parameters.

This is the SINGLE SOURCE OF TRUTH for all numeric defaults.
All modules should import from here to ensure consistency.
"""

# Hybrid predictor estimator windows
HYBRID_SMA_WINDOW = 5  # Last N prices averaged for the SMA estimate
HYBRID_REGRESSION_WINDOW = 30  # Last N prices fitted for the regression estimate

# Holt parameters used inside the hybrid predictor (fixed, independent of the range table)
HYBRID_HOLT_ALPHA = 0.6
HYBRID_HOLT_BETA = 0.3
HYBRID_TREND_CLAMP_PCT = 0.05  # Holt trend limited to +/-5% of the last price

# Sanity band for the averaged estimate, relative to the last price
HYBRID_MIN_RATIO = 0.5
HYBRID_MAX_RATIO = 1.5

# Sentiment adjustment: final = average * (1 + SENTIMENT_WEIGHT * score)
SENTIMENT_WEIGHT = 0.1
SENTIMENT_MIN = -1.0
SENTIMENT_MAX = 1.0

# Multi-step hybrid: number of future points = max(1, floor(n * HORIZON_FRACTION))
HORIZON_FRACTION = 0.2

# Range table fallbacks (unknown display ranges)
DEFAULT_SMA_PERIOD = 5
DEFAULT_ALPHA = 0.7
DEFAULT_BETA = 0.3
DEFAULT_DISPLAY_RANGE = "1M"
DEFAULT_METHOD = "hybrid"

# Ledger
STARTING_CASH = 10_000.0

# Market simulator: daily sentiment drawn uniformly from [-SPREAD, +SPREAD]
MARKET_SENTIMENT_SPREAD = 0.25

# Forecasting methods selectable from config and CLI
FORECAST_METHODS = ("sma", "regression", "smoothing", "hybrid")
