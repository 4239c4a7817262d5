"""
Shared types, defaults and configuration for the stocksim modules.

This module provides:
- Centralized default values for forecasting and ledger parameters
- Display-range lookup tables (SMA period, Holt alpha/beta)
- The error taxonomy
- SimulationConfig and its YAML loader
"""
from .defaults import (
    STARTING_CASH, HORIZON_FRACTION, SENTIMENT_WEIGHT,
    HYBRID_HOLT_ALPHA, HYBRID_HOLT_BETA, FORECAST_METHODS,
)
from .errors import (
    StocksimError,
    InvalidArgumentError,
    ConfigError,
    LedgerError,
    InsufficientFundsError,
    InsufficientHoldingsError,
)
from .ranges import DisplayRange, parse_range, sma_period_for_range, alpha_beta_for_range
from .config import SimulationConfig, DEFAULT_CONFIG
from .config_loader import load_config_from_yaml

__all__ = [
    'STARTING_CASH', 'HORIZON_FRACTION', 'SENTIMENT_WEIGHT',
    'HYBRID_HOLT_ALPHA', 'HYBRID_HOLT_BETA', 'FORECAST_METHODS',
    'StocksimError',
    'InvalidArgumentError',
    'ConfigError',
    'LedgerError',
    'InsufficientFundsError',
    'InsufficientHoldingsError',
    'DisplayRange',
    'parse_range',
    'sma_period_for_range',
    'alpha_beta_for_range',
    'SimulationConfig',
    'DEFAULT_CONFIG',
    'load_config_from_yaml',
]
