"""
Simulation configuration.

Holds the user-facing knobs for a forecasting/paper-trading session.
Config validation runs at construction time (fail fast with clear errors).
"""
import math
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from .defaults import (
    STARTING_CASH,
    DEFAULT_DISPLAY_RANGE,
    DEFAULT_METHOD,
    FORECAST_METHODS,
    HORIZON_FRACTION,
    SENTIMENT_MIN,
    SENTIMENT_MAX,
)
from .errors import ConfigError
from .ranges import parse_range


def _validate_config(
    *,
    starting_cash: float,
    display_range: str,
    method: str,
    sentiment_score: float,
    horizon_fraction: float,
    seed: Optional[int],
) -> None:
    """Validate session parameters. Raises ConfigError with clear message on failure."""
    if not isinstance(starting_cash, (int, float)) or not math.isfinite(starting_cash) or starting_cash < 0:
        raise ConfigError(f"starting_cash must be a finite number >= 0, got {starting_cash!r}")
    if parse_range(display_range) is None:
        raise ConfigError(f"Unknown display_range: {display_range!r}")
    if method not in FORECAST_METHODS:
        raise ConfigError(
            f"method must be one of {', '.join(FORECAST_METHODS)}, got {method!r}"
        )
    if not isinstance(sentiment_score, (int, float)) or not (SENTIMENT_MIN <= sentiment_score <= SENTIMENT_MAX):
        raise ConfigError(
            f"sentiment_score must be in [{SENTIMENT_MIN}, {SENTIMENT_MAX}], got {sentiment_score!r}"
        )
    if not isinstance(horizon_fraction, (int, float)) or not (0 < horizon_fraction <= 1):
        raise ConfigError(f"horizon_fraction must be in (0, 1], got {horizon_fraction!r}")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigError(f"seed must be a non-negative integer, got {seed!r}")


@dataclass
class SimulationConfig:
    """Configuration for a forecasting and paper-trading session."""
    starting_cash: float = STARTING_CASH
    display_range: str = DEFAULT_DISPLAY_RANGE
    method: str = DEFAULT_METHOD
    sentiment_score: float = 0.0
    horizon_fraction: float = HORIZON_FRACTION
    seed: Optional[int] = None  # Market simulator RNG seed (None = nondeterministic)

    def __post_init__(self):
        self.display_range = str(self.display_range).strip().upper()
        self.method = str(self.method).strip().lower()
        _validate_config(
            starting_cash=self.starting_cash,
            display_range=self.display_range,
            method=self.method,
            sentiment_score=self.sentiment_score,
            horizon_fraction=self.horizon_fraction,
            seed=self.seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


DEFAULT_CONFIG = SimulationConfig()
