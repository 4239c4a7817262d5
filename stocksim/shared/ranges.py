"""
Display-range lookup tables.

Each chart range maps to the SMA period and Holt (alpha, beta) pair used for
the user-selectable smoothing views. Shorter ranges get shorter windows and
more reactive smoothing. The hybrid predictor does not use these tables.
"""
from enum import Enum
from typing import Dict, Tuple, Union

from .defaults import DEFAULT_SMA_PERIOD, DEFAULT_ALPHA, DEFAULT_BETA


class DisplayRange(Enum):
    """Chart range selectable by the user."""
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    FIVE_YEARS = "5Y"
    MAX = "MAX"


SMA_PERIODS: Dict[DisplayRange, int] = {
    DisplayRange.ONE_WEEK: 2,
    DisplayRange.ONE_MONTH: 5,
    DisplayRange.THREE_MONTHS: 10,
    DisplayRange.SIX_MONTHS: 20,
    DisplayRange.ONE_YEAR: 50,
    DisplayRange.FIVE_YEARS: 100,
    DisplayRange.MAX: 200,
}

ALPHA_BETA: Dict[DisplayRange, Tuple[float, float]] = {
    DisplayRange.ONE_WEEK: (0.9, 0.3),
    DisplayRange.ONE_MONTH: (0.8, 0.3),
    DisplayRange.THREE_MONTHS: (0.7, 0.3),
    DisplayRange.SIX_MONTHS: (0.6, 0.3),
    DisplayRange.ONE_YEAR: (0.5, 0.3),
    DisplayRange.FIVE_YEARS: (0.4, 0.3),
    DisplayRange.MAX: (0.3, 0.3),
}


def parse_range(value: Union[str, DisplayRange, None]) -> Union[DisplayRange, None]:
    """Return the DisplayRange for a code like "1M" (case-insensitive), or None if unknown."""
    if isinstance(value, DisplayRange):
        return value
    if value is None:
        return None
    try:
        return DisplayRange(str(value).strip().upper())
    except ValueError:
        return None


def sma_period_for_range(value: Union[str, DisplayRange, None]) -> int:
    """SMA period for a display range (DEFAULT_SMA_PERIOD for unknown ranges)."""
    display_range = parse_range(value)
    if display_range is None:
        return DEFAULT_SMA_PERIOD
    return SMA_PERIODS[display_range]


def alpha_beta_for_range(value: Union[str, DisplayRange, None]) -> Tuple[float, float]:
    """Holt (alpha, beta) for a display range ((DEFAULT_ALPHA, DEFAULT_BETA) for unknown ranges)."""
    display_range = parse_range(value)
    if display_range is None:
        return DEFAULT_ALPHA, DEFAULT_BETA
    return ALPHA_BETA[display_range]
