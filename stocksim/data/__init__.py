"""
Price series data module.

Provides the Observation/PriceSeries containers and the CSV loader that turns
downloaded price files into raw series.
"""
from .series import Observation, PriceSeries, SeriesKind
from .loader import DataLoader

__all__ = [
    'Observation',
    'PriceSeries',
    'SeriesKind',
    'DataLoader',
]
