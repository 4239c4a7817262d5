"""
Sentiment collaborator interface.

The headline scorer lives outside this package; forecasting only needs a
single bounded scalar from it. Sources implement SentimentSource, and
score_headlines validates whatever they return before it reaches a forecast.
"""
import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..shared.defaults import SENTIMENT_MIN, SENTIMENT_MAX
from ..shared.errors import InvalidArgumentError


def validate_sentiment(score: float) -> float:
    """Return score as float if it is a finite number in [-1, 1], else raise InvalidArgumentError."""
    if (
        not isinstance(score, (int, float, np.floating))
        or isinstance(score, bool)
        or not math.isfinite(score)
        or not (SENTIMENT_MIN <= score <= SENTIMENT_MAX)
    ):
        raise InvalidArgumentError(
            f"sentiment score must be in [{SENTIMENT_MIN}, {SENTIMENT_MAX}], got {score!r}"
        )
    return float(score)


class SentimentSource(ABC):
    """
    Scores the aggregate tone of a batch of headlines.

    Implementations return a value in [-1, 1]: negative for bearish text,
    positive for bullish text, 0 for neutral or no headlines.
    """

    @abstractmethod
    def sentiment(self, headlines: Sequence[str]) -> float:
        """Score headlines in [-1, 1]."""
        pass


class StaticSentiment(SentimentSource):
    """Returns the same score for every batch of headlines."""

    def __init__(self, score: float = 0.0):
        self.score = validate_sentiment(score)

    def sentiment(self, headlines: Sequence[str]) -> float:
        return self.score


def score_headlines(source: SentimentSource, headlines: Sequence[str]) -> float:
    """
    Ask a sentiment source to score headlines and validate the result.

    Raises:
        InvalidArgumentError: If the source returns a value outside [-1, 1]
    """
    return validate_sentiment(source.sentiment(list(headlines)))
