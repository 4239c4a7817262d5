"""
Error taxonomy shared by the forecasting and simulation modules.

Forecasting functions raise InvalidArgumentError immediately. Ledger failures
(insufficient funds or holdings) are recoverable: callers catch them or use the
boolean try_buy/try_sell variants.
"""
from typing import Optional


class StocksimError(Exception):
    """Base class for all stocksim errors."""
    pass


class InvalidArgumentError(StocksimError, ValueError):
    """Raised for malformed input (bad period, alpha/beta, quantity, price, sentiment)."""
    pass


class ConfigError(StocksimError, ValueError):
    """Raised when a configuration is invalid."""
    pass


class LedgerError(StocksimError):
    """Base class for rejected ledger operations."""
    pass


class InsufficientFundsError(LedgerError):
    """Raised when a purchase costs more than the available cash."""

    def __init__(self, required: float, available: float, ticker: Optional[str] = None):
        self.required = required
        self.available = available
        self.ticker = ticker
        super().__init__(
            f"Insufficient funds{f' to buy {ticker}' if ticker else ''}: "
            f"need {required:.2f}, have {available:.2f}"
        )


class InsufficientHoldingsError(LedgerError):
    """Raised when a sale requests more shares than are held."""

    def __init__(self, ticker: str, requested: int, held: int):
        self.ticker = ticker
        self.requested = requested
        self.held = held
        super().__init__(
            f"Insufficient holdings of {ticker}: requested {requested}, held {held}"
        )
