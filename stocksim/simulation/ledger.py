"""
Paper-trading ledger with FIFO share lots.

The ledger:
- Starts with a configurable cash balance
- Cannot be overextended (buys never take cash below zero)
- Records every buy as its own lot (no merging)
- Sells oldest lots first and credits exactly price * quantity
- Values open lots against a caller-supplied price lookup
"""
import logging
import math
import threading
from collections import OrderedDict
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

import numpy as np

from ..data.series import PriceSeries
from ..shared.defaults import STARTING_CASH
from ..shared.errors import (
    InvalidArgumentError,
    InsufficientFundsError,
    InsufficientHoldingsError,
)
from .ledger_types import Holding, Lot, PortfolioValuation, SaleResult

logger = logging.getLogger(__name__)

PriceLookup = Union[Mapping[str, Optional[float]], Callable[[str], Optional[float]]]


def _validate_ticker(ticker: str) -> None:
    if not isinstance(ticker, str) or not ticker.strip():
        raise InvalidArgumentError(f"ticker must be a non-empty string, got {ticker!r}")


def _validate_price(price: float) -> None:
    if (
        not isinstance(price, (int, float))
        or isinstance(price, bool)
        or not math.isfinite(price)
        or price <= 0
    ):
        raise InvalidArgumentError(f"price_per_share must be a finite number > 0, got {price!r}")


def _validate_quantity(quantity: int) -> None:
    if not isinstance(quantity, (int, np.integer)) or isinstance(quantity, bool) or quantity <= 0:
        raise InvalidArgumentError(f"quantity must be an integer > 0, got {quantity!r}")


def _resolve_price(price_lookup: PriceLookup, ticker: str) -> Optional[float]:
    if callable(price_lookup):
        return price_lookup(ticker)
    return price_lookup.get(ticker)


def _as_date(timestamp) -> date:
    # Intraday observations carry a datetime; lots are dated by calendar day
    return timestamp.date() if isinstance(timestamp, datetime) else timestamp


def latest_price_lookup(series: Iterable[PriceSeries]) -> Dict[str, float]:
    """Map each non-empty series' ticker to its latest price (later series win on duplicates)."""
    return {s.ticker: s.last.price for s in series if not s.is_empty()}


class Ledger:
    """
    Cash balance plus discrete purchase lots per ticker.

    Invariants: cash >= 0 and no lot holds a non-positive share count. Every
    mutating call validates before changing state, so a rejected call has no
    effect. Mutations are serialized by an internal lock.
    """

    def __init__(self, starting_cash: float = STARTING_CASH, current_date: Optional[date] = None):
        """
        Initialize the ledger.

        Args:
            starting_cash: Cash balance at creation and after reset (default: 10 000)
            current_date: Simulated date stamped on new lots (default: today)
        """
        if (
            not isinstance(starting_cash, (int, float))
            or isinstance(starting_cash, bool)
            or not math.isfinite(starting_cash)
            or starting_cash < 0
        ):
            raise InvalidArgumentError(f"starting_cash must be a finite number >= 0, got {starting_cash!r}")
        self._starting_cash = float(starting_cash)
        self._cash = self._starting_cash
        self._lots: "OrderedDict[str, List[Lot]]" = OrderedDict()
        self._current_date = current_date or date.today()
        self._lock = threading.RLock()

    @property
    def cash(self) -> float:
        return self._cash

    @property
    def starting_cash(self) -> float:
        return self._starting_cash

    @property
    def current_date(self) -> date:
        return self._current_date

    def set_date(self, current_date: date) -> None:
        """Move the simulated date used for new lots."""
        with self._lock:
            self._current_date = current_date

    def buy(self, ticker: str, price_per_share: float, quantity: int, on: Optional[date] = None) -> Lot:
        """
        Buy shares as a new lot.

        Args:
            ticker: Instrument ticker
            price_per_share: Execution price (> 0)
            quantity: Number of shares (integer > 0)
            on: Acquisition date (default: the ledger's current date)

        Returns:
            The new Lot

        Raises:
            InvalidArgumentError: On malformed ticker, price or quantity
            InsufficientFundsError: If the cost exceeds available cash
        """
        _validate_ticker(ticker)
        _validate_price(price_per_share)
        _validate_quantity(quantity)
        quantity = int(quantity)

        with self._lock:
            cost = price_per_share * quantity
            if cost > self._cash:
                logger.warning(
                    f"Rejected buy of {quantity} {ticker} @ {price_per_share:.2f}: "
                    f"cost {cost:.2f} exceeds cash {self._cash:.2f}"
                )
                raise InsufficientFundsError(cost, self._cash, ticker)

            lot = Lot(
                ticker=ticker,
                acquired_on=on or self._current_date,
                shares=quantity,
                cost_basis_per_share=float(price_per_share),
            )
            self._cash -= cost
            self._lots.setdefault(ticker, []).append(lot)
            cash_after = self._cash

        logger.info(f"Bought {quantity} {ticker} @ {price_per_share:.2f} (cash {cash_after:.2f})")
        return lot

    def sell(self, ticker: str, price_per_share: float, quantity: int) -> SaleResult:
        """
        Sell shares, consuming lots oldest first.

        Each lot gives up min(remaining, lot.shares) shares and is reduced or
        removed. The cash credited is exactly price_per_share * quantity.

        Raises:
            InvalidArgumentError: On malformed ticker, price or quantity
            InsufficientHoldingsError: If fewer than quantity shares are held
        """
        _validate_ticker(ticker)
        _validate_price(price_per_share)
        _validate_quantity(quantity)
        quantity = int(quantity)

        with self._lock:
            held = self.shares_held(ticker)
            if held < quantity:
                logger.warning(f"Rejected sell of {quantity} {ticker}: only {held} held")
                raise InsufficientHoldingsError(ticker, quantity, held)

            remaining = quantity
            cost_basis = 0.0
            closed = 0
            reduced = 0
            kept: List[Lot] = []
            for lot in self._lots[ticker]:
                if remaining == 0:
                    kept.append(lot)
                    continue
                sold = min(remaining, lot.shares)
                cost_basis += sold * lot.cost_basis_per_share
                remaining -= sold
                if sold == lot.shares:
                    closed += 1
                else:
                    reduced += 1
                    kept.append(replace(lot, shares=lot.shares - sold))

            proceeds = price_per_share * quantity
            if kept:
                self._lots[ticker] = kept
            else:
                del self._lots[ticker]
            self._cash += proceeds
            cash_after = self._cash

        logger.info(f"Sold {quantity} {ticker} @ {price_per_share:.2f} (cash {cash_after:.2f})")
        return SaleResult(
            ticker=ticker,
            quantity=quantity,
            price_per_share=float(price_per_share),
            proceeds=proceeds,
            cost_basis=cost_basis,
            lots_closed=closed,
            lots_reduced=reduced,
        )

    def try_buy(self, ticker: str, price_per_share: float, quantity: int, on: Optional[date] = None) -> bool:
        """buy() that returns False instead of raising when cash is insufficient."""
        try:
            self.buy(ticker, price_per_share, quantity, on=on)
        except InsufficientFundsError:
            return False
        return True

    def try_sell(self, ticker: str, price_per_share: float, quantity: int) -> bool:
        """sell() that returns False instead of raising when holdings are insufficient."""
        try:
            self.sell(ticker, price_per_share, quantity)
        except InsufficientHoldingsError:
            return False
        return True

    def buy_latest(self, series: PriceSeries, quantity: int) -> Lot:
        """Buy at the series' latest price, dated at its latest observation."""
        last = series.last
        if last is None:
            raise InvalidArgumentError(f"Cannot trade {series.ticker!r}: series has no observations")
        return self.buy(series.ticker, last.price, quantity, on=_as_date(last.timestamp))

    def sell_latest(self, series: PriceSeries, quantity: int) -> SaleResult:
        """Sell at the series' latest price."""
        last = series.last
        if last is None:
            raise InvalidArgumentError(f"Cannot trade {series.ticker!r}: series has no observations")
        return self.sell(series.ticker, last.price, quantity)

    def shares_held(self, ticker: str) -> int:
        """Total shares across all lots of ticker."""
        with self._lock:
            return sum(lot.shares for lot in self._lots.get(ticker, ()))

    def lots(self, ticker: Optional[str] = None) -> List[Lot]:
        """Snapshot of lots (oldest first), optionally for one ticker."""
        with self._lock:
            if ticker is not None:
                return list(self._lots.get(ticker, ()))
            return [lot for ticker_lots in self._lots.values() for lot in ticker_lots]

    def tickers(self) -> List[str]:
        """Tickers with at least one open lot, in first-bought order."""
        with self._lock:
            return list(self._lots.keys())

    def holdings(self) -> Dict[str, Holding]:
        """Per-ticker aggregate of open lots."""
        with self._lock:
            return {
                ticker: Holding(
                    ticker=ticker,
                    shares=sum(lot.shares for lot in ticker_lots),
                    total_cost=sum(lot.cost for lot in ticker_lots),
                    lot_count=len(ticker_lots),
                )
                for ticker, ticker_lots in self._lots.items()
            }

    def valuation(self, price_lookup: PriceLookup) -> PortfolioValuation:
        """
        Market value of all open lots.

        Args:
            price_lookup: Mapping or callable returning the current price of a
                ticker, or None when no price is available

        Returns:
            PortfolioValuation; tickers without a price contribute zero and are
            listed in unpriced_tickers
        """
        with self._lock:
            value = 0.0
            unpriced: List[str] = []
            for ticker, ticker_lots in self._lots.items():
                price = _resolve_price(price_lookup, ticker)
                if price is None or (isinstance(price, float) and math.isnan(price)):
                    logger.warning(f"No current price available for {ticker}")
                    unpriced.append(ticker)
                    continue
                value += sum(lot.shares for lot in ticker_lots) * price
            return PortfolioValuation(value=value, unpriced_tickers=unpriced)

    def portfolio_value(self, price_lookup: PriceLookup) -> float:
        """Market value of all open lots (unpriced tickers count as zero)."""
        return self.valuation(price_lookup).value

    def profit_loss(self, price_lookup: PriceLookup) -> float:
        """cash + portfolio value - starting cash."""
        with self._lock:
            return self._cash + self.portfolio_value(price_lookup) - self._starting_cash

    def reset(self) -> None:
        """Restore starting cash and drop all lots."""
        with self._lock:
            self._cash = self._starting_cash
            self._lots.clear()
        logger.info(f"Ledger reset (cash {self._starting_cash:.2f})")

    def __repr__(self) -> str:
        return f"Ledger(cash={self._cash:.2f}, lots={len(self.lots())})"


__all__ = [
    "Ledger",
    "PriceLookup",
    "latest_price_lookup",
]
