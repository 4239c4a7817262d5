"""
Ledger record types: lots, per-ticker holdings, sale results and valuations.

Kept apart from ledger.py so callers (UI layers, reports) can import the
records without pulling in the Ledger itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class Lot:
    """A batch of shares bought in one purchase, consumed FIFO on sale."""
    ticker: str
    acquired_on: date
    shares: int
    cost_basis_per_share: float

    @property
    def cost(self) -> float:
        """Total cost basis of the lot."""
        return self.shares * self.cost_basis_per_share


@dataclass
class Holding:
    """All lots of one ticker, aggregated."""
    ticker: str
    shares: int
    total_cost: float
    lot_count: int

    @property
    def average_cost(self) -> float:
        """Share-weighted average cost basis."""
        return self.total_cost / self.shares if self.shares else 0.0

    def market_value(self, price: float) -> float:
        return self.shares * price


@dataclass
class SaleResult:
    """Outcome of a FIFO sale."""
    ticker: str
    quantity: int
    price_per_share: float
    proceeds: float  # Exactly price_per_share * quantity
    cost_basis: float  # FIFO cost of the shares sold
    lots_closed: int = 0  # Lots fully consumed
    lots_reduced: int = 0  # Lots partially consumed (0 or 1)

    @property
    def realized_pnl(self) -> float:
        return self.proceeds - self.cost_basis


@dataclass
class PortfolioValuation:
    """Market value of all lots plus the tickers that had no price."""
    value: float
    unpriced_tickers: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unpriced_tickers
