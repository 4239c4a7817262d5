"""
Paper-trading simulation module.

Provides the cash + FIFO lot ledger, its record types, and the
hybrid-driven market simulator.
"""
from .ledger import Ledger, PriceLookup, latest_price_lookup
from .ledger_types import Lot, Holding, SaleResult, PortfolioValuation
from .market import MarketSimulator

__all__ = [
    'Ledger',
    'PriceLookup',
    'latest_price_lookup',
    'Lot',
    'Holding',
    'SaleResult',
    'PortfolioValuation',
    'MarketSimulator',
]
