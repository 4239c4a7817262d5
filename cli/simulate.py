#!/usr/bin/env python3
"""
Paper-trading simulation CLI.

Buys a position at the latest historical price, simulates the market forward
with the hybrid predictor and reports the ledger's profit/loss.
"""
import argparse
import logging
import sys
from typing import List, Optional

from stocksim.data.loader import DataLoader
from stocksim.shared.config import SimulationConfig
from stocksim.shared.config_loader import load_config_from_yaml
from stocksim.shared.errors import InsufficientFundsError, StocksimError
from stocksim.simulation.ledger import Ledger, latest_price_lookup
from stocksim.simulation.market import MarketSimulator

from .forecast import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Paper-trade simulated price paths")
    parser.add_argument("paths", nargs="+", help="CSV files, one per instrument")
    parser.add_argument("--shares", type=int, default=10, help="Shares to buy per instrument (default: 10)")
    parser.add_argument("--days", type=int, default=5, help="Days to simulate (default: 5)")
    parser.add_argument("--config", help="YAML config file (starting cash, seed)")
    parser.add_argument("--seed", type=int, help="RNG seed (overrides config)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging (DEBUG level)")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_config_from_yaml(args.config) if args.config else SimulationConfig()
        seed = args.seed if args.seed is not None else config.seed
        series_list = [DataLoader(path).load() for path in args.paths]

        ledger = Ledger(starting_cash=config.starting_cash)
        for series in series_list:
            if series.is_empty():
                logger.warning(f"Skipped {series.ticker}: no data")
                continue
            try:
                ledger.buy_latest(series, args.shares)
            except InsufficientFundsError as e:
                logger.warning(f"Skipped {series.ticker}: {e}")

        simulated = MarketSimulator(seed=seed).run(series_list, args.days)
    except (FileNotFoundError, ValueError, StocksimError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    prices = latest_price_lookup(simulated)
    for ticker, holding in ledger.holdings().items():
        print(f"{ticker}: {holding.shares} shares @ {holding.average_cost:.2f} -> {prices[ticker]:.2f}")
    print(f"Cash: {ledger.cash:.2f}")
    print(f"Portfolio value: {ledger.portfolio_value(prices):.2f}")
    print(f"Profit/loss: {ledger.profit_loss(prices):+.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
