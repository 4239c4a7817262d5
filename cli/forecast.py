#!/usr/bin/env python3
"""
Forecast CLI.

Loads a price CSV, runs one forecasting method and prints the derived series.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from stocksim.data.loader import DataLoader
from stocksim.data.series import PriceSeries
from stocksim.forecasting.implementations import build_forecaster
from stocksim.shared.config import SimulationConfig
from stocksim.shared.config_loader import load_config_from_yaml
from stocksim.shared.defaults import FORECAST_METHODS
from stocksim.shared.errors import StocksimError


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging to stderr.

    Args:
        verbose: If True, use DEBUG level, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def format_series(series: PriceSeries) -> List[str]:
    """One 'timestamp,price' line per observation."""
    return [f"{obs.timestamp.isoformat()},{obs.price:.4f}" for obs in series]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Forecast a price series from a CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Hybrid prediction with neutral sentiment
    python -m cli.forecast data/aapl.csv

    # 3-month SMA view
    python -m cli.forecast data/aapl.csv --method sma --range 3M

    # Hybrid prediction nudged by bullish headlines
    python -m cli.forecast data/aapl.csv --sentiment 0.4
        """
    )
    parser.add_argument("path", help="CSV file with a date index and a price column")
    parser.add_argument("--ticker", help="Ticker label (default: file name)")
    parser.add_argument("--column", default="Close", help="Price column (default: Close)")
    parser.add_argument("--config", help="YAML config file (CLI flags override it)")
    parser.add_argument("--method", choices=FORECAST_METHODS, help="Forecasting method")
    parser.add_argument("--range", dest="display_range", help="Display range: 1W, 1M, 3M, 6M, 1Y, 5Y, MAX")
    parser.add_argument("--sentiment", type=float, help="Sentiment score in [-1, 1] (hybrid only)")
    parser.add_argument("--start", help="Start date (YYYY-MM-DD, inclusive)")
    parser.add_argument("--end", help="End date (YYYY-MM-DD, inclusive)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging (DEBUG level)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_config_from_yaml(args.config) if args.config else SimulationConfig()
        config = SimulationConfig(
            starting_cash=config.starting_cash,
            display_range=args.display_range or config.display_range,
            method=args.method or config.method,
            sentiment_score=args.sentiment if args.sentiment is not None else config.sentiment_score,
            horizon_fraction=config.horizon_fraction,
            seed=config.seed,
        )
        series = DataLoader(args.path, ticker=args.ticker).load(
            start_date=args.start,
            end_date=args.end,
            column=args.column,
        )
        forecaster = build_forecaster(
            config.method,
            display_range=config.display_range,
            sentiment_score=config.sentiment_score,
            horizon_fraction=config.horizon_fraction,
        )
        result = forecaster.calculate(series)
    except (FileNotFoundError, ValueError, StocksimError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"{forecaster.name} produced {result.count} points for {series.ticker}")
    print(f"# {series.ticker} {result.kind.value} ({config.display_range})")
    for line in format_series(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
