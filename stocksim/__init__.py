"""
Price forecasting and paper-trading toolkit.

Provides unified interfaces for:
- Price series (raw observations and derived forecast series)
- Forecasting (SMA, regression line, Holt smoothing, hybrid prediction)
- Paper trading (cash + FIFO share lots, valuation, profit/loss)
- Market simulation (hybrid-driven day-by-day price paths)
"""
