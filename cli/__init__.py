"""
Command-line entry points.

Provides command-line interfaces for:
- Forecasting a price file (SMA, regression, smoothing, hybrid)
- Paper-trading simulated price paths
"""
