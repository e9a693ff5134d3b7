"""simcore.backtest

Backtest engine.

- data: synthetic OHLC history
- indicators + strategies: entry signals
- simulator: single-position trade lifecycle
- validation: performance metrics
"""

from simcore.backtest.engine import BacktestResult, StrategyConfig, run_backtest

__all__ = ["BacktestResult", "StrategyConfig", "run_backtest"]
