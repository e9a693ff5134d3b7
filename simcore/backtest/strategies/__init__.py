"""simcore.backtest.strategies

Entry-rule library. One rule is active per backtest run, picked by
``entry_condition``.
"""

from __future__ import annotations

from simcore.backtest.strategies.base import Strategy, StrategyResult
from simcore.backtest.strategies.breakout import BreakoutStrategy
from simcore.backtest.strategies.ma_crossover import SMACrossStrategy
from simcore.backtest.strategies.mean_reversion import MeanReversionStrategy
from simcore.backtest.strategies.rsi_reversion import RSIReversionStrategy
from simcore.core.config import SimulationConfig
from simcore.core.types import EntryCondition


def build_strategy(entry_condition: EntryCondition | str, cfg: SimulationConfig | None = None) -> Strategy:
    cfg = cfg or SimulationConfig()
    cond = EntryCondition(entry_condition)

    if cond is EntryCondition.SMA_CROSS:
        return SMACrossStrategy(fast=cfg.fast_period, slow=cfg.slow_period)
    if cond is EntryCondition.RSI_OVERSOLD:
        return RSIReversionStrategy(period=cfg.rsi_period, oversold=cfg.rsi_oversold, overbought=cfg.rsi_overbought)
    if cond is EntryCondition.BREAKOUT:
        return BreakoutStrategy(lookback=cfg.breakout_lookback, buffer=cfg.breakout_buffer)
    return MeanReversionStrategy(lookback=cfg.slow_period, threshold_pct=cfg.mean_revert_threshold_pct)


__all__ = [
    "Strategy",
    "StrategyResult",
    "BreakoutStrategy",
    "MeanReversionStrategy",
    "RSIReversionStrategy",
    "SMACrossStrategy",
    "build_strategy",
]
