"""simcore.backtest.strategies.ma_crossover

SMA crossover:
- long when the fast SMA crosses above the slow SMA on this bar
- short when it crosses below
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from simcore.backtest.indicators import sma
from simcore.backtest.strategies.base import Strategy, StrategyResult


@dataclass(frozen=True, slots=True)
class SMACrossStrategy(Strategy):
    name: str = "sma_cross"
    fast: int = 10
    slow: int = 30

    def generate(self, *, close: np.ndarray) -> StrategyResult:
        t_len = close.shape[0]
        sig = np.zeros(t_len, dtype=np.float64)
        fast = int(self.fast)
        slow = int(self.slow)
        if t_len < 2 or fast <= 0 or slow <= 0 or fast >= slow:
            return StrategyResult(signal=sig)

        f = sma(close, fast)
        s = sma(close, slow)
        f_prev = np.roll(f, 1)
        s_prev = np.roll(s, 1)
        f_prev[0] = np.nan
        s_prev[0] = np.nan

        mask = np.isfinite(f) & np.isfinite(s) & np.isfinite(f_prev) & np.isfinite(s_prev)
        sig[mask & (f > s) & (f_prev <= s_prev)] = 1.0
        sig[mask & (f < s) & (f_prev >= s_prev)] = -1.0
        return StrategyResult(signal=sig)
