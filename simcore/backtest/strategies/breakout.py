"""simcore.backtest.strategies.breakout

Channel breakout on closes:
- long when close > max(previous lookback closes) * (1 + buffer)
- short when close < min(previous lookback closes) * (1 - buffer)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from simcore.backtest.indicators import rolling_extremes
from simcore.backtest.strategies.base import Strategy, StrategyResult


@dataclass(frozen=True, slots=True)
class BreakoutStrategy(Strategy):
    name: str = "breakout"
    lookback: int = 20
    buffer: float = 0.001

    def generate(self, *, close: np.ndarray) -> StrategyResult:
        t_len = close.shape[0]
        sig = np.zeros(t_len, dtype=np.float64)
        n = int(self.lookback)
        if t_len == 0 or n <= 1:
            return StrategyResult(signal=sig)

        c = close.astype(np.float64)
        hi, lo = rolling_extremes(c, n)
        mask = np.isfinite(hi) & np.isfinite(lo)
        up = mask & (c > hi * (1.0 + float(self.buffer)))
        down = mask & ~up & (c < lo * (1.0 - float(self.buffer)))
        sig[up] = 1.0
        sig[down] = -1.0
        return StrategyResult(signal=sig)
