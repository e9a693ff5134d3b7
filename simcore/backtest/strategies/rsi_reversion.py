"""simcore.backtest.strategies.rsi_reversion

RSI reversion:
- long when RSI < oversold
- short when RSI > overbought
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from simcore.backtest.indicators import rsi
from simcore.backtest.strategies.base import Strategy, StrategyResult


@dataclass(frozen=True, slots=True)
class RSIReversionStrategy(Strategy):
    name: str = "rsi_oversold"
    period: int = 14
    oversold: float = 30.0
    overbought: float = 70.0

    def generate(self, *, close: np.ndarray) -> StrategyResult:
        t_len = close.shape[0]
        sig = np.zeros(t_len, dtype=np.float64)
        period = int(self.period)
        if t_len == 0 or period <= 1:
            return StrategyResult(signal=sig)

        r = rsi(close, period)
        mask = np.isfinite(r)
        sig[mask & (r < float(self.oversold))] = 1.0
        sig[mask & (r > float(self.overbought))] = -1.0
        return StrategyResult(signal=sig)
