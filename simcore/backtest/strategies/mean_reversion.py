"""simcore.backtest.strategies.mean_reversion

Mean reversion against the slow SMA:
- deviation = (close - sma) / sma * 100
- long when deviation < -threshold_pct
- short when deviation > threshold_pct
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from simcore.backtest.indicators import sma
from simcore.backtest.strategies.base import Strategy, StrategyResult


@dataclass(frozen=True, slots=True)
class MeanReversionStrategy(Strategy):
    name: str = "mean_revert"
    lookback: int = 30
    threshold_pct: float = 2.0

    def generate(self, *, close: np.ndarray) -> StrategyResult:
        t_len = close.shape[0]
        sig = np.zeros(t_len, dtype=np.float64)
        n = int(self.lookback)
        if t_len == 0 or n <= 1:
            return StrategyResult(signal=sig)

        c = close.astype(np.float64)
        mu = sma(c, n)
        mask = np.isfinite(mu) & (mu != 0)
        dev = np.full_like(c, np.nan)
        dev[mask] = (c[mask] - mu[mask]) / mu[mask] * 100.0

        thr = float(self.threshold_pct)
        sig[mask & (dev < -thr)] = 1.0
        sig[mask & (dev > thr)] = -1.0
        return StrategyResult(signal=sig)
