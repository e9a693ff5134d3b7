"""simcore.backtest.indicators

Technical indicators over a close series.

Undefined values are NaN so callers can mask with ``np.isfinite``.
"""

from __future__ import annotations

import numpy as np


def sma(x: np.ndarray, n: int) -> np.ndarray:
    """Simple moving average; NaN for the first ``n - 1`` bars."""

    x = x.astype(np.float64)
    if n <= 1:
        return x
    out = np.full_like(x, np.nan, dtype=np.float64)
    if x.size < n:
        return out

    csum = np.cumsum(x, dtype=np.float64)
    # rolling sum for windows ending at i (inclusive): sum[x[i-n+1:i+1]]
    roll_sum = csum[n - 1 :].copy()
    roll_sum[1:] = roll_sum[1:] - csum[:-n]
    out[n - 1 :] = roll_sum / float(n)
    return out


def rsi(close: np.ndarray, n: int = 14) -> np.ndarray:
    """Wilder RSI.

    Seeded with the plain mean gain/loss of the first ``n`` deltas, then
    smoothed: ``avg = (avg * (n - 1) + x) / n``. RS is pinned to 100 when the
    average loss is zero. The first ``n`` entries are NaN.
    """

    close = close.astype(np.float64)
    out = np.full_like(close, np.nan, dtype=np.float64)
    if n <= 0 or close.size <= n:
        return out

    delta = np.diff(close)
    gain = np.maximum(delta, 0.0)
    loss = np.maximum(-delta, 0.0)

    avg_gain = float(np.mean(gain[:n]))
    avg_loss = float(np.mean(loss[:n]))

    for i in range(n, close.size):
        if i > n:
            # delta[i - 1] is close[i] - close[i - 1]
            avg_gain = (avg_gain * (n - 1) + gain[i - 1]) / n
            avg_loss = (avg_loss * (n - 1) + loss[i - 1]) / n
        rs = 100.0 if avg_loss == 0 else avg_gain / avg_loss
        out[i] = 100.0 - (100.0 / (1.0 + rs))

    return out


def rolling_extremes(x: np.ndarray, n: int) -> tuple[np.ndarray, np.ndarray]:
    """Max and min of the previous ``n`` bars (excluding the current one)."""

    x = x.astype(np.float64)
    hi = np.full_like(x, np.nan, dtype=np.float64)
    lo = np.full_like(x, np.nan, dtype=np.float64)
    if n <= 0:
        return hi, lo

    for i in range(n, x.size):
        w = x[i - n : i]
        hi[i] = float(np.max(w))
        lo[i] = float(np.min(w))
    return hi, lo
