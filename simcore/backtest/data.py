"""simcore.backtest.data

Synthetic OHLC history.

Stands in for a market-data feed. Realism is not a goal; the series only
has to be plausible enough to exercise the strategies:
- biased random walk (slight upward drift) starting at 0.85x the reference price
- high/low wicks by small multiplicative jitter
- timestamps evenly spaced over [from_date, to_date)

Pass a seeded ``numpy.random.Generator`` for reproducible backtests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

import numpy as np

from simcore.core.time import as_utc
from simcore.market.instruments import Instrument, resolve_instrument

START_DISCOUNT = 0.85
DRIFT_CENTER = 0.48  # < 0.5 biases changes upward
WICK_SCALE = 0.5


@dataclass(frozen=True, slots=True)
class PriceSeries:
    timestamps: tuple[datetime, ...]
    open: np.ndarray
    high: np.ndarray
    low: np.ndarray
    close: np.ndarray
    instrument: Instrument

    def __len__(self) -> int:
        return int(self.close.shape[0])


def generate_series(
    symbol: str,
    *,
    from_date: datetime | date | str,
    to_date: datetime | date | str,
    bar_count: int = 250,
    rng: np.random.Generator | None = None,
) -> PriceSeries:
    inst = resolve_instrument(symbol)
    gen = rng if rng is not None else np.random.default_rng()
    start = as_utc(from_date)
    end = as_utc(to_date)

    n = int(bar_count)
    if n <= 0:
        empty = np.zeros(0, dtype=np.float64)
        return PriceSeries(timestamps=(), open=empty, high=empty, low=empty, close=empty, instrument=inst)

    vol = float(inst.volatility)
    u_change = gen.random(n)
    u_high = gen.random(n)
    u_low = gen.random(n)

    # close[i] = close[i-1] * (1 + (u - 0.48) * vol)
    first = inst.base_price * START_DISCOUNT
    close = first * np.cumprod(1.0 + (u_change - DRIFT_CENTER) * vol)
    open_ = np.empty(n, dtype=np.float64)
    open_[0] = first
    open_[1:] = close[:-1]

    high = np.maximum(open_, close) * (1.0 + u_high * vol * WICK_SCALE)
    low = np.minimum(open_, close) * (1.0 - u_low * vol * WICK_SCALE)

    interval = (end - start) / n
    timestamps = tuple(start + i * interval for i in range(n))

    return PriceSeries(timestamps=timestamps, open=open_, high=high, low=low, close=close, instrument=inst)
