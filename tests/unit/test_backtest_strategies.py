from __future__ import annotations

import numpy as np

from simcore.backtest.strategies import (
    BreakoutStrategy,
    MeanReversionStrategy,
    RSIReversionStrategy,
    SMACrossStrategy,
    build_strategy,
)
from simcore.core.config import SimulationConfig


def test_sma_cross_fires_once_on_each_cross() -> None:
    close = np.concatenate([np.linspace(110.0, 100.0, 40), np.linspace(100.0, 120.0, 40)])
    sig = SMACrossStrategy(fast=5, slow=15).generate(close=close).signal
    longs = np.flatnonzero(sig > 0)
    assert longs.size == 1
    assert longs[0] > 40
    assert not np.any(sig[:15] != 0)


def test_sma_cross_short_on_downward_cross() -> None:
    close = np.concatenate([np.linspace(100.0, 120.0, 40), np.linspace(120.0, 100.0, 40)])
    sig = SMACrossStrategy(fast=5, slow=15).generate(close=close).signal
    assert np.flatnonzero(sig < 0).size == 1


def test_rsi_signals_oversold_long_and_overbought_short() -> None:
    up = np.linspace(100.0, 130.0, 40)
    sig_up = RSIReversionStrategy(period=14).generate(close=up).signal
    assert np.all(sig_up[14:] == -1.0)
    assert np.all(sig_up[:14] == 0.0)

    down = np.linspace(130.0, 100.0, 40)
    sig_down = RSIReversionStrategy(period=14).generate(close=down).signal
    assert np.all(sig_down[14:] == 1.0)


def test_breakout_needs_buffer() -> None:
    close = np.full(30, 100.0)
    close[25] = 100.05  # inside the 0.1% buffer
    close[27] = 100.5
    close[29] = 99.0
    sig = BreakoutStrategy(lookback=20, buffer=0.001).generate(close=close).signal
    assert sig[25] == 0.0
    assert sig[27] == 1.0
    assert sig[29] == -1.0
    assert not np.any(sig[:20] != 0)


def test_mean_reversion_deviation_threshold() -> None:
    close = np.full(40, 100.0)
    close[35] = 97.0
    close[38] = 103.0
    sig = MeanReversionStrategy(lookback=30, threshold_pct=2.0).generate(close=close).signal
    assert sig[35] == 1.0
    assert sig[38] == -1.0
    assert sig[36] == 0.0


def test_build_strategy_uses_config() -> None:
    cfg = SimulationConfig(fast_period=5, slow_period=20, rsi_period=7)
    s = build_strategy("sma_cross", cfg)
    assert isinstance(s, SMACrossStrategy) and (s.fast, s.slow) == (5, 20)
    assert isinstance(build_strategy("rsi_oversold", cfg), RSIReversionStrategy)
    assert isinstance(build_strategy("breakout", cfg), BreakoutStrategy)
    mr = build_strategy("mean_revert", cfg)
    assert isinstance(mr, MeanReversionStrategy) and mr.lookback == 20


def test_strategies_smoke_on_short_series() -> None:
    close = np.linspace(100.0, 101.0, 5)
    for name in ("sma_cross", "rsi_oversold", "breakout", "mean_revert"):
        rule = build_strategy(name)
        assert rule.name == name
        sig = rule.generate(close=close).signal
        assert sig.shape == close.shape
        assert np.all(sig == 0.0)
