from __future__ import annotations

import numpy as np
import pytest

from simcore.backtest.indicators import rolling_extremes, rsi, sma


def test_sma_warmup_is_nan_then_trailing_mean() -> None:
    x = np.arange(1.0, 11.0)
    out = sma(x, 3)
    assert np.all(np.isnan(out[:2]))
    assert out[2] == pytest.approx(2.0)
    assert out[-1] == pytest.approx(9.0)


def test_sma_shorter_than_period_is_all_nan() -> None:
    assert np.all(np.isnan(sma(np.array([1.0, 2.0]), 5)))


def test_rsi_first_period_entries_undefined() -> None:
    x = np.linspace(100.0, 120.0, 40)
    r = rsi(x, 14)
    assert np.all(np.isnan(r[:14]))
    assert np.all(np.isfinite(r[14:]))


def test_rsi_pins_rs_when_no_losses() -> None:
    r = rsi(np.linspace(100.0, 120.0, 40), 14)
    # RS = 100 -> RSI = 100 - 100/101
    assert r[20] == pytest.approx(100.0 - 100.0 / 101.0)


def test_rsi_falls_on_downtrend_and_is_bounded() -> None:
    x = np.concatenate([np.linspace(100.0, 110.0, 20), np.linspace(110.0, 90.0, 30)])
    r = rsi(x, 14)
    finite = r[np.isfinite(r)]
    assert np.all((finite >= 0.0) & (finite <= 100.0))
    assert r[-1] < 30.0


def test_rsi_wilder_smoothing_known_values() -> None:
    # deltas: +1, -1, +1, -1 ... seeded over 2 deltas, then smoothed
    x = np.array([10.0, 11.0, 10.0, 11.0, 10.0])
    r = rsi(x, 2)
    # i=2: avg_gain=0.5, avg_loss=0.5 -> 50
    assert r[2] == pytest.approx(50.0)
    # i=3: gain 1 -> avg_gain=0.75, avg_loss=0.25 -> RS=3 -> 75
    assert r[3] == pytest.approx(75.0)


def test_rolling_extremes_exclude_current_bar() -> None:
    x = np.array([1.0, 3.0, 2.0, 10.0])
    hi, lo = rolling_extremes(x, 2)
    assert np.isnan(hi[1])
    assert hi[2] == 3.0 and lo[2] == 1.0
    assert hi[3] == 3.0 and lo[3] == 2.0
