from __future__ import annotations

import numpy as np
import pytest

from simcore.backtest.validation import (
    PROFIT_FACTOR_CAP,
    bar_returns,
    compute_metrics,
    max_drawdown_pct,
    profit_factor,
    sharpe,
)


def test_validation_max_drawdown():
    equity = np.array([100.0, 120.0, 90.0, 130.0, 104.0], dtype=np.float64)
    assert max_drawdown_pct(equity) == pytest.approx(25.0)
    assert max_drawdown_pct(np.array([], dtype=np.float64)) == 0.0


def test_bar_returns_first_is_zero():
    r = bar_returns(np.array([100.0, 110.0, 99.0]))
    assert r[0] == 0.0
    assert r[1:] == pytest.approx([0.1, -0.1])


def test_sharpe_zero_variance_is_zero():
    assert sharpe(np.zeros(50)) == 0.0
    assert sharpe(np.array([0.01])) == 0.0


def test_sharpe_annualizes_population_std():
    r = np.array([0.01, -0.01, 0.02, 0.0])
    expected = np.mean(r) / np.std(r) * np.sqrt(252)
    assert sharpe(r) == pytest.approx(expected)


def test_profit_factor_sentinels():
    assert profit_factor(10.0, 0.0) == PROFIT_FACTOR_CAP
    assert profit_factor(0.0, 0.0) == 0.0
    assert profit_factor(10.0, 5.0) == pytest.approx(2.0)


def test_compute_metrics_counts_flat_trade_as_loss():
    m = compute_metrics(
        pnls=np.array([100.0, -50.0, 0.0]),
        equity=np.array([1000.0, 1100.0, 1050.0, 1050.0]),
        starting_capital=1000.0,
    )
    assert (m.total_trades, m.winning_trades, m.losing_trades) == (3, 1, 2)
    assert m.winning_trades + m.losing_trades == m.total_trades
    assert m.win_rate == pytest.approx(33.33)
    assert m.profit_factor == pytest.approx(2.0)
    assert m.avg_win == pytest.approx(100.0)
    assert m.avg_loss == pytest.approx(25.0)
    assert m.total_return == pytest.approx(50.0)
    assert m.total_return_pct == pytest.approx(5.0)
    assert m.max_drawdown == pytest.approx(4.55)


def test_compute_metrics_no_trades():
    m = compute_metrics(pnls=np.array([]), equity=np.full(10, 5000.0), starting_capital=5000.0)
    assert m.total_trades == 0
    assert m.win_rate == 0.0
    assert m.profit_factor == 0.0
    assert m.sharpe_ratio == 0.0
    assert m.max_drawdown == 0.0
    assert (m.avg_win, m.avg_loss) == (0.0, 0.0)


def test_compute_metrics_only_winners_hits_cap():
    m = compute_metrics(pnls=np.array([5.0, 7.0]), equity=np.array([100.0, 105.0, 112.0]), starting_capital=100.0)
    assert m.profit_factor == PROFIT_FACTOR_CAP
    assert m.win_rate == 100.0


def test_sharpe_reads_rounded_curve_when_given():
    equity = np.array([1000.0, 1000.004, 1000.0, 1000.004])
    curve = np.array([1000.0, 1000.0, 1000.0, 1000.0])

    raw = compute_metrics(pnls=np.array([]), equity=equity, starting_capital=1000.0)
    rounded = compute_metrics(pnls=np.array([]), equity=equity, starting_capital=1000.0, curve_equity=curve)

    assert raw.sharpe_ratio != 0.0
    assert rounded.sharpe_ratio == 0.0
    # drawdown still comes from the unrounded path
    assert rounded.max_drawdown == raw.max_drawdown
