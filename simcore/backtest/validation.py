"""simcore.backtest.validation

Performance metrics over a simulated run.

Degenerate runs (no trades, flat equity) return sentinels, never raise:
- profit factor 999 when there is profit but no loss, 0 when neither
- Sharpe 0 when returns have zero variance
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

PROFIT_FACTOR_CAP = 999.0


@dataclass(frozen=True, slots=True)
class Metrics:
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    total_return: float
    total_return_pct: float
    max_drawdown: float
    sharpe_ratio: float
    profit_factor: float
    avg_win: float
    avg_loss: float


def max_drawdown_pct(equity: np.ndarray) -> float:
    """Largest retracement from the running peak, in percent (>= 0)."""

    if equity.size == 0:
        return 0.0
    peak = np.maximum.accumulate(equity)
    dd = np.where(peak > 0, (peak - equity) / peak * 100.0, 0.0)
    return float(dd.max())


def bar_returns(equity: np.ndarray) -> np.ndarray:
    """Bar-to-bar simple returns; the first bar has none and counts as 0."""

    ret = np.zeros(equity.shape[0], dtype=np.float64)
    if equity.size > 1:
        ret[1:] = (equity[1:] / equity[:-1]) - 1.0
    return ret


def sharpe(returns: np.ndarray, *, periods_per_year: int = 252) -> float:
    r = returns.astype(np.float64)
    if r.size < 2:
        return 0.0
    mu = float(np.mean(r))
    sd = float(np.std(r))
    if sd == 0.0:
        return 0.0
    return (mu / sd) * float(np.sqrt(periods_per_year))


def profit_factor(gross_profit: float, gross_loss: float) -> float:
    if gross_loss > 0:
        return gross_profit / gross_loss
    return PROFIT_FACTOR_CAP if gross_profit > 0 else 0.0


def compute_metrics(
    *,
    pnls: np.ndarray,
    equity: np.ndarray,
    starting_capital: float,
    periods_per_year: int = 252,
    curve_equity: np.ndarray | None = None,
) -> Metrics:
    """Aggregate a run.

    Drawdown reads the unrounded ``equity``; Sharpe reads ``curve_equity`` (the
    2-decimal equity-curve values) when given, else ``equity``.
    """

    p = pnls.astype(np.float64)
    wins_mask = p > 0

    wins = int(np.sum(wins_mask))
    losses = int(p.size - wins)  # a flat trade counts as a loss
    total = wins + losses

    gross_profit = float(np.sum(p[wins_mask]))
    gross_loss = float(np.sum(np.abs(p[~wins_mask])))

    sharpe_equity = equity if curve_equity is None else curve_equity
    final = float(equity[-1]) if equity.size else float(starting_capital)
    total_return = final - float(starting_capital)
    total_return_pct = total_return / float(starting_capital) * 100.0 if starting_capital else 0.0

    return Metrics(
        total_trades=total,
        winning_trades=wins,
        losing_trades=losses,
        win_rate=round(wins / total * 100.0, 2) if total else 0.0,
        total_return=round(total_return, 2),
        total_return_pct=round(total_return_pct, 4),
        max_drawdown=round(max_drawdown_pct(equity), 2),
        sharpe_ratio=round(sharpe(bar_returns(sharpe_equity), periods_per_year=periods_per_year), 4),
        profit_factor=round(profit_factor(gross_profit, gross_loss), 4),
        avg_win=round(gross_profit / wins, 2) if wins else 0.0,
        avg_loss=round(gross_loss / losses, 2) if losses else 0.0,
    )
