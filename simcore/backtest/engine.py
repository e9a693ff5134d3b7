"""simcore.backtest.engine

Backtest entry point.

One run:
- synthesize a price history for the symbol and date range
- the configured entry rule emits signals
- the simulator walks the bars, one position at a time
- validation aggregates trades and equity into metrics

Pure computation. The result is a plain record the caller persists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import numpy as np

from simcore.backtest.data import generate_series
from simcore.backtest.simulator import EquityPoint, SimConfig, SimulatedTrade, simulate
from simcore.backtest.strategies import build_strategy
from simcore.backtest.validation import compute_metrics
from simcore.core.config import SimulationConfig
from simcore.core.types import EntryCondition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrategyConfig:
    entry_condition: EntryCondition
    stop_loss_pct: float
    take_profit_pct: float
    position_size_pct: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "entry_condition", EntryCondition(self.entry_condition))


@dataclass(frozen=True, slots=True)
class BacktestResult:
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
    equity_curve: list[EquityPoint] = field(default_factory=list)
    trade_log: list[SimulatedTrade] = field(default_factory=list)
    unknown_instrument: bool = False
    seed: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready record (enums as strings)."""

        return {
            "total_trades": self.total_trades,
            "winning_trades": self.winning_trades,
            "losing_trades": self.losing_trades,
            "win_rate": self.win_rate,
            "total_return": self.total_return,
            "total_return_pct": self.total_return_pct,
            "max_drawdown": self.max_drawdown,
            "sharpe_ratio": self.sharpe_ratio,
            "profit_factor": self.profit_factor,
            "avg_win": self.avg_win,
            "avg_loss": self.avg_loss,
            "equity_curve": [
                {"date": p.date, "equity": p.equity, "drawdown_pct": p.drawdown_pct} for p in self.equity_curve
            ],
            "trade_log": [
                {
                    "entry_date": t.entry_date,
                    "exit_date": t.exit_date,
                    "side": str(t.side),
                    "entry_price": t.entry_price,
                    "exit_price": t.exit_price,
                    "pnl": t.pnl,
                    "pnl_pct": t.pnl_pct,
                    "exit_reason": str(t.exit_reason),
                }
                for t in self.trade_log
            ],
            "unknown_instrument": self.unknown_instrument,
            "seed": self.seed,
        }


def run_backtest(
    *,
    symbol: str,
    starting_capital: float,
    from_date: datetime | date | str,
    to_date: datetime | date | str,
    strategy: StrategyConfig,
    seed: int | None = None,
    cfg: SimulationConfig | None = None,
) -> BacktestResult:
    """Replay a synthetic history of ``symbol`` through ``strategy``.

    Identical arguments with the same ``seed`` give identical results; with
    ``seed=None`` every call draws a fresh price path.
    """

    cfg = cfg or SimulationConfig()
    rng = np.random.default_rng(seed)

    series = generate_series(symbol, from_date=from_date, to_date=to_date, bar_count=cfg.bar_count, rng=rng)
    rule = build_strategy(strategy.entry_condition, cfg)
    signal = rule.generate(close=series.close).signal

    sim = simulate(
        series=series,
        signal=signal,
        starting_capital=starting_capital,
        cfg=SimConfig(
            stop_loss_pct=strategy.stop_loss_pct,
            take_profit_pct=strategy.take_profit_pct,
            position_size_pct=strategy.position_size_pct,
            start_index=cfg.start_index,
            warmup=cfg.warmup,
        ),
    )
    m = compute_metrics(
        pnls=sim.pnls,
        equity=sim.equity,
        starting_capital=starting_capital,
        periods_per_year=cfg.periods_per_year,
        curve_equity=np.array([p.equity for p in sim.equity_curve], dtype=np.float64),
    )

    logger.info(
        "backtest_completed",
        extra={
            "symbol": series.instrument.symbol,
            "entry_condition": str(strategy.entry_condition),
            "strategy": rule.name,
            "trades": m.total_trades,
            "total_return_pct": m.total_return_pct,
            "seed": seed,
        },
    )

    return BacktestResult(
        total_trades=m.total_trades,
        winning_trades=m.winning_trades,
        losing_trades=m.losing_trades,
        win_rate=m.win_rate,
        total_return=m.total_return,
        total_return_pct=m.total_return_pct,
        max_drawdown=m.max_drawdown,
        sharpe_ratio=m.sharpe_ratio,
        profit_factor=m.profit_factor,
        avg_win=m.avg_win,
        avg_loss=m.avg_loss,
        equity_curve=sim.equity_curve,
        trade_log=sim.trades,
        unknown_instrument=not series.instrument.known,
        seed=seed,
    )
