"""simcore.backtest.simulator

Single-asset, single-position trade simulator.

Lifecycle per run:

    Flat --entry signal--> OpenPosition --take_profit | stop_loss | end_of_series--> Flat

The state is an explicit union, so "at most one open position" holds by
construction. Rules:
- entries only while flat, at or after the warm-up bar, and never on the final bar
- stop/target levels fixed at entry; checked against each bar's close
- take-profit wins when both levels are breached on the same bar
- the final bar force-closes at the market close
- each trade risks ``position_size_pct`` of current capital; P&L compounds immediately
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np

from simcore.backtest.data import PriceSeries
from simcore.core.time import day_key
from simcore.core.types import ExitReason, Side
from simcore.execution.pnl import move_pct


@dataclass(frozen=True, slots=True)
class SimConfig:
    stop_loss_pct: float = 2.0
    take_profit_pct: float = 4.0
    position_size_pct: float = 10.0
    start_index: int = 35
    warmup: int = 30


@dataclass(frozen=True, slots=True)
class Flat:
    pass


FLAT: Final[Flat] = Flat()


@dataclass(frozen=True, slots=True)
class OpenPosition:
    side: Side
    entry_price: float
    entry_date: str
    stop_price: float
    target_price: float

    @classmethod
    def open(cls, *, side: Side, entry_price: float, entry_date: str, cfg: SimConfig) -> OpenPosition:
        sl = float(cfg.stop_loss_pct) / 100.0
        tp = float(cfg.take_profit_pct) / 100.0
        if side is Side.LONG:
            stop, target = entry_price * (1.0 - sl), entry_price * (1.0 + tp)
        else:
            stop, target = entry_price * (1.0 + sl), entry_price * (1.0 - tp)
        return cls(side=side, entry_price=entry_price, entry_date=entry_date, stop_price=stop, target_price=target)

    def exit_on(self, close: float, *, final: bool) -> tuple[float, ExitReason] | None:
        """Exit price and reason if this bar closes the position, else None."""

        if self.side is Side.LONG:
            hit_sl = close <= self.stop_price
            hit_tp = close >= self.target_price
        else:
            hit_sl = close >= self.stop_price
            hit_tp = close <= self.target_price

        if hit_tp:
            return self.target_price, ExitReason.TAKE_PROFIT
        if hit_sl:
            return self.stop_price, ExitReason.STOP_LOSS
        if final:
            return close, ExitReason.END_OF_SERIES
        return None


PositionState = Flat | OpenPosition


@dataclass(frozen=True, slots=True)
class SimulatedTrade:
    entry_date: str
    exit_date: str
    side: Side
    entry_price: float
    exit_price: float
    pnl: float
    pnl_pct: float
    exit_reason: ExitReason


@dataclass(frozen=True, slots=True)
class EquityPoint:
    date: str
    equity: float
    drawdown_pct: float


@dataclass(frozen=True, slots=True)
class SimResult:
    trades: list[SimulatedTrade]
    equity_curve: list[EquityPoint]
    equity: np.ndarray  # (T - start_index,) unrounded running capital
    pnls: np.ndarray  # (n_trades,) unrounded realized P&L
    final_capital: float


def simulate(
    *,
    series: PriceSeries,
    signal: np.ndarray,
    starting_capital: float,
    cfg: SimConfig | None = None,
) -> SimResult:
    cfg = cfg or SimConfig()

    close = series.close.astype(np.float64)
    if signal.ndim != 1 or close.shape[0] != signal.shape[0]:
        raise ValueError("close and signal must be 1D arrays of same length")

    t_len = close.shape[0]
    last = t_len - 1
    size_frac = float(cfg.position_size_pct) / 100.0

    capital = float(starting_capital)
    peak = capital
    state: PositionState = FLAT

    trades: list[SimulatedTrade] = []
    pnls: list[float] = []
    curve: list[EquityPoint] = []
    equity: list[float] = []

    for i in range(int(cfg.start_index), t_len):
        price = float(close[i])
        day = day_key(series.timestamps[i])

        if isinstance(state, OpenPosition):
            hit = state.exit_on(price, final=(i == last))
            if hit is not None:
                exit_price, reason = hit
                pct = move_pct(state.side, state.entry_price, exit_price)
                pnl = capital * size_frac * (pct / 100.0)
                capital += pnl

                pnls.append(pnl)
                trades.append(
                    SimulatedTrade(
                        entry_date=state.entry_date,
                        exit_date=day,
                        side=state.side,
                        entry_price=state.entry_price,
                        exit_price=exit_price,
                        pnl=round(pnl, 2),
                        pnl_pct=round(pct, 4),
                        exit_reason=reason,
                    )
                )
                state = FLAT

        if isinstance(state, Flat) and i >= int(cfg.warmup) and i < last:
            s = float(signal[i])
            if s > 0:
                state = OpenPosition.open(side=Side.LONG, entry_price=price, entry_date=day, cfg=cfg)
            elif s < 0:
                state = OpenPosition.open(side=Side.SHORT, entry_price=price, entry_date=day, cfg=cfg)

        peak = max(peak, capital)
        dd = (peak - capital) / peak * 100.0 if peak > 0 else 0.0
        equity.append(capital)
        curve.append(EquityPoint(date=day, equity=round(capital, 2), drawdown_pct=round(dd, 2)))

    return SimResult(
        trades=trades,
        equity_curve=curve,
        equity=np.array(equity, dtype=np.float64),
        pnls=np.array(pnls, dtype=np.float64),
        final_capital=capital,
    )
