"""simcore.execution.portfolio

Portfolio-level bookkeeping for paper accounts.

Pure functions over trade records: callers own persistence. Open trades are
marked through ``calculate_pnl`` so live P&L uses the same contract-size and
sign conventions as realized P&L.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

import numpy as np

from simcore.core.types import Side, TradeStatus
from simcore.execution.pnl import calculate_pnl
from simcore.market.instruments import get_market_price


@dataclass(frozen=True, slots=True)
class TradeRecord:
    """A live (paper) trade as the order-entry side stores it."""

    symbol: str
    side: Side
    entry_price: float
    quantity: float
    status: TradeStatus = TradeStatus.OPEN
    pnl: float | None = None  # booked on close
    pnl_pct: float | None = None


@dataclass(frozen=True, slots=True)
class MarkedTrade:
    trade: TradeRecord
    current_price: float
    live_pnl: float
    live_pnl_pct: float


@dataclass(frozen=True, slots=True)
class PortfolioMark:
    trades: list[MarkedTrade]
    unrealized_pnl: float
    total_equity: float


@dataclass(frozen=True, slots=True)
class PortfolioStats:
    starting_balance: float
    current_balance: float
    total_pnl: float
    total_pnl_pct: float
    total_trades: int
    winning_trades: int
    losing_trades: int


def mark_to_market(
    trades: Iterable[TradeRecord],
    *,
    balance: float,
    prices: Mapping[str, float] | None = None,
    rng: np.random.Generator | None = None,
) -> PortfolioMark:
    """Mark every trade; symbols missing from ``prices`` get a mock quote."""

    prices = {str(k).upper(): float(v) for k, v in (prices or {}).items()}
    marked: list[MarkedTrade] = []
    unrealized = 0.0

    for t in trades:
        sym = t.symbol.upper()
        px = prices.get(sym)
        if px is None:
            px = get_market_price(sym, rng=rng)
            prices[sym] = px

        if t.status == TradeStatus.OPEN:
            live = calculate_pnl(
                side=t.side, entry_price=t.entry_price, current_price=px, quantity=t.quantity, symbol=sym
            )
            live_pnl, live_pct = live.pnl, live.pnl_pct
            unrealized += live_pnl
        else:
            live_pnl = float(t.pnl or 0.0)
            live_pct = float(t.pnl_pct or 0.0)

        marked.append(MarkedTrade(trade=t, current_price=px, live_pnl=live_pnl, live_pnl_pct=live_pct))

    unrealized = round(unrealized, 2)
    return PortfolioMark(trades=marked, unrealized_pnl=unrealized, total_equity=round(float(balance) + unrealized, 2))


def recalc_portfolio_stats(
    *,
    current_balance: float,
    starting_balance: float,
    total_trades: int,
    winning_trades: int,
    losing_trades: int,
) -> PortfolioStats:
    total_pnl = float(current_balance) - float(starting_balance)
    total_pnl_pct = total_pnl / float(starting_balance) * 100.0 if starting_balance else 0.0
    return PortfolioStats(
        starting_balance=float(starting_balance),
        current_balance=float(current_balance),
        total_pnl=round(total_pnl, 2),
        total_pnl_pct=round(total_pnl_pct, 4),
        total_trades=int(total_trades),
        winning_trades=int(winning_trades),
        losing_trades=int(losing_trades),
    )


def record_open(stats: PortfolioStats) -> PortfolioStats:
    """Count a newly opened trade. Balance moves only on close."""

    return replace(stats, total_trades=stats.total_trades + 1)


def apply_close(stats: PortfolioStats, *, pnl: float) -> PortfolioStats:
    """Book a closed trade's realized ``pnl``. A trade with pnl <= 0 counts as a loss."""

    won = float(pnl) > 0
    return recalc_portfolio_stats(
        current_balance=stats.current_balance + float(pnl),
        starting_balance=stats.starting_balance,
        total_trades=stats.total_trades,
        winning_trades=stats.winning_trades + (1 if won else 0),
        losing_trades=stats.losing_trades + (0 if won else 1),
    )
