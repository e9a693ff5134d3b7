"""simcore.execution.pnl

P&L primitives for paper trades.

``signed_move`` / ``move_pct`` are the single source of sign and percentage
conventions. Live order P&L and the backtest loop both go through them.
"""

from __future__ import annotations

from dataclasses import dataclass

from simcore.core.exceptions import InvalidTradeParamsError
from simcore.core.types import Side
from simcore.market.instruments import contract_size


def signed_move(side: Side | str, entry_price: float, exit_price: float) -> float:
    """Price difference in the trade's favour (positive = profitable)."""

    diff = float(exit_price) - float(entry_price)
    return -diff if Side(side) is Side.SHORT else diff


def move_pct(side: Side | str, entry_price: float, exit_price: float) -> float:
    """Favourable move as a percentage of entry. Unrounded."""

    entry = float(entry_price)
    if entry == 0:
        raise InvalidTradeParamsError("entry_price must be non-zero")
    return signed_move(side, entry, exit_price) / entry * 100.0


@dataclass(frozen=True, slots=True)
class PnL:
    pnl: float
    pnl_pct: float


def calculate_pnl(
    *,
    side: Side | str,
    entry_price: float,
    current_price: float,
    quantity: float,
    symbol: str,
) -> PnL:
    """Currency and percentage P&L of ``quantity`` contracts.

    Works for both realized (exit price) and unrealized (mark price) P&L.
    """

    pct = move_pct(side, entry_price, current_price)
    pnl = signed_move(side, entry_price, current_price) * float(quantity) * contract_size(symbol)
    return PnL(pnl=round(pnl, 2), pnl_pct=round(pct, 4))
