from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TradeIn(BaseModel):
    symbol: str
    side: Literal["long", "short"]
    entry_price: float = Field(gt=0)
    quantity: float = Field(gt=0)
    status: Literal["open", "closed"] = "open"
    pnl: float | None = None
    pnl_pct: float | None = None


class PortfolioMarkRequest(BaseModel):
    balance: float
    trades: list[TradeIn] = []
    prices: dict[str, float] = {}


class MarkedTradeOut(BaseModel):
    symbol: str
    side: str
    status: str
    entry_price: float
    quantity: float
    current_price: float
    live_pnl: float
    live_pnl_pct: float


class PortfolioMarkResponse(BaseModel):
    trades: list[MarkedTradeOut]
    unrealized_pnl: float
    total_equity: float
