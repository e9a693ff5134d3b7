from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class StrategyIn(BaseModel):
    entry_condition: Literal["sma_cross", "rsi_oversold", "breakout", "mean_revert"]
    stop_loss_pct: float | None = Field(default=None, ge=0.1, le=50)
    take_profit_pct: float | None = Field(default=None, ge=0.1, le=100)
    position_size_pct: float | None = Field(default=None, ge=1, le=100)


class BacktestRequest(BaseModel):
    symbol: str
    from_date: date
    to_date: date
    starting_capital: float | None = Field(default=None, ge=1000)
    strategy: StrategyIn
    seed: int | None = None

    @model_validator(mode="after")
    def dates_ordered(self) -> BacktestRequest:
        if self.to_date <= self.from_date:
            raise ValueError("to_date must be after from_date")
        return self


class EquityPointOut(BaseModel):
    date: str
    equity: float
    drawdown_pct: float


class TradeOut(BaseModel):
    entry_date: str
    exit_date: str
    side: str
    entry_price: float
    exit_price: float
    pnl: float
    pnl_pct: float
    exit_reason: str


class BacktestResponse(BaseModel):
    symbol: str
    starting_capital: float
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
    equity_curve: list[EquityPointOut]
    trade_log: list[TradeOut]
    unknown_instrument: bool
    seed: int | None = None
