from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class QuoteResponse(BaseModel):
    symbol: str
    price: float
    unknown_instrument: bool


class PnLRequest(BaseModel):
    symbol: str
    side: Literal["long", "short"]
    entry_price: float = Field(gt=0)
    current_price: float = Field(gt=0)
    quantity: float = Field(gt=0)


class PnLResponse(BaseModel):
    pnl: float
    pnl_pct: float


class RiskRewardRequest(BaseModel):
    side: Literal["long", "short"]
    entry_price: float = Field(gt=0)
    stop_loss: float | None = Field(default=None, gt=0)
    take_profit: float | None = Field(default=None, gt=0)


class RiskRewardResponse(BaseModel):
    risk_pct: float | None = None
    reward_pct: float | None = None
    rr_ratio: float | None = None


class PositionSizeRequest(BaseModel):
    symbol: str
    account_balance: float = Field(gt=0)
    risk_percent: float = Field(gt=0, le=100)
    entry_price: float = Field(gt=0)
    stop_loss: float = Field(gt=0)


class PositionSizeResponse(BaseModel):
    symbol: str
    quantity: float
    risk_amount: float


class MarginCheckRequest(BaseModel):
    symbol: str
    balance: float = Field(ge=0)
    quantity: float = Field(gt=0)
    price: float | None = Field(default=None, gt=0, description="Execution price; mock quote when omitted")


class MarginCheckResponse(BaseModel):
    symbol: str
    price: float
    required_margin: float
    balance: float
