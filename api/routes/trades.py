from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_config
from api.schemas.common import ErrorResponse
from api.schemas.trades import (
    MarginCheckRequest,
    MarginCheckResponse,
    PnLRequest,
    PnLResponse,
    PositionSizeRequest,
    PositionSizeResponse,
    RiskRewardRequest,
    RiskRewardResponse,
)
from simcore.core.config import Config
from simcore.execution import (
    RiskLimits,
    calculate_pnl,
    calculate_position_size,
    calculate_risk_reward,
    check_margin,
)
from simcore.market import get_market_price

router = APIRouter(prefix="/trades")


def _limits(config: Config) -> RiskLimits:
    return RiskLimits(min_quantity=config.execution.min_quantity, margin_rate=config.execution.margin_rate)


@router.post("/pnl", response_model=PnLResponse)
def pnl(req: PnLRequest) -> PnLResponse:
    res = calculate_pnl(
        side=req.side,
        entry_price=req.entry_price,
        current_price=req.current_price,
        quantity=req.quantity,
        symbol=req.symbol,
    )
    return PnLResponse(pnl=res.pnl, pnl_pct=res.pnl_pct)


@router.post("/risk-reward", response_model=RiskRewardResponse)
def risk_reward(req: RiskRewardRequest) -> RiskRewardResponse:
    res = calculate_risk_reward(
        side=req.side, entry_price=req.entry_price, stop_loss=req.stop_loss, take_profit=req.take_profit
    )
    return RiskRewardResponse(risk_pct=res.risk_pct, reward_pct=res.reward_pct, rr_ratio=res.rr_ratio)


@router.post("/position-size", response_model=PositionSizeResponse, responses={400: {"model": ErrorResponse}})
def position_size(req: PositionSizeRequest, config: Config = Depends(get_config)) -> PositionSizeResponse:
    qty = calculate_position_size(
        account_balance=req.account_balance,
        risk_percent=req.risk_percent,
        entry_price=req.entry_price,
        stop_loss=req.stop_loss,
        symbol=req.symbol,
        limits=_limits(config),
    )
    return PositionSizeResponse(
        symbol=req.symbol.upper(),
        quantity=qty,
        risk_amount=round(req.account_balance * req.risk_percent / 100.0, 2),
    )


@router.post("/margin-check", response_model=MarginCheckResponse, responses={400: {"model": ErrorResponse}})
def margin_check(req: MarginCheckRequest, config: Config = Depends(get_config)) -> MarginCheckResponse:
    price = req.price if req.price is not None else get_market_price(req.symbol)
    margin = check_margin(balance=req.balance, quantity=req.quantity, price=price, limits=_limits(config))
    return MarginCheckResponse(
        symbol=req.symbol.upper(), price=price, required_margin=round(margin, 2), balance=req.balance
    )
