from __future__ import annotations

from fastapi import APIRouter

from api.schemas.portfolio import MarkedTradeOut, PortfolioMarkRequest, PortfolioMarkResponse
from simcore.core.types import Side, TradeStatus
from simcore.execution import TradeRecord, mark_to_market

router = APIRouter(prefix="/portfolio")


@router.post("/mark", response_model=PortfolioMarkResponse)
def mark(req: PortfolioMarkRequest) -> PortfolioMarkResponse:
    records = [
        TradeRecord(
            symbol=t.symbol,
            side=Side(t.side),
            entry_price=t.entry_price,
            quantity=t.quantity,
            status=TradeStatus(t.status),
            pnl=t.pnl,
            pnl_pct=t.pnl_pct,
        )
        for t in req.trades
    ]
    res = mark_to_market(records, balance=req.balance, prices=req.prices)
    return PortfolioMarkResponse(
        trades=[
            MarkedTradeOut(
                symbol=m.trade.symbol.upper(),
                side=str(m.trade.side),
                status=str(m.trade.status),
                entry_price=m.trade.entry_price,
                quantity=m.trade.quantity,
                current_price=m.current_price,
                live_pnl=m.live_pnl,
                live_pnl_pct=m.live_pnl_pct,
            )
            for m in res.trades
        ],
        unrealized_pnl=res.unrealized_pnl,
        total_equity=res.total_equity,
    )
