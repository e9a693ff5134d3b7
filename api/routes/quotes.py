from __future__ import annotations

from fastapi import APIRouter, Path

from api.schemas.trades import QuoteResponse
from simcore.market import quote

router = APIRouter(prefix="/quotes")


@router.get("/{symbol}", response_model=QuoteResponse)
def get_quote(symbol: str = Path(..., description="Instrument symbol, e.g. XAUUSD")) -> QuoteResponse:
    q = quote(symbol)
    return QuoteResponse(symbol=q.symbol, price=q.price, unknown_instrument=q.unknown_instrument)
