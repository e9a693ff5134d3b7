from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from simcore.core.exceptions import InsufficientBalanceError, InvalidTradeParamsError, VaSimError

_CORE_CODES: dict[type[VaSimError], tuple[str, int]] = {
    InvalidTradeParamsError: ("trade.invalid_params", 400),
    InsufficientBalanceError: ("trade.insufficient_balance", 400),
}


async def core_error_handler(request: Request, exc: VaSimError) -> JSONResponse:
    code, status = _CORE_CODES.get(type(exc), ("internal.error", 500))
    return JSONResponse(status_code=status, content={"error": {"code": code, "message": str(exc)}})
