from api.schemas.backtests import BacktestRequest, BacktestResponse
from api.schemas.common import ErrorResponse
from api.schemas.portfolio import PortfolioMarkRequest, PortfolioMarkResponse
from api.schemas.trades import (
    MarginCheckRequest,
    MarginCheckResponse,
    PnLRequest,
    PnLResponse,
    PositionSizeRequest,
    PositionSizeResponse,
    QuoteResponse,
    RiskRewardRequest,
    RiskRewardResponse,
)

__all__ = [
    "BacktestRequest",
    "BacktestResponse",
    "ErrorResponse",
    "MarginCheckRequest",
    "MarginCheckResponse",
    "PnLRequest",
    "PnLResponse",
    "PortfolioMarkRequest",
    "PortfolioMarkResponse",
    "PositionSizeRequest",
    "PositionSizeResponse",
    "QuoteResponse",
    "RiskRewardRequest",
    "RiskRewardResponse",
]
