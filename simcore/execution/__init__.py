"""simcore.execution

Paper-trade economics: P&L, risk/reward, sizing, margin, portfolio marks.
"""

from simcore.execution.pnl import PnL, calculate_pnl, move_pct, signed_move
from simcore.execution.portfolio import (
    MarkedTrade,
    PortfolioMark,
    PortfolioStats,
    TradeRecord,
    apply_close,
    mark_to_market,
    recalc_portfolio_stats,
    record_open,
)
from simcore.execution.position_sizer import RiskLimits, calculate_position_size, check_margin, required_margin
from simcore.execution.risk import RiskReward, calculate_risk_reward

__all__ = [
    "MarkedTrade",
    "PnL",
    "PortfolioMark",
    "PortfolioStats",
    "RiskLimits",
    "RiskReward",
    "TradeRecord",
    "apply_close",
    "calculate_pnl",
    "calculate_position_size",
    "calculate_risk_reward",
    "check_margin",
    "mark_to_market",
    "move_pct",
    "recalc_portfolio_stats",
    "record_open",
    "required_margin",
    "signed_move",
]
