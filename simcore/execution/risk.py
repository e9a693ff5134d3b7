"""simcore.execution.risk

Risk/reward of a planned trade.

Distances are absolute percentages of entry, so a long and a short with the
same stop and target distances score the same.
"""

from __future__ import annotations

from dataclasses import dataclass

from simcore.core.exceptions import InvalidTradeParamsError
from simcore.core.types import Side


@dataclass(frozen=True, slots=True)
class RiskReward:
    risk_pct: float | None
    reward_pct: float | None
    rr_ratio: float | None


def calculate_risk_reward(
    *,
    side: Side | str,
    entry_price: float,
    stop_loss: float | None = None,
    take_profit: float | None = None,
) -> RiskReward:
    _ = Side(side)  # validated only; distances are direction-agnostic
    entry = float(entry_price)
    if entry == 0:
        raise InvalidTradeParamsError("entry_price must be non-zero")

    risk_pct = abs(entry - float(stop_loss)) / entry * 100.0 if stop_loss is not None else None
    reward_pct = abs(float(take_profit) - entry) / entry * 100.0 if take_profit is not None else None

    rr_ratio = None
    if risk_pct is not None and reward_pct is not None and risk_pct > 0:
        rr_ratio = reward_pct / risk_pct

    return RiskReward(risk_pct=risk_pct, reward_pct=reward_pct, rr_ratio=rr_ratio)
