"""simcore.core.types

Shared enums for hot-path objects.

Pydantic models own IO boundaries; enums and dataclasses keep the core lean.
"""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    LONG = "long"
    SHORT = "short"


class EntryCondition(StrEnum):
    SMA_CROSS = "sma_cross"
    RSI_OVERSOLD = "rsi_oversold"
    BREAKOUT = "breakout"
    MEAN_REVERT = "mean_revert"


class ExitReason(StrEnum):
    TAKE_PROFIT = "take_profit"
    STOP_LOSS = "stop_loss"
    END_OF_SERIES = "end_of_series"


class TradeStatus(StrEnum):
    OPEN = "open"
    CLOSED = "closed"
