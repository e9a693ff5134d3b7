"""simcore.core

Core primitives.

If a module needs to exist, it should probably depend only on this package.
"""

from .config import Config
from .exceptions import ConfigError, InsufficientBalanceError, InvalidTradeParamsError, VaSimError
from .time import as_utc, day_key, parse_dt
from .types import EntryCondition, ExitReason, Side, TradeStatus

__all__ = [
    "Config",
    "ConfigError",
    "EntryCondition",
    "ExitReason",
    "InsufficientBalanceError",
    "InvalidTradeParamsError",
    "Side",
    "TradeStatus",
    "VaSimError",
    "as_utc",
    "day_key",
    "parse_dt",
]
