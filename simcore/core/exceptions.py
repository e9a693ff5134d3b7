"""simcore.core.exceptions

Errors are part of the interface.

Degenerate statistics are not errors; they return sentinels. Violated
numeric preconditions are.
"""

from __future__ import annotations


class VaSimError(Exception):
    """Base exception for va-sim."""


class ConfigError(VaSimError):
    """Configuration is missing, invalid, or inconsistent."""


class InvalidTradeParamsError(VaSimError, ValueError):
    """Trade inputs violate a numeric precondition (zero entry, zero stop distance)."""


class InsufficientBalanceError(VaSimError):
    """Required margin exceeds the available balance."""
