"""simcore.execution.position_sizer

Position sizing and margin primitives.

Fixed-fractional risk sizing: lose at most ``risk_percent`` of the account if
the stop is hit. Venue specifics stay out of this module; instrument
metadata supplies the contract multiplier.
"""

from __future__ import annotations

from dataclasses import dataclass

from simcore.core.exceptions import InsufficientBalanceError, InvalidTradeParamsError
from simcore.market.instruments import contract_size


@dataclass(frozen=True, slots=True)
class RiskLimits:
    min_quantity: float = 0.01
    margin_rate: float = 0.10  # simplified: 10% of notional


def calculate_position_size(
    *,
    account_balance: float,
    risk_percent: float,
    entry_price: float,
    stop_loss: float,
    symbol: str,
    limits: RiskLimits | None = None,
) -> float:
    """Quantity whose stop-out loses ``risk_percent`` of ``account_balance``.

    Floored at ``limits.min_quantity``, rounded to 4 decimals.

    Raises:
        InvalidTradeParamsError: if ``stop_loss == entry_price``.
    """

    limits = limits or RiskLimits()

    risk_amount = float(account_balance) * (float(risk_percent) / 100.0)
    price_diff = abs(float(entry_price) - float(stop_loss))
    if price_diff == 0:
        raise InvalidTradeParamsError("stop_loss must differ from entry_price")

    quantity = risk_amount / (price_diff * contract_size(symbol))
    return round(max(float(limits.min_quantity), quantity), 4)


def required_margin(*, quantity: float, price: float, limits: RiskLimits | None = None) -> float:
    limits = limits or RiskLimits()
    return float(quantity) * float(price) * float(limits.margin_rate)


def check_margin(*, balance: float, quantity: float, price: float, limits: RiskLimits | None = None) -> float:
    """Return the margin an order needs, or raise if the balance cannot cover it."""

    margin = required_margin(quantity=quantity, price=price, limits=limits)
    if margin > float(balance):
        raise InsufficientBalanceError(
            f"Insufficient balance for this position size: margin {margin:.2f} > balance {float(balance):.2f}"
        )
    return margin
