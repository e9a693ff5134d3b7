from __future__ import annotations

import pytest

from simcore.core.exceptions import InsufficientBalanceError, InvalidTradeParamsError
from simcore.execution.position_sizer import RiskLimits, calculate_position_size, check_margin, required_margin


def test_gold_sizing_example() -> None:
    qty = calculate_position_size(
        account_balance=100_000, risk_percent=2, entry_price=2600, stop_loss=2548, symbol="XAUUSD"
    )
    # 2000 / (52 * 100)
    assert qty == 0.3846


def test_floor_is_enforced() -> None:
    qty = calculate_position_size(account_balance=1000, risk_percent=0.1, entry_price=97_400, stop_loss=90_000, symbol="BTCUSD")
    assert qty == 0.01

    custom = calculate_position_size(
        account_balance=1000,
        risk_percent=0.1,
        entry_price=97_400,
        stop_loss=90_000,
        symbol="BTCUSD",
        limits=RiskLimits(min_quantity=0.5),
    )
    assert custom == 0.5


def test_size_decreases_with_risk_percent() -> None:
    sizes = [
        calculate_position_size(account_balance=50_000, risk_percent=r, entry_price=3320, stop_loss=3200, symbol="ETHUSD")
        for r in (5.0, 2.0, 1.0, 0.5)
    ]
    assert sizes == sorted(sizes, reverse=True)
    assert all(s >= 0.01 for s in sizes)


def test_zero_stop_distance_is_rejected() -> None:
    with pytest.raises(InvalidTradeParamsError):
        calculate_position_size(account_balance=10_000, risk_percent=1, entry_price=100, stop_loss=100, symbol="SPX")


def test_margin_check() -> None:
    assert required_margin(quantity=2, price=100) == pytest.approx(20.0)
    assert check_margin(balance=20.0, quantity=2, price=100) == pytest.approx(20.0)
    with pytest.raises(InsufficientBalanceError):
        check_margin(balance=19.99, quantity=2, price=100)
