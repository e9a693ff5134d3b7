from __future__ import annotations

import pytest

from api.main import create_app
from tests.unit._api_test_client import make_client

BODY = {
    "symbol": "xauusd",
    "from_date": "2023-01-01",
    "to_date": "2023-12-31",
    "starting_capital": 100000,
    "strategy": {"entry_condition": "sma_cross", "stop_loss_pct": 2, "take_profit_pct": 4, "position_size_pct": 10},
    "seed": 21,
}


@pytest.mark.anyio
async def test_create_backtest(test_config):
    app = create_app(test_config)

    async with make_client(app) as ac:
        r = await ac.post("/api/v1/backtests", json=BODY)
        assert r.status_code == 201
        data = r.json()
        assert data["symbol"] == "XAUUSD"
        assert data["seed"] == 21
        assert len(data["equity_curve"]) == 215
        assert data["winning_trades"] + data["losing_trades"] == data["total_trades"]
        assert data["unknown_instrument"] is False

        again = await ac.post("/api/v1/backtests", json=BODY)
        assert again.json() == data


@pytest.mark.anyio
async def test_backtest_fills_omitted_fields_from_preset(test_config):
    app = create_app(test_config)

    async with make_client(app) as ac:
        body = {
            "symbol": "SPX",
            "from_date": "2023-01-01",
            "to_date": "2023-12-31",
            "strategy": {"entry_condition": "breakout"},
            "seed": 4,
        }
        r = await ac.post("/api/v1/backtests", json=body)
        assert r.status_code == 201
        assert r.json()["starting_capital"] == pytest.approx(100000.0)


@pytest.mark.anyio
@pytest.mark.parametrize(
    "patch",
    [
        {"to_date": "2022-12-01"},
        {"starting_capital": 10},
        {"strategy": {"entry_condition": "moon_phase"}},
        {"strategy": {"entry_condition": "sma_cross", "stop_loss_pct": 80}},
    ],
)
async def test_backtest_rejects_invalid_request(test_config, patch):
    app = create_app(test_config)

    async with make_client(app) as ac:
        r = await ac.post("/api/v1/backtests", json={**BODY, **patch})
        assert r.status_code == 422
