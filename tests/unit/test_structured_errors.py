from __future__ import annotations

import pytest

from api.main import create_app
from simcore.core.exceptions import ConfigError
from tests.unit._api_test_client import make_client


@pytest.mark.anyio
async def test_core_error_maps_to_json_envelope(test_config):
    app = create_app(test_config)

    async with make_client(app) as ac:
        r = await ac.post(
            "/api/v1/trades/pnl",
            json={"symbol": "SPX", "side": "long", "entry_price": 100, "current_price": 101, "quantity": 1},
        )
        assert r.status_code == 200

        r = await ac.post(
            "/api/v1/trades/position-size",
            json={"symbol": "SPX", "account_balance": 1000, "risk_percent": 1, "entry_price": 10, "stop_loss": 10},
        )
        assert r.status_code == 400
        assert r.json() == {
            "error": {"code": "trade.invalid_params", "message": "stop_loss must differ from entry_price"}
        }


@pytest.mark.anyio
async def test_unmapped_core_error_is_internal(test_config):
    app = create_app(test_config)

    @app.get("/api/v1/_test/core")
    def _core() -> None:
        raise ConfigError("bad config")

    async with make_client(app) as ac:
        r = await ac.get("/api/v1/_test/core")
        assert r.status_code == 500
        assert r.json() == {"error": {"code": "internal.error", "message": "bad config"}}
