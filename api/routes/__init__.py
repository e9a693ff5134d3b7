from __future__ import annotations

from fastapi import APIRouter

from api.routes import backtests, config, health, portfolio, quotes, trades


def get_api_router() -> APIRouter:
    router = APIRouter()

    router.include_router(health.router, tags=["health"])
    router.include_router(quotes.router, tags=["quotes"])
    router.include_router(trades.router, tags=["trades"])
    router.include_router(portfolio.router, tags=["portfolio"])
    router.include_router(backtests.router, tags=["backtests"])
    router.include_router(config.router, tags=["config"])

    return router
