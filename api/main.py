from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import _load_config
from api.errors import core_error_handler
from api.routes import get_api_router
from simcore import __version__
from simcore.core.config import Config
from simcore.core.exceptions import VaSimError
from simcore.core.logging import configure_logging


def create_app(config: Config | None = None) -> FastAPI:
    start = time.monotonic()
    config = config or _load_config()
    configure_logging(config.logging)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.started_at = start
        yield

    openapi_tags = [
        {"name": "health", "description": "Liveness and version metadata."},
        {"name": "quotes", "description": "Mock market quotes."},
        {"name": "trades", "description": "Single-trade economics: P&L, risk/reward, sizing, margin."},
        {"name": "portfolio", "description": "Mark-to-market of paper trades."},
        {"name": "backtests", "description": "Strategy backtests on synthetic price history."},
        {"name": "config", "description": "Runtime configuration inspection."},
    ]

    app = FastAPI(
        title="va-sim API",
        description="Paper-trading economics and backtesting engine",
        version=__version__,
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_exception_handler(VaSimError, core_error_handler)

    # CORS: only enable if origins explicitly configured
    if config.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(get_api_router(), prefix="/api/v1")
    return app


# Module-level app for uvicorn (e.g. `uvicorn api.main:app`).
app = create_app()
