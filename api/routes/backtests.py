from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_config
from api.schemas.backtests import BacktestRequest, BacktestResponse
from simcore.backtest import StrategyConfig, run_backtest
from simcore.core.config import Config

router = APIRouter(prefix="/backtests")


@router.post("", response_model=BacktestResponse, status_code=201)
def create_backtest(req: BacktestRequest, config: Config = Depends(get_config)) -> BacktestResponse:
    """Run a backtest synchronously and return the full result.

    Omitted strategy fields fall back to the active preset.
    """

    d = config.strategy
    s = req.strategy
    strategy = StrategyConfig(
        entry_condition=s.entry_condition,
        stop_loss_pct=s.stop_loss_pct if s.stop_loss_pct is not None else d.stop_loss_pct,
        take_profit_pct=s.take_profit_pct if s.take_profit_pct is not None else d.take_profit_pct,
        position_size_pct=s.position_size_pct if s.position_size_pct is not None else d.position_size_pct,
    )
    capital = req.starting_capital if req.starting_capital is not None else d.starting_capital

    result = run_backtest(
        symbol=req.symbol,
        starting_capital=capital,
        from_date=req.from_date,
        to_date=req.to_date,
        strategy=strategy,
        seed=req.seed,
        cfg=config.simulation,
    )
    return BacktestResponse(symbol=req.symbol.upper(), starting_capital=capital, **result.to_dict())
