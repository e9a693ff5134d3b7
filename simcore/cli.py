"""simcore.cli

Command line interface entry point for va-sim.

Design constraints:
- argparse-based.
- Lazy imports: do not import numpy/fastapi at parse time.
- Results go to stdout as JSON; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

ENTRY_CONDITIONS = ["sma_cross", "rsi_oversold", "breakout", "mean_revert"]


@dataclass(frozen=True)
class CliContext:
    repo_root: Path


def _repo_root_from_cwd() -> Path:
    return Path.cwd()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="va-sim",
        description="Paper-trading economics and strategy backtests on synthetic prices.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )

    sub = parser.add_subparsers(dest="command")

    p_bt = sub.add_parser("backtest", help="Run a strategy backtest")
    p_bt.add_argument("--symbol", default="XAUUSD")
    p_bt.add_argument("--capital", type=float, default=None, help="Starting capital (default: preset)")
    p_bt.add_argument("--from", dest="from_date", required=True, help="Start date (ISO-8601)")
    p_bt.add_argument("--to", dest="to_date", required=True, help="End date (ISO-8601)")
    p_bt.add_argument("--entry", choices=ENTRY_CONDITIONS, default=None)
    p_bt.add_argument("--stop-loss", type=float, default=None, help="Stop-loss %%")
    p_bt.add_argument("--take-profit", type=float, default=None, help="Take-profit %%")
    p_bt.add_argument("--size", type=float, default=None, help="Position size, %% of capital")
    p_bt.add_argument("--seed", type=int, default=None, help="Seed for a reproducible price path")
    p_bt.add_argument("--summary", action="store_true", help="Omit equity curve and trade log")

    p_quote = sub.add_parser("quote", help="Print a mock market quote")
    p_quote.add_argument("symbol")
    p_quote.add_argument("--seed", type=int, default=None)

    p_pnl = sub.add_parser("pnl", help="P&L of a position at a given price")
    p_pnl.add_argument("--symbol", required=True)
    p_pnl.add_argument("--side", choices=["long", "short"], required=True)
    p_pnl.add_argument("--entry", type=float, required=True)
    p_pnl.add_argument("--price", type=float, required=True)
    p_pnl.add_argument("--quantity", type=float, default=1.0)

    p_risk = sub.add_parser("risk", help="Risk/reward of a planned trade")
    p_risk.add_argument("--side", choices=["long", "short"], required=True)
    p_risk.add_argument("--entry", type=float, required=True)
    p_risk.add_argument("--stop", type=float, default=None)
    p_risk.add_argument("--target", type=float, default=None)

    p_size = sub.add_parser("size", help="Risk-based position size")
    p_size.add_argument("--symbol", required=True)
    p_size.add_argument("--balance", type=float, required=True)
    p_size.add_argument("--risk", type=float, required=True, help="Risk per trade, %% of balance")
    p_size.add_argument("--entry", type=float, required=True)
    p_size.add_argument("--stop", type=float, required=True)

    p_api = sub.add_parser("api", help="Start FastAPI server")
    p_api.add_argument("--host", default=None)
    p_api.add_argument("--port", type=int, default=None)

    return parser


def _print_version() -> None:
    from simcore import __version__

    print(f"va-sim v{__version__}")


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _load_config(ctx: CliContext):
    from simcore.core.config import Config

    return Config.load(ctx.repo_root)


def _cmd_backtest(ctx: CliContext, args: argparse.Namespace) -> int:
    from simcore.backtest import StrategyConfig, run_backtest

    config = _load_config(ctx)
    d = config.strategy

    strategy = StrategyConfig(
        entry_condition=args.entry or d.entry_condition,
        stop_loss_pct=args.stop_loss if args.stop_loss is not None else d.stop_loss_pct,
        take_profit_pct=args.take_profit if args.take_profit is not None else d.take_profit_pct,
        position_size_pct=args.size if args.size is not None else d.position_size_pct,
    )
    result = run_backtest(
        symbol=args.symbol,
        starting_capital=args.capital if args.capital is not None else d.starting_capital,
        from_date=args.from_date,
        to_date=args.to_date,
        strategy=strategy,
        seed=args.seed,
        cfg=config.simulation,
    )

    out = result.to_dict()
    if args.summary:
        out.pop("equity_curve")
        out.pop("trade_log")
    _emit(out)
    return 0


def _cmd_quote(ctx: CliContext, args: argparse.Namespace) -> int:
    import numpy as np

    from simcore.market import quote

    q = quote(args.symbol, rng=np.random.default_rng(args.seed))
    _emit(asdict(q))
    return 0


def _cmd_pnl(ctx: CliContext, args: argparse.Namespace) -> int:
    from simcore.execution import calculate_pnl

    res = calculate_pnl(
        side=args.side,
        entry_price=args.entry,
        current_price=args.price,
        quantity=args.quantity,
        symbol=args.symbol,
    )
    _emit(asdict(res))
    return 0


def _cmd_risk(ctx: CliContext, args: argparse.Namespace) -> int:
    from simcore.execution import calculate_risk_reward

    res = calculate_risk_reward(side=args.side, entry_price=args.entry, stop_loss=args.stop, take_profit=args.target)
    _emit(asdict(res))
    return 0


def _cmd_size(ctx: CliContext, args: argparse.Namespace) -> int:
    from simcore.execution import RiskLimits, calculate_position_size

    config = _load_config(ctx)
    qty = calculate_position_size(
        account_balance=args.balance,
        risk_percent=args.risk,
        entry_price=args.entry,
        stop_loss=args.stop,
        symbol=args.symbol,
        limits=RiskLimits(min_quantity=config.execution.min_quantity, margin_rate=config.execution.margin_rate),
    )
    _emit({"symbol": args.symbol.upper(), "quantity": qty})
    return 0


def _cmd_api(ctx: CliContext, args: argparse.Namespace) -> int:
    config = _load_config(ctx)

    host = args.host or config.api.host
    port = args.port or config.api.port

    import uvicorn

    uvicorn.run("api.main:app", host=host, port=port, reload=False)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        _print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    ctx = CliContext(repo_root=_repo_root_from_cwd())

    from simcore.core.exceptions import VaSimError
    from simcore.core.logging import configure_logging

    try:
        configure_logging(_load_config(ctx).logging)
    except VaSimError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    dispatch: dict[str, Callable[[CliContext, argparse.Namespace], int]] = {
        "backtest": _cmd_backtest,
        "quote": _cmd_quote,
        "pnl": _cmd_pnl,
        "risk": _cmd_risk,
        "size": _cmd_size,
        "api": _cmd_api,
    }

    fn = dispatch.get(str(args.command))
    if fn is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 2

    try:
        return int(fn(ctx, args))
    except (VaSimError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
