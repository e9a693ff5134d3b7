"""simcore.market.instruments

Instrument metadata and mock quotes.

Every symbol resolves. Unknown symbols get fallback metadata, flagged
``known=False`` and logged, so a typo shows up instead of silently pricing
at 1000.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_BASE_PRICE: Final[float] = 1000.0
DEFAULT_VOLATILITY: Final[float] = 0.005
DEFAULT_CONTRACT_SIZE: Final[float] = 1.0


@dataclass(frozen=True, slots=True)
class Instrument:
    """Static metadata for one symbol.

    - ``base_price``: reference price quotes jitter around
    - ``volatility``: fractional noise/drift scale
    - ``contract_size``: converts price difference x quantity into currency
    """

    symbol: str
    base_price: float
    volatility: float
    contract_size: float
    known: bool = True


INSTRUMENTS: Final[dict[str, Instrument]] = {
    i.symbol: i
    for i in (
        Instrument("XAUUSD", 2638.50, 0.003, 100.0),  # 100 troy oz per standard lot
        Instrument("XAGUSD", 30.42, 0.008, 5000.0),
        Instrument("BTCUSD", 97400.00, 0.025, 1.0),
        Instrument("ETHUSD", 3320.00, 0.030, 1.0),
        Instrument("SPX", 5860.00, 0.004, 1.0),
        Instrument("EURUSD", 1.0820, 0.002, 100_000.0),
        Instrument("GBPUSD", 1.2680, 0.003, 100_000.0),
        Instrument("USDJPY", 149.80, 0.002, 100_000.0),
    )
}


def resolve_instrument(symbol: str) -> Instrument:
    sym = str(symbol).strip().upper()
    inst = INSTRUMENTS.get(sym)
    if inst is not None:
        return inst

    logger.warning("unknown_instrument", extra={"symbol": sym})
    return Instrument(
        symbol=sym,
        base_price=DEFAULT_BASE_PRICE,
        volatility=DEFAULT_VOLATILITY,
        contract_size=DEFAULT_CONTRACT_SIZE,
        known=False,
    )


def contract_size(symbol: str) -> float:
    return resolve_instrument(symbol).contract_size


@dataclass(frozen=True, slots=True)
class Quote:
    symbol: str
    price: float
    unknown_instrument: bool


def quote(symbol: str, *, rng: np.random.Generator | None = None) -> Quote:
    """Jittered mock quote: ``base + U(-1, 1) * volatility * base``.

    Pass a seeded ``rng`` for repeatable prices.
    """

    inst = resolve_instrument(symbol)
    gen = rng if rng is not None else np.random.default_rng()
    noise = float(gen.uniform(-1.0, 1.0)) * inst.volatility * inst.base_price
    return Quote(symbol=inst.symbol, price=round(inst.base_price + noise, 2), unknown_instrument=not inst.known)


def get_market_price(symbol: str, *, rng: np.random.Generator | None = None) -> float:
    return quote(symbol, rng=rng).price
