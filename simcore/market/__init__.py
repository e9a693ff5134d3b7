"""simcore.market

Mock market: instrument metadata and jittered quotes.
"""

from simcore.market.instruments import (
    INSTRUMENTS,
    Instrument,
    Quote,
    contract_size,
    get_market_price,
    quote,
    resolve_instrument,
)

__all__ = [
    "INSTRUMENTS",
    "Instrument",
    "Quote",
    "contract_size",
    "get_market_price",
    "quote",
    "resolve_instrument",
]
