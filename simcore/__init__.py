"""simcore: the simulation core behind the paper-trading terminal.

Two computation groups live here:

- trade economics: quotes, P&L, risk/reward, position sizing
- backtesting: synthetic price history, indicators, a single-position
  simulator and its statistics

Nothing in this package performs I/O. Callers persist and render.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.0.0"
