"""simcore.backtest.strategies.base

Entry-rule contract.

A strategy is a pure function over a close series. It outputs an entry
signal per bar; the simulator decides whether the signal can be acted on
(flat, past warm-up) and owns every exit.

Signal convention:
- +1.0 = open long
-  0.0 = no entry
- -1.0 = open short

Bars whose indicators are undefined always carry 0.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class StrategyResult:
    signal: np.ndarray  # float64, shape (T,)


class Strategy:
    name: str = "strategy"

    def generate(self, *, close: np.ndarray) -> StrategyResult:
        raise NotImplementedError
