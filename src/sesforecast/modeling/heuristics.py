"""src/sesforecast/modeling/heuristics.py"""

from __future__ import annotations

from typing import Iterable

import numpy as np

HEURISTIC_WINDOW = 10


def initial_level_heuristic(y: Iterable[float] | np.ndarray, window: int = HEURISTIC_WINDOW) -> float:
    """
    Starting estimate for the initial level (l_0).

    Fits an ordinary-least-squares trend line to the first min(window, len(y))
    observations, using time values 1..n, and returns its intercept:
      slope     = (n*sum(x*y) - sum(x)*sum(y)) / (n*sum(x^2) - sum(x)^2)
      intercept = (sum(y) - slope*sum(x)) / n

    A single observation has no slope; its value is returned as the intercept.
    """
    ny = np.asarray(y, dtype=float)[: max(int(window), 1)]
    n = ny.size
    if n == 0:
        raise ValueError("Cannot compute an initial level for an empty series.")
    if n == 1:
        return float(ny[0])

    nx = np.arange(1, n + 1, dtype=float)
    sx, sy = nx.sum(), ny.sum()
    slope = (n * float(nx @ ny) - sx * sy) / (n * float(nx @ nx) - sx**2)
    intercept = (sy - slope * sx) / n
    return float(intercept)
