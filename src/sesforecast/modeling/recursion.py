"""src/sesforecast/modeling/recursion.py"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SmoothingResult:
    """
    Output of one pass of the SES recursion.

    forecast: level[0..n] followed by level[n] repeated; length n + h
    sse: sum of squared one-step-ahead residuals over the observed part
    n_obs: number of observations the recursion consumed
    """
    forecast: np.ndarray
    sse: float
    n_obs: int

    @property
    def fitted(self) -> np.ndarray:
        """One-step-ahead in-sample forecasts, aligned with y."""
        return self.forecast[: self.n_obs]

    @property
    def level(self) -> float:
        """Final smoothed level; the flat out-of-sample forecast value."""
        return float(self.forecast[self.n_obs])


def smooth(y: np.ndarray, alpha: float, init_level: float, h: int) -> SmoothingResult:
    """
    Run the Simple Exponential Smoothing recursion with concrete parameters:
      level[0] = init_level
      level[t] = alpha * y[t-1] + (1 - alpha) * level[t-1],  t = 1..n

    The first n+1 forecast values are the levels; the remaining h-1 repeat
    level[n]. Pure: nothing outside the returned result is modified.
    """
    y = np.asarray(y, dtype=float)
    h = int(h)
    if h < 1:
        raise ValueError("h must be >= 1")

    n = y.size
    a = float(alpha)
    levels = np.empty(n + 1, dtype=float)
    levels[0] = float(init_level)
    for t in range(1, n + 1):
        levels[t] = a * y[t - 1] + (1.0 - a) * levels[t - 1]

    forecast = np.empty(n + h, dtype=float)
    forecast[: n + 1] = levels
    forecast[n + 1 :] = levels[n]

    residuals = levels[:n] - y
    return SmoothingResult(forecast=forecast, sse=float(residuals @ residuals), n_obs=n)


def sse_and_gradient(y: np.ndarray, alpha: float, init_level: float) -> tuple[float, np.ndarray]:
    """
    SSE and its gradient with respect to (alpha, init_level).

    Sensitivities are carried forward with the levels:
      d level[t] / d alpha      = y[t-1] - level[t-1] + (1 - alpha) * d level[t-1] / d alpha
      d level[t] / d init_level = (1 - alpha) ** t
    """
    y = np.asarray(y, dtype=float)
    a = float(alpha)
    level = float(init_level)
    d_alpha = 0.0
    d_level = 1.0

    sse = 0.0
    grad = np.zeros(2, dtype=float)
    for obs in y:
        err = level - obs
        sse += err * err
        grad[0] += 2.0 * err * d_alpha
        grad[1] += 2.0 * err * d_level

        d_alpha = obs - level + (1.0 - a) * d_alpha
        d_level = (1.0 - a) * d_level
        level = a * obs + (1.0 - a) * level

    return sse, grad
