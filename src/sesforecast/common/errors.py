"""src/sesforecast/common/errors.py"""

from __future__ import annotations


class SesForecastError(Exception):
    """Base class for errors raised by sesforecast."""


class InvalidInput(SesForecastError, ValueError):
    """Observations, horizon or smoothing parameters rejected at construction."""


class FitFailure(SesForecastError, RuntimeError):
    """The minimizer did not converge, so no concrete parameters exist."""


class NotFittedError(SesForecastError, RuntimeError):
    """predict() was called before fit()."""
