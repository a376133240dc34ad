"""Simple Exponential Smoothing forecasting."""

from sesforecast.common.errors import FitFailure, InvalidInput, NotFittedError, SesForecastError
from sesforecast.modeling.optimizer import FitDiagnostic, FitReport, OptimizerOptions
from sesforecast.modeling.ses import ExponentialSmoothing

__version__ = "0.1.0"

__all__ = [
    "ExponentialSmoothing",
    "OptimizerOptions",
    "FitReport",
    "FitDiagnostic",
    "SesForecastError",
    "InvalidInput",
    "FitFailure",
    "NotFittedError",
]
