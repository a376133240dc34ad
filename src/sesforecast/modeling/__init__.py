"""src/sesforecast/modeling/__init__.py"""

from .base import ForecastModel
from .evaluation import MetricPack, compute_metrics
from .heuristics import initial_level_heuristic
from .optimizer import FitDiagnostic, FitReport, OptimizerOptions, optimize_parameters
from .recursion import SmoothingResult, smooth, sse_and_gradient
from .ses import ExponentialSmoothing

__all__ = [
    "ForecastModel",
    "ExponentialSmoothing",
    "SmoothingResult",
    "smooth",
    "sse_and_gradient",
    "initial_level_heuristic",
    "OptimizerOptions",
    "FitDiagnostic",
    "FitReport",
    "optimize_parameters",
    "MetricPack",
    "compute_metrics",
]
