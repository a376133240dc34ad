"""src/sesforecast/modeling/ses.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from sesforecast.common.errors import NotFittedError
from sesforecast.modeling.optimizer import FitReport, OptimizerOptions, optimize_parameters
from sesforecast.modeling.recursion import SmoothingResult, smooth
from sesforecast.validation.checks import validate_model_inputs

logger = logging.getLogger(__name__)

DEFAULT_HORIZON = 5


@dataclass(eq=False)
class ExponentialSmoothing:
    """
    Simple Exponential Smoothing (SES) model.

    y: observations used for fitting (non-empty, finite)
    h: number of steps after the last observation to forecast (> 0)
    alpha: smoothing parameter in [0, 1]; estimated by fit() when None
    init_level: initial level l_0; estimated by fit() when None

    Parameters passed here are remembered, so calling fit() again re-estimates
    exactly the ones that were left unset.

    Not thread-safe: fit() overwrites alpha / init_level in place, so two
    concurrent fits on one instance race. Use one instance per thread.

    Example:
        mdl = ExponentialSmoothing([1.0, 2.0, 3.0], h=5)
        report = mdl.fit()
        yhat = mdl.predict()  # length len(y) + h

    Reference: Hyndman, R.J., & Athanasopoulos, G. (2019) Forecasting:
    principles and practice, 3rd edition, OTexts: Melbourne, Australia.
    """
    y: Any
    h: int = DEFAULT_HORIZON
    alpha: float | None = None
    init_level: float | None = None
    fit_report_: FitReport | None = field(default=None, init=False, repr=False)
    _user_alpha: float | None = field(default=None, init=False, repr=False)
    _user_init_level: float | None = field(default=None, init=False, repr=False)
    _fitted: bool = field(default=False, init=False, repr=False)

    name = "ses"

    def __post_init__(self) -> None:
        validate_model_inputs(self.y, self.h, self.alpha, self.init_level).raise_if_failed()
        self.y = np.array(self.y, dtype=float)
        self.h = int(self.h)
        self.alpha = None if self.alpha is None else float(self.alpha)
        self.init_level = None if self.init_level is None else float(self.init_level)
        self._user_alpha = self.alpha
        self._user_init_level = self.init_level

    @property
    def fitted(self) -> bool:
        return self._fitted

    def get_params(self) -> dict[str, Any]:
        return {"h": self.h, "alpha": self.alpha, "init_level": self.init_level}

    def fit(self, options: OptimizerOptions | None = None) -> FitReport:
        """
        Estimate unset parameters and store the results on the model.

        Returns a FitReport whose diagnostics name every auto-estimated
        parameter. Raises FitFailure if the minimizer does not converge.
        """
        report = optimize_parameters(self.y, self._user_alpha, self._user_init_level, options)
        self.alpha = report.alpha
        self.init_level = report.init_level
        self.fit_report_ = report
        self._fitted = True

        for d in report.diagnostics:
            logger.info(d.message)
        logger.debug("Fit complete (%s): alpha=%s init_level=%s SSE=%s", report.method, self.alpha, self.init_level, report.final_sse)
        return report

    def _smooth(self) -> SmoothingResult:
        if not self._fitted or self.alpha is None or self.init_level is None:
            raise NotFittedError("Model has not been fitted yet. Call fit() before predict().")
        return smooth(self.y, self.alpha, self.init_level, self.h)

    def predict(self) -> np.ndarray:
        """Fitted values followed by the flat forecast; length len(y) + h."""
        return self._smooth().forecast

    def sse(self) -> float:
        return self._smooth().sse

    def residuals(self) -> np.ndarray:
        """One-step-ahead residuals y[t] - level[t]."""
        return self.y - self._smooth().fitted
