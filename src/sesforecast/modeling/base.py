"""src/sesforecast/modeling/base.py"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ForecastModel(Protocol):
    """
    Capability set shared by forecasting models.

    Simple exponential smoothing is the only implementation today; double and
    triple smoothing would be new types providing the same two methods.
    """
    def fit(self, options: Any = None) -> Any: ...

    def predict(self) -> np.ndarray: ...
