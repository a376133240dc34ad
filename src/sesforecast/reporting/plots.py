"""src/sesforecast/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from sesforecast.modeling.base import ForecastModel
from sesforecast.modeling.optimizer import OptimizerOptions


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def plot_forecast(
    y: Iterable[float],
    yhat: Iterable[float],
    *,
    out_path: Path | None = None,
    title: str = "Time Series Example",
) -> Path | Figure:
    """
    Plot the observed series and the forecast on a shared unit-time axis.
    The forecast is usually longer than y (fitted values plus the flat
    out-of-sample tail).

    With out_path the figure is saved as PNG, closed, and the path returned.
    Without it the open Figure is returned; the caller closes it.
    """
    y_arr = np.asarray(list(y), dtype=float)
    yhat_arr = np.asarray(list(yhat), dtype=float)

    fig = plt.figure()
    plt.plot(np.arange(1, y_arr.size + 1), y_arr, lw=2, label="Observed")
    plt.plot(np.arange(1, yhat_arr.size + 1), yhat_arr, lw=2, label="Forecasted")
    if yhat_arr.size > y_arr.size:
        plt.axvline(y_arr.size, color="grey", ls="--", lw=1)
    plt.title(title)
    plt.xlabel("Unit Time")
    plt.legend(loc="lower right")
    if out_path is None:
        return fig

    _ensure_dir(out_path.parent)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path


def plot_model(
    model: ForecastModel,
    *,
    out_path: Path | None = None,
    options: OptimizerOptions | None = None,
    title: str = "Time Series Example",
) -> Path | Figure:
    """Fit the model, predict, and plot observed against forecast values."""
    model.fit(options)
    yhat = model.predict()
    return plot_forecast(model.y, yhat, out_path=out_path, title=title)
