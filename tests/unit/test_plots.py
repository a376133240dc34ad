"""tests/unit/test_plots.py"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from sesforecast.modeling.ses import ExponentialSmoothing
from sesforecast.reporting.plots import plot_forecast, plot_model


def test_plot_forecast_writes_png(tmp_path: Path) -> None:
    out = plot_forecast([1.0, 2.0, 3.0], [0.0, 1.0, 2.0, 3.0, 3.0], out_path=tmp_path / "figs" / "f.png")
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_model_fits_before_plotting(tmp_path: Path, sample_series: np.ndarray) -> None:
    mdl = ExponentialSmoothing(sample_series, h=3)
    out = plot_model(mdl, out_path=tmp_path / "model.png")
    assert mdl.fitted
    assert out.exists()


def test_plot_forecast_without_path_returns_open_figure() -> None:
    fig = plot_forecast([1.0, 2.0, 3.0], [0.0, 1.0, 2.0, 3.0, 3.0], title="No file")
    try:
        assert isinstance(fig, Figure)
        (ax,) = fig.axes
        assert [ln.get_label() for ln in ax.get_lines()][:2] == ["Observed", "Forecasted"]
        assert ax.get_title() == "No file"
    finally:
        plt.close(fig)
