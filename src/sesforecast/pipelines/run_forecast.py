"""src/sesforecast/pipelines/run_forecast.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from sesforecast.common.config import AppConfig
from sesforecast.io.models import save_model
from sesforecast.io.readers import read_series
from sesforecast.io.writers import write_csv, write_forecast_csv
from sesforecast.modeling.evaluation import compute_metrics
from sesforecast.modeling.optimizer import FitReport, OptimizerOptions
from sesforecast.modeling.ses import DEFAULT_HORIZON, ExponentialSmoothing
from sesforecast.reporting.plots import plot_forecast

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastRun:
    forecast_path: Path
    metrics_path: Path
    model_path: Path
    figure_path: Path | None
    report: FitReport


def _get(cfg_obj: Any, key: str, default: Any = None) -> Any:
    """Support both dict-style and attribute-style config."""
    if cfg_obj is None:
        return default
    if isinstance(cfg_obj, dict):
        v = cfg_obj.get(key, default)
        return default if v is None else v
    if hasattr(cfg_obj, key):
        v = getattr(cfg_obj, key)
        return default if v is None else v
    return default


def _optional_float(x: Any) -> float | None:
    if x is None or (isinstance(x, str) and not x.strip()):
        return None
    return float(x)


def _out_dir(cfg: AppConfig, key: str, fallback: str) -> Path:
    p = cfg.paths.get(key)
    return p if p is not None else cfg.resolve(fallback)


def run_forecast(cfg: AppConfig) -> ForecastRun:
    """
    Run the forecast pipeline:
      1) read the configured input series
      2) build the SES model (user alpha / init_level from config, if any)
      3) fit (optimizer options from config) and predict
      4) write forecast CSV, fit metrics CSV, model artifact and plot
    """
    input_path = _get(cfg.input, "path")
    if not input_path:
        raise ValueError("input.path is not set in the config.")
    series_path = cfg.resolve(input_path)
    column = _get(cfg.input, "column")

    y = read_series(series_path, column=column)
    logger.info("Loaded %d observations from %s", len(y), series_path)

    horizon = int(_get(cfg.forecast, "horizon", DEFAULT_HORIZON))
    model = ExponentialSmoothing(
        y,
        h=horizon,
        alpha=_optional_float(_get(cfg.forecast, "alpha")),
        init_level=_optional_float(_get(cfg.forecast, "init_level")),
    )
    options = OptimizerOptions.from_mapping(cfg.optimizer)

    report = model.fit(options)
    forecast = model.predict()
    logger.info(
        "Fitted SES (%s): alpha=%.6g init_level=%.6g SSE=%.6g",
        report.method,
        report.alpha,
        report.init_level,
        report.final_sse,
    )

    # --- Output dirs ---
    forecasts_dir = _out_dir(cfg, "forecasts_dir", "artifacts/forecasts")
    metrics_dir = _out_dir(cfg, "metrics_dir", "artifacts/metrics")
    models_dir = _out_dir(cfg, "models_dir", "artifacts/models")
    figures_dir = _out_dir(cfg, "figures_dir", "artifacts/figures")

    stem = series_path.stem
    forecast_path = write_forecast_csv(y, forecast, forecasts_dir / f"{stem}_ses_forecast_h{horizon}.csv")

    metrics = compute_metrics(y, forecast[: len(y)])
    metrics_row = {"Series": stem, "Model": model.name, "Horizon": horizon, **report.as_dict(), **metrics.as_dict()}
    metrics_path = write_csv(pd.DataFrame([metrics_row]), metrics_dir / f"{stem}_ses_fit_metrics.csv")

    model_path = save_model(model, models_dir / f"{stem}_ses.joblib")

    figure_path: Path | None = None
    if bool(_get(cfg.forecast, "plot", True)):
        try:
            figure_path = plot_forecast(
                y,
                forecast,
                out_path=figures_dir / f"{stem}_ses_forecast.png",
                title=f"SES forecast: {stem} (alpha={report.alpha:.3f})",
            )
        except Exception:
            logger.exception("Plotting failed for %s", stem)

    logger.info("Saved forecast: %s", forecast_path)
    logger.info("Saved fit metrics: %s", metrics_path)
    logger.info("Saved model: %s", model_path)
    if figure_path is not None:
        logger.info("Saved plot: %s", figure_path)

    return ForecastRun(
        forecast_path=forecast_path,
        metrics_path=metrics_path,
        model_path=model_path,
        figure_path=figure_path,
        report=report,
    )
