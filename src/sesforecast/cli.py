"""src/sesforecast/cli.py"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from sesforecast.common.config import load_config
from sesforecast.common.errors import SesForecastError
from sesforecast.common.logging import LOG_FORMAT, setup_logging
from sesforecast.io.readers import read_series
from sesforecast.modeling.optimizer import OptimizerOptions
from sesforecast.modeling.ses import DEFAULT_HORIZON, ExponentialSmoothing
from sesforecast.pipelines.run_forecast import run_forecast
from sesforecast.reporting.plots import plot_forecast

app = typer.Typer(help="Simple exponential smoothing forecasting CLI")

DEFAULT_CONFIG = "configs/config.yaml"


def _fail(err: Exception) -> NoReturn:
    print(f"[bold red]Error:[/bold red] {escape(str(err))}")
    raise typer.Exit(code=1)


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories from config (data/, artifacts/, etc.)."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    created = cfg.ensure_directories()
    print("[bold green]Init complete.[/bold green]")
    if created:
        print("Created directories:")
        for p in created:
            print(f"  - {p}")
    else:
        print("No directories needed (already exist).")


@app.command()
def forecast(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Fit SES to the configured series and write forecast artifacts."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    try:
        run = run_forecast(cfg)
    except (SesForecastError, FileNotFoundError, KeyError, ValueError) as e:
        _fail(e)
    print(f"alpha={run.report.alpha:.6g} init_level={run.report.init_level:.6g} SSE={run.report.final_sse:.6g}")
    print(f"Forecast written to {run.forecast_path}")
    print("[bold green]Forecasting complete.[/bold green]")


@app.command()
def fit(
    input_path: Path = typer.Option(..., "--input", help="CSV file with the observations"),
    column: Optional[str] = typer.Option(None, help="Value column (default: first numeric column)"),
    horizon: int = typer.Option(DEFAULT_HORIZON, "--horizon", "-h", help="Steps to forecast"),
    alpha: Optional[float] = typer.Option(None, help="Smoothing parameter; estimated when omitted"),
    init_level: Optional[float] = typer.Option(None, help="Initial level; estimated when omitted"),
    policy: str = typer.Option("joint", help="Fit policy: joint | heuristic"),
    max_iterations: int = typer.Option(500, help="Bound on solver steps"),
    tolerance: float = typer.Option(1e-10, help="Convergence threshold"),
    plot: Optional[Path] = typer.Option(None, help="Write a PNG of observed vs forecast here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every objective evaluation"),
) -> None:
    """Ad-hoc fit of one CSV column; prints parameters and the forecast."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT, force=True)
    try:
        y = read_series(input_path, column=column)
        model = ExponentialSmoothing(y, h=horizon, alpha=alpha, init_level=init_level)
        options = OptimizerOptions(max_iterations=max_iterations, tolerance=tolerance, fit_policy=policy)
        report = model.fit(options)
        yhat = model.predict()
    except (SesForecastError, FileNotFoundError, KeyError, ValueError) as e:
        _fail(e)

    params = Table(title="SES parameters")
    params.add_column("Parameter")
    params.add_column("Value", justify="right")
    params.add_column("Source")
    estimated = {d.parameter for d in report.diagnostics}
    params.add_row("alpha", f"{report.alpha:.6g}", "estimated" if "alpha" in estimated else "user")
    params.add_row("init_level", f"{report.init_level:.6g}", "estimated" if "init_level" in estimated else "user")
    params.add_row("SSE", f"{report.final_sse:.6g}", report.method)
    print(params)

    out = Table(title=f"Forecast (h={model.h})")
    out.add_column("Step", justify="right")
    out.add_column("Forecast", justify="right")
    for step, value in enumerate(yhat[len(y):], start=len(y)):
        out.add_row(str(step), f"{value:.6g}")
    print(out)

    if plot is not None:
        path = plot_forecast(y, yhat, out_path=plot)
        print(f"Plot written to {path}")


if __name__ == "__main__":
    app()
