"""src/sesforecast/io/writers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def forecast_frame(y: Iterable[float], forecast: Iterable[float]) -> pd.DataFrame:
    """
    Tidy table of one forecast run:
        Step, Observed, Forecast, Segment

    Step 0 is the initial level. Steps 1..n line up the one-step-ahead
    forecast with the observation it predicts; later steps are out of sample.
    """
    y_arr = np.asarray(list(y), dtype=float)
    f_arr = np.asarray(list(forecast), dtype=float)
    n = y_arr.size

    observed = np.full(f_arr.size, np.nan, dtype=float)
    # forecast[t] predicts y[t]; forecast[n] onwards has no observation
    k = min(n, f_arr.size)
    observed[:k] = y_arr[:k]

    return pd.DataFrame(
        {
            "Step": np.arange(f_arr.size, dtype=int),
            "Observed": observed,
            "Forecast": f_arr,
            "Segment": np.where(np.arange(f_arr.size) < n, "in_sample", "out_of_sample"),
        }
    )


def write_forecast_csv(y: Iterable[float], forecast: Iterable[float], path: Path) -> Path:
    return write_csv(forecast_frame(y, forecast), path, index=False)
