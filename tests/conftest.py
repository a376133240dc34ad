"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
import yaml

from sesforecast.common.config import AppConfig, load_config


# Level around 450-550 with noise; no exact fit exists for any alpha
SAMPLE_SERIES = [
    445.36, 453.20, 454.41, 422.38, 456.04, 440.39, 425.19, 486.21, 500.43,
    521.28, 508.95, 488.89, 509.87, 456.72, 473.82, 525.95, 549.83, 542.34,
]


@pytest.fixture
def sample_series() -> np.ndarray:
    return np.array(SAMPLE_SERIES, dtype=float)


@pytest.fixture
def increasing_series() -> np.ndarray:
    return np.arange(1.0, 21.0)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    (tmp_path / "data").mkdir(parents=True, exist_ok=True)
    return tmp_path


def write_series_csv(path: Path, values: list[float], column: str = "value") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({"period": range(1, len(values) + 1), column: values}).to_csv(path, index=False)
    return path


def make_config(project_root: Path, **overrides: dict) -> AppConfig:
    raw = {
        "paths": {
            "data_dir": "data",
            "forecasts_dir": "artifacts/forecasts",
            "metrics_dir": "artifacts/metrics",
            "models_dir": "artifacts/models",
            "figures_dir": "artifacts/figures",
        },
        "logging": {"level": "DEBUG"},
        "input": {"path": "data/series.csv", "column": "value"},
        "forecast": {"horizon": 6, "alpha": None, "init_level": None, "plot": True},
        "optimizer": {"fit_policy": "joint", "max_iterations": 500, "tolerance": 1e-10},
    }
    for section, values in overrides.items():
        raw.setdefault(section, {}).update(values)

    config_path = project_root / "configs" / "config.yaml"
    config_path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return load_config(config_path)


@pytest.fixture
def cfg(project_root: Path) -> AppConfig:
    write_series_csv(project_root / "data" / "series.csv", SAMPLE_SERIES)
    return make_config(project_root)
