"""tests/integration/test_pipeline_smoke.py"""

from __future__ import annotations

import pandas as pd
import pytest

from sesforecast.io.models import load_model
from sesforecast.pipelines.run_forecast import run_forecast
from tests.conftest import SAMPLE_SERIES, make_config


def test_pipeline_writes_all_artifacts(cfg) -> None:
    run = run_forecast(cfg)

    assert run.forecast_path.exists(), f"missing {run.forecast_path}"
    assert run.metrics_path.exists(), f"missing {run.metrics_path}"
    assert run.model_path.exists(), f"missing {run.model_path}"
    assert run.figure_path is not None and run.figure_path.exists()

    f = pd.read_csv(run.forecast_path)
    assert len(f) == len(SAMPLE_SERIES) + 6
    assert (f["Segment"] == "out_of_sample").sum() == 6

    m = pd.read_csv(run.metrics_path)
    assert m.loc[0, "Method"] == "L-BFGS-B"
    assert m.loc[0, "SSE"] == pytest.approx(m.loc[0, "Final_SSE"])

    assert load_model(run.model_path).alpha == pytest.approx(run.report.alpha)


def test_pipeline_respects_user_parameters(project_root, cfg) -> None:
    cfg = make_config(project_root, forecast={"alpha": 0.3, "init_level": 450.0, "plot": False})
    run = run_forecast(cfg)

    assert run.report.method == "none"
    assert (run.report.alpha, run.report.init_level) == (0.3, 450.0)
    assert run.figure_path is None


def test_pipeline_heuristic_policy(project_root, cfg) -> None:
    cfg = make_config(project_root, optimizer={"fit_policy": "heuristic"})
    run = run_forecast(cfg)
    assert run.report.method == "bounded"


def test_pipeline_requires_input_path(project_root) -> None:
    cfg = make_config(project_root, input={"path": None})
    with pytest.raises(ValueError):
        run_forecast(cfg)
