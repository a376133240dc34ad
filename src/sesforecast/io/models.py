"""src/sesforecast/io/models.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import joblib

from sesforecast.io.writers import ensure_parent_dir


def save_model(model: Any, path: Path) -> Path:
    """
    Persist a model as a joblib payload:
        {"model_name", "model", "params"}
    """
    ensure_parent_dir(path)
    payload = {
        "model_name": str(getattr(model, "name", type(model).__name__)),
        "model": model,
        "params": dict(model.get_params()) if hasattr(model, "get_params") else {},
    }
    joblib.dump(payload, path)
    return path


def load_model(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Missing model file:\n{path}")
    payload = joblib.load(path)
    if not isinstance(payload, dict) or "model" not in payload:
        raise ValueError(f"Unexpected model payload in {path}")
    return payload["model"]
