"""src/sesforecast/io/__init__.py"""
from .models import load_model, save_model
from .readers import read_csv, read_series
from .writers import ensure_parent_dir, forecast_frame, write_csv, write_forecast_csv

__all__ = [
    "read_csv",
    "read_series",
    "ensure_parent_dir",
    "write_csv",
    "forecast_frame",
    "write_forecast_csv",
    "save_model",
    "load_model",
]
