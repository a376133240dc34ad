"""src/sesforecast/pipelines/__init__.py"""

from .run_forecast import ForecastRun, run_forecast

__all__ = ["ForecastRun", "run_forecast"]
