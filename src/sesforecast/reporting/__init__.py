"""src/sesforecast/reporting/__init__.py"""

from .plots import plot_forecast, plot_model

__all__ = ["plot_forecast", "plot_model"]
