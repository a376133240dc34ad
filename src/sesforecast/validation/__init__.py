"""src/sesforecast/validation/__init__.py"""

from __future__ import annotations

from .checks import (
    CheckResult,
    check_finite_parameter,
    check_horizon,
    check_observations,
    check_unit_interval,
    validate_model_inputs,
)

__all__ = [
    "CheckResult",
    "check_observations",
    "check_horizon",
    "check_unit_interval",
    "check_finite_parameter",
    "validate_model_inputs",
]
