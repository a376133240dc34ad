"""src/sesforecast/validation/checks.py"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from sesforecast.common.errors import InvalidInput


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise InvalidInput(msg)


def check_observations(y: Any) -> list[str]:
    errs: list[str] = []
    try:
        arr = np.asarray(y, dtype=float)
    except (TypeError, ValueError) as e:
        return [f"y: could not convert observations to floats ({e})"]

    if arr.ndim != 1:
        errs.append(f"y: expected a one-dimensional sequence; got shape={arr.shape}")
        return errs
    if arr.size == 0:
        errs.append("y: the input array is empty")
        return errs

    bad = ~np.isfinite(arr)
    n_bad = int(bad.sum())
    if n_bad:
        sample = np.flatnonzero(bad)[:10].tolist()
        errs.append(f"y: {n_bad} non-finite values found; positions={sample}")
    return errs


def check_horizon(h: Any) -> list[str]:
    # bool is an Integral subclass
    if isinstance(h, bool) or not isinstance(h, numbers.Integral):
        return [f"h: expected an integer number of steps; got {h!r}"]
    if int(h) <= 0:
        return [f"h: the number of prediction steps must be positive; got {h}"]
    return []


def check_finite_parameter(value: float | None, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (bool, np.bool_)):
        return [f"{name}: expected a real number; got {value!r}"]
    try:
        v = float(value)
    except (TypeError, ValueError):
        return [f"{name}: expected a real number; got {value!r}"]
    if not math.isfinite(v):
        return [f"{name}: expected a finite value; got {v}"]
    return []


def check_unit_interval(value: float | None, name: str, lb: float = 0.0, ub: float = 1.0) -> list[str]:
    errs = check_finite_parameter(value, name)
    if errs or value is None:
        return errs
    v = float(value)
    if v < lb or v > ub:
        errs.append(f"{name} needs to be in the range [{lb}, {ub}]; got {v}")
    return errs


def validate_model_inputs(
    y: Any,
    h: Any,
    alpha: float | None = None,
    init_level: float | None = None,
) -> CheckResult:
    """
    Construction-time validation for an exponential smoothing model.
    - y: non-empty, one-dimensional, finite
    - h: positive integer
    - alpha: absent, or inside [0, 1]
    - init_level: absent, or finite
    """
    errors: list[str] = []
    errors.extend(check_observations(y))
    errors.extend(check_horizon(h))
    errors.extend(check_unit_interval(alpha, "alpha"))
    errors.extend(check_finite_parameter(init_level, "init_level"))
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))
