"""src/sesforecast/modeling/optimizer.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Literal, Mapping

import numpy as np
from scipy import optimize

from sesforecast.common.errors import FitFailure, InvalidInput
from sesforecast.modeling.heuristics import initial_level_heuristic
from sesforecast.modeling.recursion import sse_and_gradient

logger = logging.getLogger(__name__)

FitPolicy = Literal["joint", "heuristic"]
FIT_POLICIES = ("joint", "heuristic")

ALPHA_BOUNDS = (0.0, 1.0)
INIT_LEVEL_BOUNDS = (None, None)

# projected gradient below this fraction of SSE counts as stationary
STATIONARY_RTOL = 1e-6


def _value(m: Mapping[str, Any], key: str, default: Any) -> Any:
    # an empty YAML key loads as None
    v = m.get(key, default)
    return default if v is None else v


@dataclass(frozen=True)
class OptimizerOptions:
    """
    Controls for parameter estimation.

    max_iterations: bound on solver steps
    tolerance: convergence threshold (ftol for L-BFGS-B, xatol for bounded Brent)
    fit_policy:
      - "joint": an unset init_level is optimized together with alpha,
        starting from the trend-line intercept
      - "heuristic": an unset init_level is fixed at the trend-line intercept
        and only alpha is searched
    """
    max_iterations: int = 500
    tolerance: float = 1e-10
    fit_policy: FitPolicy | str = "joint"

    def __post_init__(self) -> None:
        if int(self.max_iterations) <= 0:
            raise InvalidInput(f"max_iterations must be > 0; got {self.max_iterations}")
        if not float(self.tolerance) > 0:
            raise InvalidInput(f"tolerance must be > 0; got {self.tolerance}")
        if str(self.fit_policy).strip().lower() not in FIT_POLICIES:
            raise InvalidInput(f"fit_policy must be one of {FIT_POLICIES}; got {self.fit_policy!r}")

    @property
    def policy(self) -> str:
        return str(self.fit_policy).strip().lower()

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any] | None) -> "OptimizerOptions":
        """Build options from a config section, falling back to defaults for missing keys."""
        m = m or {}
        defaults = cls()
        return cls(
            max_iterations=int(_value(m, "max_iterations", defaults.max_iterations)),
            tolerance=float(_value(m, "tolerance", defaults.tolerance)),
            fit_policy=str(_value(m, "fit_policy", defaults.fit_policy)),
        )


@dataclass(frozen=True)
class FitDiagnostic:
    """Advisory notice for a parameter that was estimated rather than supplied."""
    parameter: str
    value: float
    message: str


@dataclass(frozen=True)
class FitReport:
    alpha: float
    init_level: float
    diagnostics: tuple[FitDiagnostic, ...]
    initial_sse: float
    final_sse: float
    method: str
    n_iterations: int = 0
    n_evaluations: int = 0

    def as_dict(self) -> dict[str, Any]:
        # Keep stable column names for CSV exports
        return {
            "Alpha": float(self.alpha),
            "Init_Level": float(self.init_level),
            "Initial_SSE": float(self.initial_sse),
            "Final_SSE": float(self.final_sse),
            "Method": self.method,
            "Iterations": int(self.n_iterations),
            "Evaluations": int(self.n_evaluations),
        }


def _sse(y: np.ndarray, alpha: float, init_level: float) -> float:
    sse, _ = sse_and_gradient(y, alpha, init_level)
    logger.debug("SSE=%.10g alpha=%.10g init_level=%.10g", sse, alpha, init_level)
    return sse


def _diagnostic(parameter: str, value: float, how: str) -> FitDiagnostic:
    return FitDiagnostic(
        parameter=parameter,
        value=float(value),
        message=f"No value was entered for '{parameter}'; {how}: {float(value):.6g}",
    )


def _minimize_alpha(y: np.ndarray, init_level: float, opts: OptimizerOptions) -> tuple[float, float, Any]:
    """Bounded Brent search over alpha with init_level held fixed."""
    res = optimize.minimize_scalar(
        lambda a: _sse(y, float(a), init_level),
        bounds=ALPHA_BOUNDS,
        method="bounded",
        options={"maxiter": int(opts.max_iterations), "xatol": float(opts.tolerance)},
    )
    if not res.success:
        raise FitFailure(f"alpha search did not converge: {res.message}")

    # Bounded Brent never evaluates the interval ends themselves
    candidates = [(float(res.fun), float(res.x))]
    for edge in ALPHA_BOUNDS:
        candidates.append((_sse(y, edge, init_level), edge))
    best_sse, best_alpha = min(candidates)
    return best_alpha, best_sse, res


def _is_stationary(x: np.ndarray, grad: np.ndarray, sse: float, free_alpha: bool) -> bool:
    """
    True when the projected gradient at x is negligible relative to SSE.

    An alpha component pushing against its active bound does not count.
    """
    pg = np.array(grad, dtype=float)
    if free_alpha:
        lo, hi = ALPHA_BOUNDS
        if (x[0] <= lo and pg[0] > 0) or (x[0] >= hi and pg[0] < 0):
            pg[0] = 0.0
    return bool(np.max(np.abs(pg)) <= STATIONARY_RTOL * max(sse, 1.0))


@dataclass(frozen=True)
class _JointRun:
    alpha: float
    init_level: float
    sse: float
    start_sse: float
    n_iterations: int
    n_evaluations: int


def _minimize_joint(
    y: np.ndarray,
    alpha: float | None,
    seed_level: float,
    opts: OptimizerOptions,
) -> _JointRun:
    """
    L-BFGS-B over init_level and, when alpha is unset, alpha as well.

    With a free alpha the search starts from both alpha bounds and the lower
    SSE wins. A run that stops without success still counts when it stalled
    at a stationary point.
    """
    free_alpha = alpha is None

    def objective(x: np.ndarray) -> tuple[float, np.ndarray]:
        a = float(x[0]) if free_alpha else float(alpha)
        lvl = float(x[-1])
        sse, grad = sse_and_gradient(y, a, lvl)
        logger.debug("SSE=%.10g alpha=%.10g init_level=%.10g", sse, a, lvl)
        return sse, (grad if free_alpha else grad[1:])

    if free_alpha:
        starts = [np.array([edge, seed_level], dtype=float) for edge in ALPHA_BOUNDS]
        bounds = [ALPHA_BOUNDS, INIT_LEVEL_BOUNDS]
    else:
        starts = [np.array([seed_level], dtype=float)]
        bounds = [INIT_LEVEL_BOUNDS]

    runs: list[_JointRun] = []
    failures: list[str] = []
    n_iterations = n_evaluations = 0
    for x0 in starts:
        res = optimize.minimize(
            objective,
            x0,
            jac=True,
            bounds=bounds,
            method="L-BFGS-B",
            options={"maxiter": int(opts.max_iterations), "ftol": float(opts.tolerance)},
        )
        n_iterations += int(getattr(res, "nit", 0))
        n_evaluations += int(getattr(res, "nfev", 0))

        x = np.array(res.x, dtype=float)
        if not np.all(np.isfinite(x)):
            failures.append(str(res.message))
            continue
        if free_alpha:
            x[0] = np.clip(x[0], *ALPHA_BOUNDS)
        sse, grad = objective(x)
        if not np.isfinite(sse):
            failures.append(str(res.message))
            continue
        if not res.success:
            if not _is_stationary(x, grad, sse, free_alpha):
                failures.append(str(res.message))
                continue
            logger.debug("L-BFGS-B stopped at a stationary point (%s); accepting it", res.message)

        start_sse, _ = objective(x0)
        runs.append(
            _JointRun(
                alpha=float(x[0]) if free_alpha else float(alpha),
                init_level=float(x[-1]),
                sse=float(sse),
                start_sse=float(start_sse),
                n_iterations=0,
                n_evaluations=0,
            )
        )

    if not runs:
        raise FitFailure(f"L-BFGS-B did not converge: {'; '.join(failures)}")

    best = min(runs, key=lambda r: r.sse)
    return replace(best, n_iterations=n_iterations, n_evaluations=n_evaluations)


def optimize_parameters(
    y: np.ndarray,
    alpha: float | None = None,
    init_level: float | None = None,
    options: OptimizerOptions | None = None,
) -> FitReport:
    """
    Choose values for whichever of alpha / init_level are unset by minimizing SSE.

    - both set: no search; the values pass through unchanged
    - alpha unset, init_level set (or fixed by the "heuristic" policy):
      bounded univariate search over alpha in [0, 1]
    - init_level unset under the "joint" policy: L-BFGS-B over the free
      subset of (alpha, init_level), starting at (0, trend-line intercept)
      and, when alpha is free, also at (1, trend-line intercept)

    initial_sse is the SSE at the starting guess of the run that won.
    Raises FitFailure if the minimizer does not converge.
    """
    opts = options or OptimizerOptions()
    y = np.asarray(y, dtype=float)

    if alpha is not None and init_level is not None:
        sse = _sse(y, float(alpha), float(init_level))
        return FitReport(
            alpha=float(alpha),
            init_level=float(init_level),
            diagnostics=(),
            initial_sse=sse,
            final_sse=sse,
            method="none",
        )

    diagnostics: list[FitDiagnostic] = []
    seed_level = float(init_level) if init_level is not None else initial_level_heuristic(y)
    start_alpha = float(alpha) if alpha is not None else ALPHA_BOUNDS[0]
    initial_sse = _sse(y, start_alpha, seed_level)

    if init_level is None and opts.policy == "joint":
        run = _minimize_joint(y, alpha, seed_level, opts)
        a, lvl = run.alpha, run.init_level
        if alpha is None:
            diagnostics.append(_diagnostic("alpha", a, "it was chosen by L-BFGS-B"))
        diagnostics.append(_diagnostic("init_level", lvl, "it was chosen by L-BFGS-B"))
        return FitReport(
            alpha=a,
            init_level=lvl,
            diagnostics=tuple(diagnostics),
            initial_sse=run.start_sse,
            final_sse=run.sse,
            method="L-BFGS-B",
            n_iterations=run.n_iterations,
            n_evaluations=run.n_evaluations,
        )

    if init_level is None:
        diagnostics.append(_diagnostic("init_level", seed_level, "it was set from the trend-line intercept"))

    if alpha is not None:
        # heuristic policy with a user alpha: nothing left to search
        return FitReport(
            alpha=float(alpha),
            init_level=seed_level,
            diagnostics=tuple(diagnostics),
            initial_sse=initial_sse,
            final_sse=initial_sse,
            method="none",
        )

    a, final_sse, res = _minimize_alpha(y, seed_level, opts)
    diagnostics.insert(0, _diagnostic("alpha", a, "it was chosen by bounded search"))
    return FitReport(
        alpha=a,
        init_level=seed_level,
        diagnostics=tuple(diagnostics),
        initial_sse=initial_sse,
        final_sse=final_sse,
        method="bounded",
        n_iterations=int(getattr(res, "nit", 0)),
        n_evaluations=int(getattr(res, "nfev", 0)),
    )
