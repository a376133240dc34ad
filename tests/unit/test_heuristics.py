"""tests/unit/test_heuristics.py"""

from __future__ import annotations

import numpy as np
import pytest

from sesforecast.modeling.heuristics import initial_level_heuristic


def test_exact_line_returns_its_intercept() -> None:
    # y = 3 + 2x for x = 1..5
    y = 3.0 + 2.0 * np.arange(1, 6)
    assert initial_level_heuristic(y) == pytest.approx(3.0)


def test_only_first_ten_points_are_used() -> None:
    head = 7.0 - 0.5 * np.arange(1, 11)
    tail = np.array([1e6, -1e6, 5e5])
    assert initial_level_heuristic(np.concatenate([head, tail])) == pytest.approx(7.0)


def test_matches_numpy_polyfit_on_noisy_data(sample_series: np.ndarray) -> None:
    x = np.arange(1, 11, dtype=float)
    slope, intercept = np.polyfit(x, sample_series[:10], deg=1)
    assert initial_level_heuristic(sample_series) == pytest.approx(intercept)


def test_single_observation_returns_the_observation() -> None:
    assert initial_level_heuristic([42.0]) == 42.0


def test_constant_series_returns_the_constant() -> None:
    assert initial_level_heuristic([5.0, 5.0, 5.0]) == pytest.approx(5.0)


def test_empty_series_raises() -> None:
    with pytest.raises(ValueError):
        initial_level_heuristic([])
