"""tests/unit/test_recursion.py"""

from __future__ import annotations

import numpy as np
import pytest

from sesforecast.modeling.recursion import smooth, sse_and_gradient


def test_alpha_one_is_naive_lag() -> None:
    res = smooth(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), alpha=1.0, init_level=0.0, h=5)
    np.testing.assert_array_equal(res.forecast, [0, 1, 2, 3, 4, 5, 5, 5, 5, 5])


def test_alpha_zero_freezes_level() -> None:
    res = smooth(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), alpha=0.0, init_level=10.0, h=3)
    np.testing.assert_array_equal(res.forecast, [10.0] * 8)
    # residuals 9, 8, 7, 6, 5
    assert res.sse == pytest.approx(81 + 64 + 49 + 36 + 25)


def test_hand_computed_levels() -> None:
    y = np.array([10.0, 20.0])
    res = smooth(y, alpha=0.5, init_level=0.0, h=2)
    # l1 = 0.5*10 = 5, l2 = 0.5*20 + 0.5*5 = 12.5
    np.testing.assert_allclose(res.forecast, [0.0, 5.0, 12.5, 12.5])
    # residuals: 0-10, 5-20
    assert res.sse == pytest.approx(100.0 + 225.0)
    np.testing.assert_allclose(res.fitted, [0.0, 5.0])
    assert res.level == pytest.approx(12.5)


@pytest.mark.parametrize("h", [1, 4, 17])
def test_output_length_is_n_plus_h(sample_series: np.ndarray, h: int) -> None:
    res = smooth(sample_series, alpha=0.3, init_level=450.0, h=h)
    assert res.forecast.shape == (sample_series.size + h,)
    assert np.all(res.forecast[sample_series.size :] == res.level)


def test_sse_is_non_negative(sample_series: np.ndarray) -> None:
    for alpha in np.linspace(0.0, 1.0, 11):
        for lvl in (-1000.0, 0.0, 450.0, 1e4):
            assert smooth(sample_series, alpha, lvl, 1).sse >= 0.0


def test_smooth_does_not_mutate_input(sample_series: np.ndarray) -> None:
    before = sample_series.copy()
    smooth(sample_series, alpha=0.7, init_level=1.0, h=3)
    np.testing.assert_array_equal(sample_series, before)


def test_horizon_must_be_positive() -> None:
    with pytest.raises(ValueError):
        smooth(np.array([1.0]), alpha=0.5, init_level=0.0, h=0)


def test_gradient_sse_matches_smooth(sample_series: np.ndarray) -> None:
    sse, _ = sse_and_gradient(sample_series, 0.42, 460.0)
    assert sse == pytest.approx(smooth(sample_series, 0.42, 460.0, 1).sse)


@pytest.mark.parametrize("alpha,lvl", [(0.1, 400.0), (0.5, 470.0), (0.9, 520.0)])
def test_gradient_matches_central_differences(sample_series: np.ndarray, alpha: float, lvl: float) -> None:
    _, grad = sse_and_gradient(sample_series, alpha, lvl)

    eps_a, eps_l = 1e-6, 1e-4
    num_a = (
        sse_and_gradient(sample_series, alpha + eps_a, lvl)[0]
        - sse_and_gradient(sample_series, alpha - eps_a, lvl)[0]
    ) / (2 * eps_a)
    num_l = (
        sse_and_gradient(sample_series, alpha, lvl + eps_l)[0]
        - sse_and_gradient(sample_series, alpha, lvl - eps_l)[0]
    ) / (2 * eps_l)

    assert grad[0] == pytest.approx(num_a, rel=1e-5, abs=1e-3)
    assert grad[1] == pytest.approx(num_l, rel=1e-5, abs=1e-3)


def test_agrees_with_statsmodels_known_initialization(sample_series: np.ndarray) -> None:
    holtwinters = pytest.importorskip("statsmodels.tsa.holtwinters")

    alpha, lvl, h = 0.35, 448.0, 4
    ref = holtwinters.SimpleExpSmoothing(
        sample_series,
        initialization_method="known",
        initial_level=lvl,
    ).fit(smoothing_level=alpha, optimized=False)

    res = smooth(sample_series, alpha, lvl, h + 1)
    np.testing.assert_allclose(res.fitted, np.asarray(ref.fittedvalues), rtol=1e-10)
    np.testing.assert_allclose(res.forecast[sample_series.size + 1 :], np.asarray(ref.forecast(h)), rtol=1e-10)
    assert res.sse == pytest.approx(float(ref.sse), rel=1e-10)
