"""Tests for the single path curve advance."""

import math

import numpy as np
import pytest

from lmm_curve import (
    Curve,
    RandomSource,
    advance,
    advance_futures,
    martingale_error,
    to_forwards,
    to_futures,
)
from lmm_curve.simulation.advance import matured_count


def test_matured_count():
    t = np.array([0.5, 1.0, 1.5])
    assert matured_count(t, 0.0) == 0
    assert matured_count(t, 0.7) == 1
    assert matured_count(t, 1.0) == 2
    assert matured_count(t, 5.0) == 3
    assert matured_count(np.zeros(0), 1.0) == 0


def test_window_between_knots(curve, rng):
    assert advance_futures(1.2, curve, 0.3, rng) == 2
    assert curve.offset == 2
    np.testing.assert_allclose(curve.t, [1.5 - 1.2, 2.0 - 1.2])
    np.testing.assert_array_equal(curve.sigma, [0.2, 0.25])


def test_bucket_at_u_is_matured(curve, rng):
    assert advance_futures(1.0, curve, 0.3, rng) == 2
    np.testing.assert_allclose(curve.t, [0.5, 1.0])


def test_advance_past_last_knot(curve, rng):
    assert advance_futures(3.0, curve, 0.3, rng) == 0
    assert len(curve.t) == 0


def test_matured_buckets_left_in_backing_arrays(arrays, rng):
    t, rate, _ = arrays
    curve = Curve.from_arrays(*arrays)
    advance_futures(1.2, curve, 0.3, rng)
    assert t[0] == 0.5
    assert t[1] == 1.0
    assert rate[0] == 0.03
    assert t[2] == pytest.approx(0.3)


def test_one_draw_per_call(fixed_source):
    source = fixed_source(0.4, -0.2)
    advance_futures(1.0, Curve.from_arrays([], [], []), 0.5, source)
    assert source.draws == 1
    advance_futures(0.5, Curve.flat([1.0, 2.0, 3.0], 0.05, 0.2), 0.5, source)
    assert source.draws == 2


def test_evolve_formula(fixed_source):
    u, alpha, sigma, phi = 0.25, 2.0, 0.2, 0.05
    curve = Curve.from_arrays([1.0], [phi], [sigma])
    advance_futures(u, curve, alpha, fixed_source(1.0, -0.5))

    t = 0.75
    b0, b1 = math.sqrt(u) * 1.0, math.sqrt(u) * -0.5
    bu = b0 * math.cos(alpha * t) + b1 * math.sin(alpha * t)
    expected = phi * math.exp(sigma * bu - sigma**2 * u / 2)
    assert curve.rate[0] == pytest.approx(expected, rel=1e-12)


def test_draws_shared_across_buckets(fixed_source):
    u = 0.5
    curve = Curve.from_arrays([1.0, 2.0, 3.0], [0.04, 0.05, 0.06], [0.1, 0.2, 0.3])
    before = curve.rate.copy()
    # alpha = 0 makes every bucket see B0 directly
    advance_futures(u, curve, 0.0, fixed_source(0.8, 1.7))
    implied = (np.log(curve.rate / before) + curve.sigma**2 * u / 2) / curve.sigma
    np.testing.assert_allclose(implied, math.sqrt(u) * 0.8)


def test_zero_volatility_leaves_rates(rng):
    curve = Curve.from_arrays([0.5, 1.0, 2.0], [0.03, 0.04, 0.05], [0.0, 0.0, 0.0])
    advance_futures(0.7, curve, 1.3, rng)
    np.testing.assert_array_equal(curve.rate, [0.04, 0.05])


def test_zero_horizon_is_identity(curve, arrays, rng):
    t, rate, _ = (a.copy() for a in arrays)
    assert advance_futures(0.0, curve, 0.7, rng) == 4
    np.testing.assert_array_equal(curve.t, t)
    np.testing.assert_array_equal(curve.rate, rate)


def test_negative_horizon_rejected(curve, arrays, rng):
    rate = arrays[1].copy()
    with pytest.raises(ValueError):
        advance(-0.1, curve, 0.5, rng)
    np.testing.assert_array_equal(curve.rate, rate)
    assert len(curve) == 4


def test_advance_composes_conversions(arrays):
    u, alpha = 0.8, 0.4
    expected = Curve.from_arrays(*(a.copy() for a in arrays))
    to_futures(expected)
    advance_futures(u, expected, alpha, RandomSource(8))
    to_forwards(expected)

    curve = Curve.from_arrays(*arrays)
    assert advance(u, curve, alpha, RandomSource(8)) == len(expected)
    np.testing.assert_allclose(curve.t, expected.t)
    np.testing.assert_allclose(curve.rate, expected.rate)


def test_same_seed_same_path(arrays):
    first = Curve.from_arrays(*(a.copy() for a in arrays))
    second = Curve.from_arrays(*(a.copy() for a in arrays))
    advance(0.6, first, 0.2, RandomSource(3))
    advance(0.6, second, 0.2, RandomSource(3))
    np.testing.assert_array_equal(first.rate, second.rate)


@pytest.mark.parametrize("u, alpha", [(0.5, 0.0), (1.0, 0.5), (2.5, 2.0)])
def test_futures_are_martingales(u, alpha, rng):
    curve = Curve.flat(np.arange(0.5, 5.25, 0.5), 0.05, 0.25)
    to_futures(curve)
    error, std_err = martingale_error(u, curve, alpha, 20000, rng)
    assert np.all(np.abs(error) < 5 * std_err)


def test_futures_are_martingales_antithetic(rng):
    curve = Curve.flat(np.arange(0.5, 5.25, 0.5), 0.05, 0.25)
    to_futures(curve)
    error, std_err = martingale_error(1.5, curve, 1.0, 20000, rng, antithetic=True)
    assert np.all(np.abs(error) < 5 * std_err)
