"""
Boundary checks for curves and advance horizons.

The kernels in this package are branch-free and assume well formed input.
Callers that accept curves from outside should run these checks once, at the
point where the curve enters the library.
"""

import numpy as np

from .errors import DegenerateCurve, InvalidCurve


def validate_arrays(t: np.ndarray, rate: np.ndarray, sigma: np.ndarray) -> None:
    """
    Check three parallel curve sequences.

    Args:
        t (np.ndarray): knot times, strictly increasing with implicit t[-1] = 0
        rate (np.ndarray): forward rates or futures quotes
        sigma (np.ndarray): at-the-money volatilities

    Raises:
        InvalidCurve: if the sequences disagree in length, are not one dimensional,
            hold non-finite values, the grid is not strictly increasing from zero,
            or a volatility is negative
    """
    if t.ndim != 1 or rate.ndim != 1 or sigma.ndim != 1:
        raise InvalidCurve("curve sequences must be one dimensional")
    if not len(t) == len(rate) == len(sigma):
        raise InvalidCurve(
            f"curve sequences differ in length: t={len(t)}, rate={len(rate)}, sigma={len(sigma)}"
        )
    if len(t) == 0:
        return
    for name, values in (("t", t), ("rate", rate), ("sigma", sigma)):
        if not np.all(np.isfinite(values)):
            raise InvalidCurve(f"{name} contains non-finite values")
    if t[0] <= 0:
        raise InvalidCurve(f"first knot time must be positive, got {t[0]}")
    steps = np.diff(t)
    if np.any(steps <= 0):
        bad = int(np.argmax(steps <= 0)) + 1
        raise InvalidCurve(
            f"knot times must be strictly increasing: t[{bad - 1}]={t[bad - 1]}, t[{bad}]={t[bad]}"
        )
    if np.any(sigma < 0):
        raise InvalidCurve("volatilities must be non-negative")


def validate_curve(curve) -> None:
    """Check the live window of a Curve. See validate_arrays."""
    if not len(curve.times) == len(curve.rates) == len(curve.vols):
        raise InvalidCurve(
            f"backing arrays differ in length: times={len(curve.times)}, "
            f"rates={len(curve.rates)}, vols={len(curve.vols)}"
        )
    validate_arrays(curve.t, curve.rate, curve.sigma)


def validate_horizon(u: float) -> None:
    """Raise ValueError unless u is a finite, non-negative advance horizon."""
    if not np.isfinite(u) or u < 0:
        raise ValueError(f"advance horizon must be finite and non-negative, got {u}")


def require_buckets(curve) -> None:
    """Raise DegenerateCurve if the curve has no remaining buckets."""
    if len(curve) == 0:
        raise DegenerateCurve("curve has no buckets")
