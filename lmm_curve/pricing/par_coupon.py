"""
Par coupon of a forward curve.

This module provides the discount factors, annuity, swap value and par coupon of a
unit notional swap paying over the buckets of a forward curve.

Mathematical background:
With continuously compounded forwards f_j over (t_{j-1}, t_j] and t_{-1} = 0,

    D_j = D_{j-1} * exp(-f_j * (t_j - t_{j-1})),   D_{-1} = 1
    A   = sum_j D_j * (t_j - t_{j-1})

The floating leg is worth 1 - D_n and the fixed leg K * A, so the par coupon is
(1 - D_n) / A.
"""

import numpy as np
from numba import njit

from ..core.validation import require_buckets


@njit
def _discount_factors(t: np.ndarray, f: np.ndarray) -> np.ndarray:
    D = np.empty(len(t))
    Dn = 1.0
    t0 = 0.0
    for j in range(len(t)):
        Dn *= np.exp(-f[j] * (t[j] - t0))
        D[j] = Dn
        t0 = t[j]
    return D


@njit
def _par_coupon(t: np.ndarray, f: np.ndarray):
    D0 = 1.0
    Dn = 1.0
    A = 0.0  # sum D_j dt_j
    t0 = 0.0
    for j in range(len(t)):
        dt = t[j] - t0
        Dn *= np.exp(-f[j] * dt)
        A += Dn * dt
        t0 = t[j]
    return (D0 - Dn) / A


@njit
def _annuity(t: np.ndarray, f: np.ndarray) -> float:
    D = _discount_factors(t, f)
    A = 0.0
    t0 = 0.0
    for j in range(len(t)):
        A += D[j] * (t[j] - t0)
        t0 = t[j]
    return A


def discount_factors(curve) -> np.ndarray:
    """
    Discount factor to each knot of a forward curve.

    Args:
        curve (Curve): forward representation

    Returns:
        np.ndarray: D_j for every bucket

    Example:
        >>> discount_factors(Curve.flat([1.0, 2.0], 0.05, 0.0))
        array([0.95122942, 0.90483742])
    """
    return _discount_factors(curve.t, curve.rate)


def annuity(curve) -> float:
    """Present value of paying 1 per unit time over every bucket."""
    return float(_annuity(curve.t, curve.rate))


def par_coupon(curve) -> float:
    """
    Fixed rate that gives a swap over the curve's buckets zero value.

    Args:
        curve (Curve): forward representation with t[-1] = 0 implied

    Returns:
        float: the par coupon

    Raises:
        DegenerateCurve: if the curve has no buckets
    """
    require_buckets(curve)
    return float(_par_coupon(curve.t, curve.rate))


def swap_value(curve, fixed_rate: float, payer: bool = True) -> float:
    """
    Value of a unit notional swap over the curve's buckets.

    Args:
        curve (Curve): forward representation
        fixed_rate (float): fixed coupon K
        payer (bool, optional): pay fixed (True) or receive fixed (False). Defaults to True.

    Returns:
        float: 1 - D_n - K * A for a payer swap, its negation for a receiver swap

    Raises:
        DegenerateCurve: if the curve has no buckets
    """
    require_buckets(curve)
    D = _discount_factors(curve.t, curve.rate)
    value = 1 - D[-1] - fixed_rate * _annuity(curve.t, curve.rate)
    return float(value if payer else -value)
