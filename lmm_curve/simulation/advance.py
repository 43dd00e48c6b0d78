"""
Advancing a curve along one path of the two factor Libor market model.

The futures quote of each bucket is a martingale:

    Phi_j(u) = phi[j] * exp(sigma[j] * B_u - sigma[j]^2 * u / 2)

where B_u = B0_u cos(alpha t) + B1_u sin(alpha t) with B0, B1 independent Brownian
motions and t the time from u to the bucket's knot. alpha sets how fast the two
factors rotate into the single driver seen by each bucket: alpha = 0 gives a one
factor model with perfectly correlated buckets.

Forwards are not martingales, so the forward curve is advanced by converting to
futures, evolving, and converting back on the rebased grid.

Mathematical background:
B0_u and B1_u are N(0, u), drawn as sqrt(u) times a standard normal pair. The drift
-sigma^2 u / 2 cancels the variance of sigma * B_u, so E[Phi_j(u)] = phi[j].
"""

import math

import numpy as np
from numba import njit

from ..core.convexity import to_forwards, to_futures
from ..core.random_source import get_random_source
from ..core.validation import validate_horizon


@njit
def matured_count(t: np.ndarray, u: float) -> int:
    """
    Number of leading buckets whose knot time is at or before u.

    Walks the grid from the front and stops at the first live bucket, so the grid is
    assumed to be ascending.

    Example:
        >>> matured_count(np.array([0.5, 1.0, 1.5]), 1.0)
        2
    """
    n = len(t)
    k = 0
    while k < n and t[k] <= u:
        k += 1
    return k


@njit
def evolve_futures(
    u: float,
    t: np.ndarray,
    phi: np.ndarray,
    sigma: np.ndarray,
    alpha: float,
    b0: float,
    b1: float,
):
    """
    Rebase the live grid to u and apply one martingale step to the futures quotes.

    Args:
        u (float): elapsed time
        t (np.ndarray): knot times of the surviving buckets, absolute, rebased in place
        phi (np.ndarray): futures quotes, updated in place
        sigma (np.ndarray): volatilities
        alpha (float): factor rotation speed
        b0 (float): value of the first Brownian motion at u
        b1 (float): value of the second Brownian motion at u
    """
    for i in range(len(t)):
        t[i] -= u
        # rotation angle uses the time to the knot, not absolute time
        bu = b0 * np.cos(alpha * t[i]) + b1 * np.sin(alpha * t[i])
        phi[i] *= np.exp(sigma[i] * bu - sigma[i] * sigma[i] * u / 2)


def advance_futures(u: float, curve, alpha: float, rng=None) -> int:
    """
    Move a futures curve forward to time u along one random path.

    Draws one standard normal pair, drops the buckets that have matured by u,
    rebases the remaining knot times to be measured from u, and rescales each
    remaining futures quote by its stochastic exponential.

    Args:
        u (float): target time, u >= 0
        curve (Curve): futures representation with an absolute time grid; mutated
        alpha (float): factor rotation speed
        rng (RandomSource, optional): source of the normal pair; defaults to the process source

    Returns:
        int: number of surviving buckets

    Example:
        >>> curve = Curve.flat([0.5, 1.0, 1.5, 2.0], 0.05, 0.2)
        >>> to_futures(curve)
        >>> advance_futures(1.25, curve, 0.1, RandomSource(1))
        2
        >>> curve.t
        array([0.25, 0.75])
    """
    validate_horizon(u)
    if rng is None:
        rng = get_random_source()
    z0, z1 = rng.normal_pair()

    n = curve.drop_front(matured_count(curve.t, u))

    scale = math.sqrt(u)
    evolve_futures(u, curve.t, curve.rate, curve.sigma, alpha, scale * z0, scale * z1)

    return n


def advance(u: float, curve, alpha: float, rng=None) -> int:
    """
    Random forward curve at time u.

    Args:
        u (float): target time, u >= 0
        curve (Curve): forward representation with an absolute time grid; mutated to
            the surviving forwards with knot times measured from u
        alpha (float): factor rotation speed
        rng (RandomSource, optional): source of the normal pair

    Returns:
        int: number of surviving buckets
    """
    validate_horizon(u)
    to_futures(curve)
    n = advance_futures(u, curve, alpha, rng)
    to_forwards(curve)

    return n
