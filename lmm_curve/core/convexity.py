"""
Conversion between forward rates and futures quotes.

In the two factor Libor market model the futures quote phi of a bucket and its
forward f differ by a convexity adjustment that grows with the square of the time
to the knot:

    phi[i] = f[i] + sigma[i]^2 * t[i]^2 / 2

The adjustment is computed from the curve's current grid, so the conversion must be
applied to a grid in the state the caller intends (absolute times before an advance,
rebased times after it).
"""

import numpy as np
from numba import njit


@njit
def convexity_adjustment(t: np.ndarray, sigma: np.ndarray) -> np.ndarray:
    """
    Futures minus forward for each bucket.

    Args:
        t (np.ndarray): knot times
        sigma (np.ndarray): volatilities

    Returns:
        np.ndarray: sigma^2 * t^2 / 2
    """
    return sigma * sigma * t * t / 2


@njit
def _add_convexity(t: np.ndarray, rate: np.ndarray, sigma: np.ndarray, sign: float):
    for i in range(len(rate)):
        rate[i] += sign * sigma[i] * sigma[i] * t[i] * t[i] / 2


def to_futures(curve) -> None:
    """Overwrite the forwards held in curve.rate with futures quotes."""
    _add_convexity(curve.t, curve.rate, curve.sigma, 1.0)


def to_forwards(curve) -> None:
    """Overwrite the futures quotes held in curve.rate with forwards."""
    _add_convexity(curve.t, curve.rate, curve.sigma, -1.0)
