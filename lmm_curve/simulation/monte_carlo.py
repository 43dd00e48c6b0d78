"""
Monte Carlo helpers for the two factor Libor market model.

This module repeats the single path advance over many paths, either with
independent draws or with antithetic pairs to reduce variance. Each path advances
its own copy of the input curve, so the caller's curve is left untouched. Paths are
run one after another.
"""

import logging
import time

import numpy as np

from ..core.random_source import AntitheticRandomSource, get_random_source
from ..core.validation import validate_horizon
from ..pricing.par_coupon import _par_coupon
from .advance import advance, advance_futures, matured_count


def _path_source(rng, antithetic: bool):
    if rng is None:
        rng = get_random_source()
    if antithetic:
        return AntitheticRandomSource(rng.spawn().initial_seed)
    return rng


def _simulate(step, u: float, curve, alpha: float, n_paths: int, rng, antithetic: bool):
    validate_horizon(u)
    source = _path_source(rng, antithetic)

    n_survivors = len(curve) - matured_count(curve.t, u)
    rates = np.zeros((n_paths, n_survivors))
    times = curve.t[len(curve) - n_survivors :] - u

    for nsim in range(n_paths):
        path = curve.copy()
        step(u, path, alpha, source)
        rates[nsim, :] = path.rate

    return times, rates


def simulate_futures(
    u: float,
    curve,
    alpha: float,
    n_paths: int,
    rng=None,
    antithetic: bool = False,
) -> tuple:
    """
    Simulates the futures quotes of a curve at time u over many paths.

    Args:
        u (float): target time
        curve (Curve): futures representation with an absolute time grid; not modified
        alpha (float): factor rotation speed
        n_paths (int): number of Monte Carlo paths
        rng (RandomSource, optional): source of the draws
        antithetic (bool, optional): pair each path with its mirror image. Defaults to False.

    Returns:
        tuple: A tuple containing:
            - times (np.ndarray): surviving knot times measured from u
            - rates (np.ndarray): futures quotes, shape (n_paths, survivors)

    Example:
        >>> curve = Curve.flat([0.5, 1.0, 1.5, 2.0], 0.05, 0.2)
        >>> to_futures(curve)
        >>> times, rates = simulate_futures(1.0, curve, 0.1, 1000, RandomSource(7))
        >>> rates.shape
        (1000, 2)
    """
    start_time = time.perf_counter()
    times, rates = _simulate(advance_futures, u, curve, alpha, n_paths, rng, antithetic)
    elapsed_time = time.perf_counter() - start_time
    logging.debug(f"Elapsed time for simulate_futures: {elapsed_time:.2f} seconds")
    return times, rates


def simulate_forwards(
    u: float,
    curve,
    alpha: float,
    n_paths: int,
    rng=None,
    antithetic: bool = False,
) -> tuple:
    """
    Simulates the forward curve at time u over many paths.

    Same as simulate_futures, with the curve and the results in forward representation.
    """
    start_time = time.perf_counter()
    times, rates = _simulate(advance, u, curve, alpha, n_paths, rng, antithetic)
    elapsed_time = time.perf_counter() - start_time
    logging.debug(f"Elapsed time for simulate_forwards: {elapsed_time:.2f} seconds")
    return times, rates


def simulate_par_coupons(
    u: float,
    curve,
    alpha: float,
    n_paths: int,
    rng=None,
    antithetic: bool = False,
) -> np.ndarray:
    """
    Par coupon of the swap starting at u over the buckets still alive at u, per path.

    Args:
        u (float): swap start time
        curve (Curve): forward representation with an absolute time grid; not modified
        alpha (float): factor rotation speed
        n_paths (int): number of Monte Carlo paths
        rng (RandomSource, optional): source of the draws
        antithetic (bool, optional): pair each path with its mirror image. Defaults to False.

    Returns:
        np.ndarray: par coupon for each path; empty columns give nan
    """
    times, rates = simulate_forwards(u, curve, alpha, n_paths, rng, antithetic)
    if len(times) == 0:
        logging.warning(f"No buckets survive to u={u}, par coupons are undefined")
        return np.full(n_paths, np.nan)
    return np.array([_par_coupon(times, rates[nsim]) for nsim in range(n_paths)])


def martingale_error(
    u: float,
    curve,
    alpha: float,
    n_paths: int,
    rng=None,
    antithetic: bool = False,
) -> tuple:
    """
    Relative deviation of the simulated futures mean from the initial quotes.

    Args:
        u (float): target time
        curve (Curve): futures representation with an absolute time grid; not modified
        alpha (float): factor rotation speed
        n_paths (int): number of Monte Carlo paths
        rng (RandomSource, optional): source of the draws
        antithetic (bool, optional): pair each path with its mirror image. Defaults to False.

    Returns:
        tuple: A tuple containing:
            - error (np.ndarray): mean(rate_u) / rate_0 - 1 for each surviving bucket
            - std_err (np.ndarray): standard error of each entry of error

    Raises:
        ValueError: if fewer than two independent samples are drawn (two paths, or
            four paths when antithetic)
    """
    min_paths = 4 if antithetic else 2
    if n_paths < min_paths:
        raise ValueError(
            f"martingale_error needs at least {min_paths} paths, got {n_paths}"
        )
    times, rates = simulate_futures(u, curve, alpha, n_paths, rng, antithetic)
    initial = curve.rate[len(curve) - len(times) :]
    ratios = rates / initial
    if antithetic:
        # mirror pairs are dependent; average them before estimating the spread
        n_pairs = n_paths // 2
        ratios = (ratios[: 2 * n_pairs : 2] + ratios[1 : 2 * n_pairs : 2]) / 2
    error = np.mean(ratios, axis=0) - 1
    std_err = np.std(ratios, axis=0, ddof=1) / np.sqrt(len(ratios))
    return error, std_err
