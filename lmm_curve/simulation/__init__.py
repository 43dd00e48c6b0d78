"""
Simulation module for the two factor Libor market model.

This module advances forward and futures curves along random paths, one path per
call, and repeats the advance over many paths for Monte Carlo estimates.

Available functions:
- advance_futures: one martingale step of a futures curve to time u
- advance: the same step for a forward curve, through the futures representation
- simulate_futures: futures quotes at time u over many paths
- simulate_forwards: forward rates at time u over many paths
- simulate_par_coupons: par coupon at time u over many paths
- martingale_error: Monte Carlo check of the futures martingale property
"""

from .advance import advance, advance_futures, evolve_futures, matured_count
from .monte_carlo import (
    martingale_error,
    simulate_forwards,
    simulate_futures,
    simulate_par_coupons,
)

__all__ = [
    "advance",
    "advance_futures",
    "evolve_futures",
    "matured_count",
    "simulate_futures",
    "simulate_forwards",
    "simulate_par_coupons",
    "martingale_error",
]
