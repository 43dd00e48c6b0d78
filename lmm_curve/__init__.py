"""
Two factor Libor market model for forward curves.

This package simulates a discretized forward curve along paths of a two factor
Libor market model, converts between forward and futures representations of the
curve, and prices the par coupon of a forward curve. Per-bucket loops are compiled
with Numba.

Key components:
- Curve view over caller owned arrays, with boundary validation
- Convexity conversion between forwards and futures quotes
- Single path curve advance driven by two rotated Brownian motions
- Monte Carlo helpers with standard and antithetic sampling
- Discount factors, annuity, swap value and par coupon
"""

# Import core objects
from .core.convexity import convexity_adjustment, to_forwards, to_futures
from .core.curve import Curve
from .core.errors import CurveError, DegenerateCurve, InvalidCurve
from .core.random_source import (
    AntitheticRandomSource,
    RandomSource,
    get_random_source,
    seed,
    set_random_source,
)
from .core.validation import validate_curve

# Import pricing functions
from .pricing.par_coupon import annuity, discount_factors, par_coupon, swap_value

# Import simulation functions
from .simulation.advance import advance, advance_futures
from .simulation.monte_carlo import (
    martingale_error,
    simulate_forwards,
    simulate_futures,
    simulate_par_coupons,
)

# Constants
DEFAULT_SEED = 20240607  # Seed used by the benchmarks and tests
PRICING_N = 30000  # Number of paths for par coupon estimates
MARTINGALE_N = 20000  # Number of paths for martingale checks

__all__ = [
    # Core objects
    "Curve",
    "CurveError",
    "InvalidCurve",
    "DegenerateCurve",
    "validate_curve",
    "RandomSource",
    "AntitheticRandomSource",
    "get_random_source",
    "set_random_source",
    "seed",
    "convexity_adjustment",
    "to_futures",
    "to_forwards",
    # Simulation functions
    "advance_futures",
    "advance",
    "simulate_futures",
    "simulate_forwards",
    "simulate_par_coupons",
    "martingale_error",
    # Pricing functions
    "discount_factors",
    "annuity",
    "par_coupon",
    "swap_value",
    # Constants
    "DEFAULT_SEED",
    "PRICING_N",
    "MARTINGALE_N",
]
