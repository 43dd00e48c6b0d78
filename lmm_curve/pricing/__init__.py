"""
Pricing module for forward curves.

Available functions:
- discount_factors: discount factor to each knot
- annuity: present value of the fixed leg per unit coupon
- par_coupon: the par swap rate over the curve's buckets
- swap_value: value of a payer or receiver swap at a given fixed rate
"""

from .par_coupon import annuity, discount_factors, par_coupon, swap_value

__all__ = ["discount_factors", "annuity", "par_coupon", "swap_value"]
