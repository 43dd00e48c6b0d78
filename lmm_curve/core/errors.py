"""
Exceptions raised at the boundary of the curve library.

The numerical kernels never raise: they trust their inputs. These exceptions are
raised by the validation helpers and the Python-level wrappers that guard them.
"""


class CurveError(ValueError):
    """Base class for curve input errors."""


class InvalidCurve(CurveError):
    """Raised for mismatched lengths, a non-increasing grid or bad volatilities."""


class DegenerateCurve(CurveError):
    """Raised when an operation needs at least one bucket and the curve is empty."""
