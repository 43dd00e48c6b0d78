"""
Curve storage for the Libor market model.

A curve is three parallel sequences over the buckets (t[i-1], t[i]]:
- t: knot times, strictly increasing, with an implicit t[-1] = 0
- rate: forward rates, or futures quotes when in futures representation
- sigma: at-the-money volatilities, constant over the life of each bucket

The Curve object does not own a copy of the data. It holds the caller's backing
arrays and a window (offset, size) over them. Advancing a curve drops matured
buckets by moving the window forward; the backing arrays are never reallocated,
and the t, rate and sigma properties are numpy views, so every write through
them lands in the caller's buffers.

The same rate slot holds forwards or futures quotes depending on which
conversion was applied last; the Curve does not track the representation.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .validation import validate_arrays


@dataclass(eq=False)
class Curve:
    """
    Window over three parallel backing arrays.

    Args:
        times (np.ndarray): backing knot times
        rates (np.ndarray): backing forward rates or futures quotes
        vols (np.ndarray): backing volatilities
        offset (int): index of the first live bucket
        size (Optional[int]): number of live buckets, defaults to the rest of the arrays
    """

    times: np.ndarray
    rates: np.ndarray
    vols: np.ndarray
    offset: int = 0
    size: Optional[int] = None

    def __post_init__(self):
        # float64 arrays pass through untouched so that caller buffers are shared
        self.times = np.asarray(self.times, dtype=np.float64)
        self.rates = np.asarray(self.rates, dtype=np.float64)
        self.vols = np.asarray(self.vols, dtype=np.float64)
        if self.size is None:
            self.size = len(self.times) - self.offset

    @classmethod
    def from_arrays(cls, t, rate, sigma, validate: bool = True) -> "Curve":
        """
        Build a curve over the given sequences, checking them first.

        Raises:
            InvalidCurve: if validate is set and the sequences are malformed
        """
        curve = cls(t, rate, sigma)
        if validate:
            # the window is sized from times alone
            validate_arrays(curve.times, curve.rates, curve.vols)
        return curve

    @classmethod
    def flat(cls, times, rate: float, sigma: float) -> "Curve":
        """
        Flat curve: the same rate and volatility in every bucket.

        Example:
            >>> curve = Curve.flat([0.5, 1.0, 1.5, 2.0], 0.05, 0.2)
            >>> len(curve)
            4
        """
        times = np.array(times, dtype=np.float64)
        return cls.from_arrays(
            times, np.full(len(times), rate), np.full(len(times), sigma)
        )

    def __len__(self) -> int:
        return self.size

    @property
    def t(self) -> np.ndarray:
        return self.times[self.offset : self.offset + self.size]

    @property
    def rate(self) -> np.ndarray:
        return self.rates[self.offset : self.offset + self.size]

    @property
    def sigma(self) -> np.ndarray:
        return self.vols[self.offset : self.offset + self.size]

    def drop_front(self, k: int) -> int:
        """
        Drop the first k live buckets from the window.

        Returns:
            int: the number of buckets left
        """
        k = min(k, self.size)
        self.offset += k
        self.size -= k
        return self.size

    def copy(self) -> "Curve":
        """Independent curve holding copies of the live window only."""
        return Curve(self.t.copy(), self.rate.copy(), self.sigma.copy())
