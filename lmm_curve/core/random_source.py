"""
Standard normal random sources for the curve advance.

Every advance consumes one pair of independent standard normal variates. The pair
comes from a RandomSource, passed explicitly or taken from the process-wide default
returned by get_random_source(). The default can be replaced or reseeded for
reproducible runs.

Sources are not thread-safe. Threads simulating concurrently should each hold their
own RandomSource and pass it to every call.
"""

from typing import Optional, Tuple

import numpy as np


class RandomSource:
    """
    Seedable generator of independent standard normal pairs.

    Args:
        seed (Optional[int]): seed for numpy's default generator; None records fresh entropy

    Example:
        >>> rng = RandomSource(42)
        >>> z0, z1 = rng.normal_pair()
        >>> rng.reset()
        >>> rng.normal_pair() == (z0, z1)
        True
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed(seed)

    @property
    def initial_seed(self) -> int:
        return self._seed

    def seed(self, seed: Optional[int]) -> None:
        """
        Reseed the generator; reset() returns to this seed afterwards.

        A seed of None is replaced by fresh entropy, recorded so that reset() replays it.
        """
        if seed is None:
            seed = np.random.SeedSequence().entropy
        self._seed = seed
        self._generator = np.random.default_rng(seed)

    def reset(self) -> None:
        """Restart the stream from the last seed."""
        self._generator = np.random.default_rng(self._seed)

    def normal_pair(self) -> Tuple[float, float]:
        """Draw two independent standard normal variates."""
        z = self._generator.standard_normal(2)
        return float(z[0]), float(z[1])

    def spawn(self) -> "RandomSource":
        """Child source with a seed drawn from this one."""
        return RandomSource(int(self._generator.integers(0, 2**63 - 1)))


class AntitheticRandomSource(RandomSource):
    """
    Random source producing antithetic pairs.

    Odd calls to normal_pair() draw a fresh pair; even calls return the negation of the
    previous pair, so consecutive paths are mirror images of each other.
    """

    def __init__(self, seed: Optional[int] = None):
        super().__init__(seed)
        self._pending = None

    def seed(self, seed: Optional[int]) -> None:
        super().seed(seed)
        self._pending = None

    def reset(self) -> None:
        super().reset()
        self._pending = None

    def normal_pair(self) -> Tuple[float, float]:
        if self._pending is not None:
            z0, z1 = self._pending
            self._pending = None
            return -z0, -z1
        z0, z1 = super().normal_pair()
        self._pending = (z0, z1)
        return z0, z1


_default_source = RandomSource()


def get_random_source() -> RandomSource:
    """Return the process-wide default source."""
    return _default_source


def set_random_source(source: RandomSource) -> RandomSource:
    """
    Replace the process-wide default source.

    Returns:
        RandomSource: the source that was replaced
    """
    global _default_source
    previous = _default_source
    _default_source = source
    return previous


def seed(value: Optional[int]) -> None:
    """Reseed the process-wide default source."""
    _default_source.seed(value)
